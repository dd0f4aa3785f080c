# SPDX-License-Identifier: MIT
"""PEP 440 version parsing, normalization, formatting and comparison.

This package accepts the full permissive PEP 440 spelling (case-insensitive
tags, optional separators, implicit numbers, leading "v", surrounding
whitespace) and normalizes it to a single immutable value.

Example:
    >>> from pep440_version import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.0-RC1")
    >>> version.pre_release
    PreRelease(kind=<PreReleaseKind.RELEASE_CANDIDATE: 'rc'>, number=1)
    >>> str(version)
    '1.0rc1'
    >>>
    >>> compare_versions("1.2", "1.2.0")
    0
"""

__version__ = "0.1.0"

from .errors import InvalidVersionError
from .grammar import VERSION_PATTERN
from .segments import MAX_SEGMENT_VALUE
from .version import (
    PreRelease,
    PreReleaseKind,
    Version,
    format_version,
)
from .parser import (
    is_valid_version,
    parse_version,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Version value
    "Version",
    "PreRelease",
    "PreReleaseKind",
    "format_version",
    # Parsing
    "parse_version",
    "is_valid_version",
    "InvalidVersionError",
    "VERSION_PATTERN",
    "MAX_SEGMENT_VALUE",
    # Comparison
    "compare_versions",
    "version_key",
]
