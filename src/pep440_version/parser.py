# SPDX-License-Identifier: MIT
"""Entry points for turning text into :class:`~pep440_version.version.Version`."""

from __future__ import annotations

from .errors import InvalidVersionError
from .grammar import match_version
from .segments import interpret
from .version import Version


def parse_version(version_string: str) -> Version:
    """Parse a PEP 440 version string into a Version object.

    Any accepted spelling is normalized, so "1.0-RC1", "1.0.c1" and
    "1.0rc1" all produce the same value.

    Args:
        version_string: The version text; leading and trailing whitespace
            and a leading "v" are ignored

    Returns:
        A fully populated Version

    Raises:
        InvalidVersionError: If the string does not match the grammar or one
            of its numeric segments cannot be converted

    Examples:
        >>> parse_version("1.2.3")
        Version(epoch=None, release=(1, 2, 3), pre_release=None, post_release=None, dev_release=None, local_label=None)

        >>> str(parse_version("01!02.03a04"))
        '1!2.3a4'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    return Version(**interpret(match_version(version_string)))


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid PEP 440 version.

    Examples:
        >>> is_valid_version("1.0.post1")
        True
        >>> is_valid_version("1.0-")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
