# SPDX-License-Identifier: MIT
"""Surface grammar for PEP 440 version strings.

The grammar is permissive: every optional segment accepts several spellings
and a single ``.``, ``_`` or ``-`` separator. Matching only extracts the raw
lexemes; turning them into numbers happens in :mod:`pep440_version.segments`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidVersionError

logger = logging.getLogger(__name__)

# Compiled once and shared; re.Pattern objects are safe to use from any thread.
# re.ASCII keeps \d and \s from matching non-ASCII digits and spaces.
VERSION_PATTERN = re.compile(
    r"""
    ^\s*
    v?
    (?:(?P<epoch>\d+)!)?
    (?P<release>\d+(?:\.\d+)*)
    (?:                                     # pre-release
        [._-]?
        (?:
            (?P<alpha>a|alpha)
          | (?P<beta>b|beta)
          | (?P<rc>rc|c|pre|preview)
        )
        [._-]?
        (?P<pre_n>\d+)?
    )?
    (?:                                     # post release
        [._-]?
        (?P<post>post|rev|r)
        [._-]?
        (?P<post_n>\d+)?
      | -(?P<post_implicit>\d+)
    )?
    (?:                                     # development release
        [._-]?
        (?P<dev>dev)
        (?P<dev_n>\d+)?
    )?
    (?:\+(?P<local>[a-z0-9._-]+))?
    \s*$
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True, slots=True)
class VersionLexemes:
    """Raw text captured for each segment of a version string.

    Every field is ``None`` when the segment was absent from the input.
    Exactly one of ``alpha``, ``beta`` and ``rc`` is set when a pre-release
    is present, and at most one of ``post`` and ``post_implicit``.
    """

    source: str
    epoch: Optional[str]
    release: str
    alpha: Optional[str] = None
    beta: Optional[str] = None
    rc: Optional[str] = None
    pre_n: Optional[str] = None
    post: Optional[str] = None
    post_n: Optional[str] = None
    post_implicit: Optional[str] = None
    dev: Optional[str] = None
    dev_n: Optional[str] = None
    local: Optional[str] = None


def match_version(text: str) -> VersionLexemes:
    """Match ``text`` against the version grammar.

    Args:
        text: Candidate version string; surrounding whitespace is allowed

    Returns:
        The raw lexemes of each segment

    Raises:
        InvalidVersionError: If ``text`` does not match the grammar
    """
    match = VERSION_PATTERN.match(text)
    if match is None:
        logger.debug("Rejected version string %r: no grammar match", text)
        raise InvalidVersionError(text)

    return VersionLexemes(source=text, **match.groupdict())
