# SPDX-License-Identifier: MIT
"""Conversion of raw version lexemes into typed, normalized fields.

Normalization rules:
- integers lose their leading zeros (``"007"`` becomes ``7``)
- pre-release spellings collapse to alpha, beta or release candidate
- a pre, post or dev tag without a number means number 0
- ``_`` and ``-`` in the local label become ``.``
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import InvalidVersionError
from .grammar import VersionLexemes
from .version import PreRelease, PreReleaseKind

logger = logging.getLogger(__name__)

# Numeric segments are unsigned 64-bit values.
MAX_SEGMENT_VALUE = 2**64 - 1
_MAX_SEGMENT_DIGITS = len(str(MAX_SEGMENT_VALUE))

_PRE_RELEASE_KINDS = {
    "a": PreReleaseKind.ALPHA,
    "alpha": PreReleaseKind.ALPHA,
    "b": PreReleaseKind.BETA,
    "beta": PreReleaseKind.BETA,
    "rc": PreReleaseKind.RELEASE_CANDIDATE,
    "c": PreReleaseKind.RELEASE_CANDIDATE,
    "pre": PreReleaseKind.RELEASE_CANDIDATE,
    "preview": PreReleaseKind.RELEASE_CANDIDATE,
}

_LOCAL_SEPARATORS = str.maketrans("_-", "..")


def parse_segment_int(lexeme: str, segment: str, source: str) -> int:
    """Convert one numeric lexeme to an int.

    The grammar only lets ASCII digits through, so ``lexeme`` is always a
    run of ``0-9``. Leading zeros are dropped before conversion and do not
    count towards the width limit.

    Raises:
        InvalidVersionError: If the value exceeds MAX_SEGMENT_VALUE
    """
    assert lexeme.isascii() and lexeme.isdigit(), f"non-digit {segment} lexeme: {lexeme!r}"

    digits = lexeme.lstrip("0") or "0"
    if len(digits) > _MAX_SEGMENT_DIGITS or int(digits) > MAX_SEGMENT_VALUE:
        logger.debug("Rejected version string %r: %s %r overflows", source, segment, lexeme)
        raise InvalidVersionError(source, segment=segment, lexeme=lexeme)
    return int(digits)


def _implicit_number(lexeme: Optional[str], segment: str, source: str) -> int:
    if lexeme is None:
        return 0
    return parse_segment_int(lexeme, segment, source)


def interpret(lexemes: VersionLexemes) -> dict[str, Any]:
    """Turn grammar lexemes into the keyword arguments of :class:`Version`.

    Args:
        lexemes: Output of :func:`pep440_version.grammar.match_version`

    Returns:
        Mapping with keys epoch, release, pre_release, post_release,
        dev_release and local_label

    Raises:
        InvalidVersionError: If a numeric segment cannot be converted
    """
    source = lexemes.source

    epoch = None
    if lexemes.epoch is not None:
        epoch = parse_segment_int(lexemes.epoch, "epoch", source)

    release = tuple(
        parse_segment_int(part, "release segment", source)
        for part in lexemes.release.split(".")
    )

    pre_release = None
    tag = lexemes.alpha or lexemes.beta or lexemes.rc
    if tag is not None:
        pre_release = PreRelease(
            kind=_PRE_RELEASE_KINDS[tag.lower()],
            number=_implicit_number(lexemes.pre_n, "pre-release segment", source),
        )

    post_release = None
    if lexemes.post is not None:
        post_release = _implicit_number(lexemes.post_n, "post release segment", source)
    elif lexemes.post_implicit is not None:
        post_release = parse_segment_int(
            lexemes.post_implicit, "post release segment", source
        )

    dev_release = None
    if lexemes.dev is not None:
        dev_release = _implicit_number(lexemes.dev_n, "development release segment", source)

    local_label = None
    if lexemes.local is not None:
        local_label = lexemes.local.translate(_LOCAL_SEPARATORS)

    return {
        "epoch": epoch,
        "release": release,
        "pre_release": pre_release,
        "post_release": post_release,
        "dev_release": dev_release,
        "local_label": local_label,
    }
