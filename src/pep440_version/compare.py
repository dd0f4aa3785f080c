# SPDX-License-Identifier: MIT
"""Version comparison.

Only the epoch and the release segments take part in the ordering. Release
sequences of different length are compared as if the shorter one were padded
with zeros, so "1.2" == "1.2.0" < "1.3".

Pre-release, post-release, development release and local label are ignored:
"1.0a1", "1.0", "1.0.post1" and "1.0.dev1" all compare equal. This is
narrower than the full PEP 440 precedence (dev < pre < final < post).
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Union

from .parser import parse_version
from .version import Version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.2", "1.3")
        -1
        >>> compare_versions("1.2", "1.2.0")
        0
        >>> compare_versions("1!0.1", "2.0")
        1
        >>> compare_versions("1.0a1", "1.0")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    epoch1 = v1.epoch or 0
    epoch2 = v2.epoch or 0
    if epoch1 != epoch2:
        return -1 if epoch1 < epoch2 else 1

    for part1, part2 in zip_longest(v1.release, v2.release, fillvalue=0):
        if part1 != part2:
            return -1 if part1 < part2 else 1

    return 0


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Trailing zero release segments are dropped so that "1.2" and "1.2.0"
    produce the same key.

    Examples:
        >>> sorted(["2.0", "1.10", "1.9", "1!0.1"], key=version_key)
        ['1.9', '1.10', '2.0', '1!0.1']
    """
    v = parse_version(version) if isinstance(version, str) else version

    release = list(v.release)
    while release and release[-1] == 0:
        release.pop()

    return (v.epoch or 0, tuple(release))
