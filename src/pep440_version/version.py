# SPDX-License-Identifier: MIT
"""The parsed version value and its canonical text form.

Canonical form:
    [N!]N(.N)*[{a|b|rc}N][.postN][.devN][+local]
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class PreReleaseKind(str, enum.Enum):
    """Canonical pre-release kinds; the value is the canonical spelling."""

    ALPHA = "a"
    BETA = "b"
    RELEASE_CANDIDATE = "rc"


@dataclass(frozen=True, slots=True)
class PreRelease:
    """A pre-release marker such as ``a1`` or ``rc0``."""

    kind: PreReleaseKind
    number: int = 0

    def __str__(self) -> str:
        return f"{self.kind.value}{self.number}"


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed PEP 440 version.

    Equality and ordering only look at the epoch and the release segments;
    see :func:`pep440_version.compare.compare_versions`.

    Attributes:
        epoch: Version epoch, None when not given (compares as 0)
        release: Release segments, e.g. ``(1, 2, 3)`` for "1.2.3"
        pre_release: Optional alpha, beta or release candidate marker
        post_release: Optional post-release number
        dev_release: Optional development release number
        local_label: Optional local version label with separators folded to "."
    """

    epoch: Optional[int]
    release: tuple[int, ...]
    pre_release: Optional[PreRelease] = None
    post_release: Optional[int] = None
    dev_release: Optional[int] = None
    local_label: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.release:
            raise ValueError("Version release must contain at least one segment")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    def __hash__(self) -> int:
        from .compare import version_key

        return hash(version_key(self))

    def _compare(self, other: object) -> int:
        from .compare import compare_versions

        return compare_versions(self, other)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True for pre-releases and development releases."""
        return self.pre_release is not None or self.dev_release is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post_release is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev_release is not None

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1] if len(self.release) > 1 else 0

    @property
    def micro(self) -> int:
        return self.release[2] if len(self.release) > 2 else 0

    @property
    def base_version(self) -> str:
        """Return the epoch and release only, e.g. "1!2.0" for "1!2.0rc1+abc"."""
        base = ".".join(str(part) for part in self.release)
        if self.epoch is not None:
            base = f"{self.epoch}!{base}"
        return base

    @property
    def public(self) -> str:
        """Return the canonical form without the local label."""
        return format_version(self).split("+", 1)[0]


def format_version(version: Version) -> str:
    """Render a Version in canonical PEP 440 form.

    The result does not depend on how the version was originally spelled:

    Examples:
        >>> from pep440_version import parse_version
        >>> format_version(parse_version("V01!1.2-RC.3_post-4.dev5+Ubuntu-1"))
        '1!1.2rc3.post4.dev5+Ubuntu.1'
    """
    parts = []

    if version.epoch is not None:
        parts.append(f"{version.epoch}!")

    parts.append(".".join(str(part) for part in version.release))

    if version.pre_release is not None:
        parts.append(str(version.pre_release))

    if version.post_release is not None:
        parts.append(f".post{version.post_release}")

    if version.dev_release is not None:
        parts.append(f".dev{version.dev_release}")

    if version.local_label is not None:
        parts.append(f"+{version.local_label}")

    return "".join(parts)
