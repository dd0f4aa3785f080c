# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and comparison.

These tests verify that:
- Every spelling the grammar accepts round-trips through the canonical form
- Canonical formatting is idempotent
- The comparator is a total order consistent with version_key and hashing
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from pep440_version import (
    MAX_SEGMENT_VALUE,
    PreReleaseKind,
    compare_versions,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

separators = st.sampled_from(["", ".", "_", "-"])
numbers = st.integers(min_value=0, max_value=MAX_SEGMENT_VALUE)
small_numbers = st.integers(min_value=0, max_value=20)

PRE_SPELLINGS = {
    "a": PreReleaseKind.ALPHA,
    "alpha": PreReleaseKind.ALPHA,
    "b": PreReleaseKind.BETA,
    "beta": PreReleaseKind.BETA,
    "rc": PreReleaseKind.RELEASE_CANDIDATE,
    "c": PreReleaseKind.RELEASE_CANDIDATE,
    "pre": PreReleaseKind.RELEASE_CANDIDATE,
    "preview": PreReleaseKind.RELEASE_CANDIDATE,
}


def _recase(draw, text: str) -> str:
    """Randomly upper-case letters of a tag."""
    return "".join(c.upper() if draw(st.booleans()) else c for c in text)


def _digits(draw, value: int) -> str:
    """Render an integer with optional leading zeros."""
    return "0" * draw(st.integers(0, 3)) + str(value)


@st.composite
def version_spellings(draw):
    """Generate a permissive version spelling together with its expected fields."""
    expected: dict = {}
    text = draw(st.sampled_from(["", "v", "V"]))

    if draw(st.booleans()):
        epoch = draw(numbers)
        expected["epoch"] = epoch
        text += f"{_digits(draw, epoch)}!"
    else:
        expected["epoch"] = None

    release = draw(st.lists(numbers, min_size=1, max_size=5))
    expected["release"] = tuple(release)
    text += ".".join(_digits(draw, part) for part in release)

    pre_has_number = True
    if draw(st.booleans()):
        spelling = draw(st.sampled_from(sorted(PRE_SPELLINGS)))
        text += draw(separators) + _recase(draw, spelling)
        if draw(st.booleans()):
            number = draw(numbers)
            text += draw(separators) + _digits(draw, number)
        else:
            number = 0
            pre_has_number = False
        expected["pre"] = (PRE_SPELLINGS[spelling], number)
    else:
        expected["pre"] = None

    # "1a-3" reads as pre-release a3, so a bare "-N" needs an explicit pre number
    post_forms = ["none", "tagged", "bare"] if pre_has_number else ["none", "tagged"]
    post_form = draw(st.sampled_from(post_forms))
    if post_form == "tagged":
        text += draw(separators) + _recase(draw, draw(st.sampled_from(["post", "rev", "r"])))
        if draw(st.booleans()):
            number = draw(numbers)
            text += draw(separators) + _digits(draw, number)
        else:
            number = 0
        expected["post"] = number
    elif post_form == "bare":
        number = draw(numbers)
        text += f"-{_digits(draw, number)}"
        expected["post"] = number
    else:
        expected["post"] = None

    if draw(st.booleans()):
        text += draw(separators) + _recase(draw, "dev")
        if draw(st.booleans()):
            number = draw(numbers)
            text += _digits(draw, number)
        else:
            number = 0
        expected["dev"] = number
    else:
        expected["dev"] = None

    if draw(st.booleans()):
        local = draw(st.from_regex(r"[a-zA-Z0-9][a-zA-Z0-9._-]{0,10}", fullmatch=True))
        text += f"+{local}"
        expected["local"] = local.replace("_", ".").replace("-", ".")
    else:
        expected["local"] = None

    padding = st.sampled_from(["", " ", "\t", "\n "])
    return draw(padding) + text + draw(padding), expected


@st.composite
def simple_versions(draw):
    """Generate canonical versions with small numbers so that collisions occur."""
    text = ""
    if draw(st.booleans()):
        text += f"{draw(st.integers(0, 2))}!"
    text += ".".join(str(p) for p in draw(st.lists(small_numbers, min_size=1, max_size=4)))
    if draw(st.booleans()):
        text += f"{draw(st.sampled_from(['a', 'b', 'rc']))}{draw(small_numbers)}"
    if draw(st.booleans()):
        text += f".post{draw(small_numbers)}"
    return parse_version(text)


# =============================================================================
# Properties
# =============================================================================


class TestParseProperties:
    """Properties of parsing and canonical formatting."""

    @given(version_spellings())
    @settings(max_examples=300)
    def test_spelling_parses_to_expected_fields(self, case):
        """Every accepted spelling yields the normalized fields."""
        text, expected = case
        v = parse_version(text)

        assert v.epoch == expected["epoch"]
        assert v.release == expected["release"]
        if expected["pre"] is None:
            assert v.pre_release is None
        else:
            assert (v.pre_release.kind, v.pre_release.number) == expected["pre"]
        assert v.post_release == expected["post"]
        assert v.dev_release == expected["dev"]
        assert v.local_label == expected["local"]

    @given(version_spellings())
    @settings(max_examples=300)
    def test_canonical_form_round_trips(self, case):
        """Re-parsing the canonical form gives an equal, identically formatted value."""
        text, _ = case
        v = parse_version(text)
        reparsed = parse_version(str(v))

        assert compare_versions(v, reparsed) == 0
        assert reparsed == v
        assert str(reparsed) == str(v)
        assert reparsed.pre_release == v.pre_release
        assert reparsed.post_release == v.post_release
        assert reparsed.dev_release == v.dev_release
        assert reparsed.local_label == v.local_label


class TestOrderProperties:
    """Properties of the comparator."""

    @given(simple_versions(), simple_versions())
    def test_antisymmetry(self, a, b):
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(simple_versions(), simple_versions(), simple_versions())
    def test_transitivity(self, a, b, c):
        if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
            assert compare_versions(a, c) <= 0

    @given(simple_versions(), simple_versions())
    def test_consistent_with_version_key(self, a, b):
        """version_key sorts exactly like compare_versions."""
        key_order = (version_key(a) > version_key(b)) - (version_key(a) < version_key(b))
        assert key_order == compare_versions(a, b)

    @given(simple_versions(), simple_versions())
    def test_equal_versions_hash_equal(self, a, b):
        if a == b:
            assert hash(a) == hash(b)

    @given(simple_versions())
    def test_trailing_zero_padding_is_equal(self, v):
        padded = parse_version(str(v).replace(v.base_version, v.base_version + ".0", 1))
        assert padded == v
