# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and precedence.

These tests verify that:
- Formatting a parsed version and parsing it again yields an equal version
- is_at_least is reflexive, total and transitive
- Versions that are each at least the other share a normal version
- compare_versions and version_key agree with is_at_least
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from sem_version import (
    Version,
    parse_version,
    format_version,
    is_at_least,
    compare_versions,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Small numbers so that equal normal versions are common
numbers = st.integers(min_value=0, max_value=3)

# Numeric and alphanumeric identifiers, including leading zeros and hyphens
numeric_identifiers = st.one_of(
    st.from_regex(r"0?[0-9]{1,2}", fullmatch=True),
    st.from_regex(r"[0-9]{20,40}", fullmatch=True),
    st.integers(min_value=4301, max_value=4310).map(lambda n: "9" * n),
)
alpha_identifiers = st.sampled_from(["alpha", "beta", "rc", "x-y", "-", "Beta", "0a"])
identifiers = st.one_of(numeric_identifiers, alpha_identifiers)

metadata = st.from_regex(r"[0-9A-Za-z.-]{0,10}", fullmatch=True)


@st.composite
def versions(draw):
    """Generate a Version as the parser would produce it."""
    normal = (draw(numbers), draw(numbers), draw(numbers))
    prerelease = tuple(draw(st.lists(identifiers, max_size=3)))
    return Version(normal=normal, prerelease=prerelease, meta=draw(metadata))


@st.composite
def version_strings(draw):
    """Generate a valid version string, possibly with leading zeros."""
    normal = ".".join(draw(st.from_regex(r"[0-9]{1,3}", fullmatch=True)) for _ in range(3))
    prerelease = draw(st.lists(identifiers, max_size=3))
    result = normal
    if prerelease:
        result += "-" + ".".join(prerelease)
    meta = draw(metadata)
    if meta:
        result += "+" + meta
    return result


# =============================================================================
# Property tests
# =============================================================================


class TestRoundTrip:
    """Formatting then parsing reproduces the value."""

    @given(version_strings())
    @settings(max_examples=200)
    def test_parse_format_parse(self, version_string):
        """Re-parsing formatted output yields an equal Version."""
        parsed = parse_version(version_string)
        assert parse_version(format_version(parsed)) == parsed

    @given(versions())
    @settings(max_examples=200)
    def test_format_parse(self, version):
        """Generated versions survive a trip through their string form."""
        reparsed = parse_version(str(version))
        assert reparsed.normal == version.normal
        assert reparsed.meta == version.meta
        assert compare_versions(reparsed, version) == 0


class TestOrderProperties:
    """is_at_least defines a total preorder."""

    @given(versions())
    def test_reflexive(self, v):
        """Every version is at least itself."""
        assert is_at_least(v, v) is True

    @given(versions(), versions())
    @settings(max_examples=300)
    def test_total(self, a, b):
        """For any pair, at least one direction holds."""
        assert is_at_least(a, b) or is_at_least(b, a)

    @given(versions(), versions())
    @settings(max_examples=300)
    def test_antisymmetric(self, a, b):
        """Mutually at-least versions share a normal version and release state."""
        if is_at_least(a, b) and is_at_least(b, a):
            assert a.normal == b.normal
            assert a.is_prerelease == b.is_prerelease
            assert len(a.prerelease) == len(b.prerelease)

    @given(versions(), versions(), versions())
    @settings(max_examples=300)
    def test_transitive(self, a, b, c):
        """If a >= b and b >= c then a >= c."""
        if is_at_least(a, b) and is_at_least(b, c):
            assert is_at_least(a, c)

    @given(versions(), versions())
    def test_meta_ignored(self, a, b):
        """Replacing metadata never changes the outcome."""
        stripped = Version(normal=a.normal, prerelease=a.prerelease)
        assert is_at_least(a, b) == is_at_least(stripped, b)


class TestDerivedOrderings:
    """compare_versions and version_key agree with is_at_least."""

    @given(versions(), versions())
    @settings(max_examples=300)
    def test_compare_matches(self, a, b):
        """compare_versions is the three-way form of is_at_least."""
        result = compare_versions(a, b)
        assert (result >= 0) == is_at_least(a, b)
        assert (result <= 0) == is_at_least(b, a)
        assert compare_versions(b, a) == -result

    @given(versions(), versions())
    @settings(max_examples=300)
    def test_key_matches(self, a, b):
        """version_key orders pairs the same way as is_at_least."""
        assert (version_key(a) >= version_key(b)) == is_at_least(a, b)
