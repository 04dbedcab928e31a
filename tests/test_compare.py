# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_range import (
    InvalidVersionError,
    UnknownOperatorError,
    bump_version,
    compare_versions,
    compare_with_operator,
    diff_versions,
    eq,
    gt,
    gte,
    lt,
    lte,
    max_version,
    min_version,
    neq,
    parse_version,
    rsort_versions,
    sort_versions,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_lexical(self):
        """Test that components compare numerically."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_alpha_vs_beta(self):
        """Test that alpha < beta."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-beta", "1.0.0-alpha") == 1

    def test_beta_vs_rc(self):
        """Test that beta < rc."""
        assert compare_versions("1.0.0-beta", "1.0.0-rc") == -1

    def test_numbered_prerelease(self):
        """Test comparison of numbered pre-releases."""
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.2") == -1
        assert compare_versions("1.0.0-alpha.2", "1.0.0-alpha.1") == 1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.1") == 0

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_semver_precedence_chain(self):
        """Test the pre-release chain from the SemVer 2.0.0 document."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert lt(versions[i], versions[i + 1]), f"{versions[i]} should be < {versions[i + 1]}"

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1  # Numeric comparison

    def test_long_numeric_prerelease_parts(self):
        """Test numeric parts longer than the int conversion limit."""
        huge = "1.0.0-" + "1" * 5000
        assert compare_versions(huge, "1.0.0-2") == 1
        assert compare_versions("1.0.0-2", huge) == -1
        assert compare_versions(huge, huge) == 0

    def test_numeric_below_alphanumeric(self):
        """Test that numeric identifiers sort below alphanumeric ones."""
        assert compare_versions("1.0.0-999", "1.0.0-a") == -1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.a") == -1

    def test_ascii_ordering(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-a", "1.0.0-beta") == -1


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0", "1.0.0-rc", "1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-1"]
        assert sorted(versions, key=version_key) == [
            "1.0.0-1",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-rc",
            "1.0.0",
        ]

    def test_sorting_long_numeric_prerelease(self):
        """Test that the key orders numeric parts by value without int()."""
        huge = "1.0.0-" + "9" * 5000
        versions = [huge, "1.0.0-10", "1.0.0-9", "1.0.0-a"]
        assert sorted(versions, key=version_key) == ["1.0.0-9", "1.0.0-10", huge, "1.0.0-a"]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2


class TestOperatorHelpers:
    """Tests for eq/neq/lt/lte/gt/gte and compare_with_operator."""

    def test_helpers(self):
        assert eq("1.0.0", "1.0.0+x")
        assert neq("1.0.0", "1.0.1")
        assert lt("1.0.0", "1.0.1")
        assert lte("1.0.1", "1.0.1")
        assert gt("2.0.0", "1.9.9")
        assert gte("2.0.0", "2.0.0")

    @pytest.mark.parametrize(
        "op,expected",
        [("=", False), ("==", False), ("!=", True), ("<", True), ("<=", True), (">", False), (">=", False)],
    )
    def test_compare_with_operator(self, op, expected):
        assert compare_with_operator("1.0.0", op, "2.0.0") is expected

    def test_unknown_operator(self):
        with pytest.raises(UnknownOperatorError):
            compare_with_operator("1.0.0", "<>", "2.0.0")


class TestOrderingHelpers:
    """Tests for sort/rsort/min/max helpers."""

    def test_sort_versions(self):
        result = sort_versions(["2.0.0", "1.0.0-rc.1", "1.0.0"])
        assert [str(v) for v in result] == ["1.0.0-rc.1", "1.0.0", "2.0.0"]

    def test_rsort_versions(self):
        result = rsort_versions(["2.0.0", "1.0.0-rc.1", "1.0.0"])
        assert [str(v) for v in result] == ["2.0.0", "1.0.0", "1.0.0-rc.1"]

    def test_sort_is_stable_for_build_variants(self):
        """Test that precedence ties keep their input order."""
        result = sort_versions(["1.0.0+b2", "0.1.0", "1.0.0+b1"])
        assert [str(v) for v in result] == ["0.1.0", "1.0.0+b2", "1.0.0+b1"]

    def test_max_min(self):
        versions = ["1.2.0", "3.0.0-beta", "2.9.9"]
        assert str(max_version(versions)) == "3.0.0-beta"
        assert str(min_version(versions)) == "1.2.0"

    def test_max_min_empty(self):
        assert max_version([]) is None
        assert min_version([]) is None


class TestDiffAndBump:
    """Tests for diff_versions and bump_version."""

    def test_diff_versions(self):
        assert diff_versions("1.0.0", "2.0.0") == "major"
        assert diff_versions("1.0.0+a", "1.0.0+b") == "build"
        assert diff_versions("1.0.0", "1.0.0") is None

    @pytest.mark.parametrize(
        "part,expected",
        [
            ("major", "2.0.0"),
            ("minor", "1.3.0"),
            ("patch", "1.2.4"),
            ("prerelease", "1.2.3-rc.2"),
        ],
    )
    def test_bump_version(self, part, expected):
        assert str(bump_version("1.2.3-rc.1+b", part)) == expected

    def test_bump_unknown_part(self):
        with pytest.raises(ValueError):
            bump_version("1.2.3", "build")  # type: ignore


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a, b, c = "1.0.0-alpha", "1.0.0-beta", "1.0.0"
        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build"]:
            assert compare_versions(v, v) == 0
