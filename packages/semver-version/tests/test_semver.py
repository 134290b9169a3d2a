# SPDX-License-Identifier: MIT
"""Unit tests for semantic version parsing."""

import dataclasses

import pytest

from semver_version import (
    IdentifierKind,
    InvalidVersionError,
    Version,
    classify_identifier,
    is_valid_semver,
    parse_version,
    render_version,
)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease == ()
        assert v.build == ()

    def test_version_with_zeros(self):
        """Test parsing version with zero components."""
        v = parse_version("0.0.0")
        assert (v.major, v.minor, v.patch) == (0, 0, 0)

    def test_unbounded_version_numbers(self):
        """Test that components are not limited to 64 bits."""
        v = parse_version("18446744073709551616.0.99999999999999999999999")
        assert v.major == 2**64
        assert v.patch == 99999999999999999999999

    def test_prerelease_identifiers(self):
        """Test parsing pre-release identifiers into a sequence."""
        v = parse_version("1.0.0-alpha.1")
        assert v.prerelease == ("alpha", "1")
        assert v.is_prerelease is True

    def test_prerelease_identifiers_kept_as_strings(self):
        """Test that numeric identifiers are not converted at parse time."""
        v = parse_version("1.0.0-0.3.7")
        assert v.prerelease == ("0", "3", "7")

    def test_prerelease_with_hyphens(self):
        """Test that hyphens inside pre-release identifiers are kept."""
        v = parse_version("1.0.0-x-y-z.--")
        assert v.prerelease == ("x-y-z", "--")

    def test_build_metadata(self):
        """Test parsing build metadata."""
        v = parse_version("1.0.0+build.123")
        assert v.build == ("build", "123")
        assert v.prerelease == ()
        assert v.is_prerelease is False

    def test_build_metadata_allows_leading_zeros(self):
        """Test that build metadata identifiers may have leading zeros."""
        v = parse_version("1.0.0+001.0002")
        assert v.build == ("001", "0002")

    def test_hyphen_after_plus_belongs_to_build(self):
        """Test that a hyphen after the build marker is metadata content."""
        v = parse_version("1.0.0+build-1")
        assert v.prerelease == ()
        assert v.build == ("build-1",)

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        v = parse_version("1.0.0-alpha.1+build.456")
        assert v.prerelease == ("alpha", "1")
        assert v.build == ("build", "456")

    def test_prerelease_and_build_with_hyphens(self):
        """Test hyphens on both sides of the build marker."""
        v = parse_version("1.0.0-rc-1+exp.sha-5114f85")
        assert v.prerelease == ("rc-1",)
        assert v.build == ("exp", "sha-5114f85")

    def test_version_str(self):
        """Test Version string representation."""
        v = parse_version("1.2.3-alpha.1+build")
        assert str(v) == "1.2.3-alpha.1+build"
        assert render_version(v) == "1.2.3-alpha.1+build"

    def test_base_version(self):
        """Test base_version property."""
        v = parse_version("1.2.3-alpha.1+build")
        assert v.base_version == "1.2.3"

    def test_joined_identifier_text(self):
        """Test prerelease_text and build_text properties."""
        v = parse_version("1.2.3-alpha.1+build.7")
        assert v.prerelease_text == "alpha.1"
        assert v.build_text == "build.7"
        assert parse_version("1.2.3").prerelease_text is None
        assert parse_version("1.2.3").build_text is None

    def test_to_dict(self):
        """Test the machine-readable field view."""
        v = parse_version("1.2.3-alpha.1+build.7")
        assert v.to_dict() == {
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prereleaseIdentifiers": ["alpha", "1"],
            "buildMetadata": ["build", "7"],
        }


class TestInvalidVersions:
    """Tests for invalid version strings."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "1",
            "1.0",
            "1.2.3.4",
            "a.b.c",
            "1..0",
            "-1.0.0",
            "+1.0.0",
            "1.0.-0",
            " 1.0.0",
            "1.0.0 ",
            "v1.0.0",
            "1.0.0-",
            "1.0.0+",
            "1.0.0-+build",
            "1.0.0-alpha.",
            "1.0.0-.alpha",
            "1.0.0-alpha..1",
            "1.0.0+build.",
            "1.0.0+build..1",
            "1.0.0-alpha_1",
            "1.0.0+build+2",
            "1.0.0-01",
            "1.0.0-alpha.007",
        ],
    )
    def test_rejected(self, text):
        """Test that malformed strings raise InvalidVersionError."""
        with pytest.raises(InvalidVersionError):
            parse_version(text)

    @pytest.mark.parametrize("text", ["01.0.0", "1.00.0", "1.0.01"])
    def test_leading_zeros_in_core(self, text):
        """Test that leading zeros in MAJOR.MINOR.PATCH raise error."""
        with pytest.raises(InvalidVersionError, match="leading zeros"):
            parse_version(text)

    def test_non_ascii(self):
        """Test that non-ASCII characters are rejected up front."""
        with pytest.raises(InvalidVersionError, match="ASCII"):
            parse_version("1.0.0-alphä")

    def test_non_ascii_digits(self):
        """Test that non-ASCII digits are not treated as numbers."""
        with pytest.raises(InvalidVersionError):
            parse_version("１.0.0")

    def test_error_carries_input(self):
        """Test that the error keeps the offending text."""
        with pytest.raises(InvalidVersionError) as excinfo:
            parse_version("1.0.0-alpha.")
        assert excinfo.value.version == "1.0.0-alpha."
        assert "empty" in excinfo.value.message

    def test_non_string_input(self):
        """Test that non-string input raises error."""
        with pytest.raises(InvalidVersionError):
            parse_version(123)  # type: ignore

    def test_none_input(self):
        """Test that None input raises error."""
        with pytest.raises(InvalidVersionError):
            parse_version(None)  # type: ignore


class TestIsValidSemver:
    """Tests for is_valid_semver function."""

    def test_valid_full(self):
        """Test valid full version."""
        assert is_valid_semver("1.0.0-alpha.1+build.123") is True

    def test_invalid_missing_patch(self):
        """Test invalid version missing patch."""
        assert is_valid_semver("1.0") is False

    def test_invalid_non_string(self):
        """Test invalid non-string input."""
        assert is_valid_semver(123) is False  # type: ignore

    def test_whitespace_not_trimmed(self):
        """Test that surrounding whitespace makes a version invalid."""
        assert is_valid_semver("  1.0.0  ") is False


class TestVersionConstruction:
    """Tests for building Version values from components."""

    def test_defaults(self):
        """Test that identifier sequences default to empty."""
        v = Version(1, 2, 3)
        assert v.prerelease == ()
        assert v.build == ()
        assert str(v) == "1.2.3"

    def test_lists_become_tuples(self):
        """Test that list identifiers are stored as tuples."""
        v = Version(1, 0, 0, ["rc", "1"], ["sha", "abc"])
        assert v.prerelease == ("rc", "1")
        assert v.build == ("sha", "abc")
        assert hash(v) == hash(Version(1, 0, 0, ("rc", "1"), ("sha", "abc")))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"major": -1, "minor": 0, "patch": 0},
            {"major": 1, "minor": 1.5, "patch": 0},
            {"major": True, "minor": 0, "patch": 0},
            {"major": 1, "minor": 0, "patch": "0"},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": ("",)},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": ("a b",)},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": ("01",)},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": (1,)},
            {"major": 1, "minor": 0, "patch": 0, "prerelease": "alpha"},
            {"major": 1, "minor": 0, "patch": 0, "build": ("a.b",)},
            {"major": 1, "minor": 0, "patch": 0, "build": ("é",)},
        ],
    )
    def test_invalid_components(self, kwargs):
        """Test that invalid components are rejected at construction."""
        with pytest.raises(InvalidVersionError):
            Version(**kwargs)

    def test_build_leading_zero_allowed(self):
        """Test that build identifiers may have leading zeros."""
        assert Version(1, 0, 0, build=("007",)).build == ("007",)


class TestVersionEquality:
    """Tests for Version equality and hashing."""

    def test_equal_versions(self):
        """Test that equal versions are equal."""
        assert parse_version("1.0.0-rc.1+b") == parse_version("1.0.0-rc.1+b")

    def test_different_versions(self):
        """Test that different versions are not equal."""
        assert parse_version("1.0.0") != parse_version("2.0.0")

    def test_build_metadata_matters_for_equality(self):
        """Test that equality is structural, build metadata included."""
        assert parse_version("1.0.0+a") != parse_version("1.0.0+b")
        assert parse_version("1.0.0+a") != parse_version("1.0.0")

    def test_identifier_order_matters(self):
        """Test that identifier sequences are order-significant."""
        assert parse_version("1.0.0-a.b") != parse_version("1.0.0-b.a")

    def test_hashable(self):
        """Test that versions are hashable."""
        v = parse_version("1.0.0")
        assert v in {v}

    def test_frozen(self):
        """Test that Version is immutable."""
        v = parse_version("1.0.0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.major = 2  # type: ignore

    def test_no_ordering_operators(self):
        """Test that ordering goes through the comparator, not dunder methods."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < parse_version("2.0.0")  # type: ignore


class TestClassifyIdentifier:
    """Tests for identifier classification."""

    @pytest.mark.parametrize(
        "identifier, expected",
        [
            ("0", (IdentifierKind.NUMERIC, 0)),
            ("11", (IdentifierKind.NUMERIC, 11)),
            ("alpha", (IdentifierKind.ALPHANUMERIC, "alpha")),
            ("1a", (IdentifierKind.ALPHANUMERIC, "1a")),
            ("-1", (IdentifierKind.ALPHANUMERIC, "-1")),
            ("01", (IdentifierKind.ALPHANUMERIC, "01")),
        ],
    )
    def test_classification(self, identifier, expected):
        """Test numeric and alphanumeric classification."""
        assert classify_identifier(identifier) == expected

    def test_numeric_sorts_first(self):
        """Test that the numeric kind orders before the alphanumeric kind."""
        assert IdentifierKind.NUMERIC < IdentifierKind.ALPHANUMERIC
