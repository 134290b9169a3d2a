# SPDX-License-Identifier: MIT
"""Semantic version parsing and rendering.

Implements the SemVer 2.0.0 grammar:
- Core: MAJOR.MINOR.PATCH, each ``0`` or a digit string without a leading zero
- Pre-release: ``-`` followed by dot-separated identifiers (-alpha, -alpha.1, -rc.2)
- Build metadata: ``+`` followed by dot-separated identifiers (+build.123, +001)

Parsed versions always render back to a string that reparses to an equal value.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant), restricted to ASCII digits
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z"
)

_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")
_DIGITS_PATTERN = re.compile(r"[0-9]+")


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class IdentifierKind(IntEnum):
    """How an identifier takes part in precedence ordering.

    Numeric identifiers always sort before alphanumeric ones.
    """

    NUMERIC = 0
    ALPHANUMERIC = 1


def _is_canonical_number(text: str) -> bool:
    return _DIGITS_PATTERN.fullmatch(text) is not None and (text == "0" or text[0] != "0")


def classify_identifier(identifier: str) -> tuple[IdentifierKind, Union[int, str]]:
    """Classify an identifier for ordering.

    Returns ``(NUMERIC, value)`` when the identifier is a canonical decimal
    number and ``(ALPHANUMERIC, identifier)`` otherwise. Digit strings with a
    redundant leading zero are alphanumeric.

    Examples:
        >>> classify_identifier("11")
        (<IdentifierKind.NUMERIC: 0>, 11)
        >>> classify_identifier("rc1")
        (<IdentifierKind.ALPHANUMERIC: 1>, 'rc1')
    """
    if _is_canonical_number(identifier):
        return (IdentifierKind.NUMERIC, int(identifier))
    return (IdentifierKind.ALPHANUMERIC, identifier)


def _identifier_problem(identifier: Any, label: str, allow_leading_zero: bool) -> Optional[str]:
    """Return a description of what is wrong with an identifier, or None."""
    if not isinstance(identifier, str):
        return f"{label} identifier must be a string, got {type(identifier).__name__}"
    if not identifier:
        return f"{label} identifiers must not be empty"
    if _IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        return f"{label} identifier {identifier!r} may only contain [0-9A-Za-z-]"
    if (
        not allow_leading_zero
        and _DIGITS_PATTERN.fullmatch(identifier)
        and not _is_canonical_number(identifier)
    ):
        return f"Numeric {label} identifier {identifier!r} must not have leading zeros"
    return None


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Equality and hashing cover every field, build metadata included. Ordering
    is not defined on the class itself; use
    :func:`semver_version.compare.compare_precedence` or
    :func:`semver_version.compare.version_key`.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        build: Build metadata identifiers (e.g., ("build", "123"))
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionError(
                    repr(value), f"{name} must be a non-negative integer, got {value!r}"
                )

        for name in ("prerelease", "build"):
            if isinstance(getattr(self, name), str):
                raise InvalidVersionError(
                    getattr(self, name), f"{name} must be a sequence of identifiers, not a string"
                )
        # Accept any iterable of identifiers but always store tuples
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

        for identifier in self.prerelease:
            problem = _identifier_problem(identifier, "Pre-release", allow_leading_zero=False)
            if problem:
                raise InvalidVersionError(str(identifier), problem)
        for identifier in self.build:
            problem = _identifier_problem(identifier, "Build metadata", allow_leading_zero=True)
            if problem:
                raise InvalidVersionError(str(identifier), problem)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_text(self) -> Optional[str]:
        """Return the pre-release identifiers joined by dots, or None."""
        return ".".join(self.prerelease) if self.prerelease else None

    @property
    def build_text(self) -> Optional[str]:
        """Return the build metadata identifiers joined by dots, or None."""
        return ".".join(self.build) if self.build else None

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a JSON-serializable dictionary."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prereleaseIdentifiers": list(self.prerelease),
            "buildMetadata": list(self.build),
        }


def _parse_core_component(text: str, name: str, version_string: str) -> int:
    if not _is_canonical_number(text):
        if _DIGITS_PATTERN.fullmatch(text):
            raise InvalidVersionError(
                version_string, f"{name} version {text!r} must not have leading zeros"
            )
        raise InvalidVersionError(
            version_string, f"{name} version {text!r} is not a non-negative integer"
        )
    return int(text)


def _split_identifiers(
    text: str, label: str, version_string: str, allow_leading_zero: bool
) -> tuple[str, ...]:
    if not text:
        raise InvalidVersionError(version_string, f"{label} section must not be empty")

    identifiers = tuple(text.split("."))
    for identifier in identifiers:
        problem = _identifier_problem(identifier, label, allow_leading_zero)
        if problem:
            raise InvalidVersionError(version_string, problem)
    return identifiers


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', '1'), build=('build', '456'))
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    try:
        return _parse(version_string)
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e.message)
        raise


def _parse(version_string: str) -> Version:
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")
    if not version_string.isascii():
        raise InvalidVersionError(version_string, "Version string must be ASCII")

    # The first "+" starts build metadata; a "-" past it belongs to the metadata
    head, has_build, build_text = version_string.partition("+")
    core, has_prerelease, prerelease_text = head.partition("-")

    parts = core.split(".")
    if len(parts) != 3:
        raise InvalidVersionError(
            version_string,
            f"Expected MAJOR.MINOR.PATCH, found {len(parts)} component(s) in {core!r}",
        )
    major, minor, patch = (
        _parse_core_component(text, name, version_string)
        for text, name in zip(parts, ("Major", "Minor", "Patch"))
    )

    prerelease: tuple[str, ...] = ()
    if has_prerelease:
        prerelease = _split_identifiers(
            prerelease_text, "Pre-release", version_string, allow_leading_zero=False
        )

    build: tuple[str, ...] = ()
    if has_build:
        build = _split_identifiers(
            build_text, "Build metadata", version_string, allow_leading_zero=True
        )

    return Version(major, minor, patch, prerelease, build)


def render_version(version: Version) -> str:
    """Render a version in canonical form.

    The result always reparses to an equal version.
    """
    return str(version)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True

