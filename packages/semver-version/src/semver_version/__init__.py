# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package parses, renders and orders versions following the SemVer 2.0.0
specification, and offers several comparison modes that differ in how
pre-release identifiers and build metadata take part.

Example:
    >>> from semver_version import parse_version, compare, Operator, CompareMode
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> compare(parse_version("1.0.0-alpha"), parse_version("1.0.0-beta"), Operator.LT)
    True
    >>> compare(
    ...     parse_version("1.0.0-alpha"),
    ...     parse_version("1.0.0-beta"),
    ...     Operator.EQ,
    ...     CompareMode.TRADITIONAL,
    ... )
    True
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    IdentifierKind,
    classify_identifier,
    parse_version,
    render_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    Comparison,
    CompareMode,
    Operator,
    compare,
    compare_precedence,
    compare_versions,
    explain,
    normalize,
    precedes,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "IdentifierKind",
    "classify_identifier",
    "parse_version",
    "render_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Version comparison
    "Comparison",
    "CompareMode",
    "Operator",
    "compare",
    "compare_precedence",
    "compare_versions",
    "explain",
    "normalize",
    "precedes",
    "version_key",
]
