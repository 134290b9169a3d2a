# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Every relational operator is derived from one ordering function,
:func:`compare_precedence`. A comparison mode decides which identifiers are
cleared from both operands before the operator is applied:

- traditional: only MAJOR.MINOR.PATCH matter
- precedence: build metadata is ignored (the SemVer default)
- strict-equality-only: ``==`` and ``!=`` respect build metadata, ordering does not
- strict: build metadata takes part in every operator as a final tie-break
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .semver import Version, classify_identifier, parse_version

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    """Relational operators understood by :func:`compare`."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @classmethod
    def from_token(cls, token: str) -> "Operator":
        """Look up an operator by its symbolic, short or long spelling.

        Raises:
            ValueError: If the token names no operator
        """
        try:
            return _OPERATOR_TOKENS[token]
        except KeyError:
            raise ValueError(
                f"Unknown comparison operator {token!r}; expected one of: "
                + ", ".join(_OPERATOR_TOKENS)
            ) from None

    @classmethod
    def tokens(cls) -> list[str]:
        """Return every accepted operator spelling."""
        return list(_OPERATOR_TOKENS)

    @property
    def is_equality(self) -> bool:
        return self in (Operator.EQ, Operator.NE)


_OPERATOR_TOKENS: dict[str, Operator] = {
    "==": Operator.EQ,
    "eq": Operator.EQ,
    "equal": Operator.EQ,
    "!=": Operator.NE,
    "ne": Operator.NE,
    "unequal": Operator.NE,
    "<": Operator.LT,
    "lt": Operator.LT,
    "older": Operator.LT,
    "<=": Operator.LE,
    "le": Operator.LE,
    "notNewer": Operator.LE,
    ">": Operator.GT,
    "gt": Operator.GT,
    "newer": Operator.GT,
    ">=": Operator.GE,
    "ge": Operator.GE,
    "notOlder": Operator.GE,
}


class CompareMode(str, Enum):
    """Which identifiers take part in a comparison."""

    TRADITIONAL = "traditional"
    PRECEDENCE = "precedence"
    STRICT_EQUALITY = "strict-equality-only"
    STRICT = "strict"


@dataclass(frozen=True)
class Comparison:
    """Outcome of a comparison along with the operands actually compared."""

    left: Version
    right: Version
    compared_left: Version
    compared_right: Version
    operator: Operator
    mode: CompareMode
    inverted: bool
    result: bool


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def compare_precedence(a: Version, b: Version, *, include_build: bool = False) -> int:
    """Order two versions by SemVer precedence.

    Args:
        a: First version
        b: Second version
        include_build: Break remaining ties by comparing the dot-joined build
            metadata as plain strings. This applies to release versions too,
            so ``1.0.0 < 1.0.0+a < 1.0.0+b``

    Returns:
        -1 if a precedes b, 0 if neither precedes the other, 1 if b precedes a

    Examples:
        >>> compare_precedence(parse_version("1.0.0-alpha"), parse_version("1.0.0"))
        -1
        >>> compare_precedence(parse_version("1.0.0+a"), parse_version("1.0.0+b"))
        0
        >>> compare_precedence(parse_version("1.0.0+a"), parse_version("1.0.0+b"), include_build=True)
        -1
    """
    result = _sign((a.major, a.minor, a.patch), (b.major, b.minor, b.patch))
    if result:
        return result

    # A release outranks any of its pre-releases
    if a.prerelease and not b.prerelease:
        return -1
    if b.prerelease and not a.prerelease:
        return 1

    for left, right in zip(a.prerelease, b.prerelease):
        if left != right:
            result = _sign(classify_identifier(left), classify_identifier(right))
            if result:
                return result

    result = _sign(len(a.prerelease), len(b.prerelease))
    if result or not include_build:
        return result

    return _sign(".".join(a.build), ".".join(b.build))


def precedes(a: Version, b: Version, *, include_build: bool = False) -> bool:
    """Return True if ``a`` has strictly lower precedence than ``b``."""
    return compare_precedence(a, b, include_build=include_build) < 0


def normalize(version: Version, mode: CompareMode, operator: Operator) -> Version:
    """Return the view of ``version`` that ``operator`` compares under ``mode``."""
    mode = CompareMode(mode)
    operator = Operator(operator)
    if mode is CompareMode.TRADITIONAL:
        return dataclasses.replace(version, prerelease=(), build=())
    if mode is CompareMode.STRICT:
        return version
    if mode is CompareMode.STRICT_EQUALITY and operator.is_equality:
        return version
    return dataclasses.replace(version, build=())


def explain(
    a: Version,
    b: Version,
    operator: Operator,
    mode: CompareMode = CompareMode.PRECEDENCE,
    invert: bool = False,
) -> Comparison:
    """Evaluate ``a <operator> b`` under ``mode`` and report how it was decided.

    Args:
        a: Left operand
        b: Right operand
        operator: Relational operator to apply
        mode: Which identifiers take part in the comparison
        invert: Negate the final result

    Returns:
        A Comparison holding both the original and the normalized operands
    """
    operator = Operator(operator)
    mode = CompareMode(mode)
    left = normalize(a, mode, operator)
    right = normalize(b, mode, operator)
    include_build = mode is CompareMode.STRICT

    if operator is Operator.EQ:
        result = left == right
    elif operator is Operator.NE:
        result = left != right
    elif operator is Operator.LT:
        result = precedes(left, right, include_build=include_build)
    elif operator is Operator.LE:
        result = not precedes(right, left, include_build=include_build)
    elif operator is Operator.GT:
        result = precedes(right, left, include_build=include_build)
    else:
        result = not precedes(left, right, include_build=include_build)

    if invert:
        result = not result

    logger.debug(
        "%s %s %s (mode=%s, compared as %s and %s, inverted=%s) -> %s",
        a,
        operator.value,
        b,
        mode.value,
        left,
        right,
        invert,
        result,
    )
    return Comparison(
        left=a,
        right=b,
        compared_left=left,
        compared_right=right,
        operator=operator,
        mode=mode,
        inverted=invert,
        result=result,
    )


def compare(
    a: Version,
    b: Version,
    operator: Operator,
    mode: CompareMode = CompareMode.PRECEDENCE,
    invert: bool = False,
) -> bool:
    """Evaluate ``a <operator> b`` under a comparison mode.

    Equality operators use structural equality of the normalized operands;
    ordering operators use :func:`precedes`. Never raises for valid versions.

    Examples:
        >>> a, b = parse_version("1.0.0+a"), parse_version("1.0.0+b")
        >>> compare(a, b, Operator.EQ)
        True
        >>> compare(a, b, Operator.EQ, CompareMode.STRICT_EQUALITY)
        False
        >>> compare(a, b, Operator.LT, CompareMode.STRICT)
        True
    """
    return explain(a, b, operator, mode, invert).result


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored in comparisons per SemVer specification.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare_precedence(v1, v2)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly like :func:`compare_versions`; build metadata is ignored.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases get (1,) so they sort after every pre-release of the same core
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(classify_identifier(part) for part in v.prerelease))

    return (v.major, v.minor, v.patch, prerelease_key)
