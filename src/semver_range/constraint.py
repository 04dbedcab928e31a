# SPDX-License-Identifier: MIT
"""Version range constraints.

Supported forms:
- Exact versions: 1.0.0, =1.0.0
- Comparison operators: <1.0.0, <=1.0.0, >1.0.0, >=1.0.0, !=1.0.0
- Tilde ranges: ~1.2.3 (>=1.2.3 <1.3.0)
- Caret ranges: ^1.2.3 (>=1.2.3 <2.0.0), ^0.2.3 (>=0.2.3 <0.3.0)
- Wildcards: *, 1, 1.x, 1.*, 1.2, 1.2.x, 1.2.*
- Hyphen ranges: 1.2.3 - 2.3.4 (>=1.2.3 <=2.3.4), 1.2.3 - 2.3 (>=1.2.3 <2.4.0)
- AND: >=1.0.0 <2.0.0, >=1.0.0, <2.0.0
- OR: ^1.0.0 || ^2.0.0

Every constraint is normalized into OR-groups of AND-conditions.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import (
    InvalidBuildMetadataError,
    InvalidConstraintError,
    InvalidPreReleaseError,
    UnknownOperatorError,
)
from .identifiers import BuildMetadata, PreRelease
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

WILDCARDS = frozenset({"*", "x", "X"})

# Leading operator symbols followed by the version text
CONSTRAINT_PATTERN = re.compile(r"(?P<operator>[<>=!~^]*)(?P<version>.*)")

HYPHEN_RANGE_PATTERN = re.compile(
    r"(?P<from>v?[0-9][0-9A-Za-z.+*-]*)\s+-\s+(?P<to>v?[0-9][0-9A-Za-z.+*-]*)"
)

WILDCARD_PATTERN = re.compile(
    r"v?(?P<major>0|[1-9][0-9]*)"
    r"(?:\.(?P<minor>0|[1-9][0-9]*|[xX*]))?"
    r"(?:\.(?P<patch>0|[1-9][0-9]*|[xX*]))?"
)

PARTIAL_VERSION_PATTERN = re.compile(
    r"v?(?P<major>0|[1-9][0-9]*)"
    r"(?:\.(?P<minor>0|[1-9][0-9]*|[xX*]))?"
    r"(?:\.(?P<patch>0|[1-9][0-9]*|[xX*]))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?"
)

# ">= 1.0.0" -> ">=1.0.0" before tokenizing
_DETACHED_OPERATOR = re.compile(r"([<>=!~^]+)\s+")

_AND_SEPARATOR = re.compile(r"[\s,]+")


class Operator(str, Enum):
    """Constraint operators."""

    EQUAL = "="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    TILDE = "~"
    CARET = "^"

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Return the operator for ``symbol``; an empty symbol means equality.

        Raises:
            UnknownOperatorError: If ``symbol`` is not a recognized operator
        """
        if symbol == "":
            return cls.EQUAL
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None


@dataclass(frozen=True, slots=True)
class Comparison:
    """A single ``operator version`` test."""

    operator: Operator
    version: Version

    def __post_init__(self) -> None:
        if self.operator in (Operator.TILDE, Operator.CARET):
            raise InvalidConstraintError(
                f"{self.operator.value}{self.version}",
                f"Operator '{self.operator.value}' must be expanded into a range",
            )

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    def is_satisfied_by(self, version: Version) -> bool:
        op = self.operator
        if op is Operator.EQUAL:
            return version == self.version
        if op is Operator.NOT_EQUAL:
            return version != self.version
        if op is Operator.LESS_THAN:
            return version < self.version
        if op is Operator.LESS_THAN_OR_EQUAL:
            return version <= self.version
        if op is Operator.GREATER_THAN:
            return version > self.version
        return version >= self.version


@dataclass(frozen=True, slots=True)
class Range:
    """A ``[lower, upper)`` range, or ``[lower, upper]`` when ``upper_inclusive``."""

    lower: Version
    upper: Version
    upper_inclusive: bool = False

    def __str__(self) -> str:
        upper_op = "<=" if self.upper_inclusive else "<"
        return f">={self.lower} {upper_op}{self.upper}"

    def is_satisfied_by(self, version: Version) -> bool:
        if version < self.lower:
            return False
        if self.upper_inclusive:
            return version <= self.upper
        return version < self.upper


Condition = Union[Comparison, Range]
AndGroup = tuple[Condition, ...]

_MATCH_ALL: Condition = Comparison(Operator.GREATER_THAN_OR_EQUAL, Version(0, 0, 0))


@dataclass(frozen=True, slots=True)
class Constraint:
    """A parsed version constraint.

    Attributes:
        groups: OR-groups; a version satisfies the constraint if every
            condition of at least one group holds
        original: The constraint text as supplied, used for display
    """

    groups: tuple[AndGroup, ...]
    original: str = ""

    def __str__(self) -> str:
        return self.original

    @classmethod
    def parse(cls, constraint: str) -> Constraint:
        """Parse a constraint string.

        Raises:
            InvalidConstraintError: If a token matches no recognized form
            UnknownOperatorError: If a token uses an unrecognized operator

        Examples:
            >>> Constraint.parse("^1.2.3").is_satisfied_by("1.9.9")
            True
            >>> Constraint.parse("1.2.3 - 2.3").is_satisfied_by("2.4.0")
            False
        """
        if not isinstance(constraint, str):
            raise InvalidConstraintError(
                str(constraint), f"Constraint must be a string, got {type(constraint).__name__}"
            )

        text = constraint.strip()
        if text == "" or text in WILDCARDS:
            return cls(((_MATCH_ALL,),), text)

        groups = tuple(_parse_and_group(group.strip()) for group in text.split("||"))
        logger.debug("Parsed constraint %r into %d OR-group(s)", text, len(groups))
        return cls(groups, text)

    @classmethod
    def exact(cls, version: Union[Version, str]) -> Constraint:
        """Create a constraint matching exactly ``version`` (build ignored)."""
        v = parse_version(version) if isinstance(version, str) else version
        return cls(((Comparison(Operator.EQUAL, v),),), str(v))

    @classmethod
    def with_operator(cls, operator: Union[Operator, str], version: Union[Version, str]) -> Constraint:
        """Create a constraint from an operator and a version.

        Tilde and caret operators are expanded into their ranges.
        """
        if not isinstance(operator, Operator):
            operator = Operator.from_symbol(operator)
        v = parse_version(version) if isinstance(version, str) else version
        return cls(((_condition_for(operator, v),),), f"{operator.value}{v}")

    def is_satisfied_by(self, version: Union[Version, str]) -> bool:
        """Return True if ``version`` satisfies at least one OR-group."""
        v = parse_version(version) if isinstance(version, str) else version
        return any(
            all(condition.is_satisfied_by(v) for condition in group) for group in self.groups
        )

    def __contains__(self, version: Union[Version, str]) -> bool:
        return self.is_satisfied_by(version)

    def and_(self, other: Constraint) -> Constraint:
        """Combine with ``other`` so both must hold (AND distributed over OR)."""
        groups = tuple(mine + theirs for mine in self.groups for theirs in other.groups)
        return Constraint(groups, f"{self.original} {other.original}")

    def or_(self, other: Constraint) -> Constraint:
        """Combine with ``other`` so either may hold."""
        return Constraint(self.groups + other.groups, f"{self.original} || {other.original}")

    __and__ = and_
    __or__ = or_


def parse_constraint(constraint: str) -> Constraint:
    """Parse a constraint string. See :meth:`Constraint.parse`."""
    return Constraint.parse(constraint)


def satisfies(version: Union[Version, str], constraint: Union[Constraint, str]) -> bool:
    """Return True if ``version`` satisfies ``constraint``.

    Examples:
        >>> satisfies("1.5.0", ">=1.0.0 <2.0.0")
        True
        >>> satisfies("2.0.0", "^1.0.0")
        False
    """
    if isinstance(constraint, str):
        constraint = Constraint.parse(constraint)
    return constraint.is_satisfied_by(version)


def _parse_and_group(group: str) -> AndGroup:
    hyphen = HYPHEN_RANGE_PATTERN.fullmatch(group)
    if hyphen:
        return (_parse_hyphen_range(hyphen.group("from"), hyphen.group("to")),)

    parts = [part for part in _AND_SEPARATOR.split(_DETACHED_OPERATOR.sub(r"\1", group)) if part]
    if not parts:
        raise InvalidConstraintError(group)
    return tuple(_parse_single(part) for part in parts)


def _parse_hyphen_range(lower_text: str, upper_text: str) -> Range:
    lower, _ = _parse_partial_version(lower_text)
    upper, upper_is_full = _parse_partial_version(upper_text)

    # A partial upper bound (2.3) means <2.4.0 rather than <=2.3.0
    if upper_is_full:
        return Range(lower, upper, upper_inclusive=True)
    return Range(lower, upper.increment_minor())


def _parse_single(token: str) -> Condition:
    if token in WILDCARDS:
        return _MATCH_ALL

    wildcard = WILDCARD_PATTERN.fullmatch(token)
    if wildcard:
        major = _component(wildcard.group("major"), token)
        minor = wildcard.group("minor")
        patch = wildcard.group("patch")
        if minor is None or minor in WILDCARDS:
            return Range(Version(major, 0, 0), Version(major + 1, 0, 0))
        if patch is None or patch in WILDCARDS:
            minor_number = _component(minor, token)
            return Range(Version(major, minor_number, 0), Version(major, minor_number + 1, 0))

    match = CONSTRAINT_PATTERN.fullmatch(token)
    if match is None or not match.group("version"):
        raise InvalidConstraintError(token)

    operator = Operator.from_symbol(match.group("operator"))
    version, _ = _parse_partial_version(match.group("version"), token)
    return _condition_for(operator, version)


def _condition_for(operator: Operator, version: Version) -> Condition:
    if operator is Operator.TILDE:
        return Range(version, Version(version.major, version.minor + 1, 0))

    if operator is Operator.CARET:
        # Bump the leftmost non-zero component
        if version.major > 0:
            upper = Version(version.major + 1, 0, 0)
        elif version.minor > 0:
            upper = Version(0, version.minor + 1, 0)
        else:
            upper = Version(0, 0, version.patch + 1)
        return Range(version, upper)

    return Comparison(operator, version)


def _component(text: str, token: str) -> int:
    try:
        return int(text)
    except ValueError as err:
        raise InvalidConstraintError(
            token, f"Version component is too large: {len(text)} digits"
        ) from err


def _parse_partial_version(text: str, token: Optional[str] = None) -> tuple[Version, bool]:
    """Parse MAJOR[.MINOR[.PATCH]][-pre][+build], defaulting missing parts to 0.

    Returns:
        The version and whether all three numeric components were given
    """
    match = PARTIAL_VERSION_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidConstraintError(token or text)

    components = [match.group(name) for name in ("major", "minor", "patch")]
    is_full = all(part is not None and part not in WILDCARDS for part in components)
    major, minor, patch = (
        0 if part is None or part in WILDCARDS else _component(part, token or text)
        for part in components
    )

    prerelease = match.group("prerelease")
    build = match.group("build")
    try:
        version = Version(
            major,
            minor,
            patch,
            PreRelease.from_string(prerelease) if prerelease else PreRelease(),
            BuildMetadata.from_string(build) if build else BuildMetadata(),
        )
    except (InvalidPreReleaseError, InvalidBuildMetadataError) as err:
        raise InvalidConstraintError(token or text, f"Invalid version in constraint: {err}") from err
    return version, is_full
