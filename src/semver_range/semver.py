# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101
- An optional leading "v" (v1.2.3)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Literal, Optional, Sequence, Union

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import InvalidVersionError, LeadingZerosError, NegativeComponentError
from .identifiers import BuildMetadata, PreRelease

if TYPE_CHECKING:
    from .constraint import Constraint

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

# Same shape with unrestricted digits, used to report leading zeros precisely
_LOOSE_CORE_PATTERN = re.compile(r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)(?:[-+].*)?")

# Lenient MAJOR[.MINOR[.PATCH]] run for coerce_version
_COERCE_PATTERN = re.compile(r"v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?")

DiffType = Literal["major", "minor", "patch", "prerelease", "build"]

PreReleaseInput = Union[str, Sequence[str], PreRelease]
BuildInput = Union[str, Sequence[str], BuildMetadata]


def _to_prerelease(value: Optional[PreReleaseInput]) -> PreRelease:
    if value is None:
        return PreRelease()
    if isinstance(value, PreRelease):
        return value
    if isinstance(value, str):
        return PreRelease.from_string(value)
    return PreRelease.from_identifiers(value)


def _to_build(value: Optional[BuildInput]) -> BuildMetadata:
    if value is None:
        return BuildMetadata()
    if isinstance(value, BuildMetadata):
        return value
    if isinstance(value, str):
        return BuildMetadata.from_string(value)
    return BuildMetadata.from_identifiers(value)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Equality, ordering and hashing follow SemVer precedence, so build
    metadata is ignored: ``Version(1, 0, 0, build=...)`` compares equal to
    ``Version(1, 0, 0)``. Use :meth:`identical` to include build metadata.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "beta", "rc.2")
        build: Build metadata (e.g., "build.123", "20240101")
    """

    major: int
    minor: int
    patch: int
    prerelease: PreRelease = field(default_factory=PreRelease)
    build: BuildMetadata = field(default_factory=BuildMetadata)

    def __post_init__(self) -> None:
        for component in ("major", "minor", "patch"):
            number = getattr(self, component)
            if number < 0:
                raise NegativeComponentError(component, number)
        # Accept dotted strings and identifier sequences as well as ready values
        object.__setattr__(self, "prerelease", _to_prerelease(self.prerelease))
        object.__setattr__(self, "build", _to_build(self.build))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.core
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def core(self) -> str:
        """Return MAJOR.MINOR.PATCH without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def is_stable(self) -> bool:
        """Return True for a release version with major > 0."""
        return not self.prerelease and self.major > 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def is_development(self) -> bool:
        """Return True for initial-development versions (0.y.z)."""
        return self.major == 0

    @property
    def has_build(self) -> bool:
        """Return True if build metadata is present."""
        return bool(self.build)

    def compare_to(self, other: Version) -> int:
        """Compare two versions by SemVer precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        # Compare pre-release (build metadata is ignored)
        return self.prerelease.compare_to(other.prerelease)

    def equals(self, other: Version) -> bool:
        """Return True if both versions have the same precedence."""
        return self.compare_to(other) == 0

    def identical(self, other: Version) -> bool:
        """Return True if both versions render to the same string, build included."""
        return str(self) == str(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def increment_major(self) -> Version:
        """Return the next major release, e.g. 1.2.3-beta -> 2.0.0."""
        return Version(self.major + 1, 0, 0)

    def increment_minor(self) -> Version:
        """Return the next minor release, e.g. 1.2.3 -> 1.3.0."""
        return Version(self.major, self.minor + 1, 0)

    def increment_patch(self) -> Version:
        """Return the next patch release, e.g. 1.2.3 -> 1.2.4."""
        return Version(self.major, self.minor, self.patch + 1)

    def increment_prerelease(self) -> Version:
        """Bump the pre-release, clearing build metadata.

        Examples:
            1.0.0 -> 1.0.0-0, 1.0.0-alpha -> 1.0.0-alpha.1,
            1.0.0-alpha.1 -> 1.0.0-alpha.2
        """
        return Version(self.major, self.minor, self.patch, self.prerelease.increment())

    def with_prerelease(self, prerelease: PreReleaseInput) -> Version:
        """Return a copy with the given pre-release, keeping build metadata."""
        return replace(self, prerelease=_to_prerelease(prerelease))

    def without_prerelease(self) -> Version:
        """Return a copy with the pre-release removed."""
        return replace(self, prerelease=PreRelease())

    def with_build(self, build: BuildInput) -> Version:
        """Return a copy with the given build metadata."""
        return replace(self, build=_to_build(build))

    def without_build(self) -> Version:
        """Return a copy with build metadata removed."""
        return replace(self, build=BuildMetadata())

    def diff(self, other: Version) -> Optional[DiffType]:
        """Return the most significant field that differs, or None if identical.

        Priority order is major, minor, patch, prerelease, build.
        """
        if self.major != other.major:
            return "major"
        if self.minor != other.minor:
            return "minor"
        if self.patch != other.patch:
            return "patch"
        if self.prerelease != other.prerelease:
            return "prerelease"
        if self.build != other.build:
            return "build"
        return None

    def satisfies(self, constraint: Union[Constraint, str]) -> bool:
        """Return True if this version satisfies ``constraint``."""
        from .constraint import Constraint

        if isinstance(constraint, str):
            constraint = Constraint.parse(constraint)
        return constraint.is_satisfied_by(self)

    def to_dict(self) -> dict[str, Any]:
        """Return a machine-readable decomposition of the version."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": str(self.prerelease),
            "build": str(self.build),
            "full": str(self),
        }


def _component(text: str, version_string: str) -> int:
    try:
        return int(text)
    except ValueError as err:
        # Digit runs past the interpreter's int conversion limit
        raise InvalidVersionError(
            version_string, f"Version component is too large: {len(text)} digits"
        ) from err


def _check_leading_zeros(version_string: str) -> None:
    loose = _LOOSE_CORE_PATTERN.fullmatch(version_string)
    if loose is None:
        return
    for component in ("major", "minor", "patch"):
        text = loose.group(component)
        if len(text) > 1 and text.startswith("0"):
            raise LeadingZerosError(component, text)


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (v?MAJOR.MINOR.PATCH[-prerelease][+build])
        config: Parser options; defaults to ``DEFAULT_CONFIG``

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning
        LeadingZerosError: If a numeric core component has a leading zero

    Examples:
        >>> str(parse_version("1.2.3"))
        '1.2.3'

        >>> str(parse_version("v1.0.0-alpha.1").prerelease)
        'alpha.1'

        >>> str(parse_version("2.0.0-rc.1+build.456").build)
        'build.456'
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    candidate = config.prepare(version_string)
    if not candidate:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(candidate)
    if not match:
        _check_leading_zeros(candidate)
        raise InvalidVersionError(version_string)

    prerelease = match.group("prerelease")
    build = match.group("buildmetadata")
    return Version(
        major=_component(match.group("major"), version_string),
        minor=_component(match.group("minor"), version_string),
        patch=_component(match.group("patch"), version_string),
        prerelease=PreRelease.from_string(prerelease) if prerelease else PreRelease(),
        build=BuildMetadata.from_string(build) if build else BuildMetadata(),
    )


def try_parse_version(
    version_string: str, config: Optional[ParserConfig] = None
) -> Optional[Version]:
    """Parse a version string, returning None instead of raising on bad input."""
    try:
        return parse_version(version_string, config)
    except InvalidVersionError:
        return None


def is_valid_semver(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        config: Parser options; defaults to ``DEFAULT_CONFIG``

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
    if not isinstance(version_string, str):
        return False
    config = config or DEFAULT_CONFIG
    return SEMVER_PATTERN.fullmatch(config.prepare(version_string)) is not None


def create_version(
    major: int,
    minor: int = 0,
    patch: int = 0,
    prerelease: Optional[PreReleaseInput] = None,
    build: Optional[BuildInput] = None,
) -> Version:
    """Create a version from individual components.

    ``prerelease`` and ``build`` may be dotted strings ("alpha.1") or
    identifier sequences (["alpha", "1"]).

    Raises:
        NegativeComponentError: If a numeric component is negative
        InvalidPreReleaseError: If the pre-release is malformed
        InvalidBuildMetadataError: If the build metadata is malformed
    """
    return Version(major, minor, patch, _to_prerelease(prerelease), _to_build(build))


def coerce_version(version_string: str) -> Optional[Version]:
    """Extract a version from a loosely formatted string.

    Examples:
        "v1.2.3" -> 1.2.3, "1.2" -> 1.2.0, "release-7" -> 7.0.0, "abc" -> None
    """
    if not isinstance(version_string, str):
        return None

    parsed = try_parse_version(version_string)
    if parsed is not None:
        return parsed

    match = _COERCE_PATTERN.search(version_string)
    if match is None:
        return None

    major, minor, patch = match.groups()
    try:
        coerced = Version(
            _component(major, version_string),
            _component(minor or "0", version_string),
            _component(patch or "0", version_string),
        )
    except InvalidVersionError:
        logger.debug("Could not coerce %r: component too large", version_string)
        return None
    logger.debug("Coerced %r to %s", version_string, coerced)
    return coerced
