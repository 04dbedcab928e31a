# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers < alphanumeric identifiers < release
Build metadata is ignored in comparisons per SemVer 2.0.0.

Every function accepts either version strings or Version objects.
"""

from __future__ import annotations

from typing import Iterable, Literal, Optional, Union

from .errors import UnknownOperatorError
from .semver import DiffType, Version, parse_version

VersionLike = Union[str, Version]

BumpPart = Literal["major", "minor", "patch", "prerelease"]


def as_version(version: VersionLike) -> Version:
    """Return ``version`` as a Version, parsing it if it is a string."""
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

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
        Build metadata is ignored in comparisons per SemVer 2.0.0.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0")
        0
        >>> compare_versions("2.0.0", "1.0.0")
        1
        >>> compare_versions("1.0.0-alpha", "1.0.0-beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return as_version(version1).compare_to(as_version(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that orders exactly like ``compare_versions``

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = as_version(version)

    # Pre-release key: None becomes (1,) to sort after pre-releases
    # Pre-release strings become (0, parsed_parts...)
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if part.isdigit():
                # No leading zeros, so length then text orders by numeric value
                parts.append((0, len(part), part))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def eq(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 == version2 by precedence."""
    return compare_versions(version1, version2) == 0


def neq(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 != version2 by precedence."""
    return compare_versions(version1, version2) != 0


def lt(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 < version2."""
    return compare_versions(version1, version2) < 0


def lte(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 <= version2."""
    return compare_versions(version1, version2) <= 0


def gt(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 > version2."""
    return compare_versions(version1, version2) > 0


def gte(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 >= version2."""
    return compare_versions(version1, version2) >= 0


_OPERATOR_CHECKS = {
    "=": eq,
    "==": eq,
    "!=": neq,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
}


def compare_with_operator(version1: VersionLike, operator: str, version2: VersionLike) -> bool:
    """Evaluate ``version1 <operator> version2``.

    Raises:
        UnknownOperatorError: If ``operator`` is not one of =, ==, !=, <, <=, >, >=

    Examples:
        >>> compare_with_operator("1.0.0", "<", "2.0.0")
        True
    """
    check = _OPERATOR_CHECKS.get(operator)
    if check is None:
        raise UnknownOperatorError(operator)
    return check(version1, version2)


def sort_versions(versions: Iterable[VersionLike]) -> list[Version]:
    """Return versions in ascending precedence order (stable for ties)."""
    return sorted(as_version(v) for v in versions)


def rsort_versions(versions: Iterable[VersionLike]) -> list[Version]:
    """Return versions in descending precedence order (stable for ties)."""
    return sorted((as_version(v) for v in versions), reverse=True)


def max_version(versions: Iterable[VersionLike]) -> Optional[Version]:
    """Return the highest version, or None for an empty input."""
    ordered = rsort_versions(versions)
    return ordered[0] if ordered else None


def min_version(versions: Iterable[VersionLike]) -> Optional[Version]:
    """Return the lowest version, or None for an empty input."""
    ordered = sort_versions(versions)
    return ordered[0] if ordered else None


def diff_versions(version1: VersionLike, version2: VersionLike) -> Optional[DiffType]:
    """Return the most significant differing field, or None if identical.

    Examples:
        >>> diff_versions("1.0.0", "2.0.0")
        'major'
        >>> diff_versions("1.0.0+a", "1.0.0+b")
        'build'
    """
    return as_version(version1).diff(as_version(version2))


def bump_version(version: VersionLike, part: BumpPart) -> Version:
    """Increment one part of a version, resetting the less significant parts.

    Raises:
        ValueError: If ``part`` is not major, minor, patch or prerelease
    """
    v = as_version(version)
    if part == "major":
        return v.increment_major()
    if part == "minor":
        return v.increment_minor()
    if part == "patch":
        return v.increment_patch()
    if part == "prerelease":
        return v.increment_prerelease()
    raise ValueError(f"Unknown version part: {part!r}")
