# SPDX-License-Identifier: MIT
"""Immutable, ordered collections of versions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, TypeVar, Union

from .compare import VersionLike, as_version
from .constraint import Constraint
from .semver import Version, parse_version

T = TypeVar("T")

ConstraintLike = Union[str, Constraint]


def _as_constraint(constraint: ConstraintLike) -> Constraint:
    return Constraint.parse(constraint) if isinstance(constraint, str) else constraint


@dataclass(frozen=True, slots=True)
class VersionCollection:
    """An ordered sequence of versions that may contain duplicates.

    Every transformation returns a new collection; the receiver is never
    modified.

    Example:
        >>> versions = VersionCollection.from_strings(["1.0.0", "2.1.0", "2.0.0-rc.1"])
        >>> str(versions.max_satisfying("^2.0.0"))
        '2.1.0'
    """

    versions: tuple[Version, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "versions", tuple(self.versions))

    @classmethod
    def from_strings(cls, versions: Iterable[str]) -> VersionCollection:
        """Parse every string; raises InvalidVersionError on the first bad one."""
        return cls(tuple(parse_version(v) for v in versions))

    @classmethod
    def from_versions(cls, versions: Iterable[Version]) -> VersionCollection:
        return cls(tuple(versions))

    def add(self, version: VersionLike) -> VersionCollection:
        return VersionCollection(self.versions + (as_version(version),))

    def all(self) -> list[Version]:
        return list(self.versions)

    def __len__(self) -> int:
        return len(self.versions)

    def __iter__(self) -> Iterator[Version]:
        return iter(self.versions)

    def __getitem__(self, index: int) -> Version:
        return self.versions[index]

    @property
    def is_empty(self) -> bool:
        return not self.versions

    def first(self) -> Optional[Version]:
        return self.versions[0] if self.versions else None

    def last(self) -> Optional[Version]:
        return self.versions[-1] if self.versions else None

    def sorted(self) -> VersionCollection:
        """Ascending precedence; versions that tie keep their input order."""
        return VersionCollection(tuple(sorted(self.versions)))

    def rsorted(self) -> VersionCollection:
        """Descending precedence; versions that tie keep their input order."""
        return VersionCollection(tuple(sorted(self.versions, reverse=True)))

    def max(self) -> Optional[Version]:
        return self.rsorted().first()

    def min(self) -> Optional[Version]:
        return self.sorted().first()

    def satisfying(self, constraint: ConstraintLike) -> VersionCollection:
        """Keep the versions that satisfy ``constraint``, preserving order."""
        c = _as_constraint(constraint)
        return self.filter(c.is_satisfied_by)

    def max_satisfying(self, constraint: ConstraintLike) -> Optional[Version]:
        return self.satisfying(constraint).max()

    def min_satisfying(self, constraint: ConstraintLike) -> Optional[Version]:
        return self.satisfying(constraint).min()

    def stable(self) -> VersionCollection:
        return self.filter(lambda v: v.is_stable)

    def prereleases(self) -> VersionCollection:
        return self.filter(lambda v: v.is_prerelease)

    def major(self, major: int) -> VersionCollection:
        return self.filter(lambda v: v.major == major)

    def minor(self, major: int, minor: int) -> VersionCollection:
        return self.filter(lambda v: v.major == major and v.minor == minor)

    def unique(self) -> VersionCollection:
        """Drop versions that repeat an earlier one, ignoring build metadata.

        The first occurrence of each version wins.
        """
        seen: set[str] = set()
        unique = []
        for version in self.versions:
            key = f"{version.core}-{version.prerelease}"
            if key in seen:
                continue
            seen.add(key)
            unique.append(version)
        return VersionCollection(tuple(unique))

    def map(self, callback: Callable[[Version], T]) -> list[T]:
        return [callback(v) for v in self.versions]

    def filter(self, predicate: Callable[[Version], bool]) -> VersionCollection:
        return VersionCollection(tuple(v for v in self.versions if predicate(v)))

    def to_strings(self) -> list[str]:
        return [str(v) for v in self.versions]


def max_satisfying(
    versions: Iterable[VersionLike], constraint: ConstraintLike
) -> Optional[Version]:
    """Return the highest version satisfying ``constraint``, or None.

    Examples:
        >>> str(max_satisfying(["1.0.0", "1.5.0", "2.0.0"], "^1.0.0"))
        '1.5.0'
    """
    return VersionCollection(tuple(as_version(v) for v in versions)).max_satisfying(constraint)


def min_satisfying(
    versions: Iterable[VersionLike], constraint: ConstraintLike
) -> Optional[Version]:
    """Return the lowest version satisfying ``constraint``, or None."""
    return VersionCollection(tuple(as_version(v) for v in versions)).min_satisfying(constraint)
