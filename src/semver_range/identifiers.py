# SPDX-License-Identifier: MIT
"""Pre-release and build metadata identifier lists.

Both are dot-separated sequences of ``[0-9A-Za-z-]+`` tokens:
- Pre-release: 1.0.0-alpha.1 -> ("alpha", "1"); numeric tokens may not
  carry a leading zero, and lists are ordered per SemVer precedence
- Build: 1.0.0+exp.sha.5114f85 -> ("exp", "sha", "5114f85"); compared for
  equality only
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Iterator, Optional

from .errors import InvalidBuildMetadataError, InvalidPreReleaseError

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


@dataclass(frozen=True, slots=True)
class _IdentifierList:
    identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        identifiers = tuple(self.identifiers)
        for identifier in identifiers:
            self._validate_identifier(identifier)
        object.__setattr__(self, "identifiers", identifiers)

    @classmethod
    def _validate_identifier(cls, identifier: str) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)

    @property
    def is_empty(self) -> bool:
        return not self.identifiers

    def at(self, index: int) -> Optional[str]:
        """Return the identifier at ``index``, or None when out of range."""
        if 0 <= index < len(self.identifiers):
            return self.identifiers[index]
        return None


@total_ordering
@dataclass(frozen=True, slots=True)
class PreRelease(_IdentifierList):
    """Pre-release identifiers, e.g. ``alpha.1`` or ``rc.2``.

    ``PreRelease()`` is the "no pre-release" state, which outranks every
    non-empty pre-release of the same core version.
    """

    @classmethod
    def from_string(cls, prerelease: str) -> PreRelease:
        """Parse a dotted pre-release string (without the leading hyphen).

        Raises:
            InvalidPreReleaseError: If the string or any identifier is invalid
        """
        if prerelease == "":
            raise InvalidPreReleaseError.empty_identifier()
        return cls(tuple(prerelease.split(".")))

    @classmethod
    def from_identifiers(cls, identifiers: Iterable[str]) -> PreRelease:
        """Build a pre-release from an explicit identifier sequence.

        Raises:
            InvalidPreReleaseError: If the sequence is empty or any identifier is invalid
        """
        identifiers = tuple(identifiers)
        if not identifiers:
            raise InvalidPreReleaseError.empty_identifier()
        return cls(identifiers)

    @classmethod
    def _validate_identifier(cls, identifier: str) -> None:
        if identifier == "":
            raise InvalidPreReleaseError.empty_identifier()
        if not IDENTIFIER_PATTERN.fullmatch(identifier):
            raise InvalidPreReleaseError.invalid_characters(identifier)
        if identifier.isdigit() and identifier != "0" and identifier.startswith("0"):
            raise InvalidPreReleaseError.numeric_leading_zeros(identifier)

    def compare_to(self, other: PreRelease) -> int:
        """Compare two pre-releases per SemVer 2.0.0 precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        # No pre-release > any pre-release
        if not self.identifiers and not other.identifiers:
            return 0
        if not self.identifiers:
            return 1
        if not other.identifiers:
            return -1

        for mine, theirs in zip(self.identifiers, other.identifiers):
            result = _compare_identifiers(mine, theirs)
            if result:
                return result

        # Shared prefix equal - more identifiers has higher precedence
        if len(self.identifiers) != len(other.identifiers):
            return -1 if len(self.identifiers) < len(other.identifiers) else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare_to(other) < 0

    def increment(self) -> PreRelease:
        """Return the next pre-release.

        Examples:
            "" -> "0", "alpha" -> "alpha.1", "alpha.1" -> "alpha.2"
        """
        if not self.identifiers:
            return PreRelease(("0",))

        last = self.identifiers[-1]
        if last.isdigit():
            return PreRelease(self.identifiers[:-1] + (_increment_digits(last),))
        return PreRelease(self.identifiers + ("1",))


@dataclass(frozen=True, slots=True)
class BuildMetadata(_IdentifierList):
    """Build metadata identifiers, e.g. ``build.123`` or ``20240101``.

    Never consulted for precedence.
    """

    @classmethod
    def from_string(cls, build: str) -> BuildMetadata:
        """Parse a dotted build string (without the leading plus).

        An empty string yields empty build metadata.

        Raises:
            InvalidBuildMetadataError: If any identifier is invalid
        """
        if build == "":
            return cls()
        return cls(tuple(build.split(".")))

    @classmethod
    def from_identifiers(cls, identifiers: Iterable[str]) -> BuildMetadata:
        return cls(tuple(identifiers))

    @classmethod
    def _validate_identifier(cls, identifier: str) -> None:
        if identifier == "":
            raise InvalidBuildMetadataError.empty_identifier()
        if not IDENTIFIER_PATTERN.fullmatch(identifier):
            raise InvalidBuildMetadataError.invalid_characters(identifier)


def _compare_identifiers(a: str, b: str) -> int:
    is_num_a = a.isdigit()
    is_num_b = b.isdigit()

    if is_num_a and is_num_b:
        # No leading zeros, so a longer digit run is the larger number
        key_a, key_b = (len(a), a), (len(b), b)
        if key_a != key_b:
            return -1 if key_a < key_b else 1
        return 0
    if is_num_a:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num_b:
        return 1
    if a != b:
        return -1 if a < b else 1
    return 0


def _increment_digits(digits: str) -> str:
    """Add one to a decimal digit string without converting it to int.

    Examples:
        "9" -> "10", "199" -> "200"
    """
    head = digits.rstrip("9")
    carried = len(digits) - len(head)
    if not head:
        return "1" + "0" * carried
    return head[:-1] + str(int(head[-1]) + 1) + "0" * carried
