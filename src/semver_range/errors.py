# SPDX-License-Identifier: MIT
"""Exceptions raised by semantic version and constraint parsing.

Every error represents malformed input; none of them are retryable.
"""

from __future__ import annotations


class SemVerError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, value: str, message: str = ""):
        self.value = value
        self.message = message or f"Invalid value: {value}"
        super().__init__(self.message)


class InvalidVersionError(SemVerError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        super().__init__(version, message or f"Invalid semantic version format: '{version}'")

    @property
    def version(self) -> str:
        return self.value


class NegativeComponentError(InvalidVersionError):
    """Raised when major, minor or patch is constructed with a negative integer."""

    def __init__(self, component: str, number: int):
        self.component = component
        super().__init__(
            str(number),
            f"Version {component} must be a non-negative integer, got: {number}",
        )


class LeadingZerosError(InvalidVersionError):
    """Raised when a numeric version component has a leading zero."""

    def __init__(self, component: str, text: str):
        self.component = component
        super().__init__(text, f"Version {component} must not have leading zeros: '{text}'")


class InvalidPreReleaseError(SemVerError):
    """Raised when a pre-release identifier is empty or malformed."""

    @classmethod
    def empty_identifier(cls) -> InvalidPreReleaseError:
        return cls("", "Pre-release identifiers must not be empty")

    @classmethod
    def invalid_characters(cls, identifier: str) -> InvalidPreReleaseError:
        return cls(
            identifier,
            f"Pre-release identifier contains invalid characters: '{identifier}'. "
            "Only alphanumerics and hyphens are allowed [0-9A-Za-z-]",
        )

    @classmethod
    def numeric_leading_zeros(cls, identifier: str) -> InvalidPreReleaseError:
        return cls(
            identifier,
            f"Numeric pre-release identifier must not have leading zeros: '{identifier}'",
        )


class InvalidBuildMetadataError(SemVerError):
    """Raised when a build metadata identifier is empty or malformed."""

    @classmethod
    def empty_identifier(cls) -> InvalidBuildMetadataError:
        return cls("", "Build metadata identifiers must not be empty")

    @classmethod
    def invalid_characters(cls, identifier: str) -> InvalidBuildMetadataError:
        return cls(
            identifier,
            f"Build metadata identifier contains invalid characters: '{identifier}'. "
            "Only alphanumerics and hyphens are allowed [0-9A-Za-z-]",
        )


class InvalidConstraintError(SemVerError):
    """Raised when a constraint token matches none of the recognized range forms."""

    def __init__(self, constraint: str, message: str = ""):
        super().__init__(
            constraint, message or f"Invalid version constraint format: '{constraint}'"
        )

    @property
    def constraint(self) -> str:
        return self.value


class UnknownOperatorError(InvalidConstraintError):
    """Raised for an operator symbol outside the recognized set."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(operator, f"Unknown constraint operator: '{operator}'")
