# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and range matching.

This package provides utilities for parsing and comparing semantic versions
following the SemVer 2.0.0 specification, and for matching versions against
npm-style range constraints (tilde, caret, wildcard, hyphen, AND/OR).

Example:
    >>> from semver_range import parse_version, compare_versions, satisfies
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version.prerelease)
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
    >>> satisfies("1.4.0", "^1.2.0 || ^2.0.0")
    True
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import (
    SemVerError,
    InvalidVersionError,
    NegativeComponentError,
    LeadingZerosError,
    InvalidPreReleaseError,
    InvalidBuildMetadataError,
    InvalidConstraintError,
    UnknownOperatorError,
)
from .identifiers import PreRelease, BuildMetadata
from .semver import (
    Version,
    parse_version,
    try_parse_version,
    is_valid_semver,
    create_version,
    coerce_version,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    eq,
    neq,
    lt,
    lte,
    gt,
    gte,
    compare_with_operator,
    sort_versions,
    rsort_versions,
    max_version,
    min_version,
    diff_versions,
    bump_version,
)
from .constraint import (
    Operator,
    Comparison,
    Range,
    Constraint,
    parse_constraint,
    satisfies,
)
from .collection import (
    VersionCollection,
    max_satisfying,
    min_satisfying,
)
from .storage import decode_version, encode_version

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "ParserConfig",
    # Errors
    "SemVerError",
    "InvalidVersionError",
    "NegativeComponentError",
    "LeadingZerosError",
    "InvalidPreReleaseError",
    "InvalidBuildMetadataError",
    "InvalidConstraintError",
    "UnknownOperatorError",
    # Version parsing
    "PreRelease",
    "BuildMetadata",
    "Version",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "create_version",
    "coerce_version",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "eq",
    "neq",
    "lt",
    "lte",
    "gt",
    "gte",
    "compare_with_operator",
    "sort_versions",
    "rsort_versions",
    "max_version",
    "min_version",
    "diff_versions",
    "bump_version",
    # Constraints
    "Operator",
    "Comparison",
    "Range",
    "Constraint",
    "parse_constraint",
    "satisfies",
    # Collections
    "VersionCollection",
    "max_satisfying",
    "min_satisfying",
    # Storage
    "decode_version",
    "encode_version",
]
