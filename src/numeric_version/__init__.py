# SPDX-License-Identifier: MIT
"""Numeric version parsing and comparison with wildcard support.

This package provides a small value type for versions of the form
MAJOR[.MINOR[.PATCH[.BUILD]]], where the last field may be a wildcard
("10.4.*"). It is deliberately not SemVer: there are no pre-release or
build-metadata suffixes.

Example:
    >>> from numeric_version import Version, parse_version, up_to
    >>>
    >>> version = parse_version("10.4.5")
    >>> version.minor.int_value
    4
    >>>
    >>> parse_version("10.4.*").contains(version)
    True
    >>>
    >>> version in up_to("10.4", "10.5")
    True
    >>>
    >>> str(version.increment("minor"))
    '10.5'
"""

__version__ = "0.1.0"

from .fields import (
    UNASSIGNED,
    WILDCARD,
    Field,
    FieldKind,
    FieldValue,
)
from .version import (
    VERSION_PATTERN,
    CannotIncrementWildcardError,
    ComparisonResult,
    InvalidRangeError,
    InvalidVersionError,
    Version,
    VersionError,
    increment_version,
    is_valid_version,
    parse_version,
)
from .compare import (
    as_version,
    compare_versions,
    version_contains,
    version_key,
    versions_match,
)
from .ranges import (
    AtLeastRange,
    AtMostRange,
    BeforeRange,
    ThroughRange,
    UpToRange,
    VersionRange,
    at_least,
    at_most,
    before,
    through,
    up_to,
)
from .serialization import (
    dump_python,
    dump_version_json,
    load_python,
    load_version_json,
)

__all__ = [
    # Fields
    "Field",
    "FieldKind",
    "FieldValue",
    "WILDCARD",
    "UNASSIGNED",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "increment_version",
    "VERSION_PATTERN",
    # Errors
    "VersionError",
    "InvalidVersionError",
    "CannotIncrementWildcardError",
    "InvalidRangeError",
    # Version comparison
    "ComparisonResult",
    "as_version",
    "compare_versions",
    "versions_match",
    "version_contains",
    "version_key",
    # Ranges
    "VersionRange",
    "ThroughRange",
    "UpToRange",
    "AtLeastRange",
    "BeforeRange",
    "AtMostRange",
    "through",
    "up_to",
    "at_least",
    "before",
    "at_most",
    # Serialization
    "dump_version_json",
    "load_version_json",
    "dump_python",
    "load_python",
]
