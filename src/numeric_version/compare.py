# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Three relations are offered, and they intentionally differ:
- ordering (compare_versions): the left side must be concrete
- matching (versions_match): symmetric, a wildcard on either side matches
- containment (version_contains): a pattern matches a concrete version
"""

from __future__ import annotations

from typing import Union

from .version import ComparisonResult, InvalidVersionError, Version, parse_version

VersionLike = Union[str, Version]


def as_version(version: VersionLike) -> Version:
    """Return version, parsing it first when given as a string."""
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> ComparisonResult:
    """Order two numeric versions.

    Args:
        version1: Left hand version (string or Version object)
        version2: Right hand version (string or Version object)

    Returns:
        ASCENDING if version1 < version2, SAME if they are equal,
        DESCENDING if version1 > version2, ERROR if version1 has a wildcard

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("10.4", "10.5")
        <ComparisonResult.ASCENDING: 'ascending'>
        >>> compare_versions("10.4", "10.4.0.0")
        <ComparisonResult.SAME: 'same'>
        >>> compare_versions("14.5.0", "14.5.*")
        <ComparisonResult.DESCENDING: 'descending'>
        >>> compare_versions("14.5.*", "1")
        <ComparisonResult.ERROR: 'error'>
    """
    return as_version(version1).compare(as_version(version2))


def versions_match(version1: VersionLike, version2: VersionLike) -> bool:
    """Wildcard aware equality of two versions.

    Examples:
        >>> versions_match("4.*", "4.5")
        True
        >>> versions_match("4.5", "4.6")
        False
    """
    return as_version(version1) == as_version(version2)


def version_contains(pattern: VersionLike, version: VersionLike) -> bool:
    """Return True if pattern (e.g. "4.4.*") matches a concrete version.

    Examples:
        >>> version_contains("4.4.*", "4.4.5")
        True
        >>> version_contains("4.4.5", "4.4.*")
        False
    """
    return as_version(pattern).contains(as_version(version))


def version_key(version: VersionLike) -> tuple[int, int, int, int]:
    """Return a sort key for a concrete version.

    Unspecified fields count as 0, so the key agrees with compare_versions.

    Raises:
        InvalidVersionError: If the version contains a wildcard

    Examples:
        >>> sorted(["10.5", "2", "10.4.3"], key=version_key)
        ['2', '10.4.3', '10.5']
    """
    v = as_version(version)
    if v.has_wildcard:
        raise InvalidVersionError(str(v), f"Wildcard version {v} has no sort position")
    major, minor, patch, build = (f.int_value for f in v.fields)
    return (major, minor, patch, build)
