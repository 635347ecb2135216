# SPDX-License-Identifier: MIT
"""Version ranges built from concrete Version endpoints.

Closed ranges:
- ThroughRange: lower <= v <= upper ("4...5")
- UpToRange: lower <= v < upper ("4..<5")

Open ranges:
- AtLeastRange: v >= lower ("1.2...")
- BeforeRange: v < upper ("..<14.5.7")
- AtMostRange: v <= upper ("...14.5.7")

Example:
    >>> from numeric_version import up_to
    >>> r = up_to("10.4", "10.5")
    >>> "10.4.5" in r
    True
    >>> "10.5.0.0" in r
    False
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .compare import VersionLike, as_version
from .version import ComparisonResult, InvalidRangeError, Version


def _require_concrete(version: Version, role: str) -> None:
    if version.has_wildcard:
        raise InvalidRangeError(f"Range {role} bound cannot contain a wildcard: {version}")


def _require_ordered(lower: Version, upper: Version) -> None:
    _require_concrete(lower, "lower")
    _require_concrete(upper, "upper")
    if lower.compare(upper) is not ComparisonResult.ASCENDING:
        raise InvalidRangeError(f"Range lower bound {lower} must be below upper bound {upper}")


class VersionRange(ABC):
    """Base class for version ranges.

    Membership can be tested with contains() or the ``in`` operator, which
    also accepts version strings.
    """

    __slots__ = ()

    @abstractmethod
    def contains(self, version: Version) -> bool:
        """Return True if version falls inside the range."""

    def __contains__(self, version: object) -> bool:
        if isinstance(version, (str, Version)):
            return self.contains(as_version(version))
        return False


@dataclass(frozen=True, slots=True, eq=False)
class ThroughRange(VersionRange):
    """Inclusive range [lower, upper]."""

    lower: Version
    upper: Version

    def __post_init__(self) -> None:
        _require_ordered(self.lower, self.upper)

    def contains(self, version: Version) -> bool:
        return version >= self.lower and self.upper >= version

    def __str__(self) -> str:
        return f"{self.lower}...{self.upper}"


@dataclass(frozen=True, slots=True, eq=False)
class UpToRange(VersionRange):
    """Half open range [lower, upper).

    The upper bound is excluded using wildcard aware equality, so 5.0.0.0
    is outside 4..<5.
    """

    lower: Version
    upper: Version

    def __post_init__(self) -> None:
        _require_ordered(self.lower, self.upper)

    def contains(self, version: Version) -> bool:
        return version != self.upper and version >= self.lower and self.upper >= version

    def __str__(self) -> str:
        return f"{self.lower}..<{self.upper}"


@dataclass(frozen=True, slots=True, eq=False)
class AtLeastRange(VersionRange):
    """All versions at or after lower."""

    lower: Version

    def __post_init__(self) -> None:
        _require_concrete(self.lower, "lower")

    def contains(self, version: Version) -> bool:
        return version >= self.lower

    def __str__(self) -> str:
        return f"{self.lower}..."


@dataclass(frozen=True, slots=True, eq=False)
class BeforeRange(VersionRange):
    """All versions strictly before upper."""

    upper: Version

    def __post_init__(self) -> None:
        _require_concrete(self.upper, "upper")

    def contains(self, version: Version) -> bool:
        return version < self.upper

    def __str__(self) -> str:
        return f"..<{self.upper}"


@dataclass(frozen=True, slots=True, eq=False)
class AtMostRange(VersionRange):
    """All versions at or before upper."""

    upper: Version

    def __post_init__(self) -> None:
        _require_concrete(self.upper, "upper")

    def contains(self, version: Version) -> bool:
        return version <= self.upper

    def __str__(self) -> str:
        return f"...{self.upper}"


def through(lower: VersionLike, upper: VersionLike) -> ThroughRange:
    """Build an inclusive range from two versions.

    Raises:
        InvalidVersionError: If either version string is invalid
        InvalidRangeError: If a bound is wildcarded or lower >= upper
    """
    return ThroughRange(as_version(lower), as_version(upper))


def up_to(lower: VersionLike, upper: VersionLike) -> UpToRange:
    """Build a range from lower up to, but excluding, upper."""
    return UpToRange(as_version(lower), as_version(upper))


def at_least(lower: VersionLike) -> AtLeastRange:
    return AtLeastRange(as_version(lower))


def before(upper: VersionLike) -> BeforeRange:
    return BeforeRange(as_version(upper))


def at_most(upper: VersionLike) -> AtMostRange:
    return AtMostRange(as_version(upper))
