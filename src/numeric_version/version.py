# SPDX-License-Identifier: MIT
"""Numeric version parsing, formatting, comparison and incrementing.

Supports MAJOR[.MINOR[.PATCH[.BUILD]]] where the last field present may be
a wildcard:
- Concrete: 10, 10.4, 10.4.3, 10.4.3.1000
- Wildcard: *, 10.*, 10.4.*, 10.4.3.*
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .fields import (
    UNASSIGNED,
    WILDCARD,
    WILDCARD_TOKEN,
    Field,
    FieldInput,
    FieldValue,
)

# One to four dot separated fields; only the last may be a wildcard.
VERSION_PATTERN = re.compile(r"(?:[0-9]+\.){0,3}(?:[0-9]+|\*)")

MAX_FIELDS = len(Field)

_FIELD_NAMES = tuple(f.name.lower() for f in Field)


class VersionError(ValueError):
    """Base class for numeric version errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidVersionError(VersionError):
    """Raised when a string is not a valid numeric version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        super().__init__(message or f"Invalid version string: {version!r}")


class CannotIncrementWildcardError(VersionError):
    """Raised when incrementing a version that contains a wildcard."""

    def __init__(self, version: Version):
        self.version = version
        super().__init__(f"Cannot increment wildcard version {version}")


class InvalidRangeError(VersionError):
    """Raised when a version range is built from unusable endpoints."""


class ComparisonResult(Enum):
    """Outcome of ordering two versions.

    ERROR is returned when the left hand version holds a wildcard, since a
    pattern has no single position in the order.
    """

    ASCENDING = "ascending"
    SAME = "same"
    DESCENDING = "descending"
    ERROR = "error"


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class Version:
    """An immutable numeric version of up to four fields.

    Fields accept an int, None (not specified), "*" or WILDCARD, or a
    FieldValue. Construction normalises the fields so that nothing follows
    a wildcard or an unspecified field:

        >>> Version(5, "*", 3, 4)
        Version('5.*')
        >>> Version(1, None, 3)
        Version('1')

    Equality is wildcard aware and symmetric but not transitive
    (4.* == 4.5 and 4.* == 4.6 while 4.5 != 4.6), so versions are not
    hashable.
    """

    major: FieldValue
    minor: FieldValue
    patch: FieldValue
    build: FieldValue

    def __init__(
        self,
        major: FieldInput,
        minor: FieldInput = None,
        patch: FieldInput = None,
        build: FieldInput = None,
    ):
        values = [FieldValue.coerce(v) for v in (major, minor, patch, build)]
        if values[0].is_unassigned:
            raise ValueError("The major field of a version must be specified")

        # A wildcard or unassigned field swallows every field after it.
        for index in range(1, MAX_FIELDS):
            if not values[index - 1].is_value:
                values[index] = UNASSIGNED

        for name, value in zip(_FIELD_NAMES, values):
            object.__setattr__(self, name, value)

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Alias for parse_version()."""
        return parse_version(version_string)

    # Field access

    @property
    def fields(self) -> tuple[FieldValue, FieldValue, FieldValue, FieldValue]:
        """All four fields, most significant first."""
        return (self.major, self.minor, self.patch, self.build)

    def field(self, field: Union[Field, str]) -> FieldValue:
        """Return the value of a single field."""
        return self.fields[Field.coerce(field).index]

    @property
    def has_wildcard(self) -> bool:
        """True if the version is a pattern such as 10.4.*."""
        return any(f.is_wildcard for f in self.fields)

    @property
    def is_concrete(self) -> bool:
        return not self.has_wildcard

    @property
    def specified_count(self) -> int:
        """Number of fields given a value or a wildcard."""
        return sum(1 for f in self.fields if f.is_assigned)

    def __iter__(self) -> Iterator[FieldValue]:
        return iter(self.fields)

    # Formatting

    def __str__(self) -> str:
        """Return the canonical string, e.g. "10.4.*"."""
        parts = [str(self.major)]
        for value in self.fields[1:]:
            if value.is_unassigned:
                break
            parts.append(str(value))
        return ".".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    @property
    def string_value(self) -> str:
        return str(self)

    # Comparison

    def compare(self, other: Version) -> ComparisonResult:
        """Order this version against another.

        The left hand side (self) must be concrete; a wildcard here gives
        ComparisonResult.ERROR. A wildcard on the right hand side ranks
        above any concrete number at that field.

        Examples:
            >>> Version(14, 5, 0).compare(Version(14, 5, "*"))
            <ComparisonResult.DESCENDING: 'descending'>
            >>> Version(14, "*").compare(Version(1))
            <ComparisonResult.ERROR: 'error'>
        """
        if self.has_wildcard:
            return ComparisonResult.ERROR

        for mine, theirs in zip(self.fields, other.fields):
            if theirs.is_wildcard:
                return ComparisonResult.DESCENDING
            if mine.int_value < theirs.int_value:
                return ComparisonResult.ASCENDING
            if mine.int_value > theirs.int_value:
                return ComparisonResult.DESCENDING
        return ComparisonResult.SAME

    def __eq__(self, other: object) -> bool:
        """Wildcard aware equality.

        A wildcard on either side matches the remainder of the other
        version, so 2.* == 2.3 and 2.3 == 2.*. Unspecified fields compare
        as 0, so 10.4 == 10.4.0.0.
        """
        if not isinstance(other, Version):
            return NotImplemented
        for mine, theirs in zip(self.fields, other.fields):
            if mine.is_wildcard or theirs.is_wildcard:
                return True
            if mine.int_value != theirs.int_value:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is ComparisonResult.ASCENDING

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) in (ComparisonResult.ASCENDING, ComparisonResult.SAME)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is ComparisonResult.DESCENDING

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) in (ComparisonResult.DESCENDING, ComparisonResult.SAME)

    def contains(self, version: Version) -> bool:
        """Return True if this version (usually a pattern) matches version.

        A pattern never contains another pattern, so a wildcarded argument
        is always rejected.

        Examples:
            >>> Version(4, 4, "*").contains(Version(4, 4, 5, 1000))
            True
            >>> Version(4, 4, "*").contains(Version(4, 5, 0))
            False
            >>> Version(4, 4, 5).contains(Version(4, 4, "*"))
            False
        """
        if version.has_wildcard:
            return False
        for mine, theirs in zip(self.fields, version.fields):
            if mine.is_wildcard:
                return True
            if mine.int_value != theirs.int_value:
                return False
        return True

    def __contains__(self, version: object) -> bool:
        if isinstance(version, str):
            version = parse_version(version)
        if not isinstance(version, Version):
            return False
        return self.contains(version)

    # Incrementing

    def increment(self, field: Union[Field, str], zero_lower: bool = True) -> Version:
        """Return a new version with one field bumped by one.

        Args:
            field: The field to increment
            zero_lower: If True, every less significant field is dropped
                (10.4.3.1000 -> 10.5). If False, they keep their numbers
                (10.4.3.1000 -> 10.5.3.1000) and unspecified ones become 0
                (1.2 -> 2.2.0.0).

        Raises:
            CannotIncrementWildcardError: If the version contains a wildcard
        """
        if self.has_wildcard:
            raise CannotIncrementWildcardError(self)

        target = Field.coerce(field).index
        values: list[FieldInput] = []
        for index, value in enumerate(self.fields):
            if index < target:
                values.append(value.int_value)
            elif index == target:
                values.append(value.int_value + 1)
            elif zero_lower:
                values.append(None)
            else:
                values.append(value.int_value)
        return Version(*values)

    # pydantic integration

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            parse_version, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def _describe_invalid(version_string: str) -> str:
    """Explain why a trimmed string failed to match VERSION_PATTERN."""
    parts = version_string.split(".")
    if len(parts) > MAX_FIELDS:
        return f"too many fields (at most {MAX_FIELDS})"
    if any(part == "" for part in parts):
        return "empty field"
    wildcards = parts.count(WILDCARD_TOKEN)
    if wildcards > 1:
        return "multiple wildcards"
    if wildcards == 1 and parts[-1] != WILDCARD_TOKEN:
        return "wildcard must be the last field"
    return "fields must be decimal numbers or '*'"


def parse_version(version_string: str) -> Version:
    """Parse a numeric version string into a Version object.

    Leading and trailing whitespace is ignored. Fields not present in the
    string are left unspecified.

    Args:
        version_string: A string such as "10.4", "1.2.3.4" or "10.4.*"

    Returns:
        A Version object with parsed fields

    Raises:
        InvalidVersionError: If the string is not a valid numeric version

    Examples:
        >>> parse_version("10.4.3")
        Version('10.4.3')
        >>> parse_version("  1.2.* ").patch.is_wildcard
        True
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    if VERSION_PATTERN.fullmatch(version_string) is None:
        raise InvalidVersionError(
            version_string,
            f"Invalid version string {version_string!r}: {_describe_invalid(version_string)}",
        )

    try:
        values: list[FieldInput] = [
            WILDCARD if part == WILDCARD_TOKEN else int(part)
            for part in version_string.split(".")
        ]
    except ValueError as exc:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise InvalidVersionError(version_string, f"Invalid version string: {exc}") from exc
    return Version(*values)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid numeric version.

    Examples:
        >>> is_valid_version("10.4.*")
        True
        >>> is_valid_version("1..2")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def increment_version(
    version: Union[str, Version], field: Union[Field, str], zero_lower: bool = True
) -> Version:
    """Increment a field of a version given as a string or Version.

    Examples:
        >>> increment_version("1.2", "build")
        Version('1.2.0.1')
        >>> increment_version("10.4.3.1000", Field.MINOR, zero_lower=False)
        Version('10.5.3.1000')
    """
    v = parse_version(version) if isinstance(version, str) else version
    return v.increment(field, zero_lower=zero_lower)
