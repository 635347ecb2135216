# SPDX-License-Identifier: MIT
"""Field slots and field values for numeric versions.

A version is made of four slots (major, minor, patch, build). Each slot
holds a FieldValue which is one of:
- a concrete non-negative integer
- a wildcard, matching any value at this slot and every slot after it
- unassigned, meaning the slot was not specified
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

WILDCARD_TOKEN = "*"


class Field(Enum):
    """The four version slots, in decreasing significance."""

    MAJOR = 0
    MINOR = 1
    PATCH = 2
    BUILD = 3

    @property
    def index(self) -> int:
        """Position of the slot within a version (0 = major)."""
        return self.value

    @classmethod
    def coerce(cls, field: Union[Field, str]) -> Field:
        """Return a Field from a Field or a case-insensitive slot name.

        Raises:
            ValueError: If the name does not identify a slot
        """
        if isinstance(field, cls):
            return field
        if isinstance(field, str):
            try:
                return cls[field.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown version field: {field!r}")


class FieldKind(Enum):
    VALUE = "value"
    WILDCARD = "wildcard"
    UNASSIGNED = "unassigned"


@dataclass(frozen=True, slots=True)
class FieldValue:
    """A single version slot value.

    Attributes:
        kind: Whether the slot holds a number, a wildcard or nothing
        number: The concrete number (always 0 unless kind is VALUE)
    """

    kind: FieldKind
    number: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError(f"Field number must be an int, got {type(self.number).__name__}")
        if self.kind is not FieldKind.VALUE and self.number != 0:
            raise ValueError(f"A {self.kind.value} field cannot carry a number")
        if self.number < 0:
            raise ValueError(f"Field number must be non-negative, got {self.number}")

    @classmethod
    def of(cls, number: int) -> FieldValue:
        """Return a concrete field value."""
        return cls(FieldKind.VALUE, number)

    @classmethod
    def coerce(cls, value: FieldInput) -> FieldValue:
        """Convert a constructor argument into a FieldValue.

        Args:
            value: An int, None (unassigned), "*" (wildcard) or a FieldValue

        Raises:
            TypeError: If the value has an unsupported type
            ValueError: If an integer is negative or a string is not "*"
        """
        if isinstance(value, FieldValue):
            return value
        if value is None:
            return UNASSIGNED
        if isinstance(value, str):
            if value == WILDCARD_TOKEN:
                return WILDCARD
            raise ValueError(f"Only {WILDCARD_TOKEN!r} is accepted as a string field, got {value!r}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Unsupported version field type: {type(value).__name__}")
        return cls.of(value)

    @property
    def is_value(self) -> bool:
        return self.kind is FieldKind.VALUE

    @property
    def is_wildcard(self) -> bool:
        return self.kind is FieldKind.WILDCARD

    @property
    def is_unassigned(self) -> bool:
        return self.kind is FieldKind.UNASSIGNED

    @property
    def is_assigned(self) -> bool:
        """True for a number or a wildcard."""
        return self.kind is not FieldKind.UNASSIGNED

    @property
    def int_value(self) -> int:
        """The number used for ordering; unassigned slots count as 0."""
        return self.number

    def __str__(self) -> str:
        if self.kind is FieldKind.WILDCARD:
            return WILDCARD_TOKEN
        if self.kind is FieldKind.UNASSIGNED:
            return ""
        return str(self.number)


WILDCARD = FieldValue(FieldKind.WILDCARD)
UNASSIGNED = FieldValue(FieldKind.UNASSIGNED)

FieldInput = Union[int, str, None, FieldValue]
