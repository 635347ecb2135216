# SPDX-License-Identifier: MIT
"""Text serialization of versions through pydantic.

A Version is always encoded as its canonical string ("10.4.*"). Decoding
parses the string and reports a bad version as a pydantic ValidationError
rather than producing a default value.

Version can also be used directly as a field type on pydantic models:

    >>> from pydantic import BaseModel
    >>> class Requirement(BaseModel):
    ...     name: str
    ...     version: Version
    >>> Requirement(name="core", version="3.6.*").model_dump_json()
    '{"name":"core","version":"3.6.*"}'
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import TypeAdapter

from .version import Version

VERSION_ADAPTER: TypeAdapter[Version] = TypeAdapter(Version)


def dump_version_json(version: Version) -> str:
    """Encode a version as a JSON string literal, e.g. '"10.4.3"'."""
    return VERSION_ADAPTER.dump_json(version).decode("utf-8")


def load_version_json(data: Union[str, bytes]) -> Version:
    """Decode a JSON string literal into a Version.

    Raises:
        pydantic.ValidationError: If the JSON is not a string or the string
            is not a valid version
    """
    return VERSION_ADAPTER.validate_json(data)


def dump_python(version: Version) -> str:
    """Return the plain string form used by structured-data encoders."""
    return VERSION_ADAPTER.dump_python(version)


def load_python(value: Any) -> Version:
    """Validate a Python value (string or Version) into a Version.

    Raises:
        pydantic.ValidationError: If the value is not a valid version
    """
    return VERSION_ADAPTER.validate_python(value)
