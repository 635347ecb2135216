# SPDX-License-Identifier: MIT
"""Unit tests for version serialization through pydantic."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from numeric_version import (
    WILDCARD,
    Version,
    dump_python,
    dump_version_json,
    load_python,
    load_version_json,
)


class Counter(BaseModel):
    """Model with a version field, as a caller would declare it."""

    version: Version
    name: str
    value: int


class TestJsonHelpers:
    """Tests for the TypeAdapter based helpers."""

    def test_dump(self):
        """Test that a version encodes as its string."""
        assert dump_version_json(Version(10, 4, 3)) == '"10.4.3"'
        assert dump_version_json(Version(55, WILDCARD)) == '"55.*"'

    def test_load(self):
        """Test decoding a JSON string."""
        v = load_version_json('"10.4.3"')
        assert v.fields == Version(10, 4, 3).fields

    def test_load_bytes(self):
        """Test decoding JSON bytes."""
        assert str(load_version_json(b'"55.*"')) == "55.*"

    def test_load_invalid(self):
        """Test that an invalid version is a validation error."""
        with pytest.raises(ValidationError):
            load_version_json('"3.A.*"')
        with pytest.raises(ValidationError):
            load_version_json('"1.23.4.5.6"')

    def test_load_wrong_type(self):
        """Test that non-string JSON is rejected."""
        with pytest.raises(ValidationError):
            load_version_json("10")

    def test_python_round_trip(self):
        """Test dumping to and loading from plain Python values."""
        assert dump_python(Version(3, 6, WILDCARD)) == "3.6.*"
        assert str(load_python("3.6.*")) == "3.6.*"
        v = Version(1)
        assert load_python(v) is v


class TestModelField:
    """Tests for Version as a pydantic model field."""

    def test_json_round_trip(self):
        """Test encoding and decoding a model with a version field."""
        original = Counter(version=Version(3, 6, WILDCARD), name="counter", value=3)
        data = original.model_dump_json()

        assert json.loads(data) == {"version": "3.6.*", "name": "counter", "value": 3}

        restored = Counter.model_validate_json(data)
        assert restored.version.fields == original.version.fields
        assert restored.name == "counter"

    def test_model_dump(self):
        """Test that model_dump produces the version string."""
        model = Counter(version=Version(10, 4, 3), name="n", value=1)
        assert model.model_dump()["version"] == "10.4.3"

    def test_string_input(self):
        """Test that a model accepts a version string."""
        model = Counter(version="  1.2 ", name="n", value=1)
        assert str(model.version) == "1.2"

    @pytest.mark.parametrize(
        "payload",
        [
            '{"version":"3.A.*","name":"counter","value":3}',
            '{"version":"1.23.4.5.6","name":"counter","value":3}',
            '{"version":"","name":"counter","value":3}',
        ],
    )
    def test_invalid_version_rejected(self, payload):
        """Test that an invalid version fails model validation."""
        with pytest.raises(ValidationError) as exc_info:
            Counter.model_validate_json(payload)
        assert exc_info.value.errors()[0]["loc"] == ("version",)

    def test_json_schema(self):
        """Test that the field is described as a string."""
        schema = Counter.model_json_schema()
        assert schema["properties"]["version"]["type"] == "string"
