"""Tests for the column type to input type mapping."""

from __future__ import annotations

import logging

import pytest

from model_input.exceptions import UnknownColumnTypeError
from model_input.input_types import INPUT_TYPE_MAP, resolve_input_type

EXPECTED = {
    "string": "text",
    "text": "textarea",
    "integer": "number",
    "smallint": "number",
    "bigint": "number",
    "decimal": "number",
    "float": "number",
    "boolean": "checkbox",
    "date": "date",
    "datetime": "datetime-local",
    "time": "time",
    "json": "text",
    "jsonb": "text",
    "guid": "text",
    "uuid": "text",
    "array": "text",
    "simple_array": "text",
    "object": "text",
    "json_array": "text",
    "binary": "file",
    "blob": "file",
}


class TestInputTypeMap:
    def test_exact_table(self):
        assert dict(INPUT_TYPE_MAP) == EXPECTED

    def test_read_only(self):
        with pytest.raises(TypeError):
            INPUT_TYPE_MAP["string"] = "email"  # type: ignore[index]


class TestResolveInputType:
    @pytest.mark.parametrize(("column_type", "input_type"), sorted(EXPECTED.items()))
    def test_mapped_types(self, column_type, input_type):
        assert resolve_input_type(column_type) == input_type

    def test_case_insensitive(self):
        assert resolve_input_type("DateTime") == "datetime-local"

    def test_unknown_falls_back_to_text(self, caplog):
        with caplog.at_level(logging.WARNING, logger="model_input.input_types"):
            assert resolve_input_type("interval") == "text"
        assert "interval" in caplog.text

    def test_custom_fallback(self):
        assert resolve_input_type("geometry", fallback="hidden") == "hidden"

    def test_strict_raises(self):
        with pytest.raises(UnknownColumnTypeError) as exc_info:
            resolve_input_type("interval", strict=True)
        assert exc_info.value.column_type == "interval"

    def test_strict_mapped_type_passes(self):
        assert resolve_input_type("boolean", strict=True) == "checkbox"
