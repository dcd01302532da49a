"""Canonical column type to HTML input type mapping."""

from __future__ import annotations

import logging
from types import MappingProxyType

from model_input.exceptions import UnknownColumnTypeError

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_INPUT_TYPE = "text"

INPUT_TYPE_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
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
        "binary": "file",
        "blob": "file",
        "guid": "text",
        "uuid": "text",
        "array": "text",
        "simple_array": "text",
        "object": "text",
        "json_array": "text",
    }
)

# Input types that get minlength/maxlength rules.
TEXT_INPUT_TYPES = frozenset({"text", "textarea"})


def resolve_input_type(
    column_type: str,
    *,
    strict: bool = False,
    fallback: str = DEFAULT_FALLBACK_INPUT_TYPE,
) -> str:
    """Return the HTML input type for a canonical column type.

    Args:
        column_type: Canonical type name (``"integer"``, ``"string"``, ...).
        strict: Raise instead of falling back when the type is unmapped.
        fallback: Input type used for unmapped types when not strict.

    Raises:
        UnknownColumnTypeError: If *strict* and the type is unmapped.
    """
    key = column_type.lower()
    if key in INPUT_TYPE_MAP:
        return INPUT_TYPE_MAP[key]
    if strict:
        raise UnknownColumnTypeError(column_type)
    logger.warning("No input type mapping for column type %r, using %r", column_type, fallback)
    return fallback
