"""Derive HTML validation attributes from column metadata."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from model_input.column import ColumnSchema
from model_input.input_types import TEXT_INPUT_TYPES, resolve_input_type

Clock = Callable[[], datetime]

BASELINE_RULES: MappingProxyType[str, Any] = MappingProxyType(
    {
        "required": False,
        "min": None,
        "max": None,
        "minlength": None,
        "maxlength": None,
        "disabled": False,
        "readonly": False,
        "step": None,
        "pattern": None,
        "placeholder": None,
        "autocomplete": None,
        "autofocus": False,
        "multiple": False,
    }
)

# Digits assumed when the database reports no precision for a numeric column.
_DEFAULT_PRECISION: dict[str, int] = {
    "smallint": 5,
    "integer": 10,
    "bigint": 19,
}
_FALLBACK_PRECISION = 10

_DATE_FORMAT = "%Y-%m-%d"
_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"
_TIME_FORMAT = "%H:%M"


def numeric_bounds(schema: ColumnSchema) -> dict[str, Any]:
    """Compute ``min``, ``max`` and ``step`` for a numeric column.

    Bounds are exact Python integers, so arbitrarily large precisions never
    overflow. ``step`` is a :class:`~decimal.Decimal` equal to ``10 ** -scale``.
    """
    precision = schema.precision
    if precision is None:
        precision = _DEFAULT_PRECISION.get(schema.type.lower(), _FALLBACK_PRECISION)
    scale = schema.scale or 0
    whole_digits = precision - scale

    if schema.unsigned:
        maximum = 10**precision - 1
        minimum = 0
    else:
        maximum = 10**whole_digits - 1
        minimum = -(10**whole_digits)

    return {
        "min": minimum,
        "max": maximum,
        "step": Decimal(1).scaleb(-scale),
    }


def derive_rules(
    schema: ColumnSchema,
    *,
    input_type: str | None = None,
    clock: Clock | None = None,
) -> dict[str, Any]:
    """Build the attribute rules implied by a column's metadata.

    Args:
        schema: Column metadata snapshot.
        input_type: Pre-resolved HTML input type. Resolved from
            ``schema.type`` when omitted.
        clock: Returns "now" for date/time default values. Defaults to
            :meth:`datetime.now`.

    Returns:
        A new ordered dict starting from :data:`BASELINE_RULES`.
    """
    if input_type is None:
        input_type = resolve_input_type(schema.type)
    now = clock or datetime.now

    rules = dict(BASELINE_RULES)
    if schema.notnull:
        rules["required"] = True

    if input_type in TEXT_INPUT_TYPES:
        rules["minlength"] = 0
        rules["maxlength"] = schema.length
        if schema.notnull:
            rules["minlength"] = 1
        # Fixed-width columns must be filled exactly.
        if schema.fixed:
            rules["minlength"] = schema.length
            rules["maxlength"] = schema.length
    elif input_type == "number":
        rules.update(numeric_bounds(schema))
    elif input_type == "date":
        rules["value"] = now().strftime(_DATE_FORMAT)
    elif input_type == "datetime-local":
        rules["value"] = now().strftime(_DATETIME_FORMAT)
    elif input_type == "time":
        rules["value"] = now().strftime(_TIME_FORMAT)

    return rules
