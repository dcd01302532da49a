"""Caller options and directive argument parsing.

Options arrive either as structured data (a mapping passed from a template)
or as text (``"User, email, {'label_text': 'E-mail'}"``). Text is parsed with
:func:`ast.literal_eval`, which only accepts literals, so template authors
cannot smuggle executable code into a directive.
"""

from __future__ import annotations

import ast
import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from model_input.exceptions import MalformedOptionsError
from model_input.sanitize import is_safe_identifier, is_valid_attribute_name, strip_quotes

_SCALAR_TYPES = (str, int, float, bool)


class InputOptions(BaseModel):
    """Caller configuration for one directive invocation."""

    container_classes: str = Field(default="", description="Classes for the wrapping <div>.")
    label_classes: str = Field(default="", description="Classes for the <label>.")
    input_classes: str = Field(default="", description="Classes for the <input>.")
    label_text: str | None = Field(default=None, description="Label text. Defaults to the field name.")
    id_suffix: str = Field(default="", description="Appended to the generated element id.")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra input attributes. These override any derived rule with the same name.",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("attributes")
    @classmethod
    def _check_attributes(cls, value: dict[str, Any]) -> dict[str, Any]:
        for key, item in value.items():
            if not is_valid_attribute_name(key):
                raise ValueError(f"invalid attribute name {key!r}")
            if item is not None and not isinstance(item, _SCALAR_TYPES):
                raise ValueError(f"attribute {key!r} must be a scalar, got {type(item).__name__}")
        return value


@dataclasses.dataclass(frozen=True)
class DirectiveCall:
    """A parsed ``model, field, options`` directive expression."""

    model: str
    field: str
    options: InputOptions = dataclasses.field(default_factory=InputOptions)


def _literal(text: str) -> Any:
    try:
        return ast.literal_eval(text.strip())
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
        raise MalformedOptionsError(f"options are not a valid literal: {text.strip()!r}") from exc


def parse_options(value: InputOptions | Mapping[str, Any] | str | None) -> InputOptions:
    """Normalize caller options into an :class:`InputOptions`.

    Raises:
        MalformedOptionsError: If the options are not a mapping literal or
            contain unknown keys or invalid values.
    """
    if isinstance(value, InputOptions):
        return value
    if value is None:
        return InputOptions()
    if isinstance(value, str):
        value = _literal(value) if value.strip() else {}
    if not isinstance(value, Mapping):
        raise MalformedOptionsError(f"options must be a mapping, got {type(value).__name__}")
    try:
        return InputOptions.model_validate(dict(value))
    except ValidationError as exc:
        raise MalformedOptionsError(f"invalid options: {exc}") from exc


def _identifier(raw: str, role: str) -> str:
    name = strip_quotes(raw)
    if not is_safe_identifier(name):
        raise MalformedOptionsError(f"{role} must be an identifier, got {raw.strip()!r}")
    return name


def parse_directive(expression: str) -> DirectiveCall:
    """Parse ``"Model, field[, {options}]"`` into a :class:`DirectiveCall`.

    Only the first two commas separate arguments; everything after them is
    the options literal.
    """
    parts = expression.split(",", 2)
    if len(parts) < 2:
        raise MalformedOptionsError(f"expected 'model, field[, options]', got {expression!r}")

    model = _identifier(parts[0], "model")
    field_name = _identifier(parts[1], "field")
    options = parse_options(parts[2] if len(parts) == 3 else None)
    return DirectiveCall(model=model, field=field_name, options=options)
