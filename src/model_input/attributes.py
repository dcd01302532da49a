"""Merge derived rules with caller overrides and serialize them as HTML attributes."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from markupsafe import Markup, escape

# Rendered through dedicated template slots, never through the attribute string.
RESERVED_ATTRIBUTES = frozenset({"id", "name", "type", "class"})


def merge_attributes(derived: Mapping[str, Any], overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Combine derived rules with caller-supplied attributes.

    Caller values win on key collision. Reserved keys are dropped from the
    result; callers read ``id``/``name``/``type`` from the overrides directly.
    """
    merged = {**derived, **(overrides or {})}
    return {key: value for key, value in merged.items() if key not in RESERVED_ATTRIBUTES}


def _format_value(value: Any) -> str:
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def render_attributes(attributes: Mapping[str, Any]) -> Markup:
    """Serialize attributes into an escaped HTML attribute string.

    ``None`` and ``False`` values are omitted, ``True`` renders as a
    presence-only attribute, anything else as ``key="value"``. The result
    starts with a space when non-empty so it can follow other attributes.
    """
    parts: list[str] = []
    for key, value in attributes.items():
        if key in RESERVED_ATTRIBUTES or value is None or value is False:
            continue
        if value is True:
            parts.append(str(escape(key)))
        else:
            parts.append(f'{escape(key)}="{escape(_format_value(value))}"')
    if not parts:
        return Markup("")
    return Markup(" " + " ".join(parts))
