"""Validation helpers for names interpolated into generated markup.

Values are escaped by the renderer, but names end up in positions where
escaping alone is not enough (attribute names, element ids), so they are
checked against a conservative character set before use.
"""

from __future__ import annotations

import re

# Model and field identifiers: letters, digits, underscore, optional dotted path.
_SAFE_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")

# HTML attribute names accepted from callers (covers data-*, aria-*, x-on:click, @click).
_ATTRIBUTE_NAME_RE = re.compile(r"^[A-Za-z_:@][A-Za-z0-9_.:@-]*$")


def is_safe_identifier(value: str) -> bool:
    """Check whether a model or field name is a plain (optionally dotted) identifier."""
    return bool(_SAFE_IDENTIFIER_RE.match(str(value)))


def is_valid_attribute_name(value: str) -> bool:
    """Check whether *value* can be emitted as an HTML attribute name without escaping."""
    return bool(_ATTRIBUTE_NAME_RE.match(str(value)))


def strip_quotes(value: str) -> str:
    """Remove one pair of matching single or double quotes around *value*."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value
