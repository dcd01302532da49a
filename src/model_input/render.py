"""Markup assembly — turns a column schema and caller options into HTML."""

from __future__ import annotations

from jinja2 import PackageLoader, select_autoescape
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup

from model_input.attributes import merge_attributes, render_attributes
from model_input.column import ColumnSchema
from model_input.input_types import DEFAULT_FALLBACK_INPUT_TYPE, resolve_input_type
from model_input.options import InputOptions
from model_input.rules import Clock, derive_rules

TEMPLATE_NAME = "model_input.html.j2"


def _get_template_env() -> SandboxedEnvironment:
    """Create a sandboxed Jinja2 environment with autoescape enabled for HTML templates."""
    return SandboxedEnvironment(
        loader=PackageLoader("model_input", "templates"),
        autoescape=select_autoescape(["html", "html.j2"]),
        keep_trailing_newline=False,
    )


_env = _get_template_env()


def input_id(field: str, suffix: str = "") -> str:
    """Return the element id for *field*.

    The separator is kept even when *suffix* is empty (``"email_input_"``).
    """
    return f"{field}_input_{suffix}"


def render_input(
    field: str,
    column: ColumnSchema,
    options: InputOptions | None = None,
    *,
    clock: Clock | None = None,
    strict: bool = False,
    fallback: str = DEFAULT_FALLBACK_INPUT_TYPE,
) -> Markup:
    """Render the container, label and input markup for one column.

    Args:
        field: Column name, used as the input ``name`` and the default label.
        column: Column metadata.
        options: Caller options. ``attributes`` entries override derived
            rules, and ``attributes.id``/``name``/``type`` replace the
            computed id, name and input type.
        clock: Time source for date/time default values.
        strict: Raise for column types without an input mapping.
        fallback: Input type used for unmapped column types when not strict.

    Raises:
        UnknownColumnTypeError: If *strict* and the column type is unmapped.
    """
    options = options or InputOptions()
    overrides = options.attributes

    resolved_type = resolve_input_type(column.type, strict=strict, fallback=fallback)
    derived = derive_rules(column, input_type=resolved_type, clock=clock)
    attributes = render_attributes(merge_attributes(derived, overrides))

    element_id = overrides.get("id")
    if element_id is None:
        element_id = input_id(field, options.id_suffix)
    input_type = overrides["type"] if overrides.get("type") is not None else resolved_type
    name = overrides["name"] if overrides.get("name") is not None else field

    template = _env.get_template(TEMPLATE_NAME)
    html = template.render(
        container_classes=options.container_classes,
        label_classes=options.label_classes,
        label_text=options.label_text if options.label_text is not None else field,
        input_id=element_id,
        input_type=input_type,
        name=name,
        input_classes=options.input_classes,
        attributes=attributes,
    )
    return Markup(html)
