"""Input generator — resolves a model field and renders its form input."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from model_input.config import ModelInputSettings
from model_input.options import InputOptions, parse_directive, parse_options
from model_input.providers.base import SchemaProvider
from model_input.registry import ModelRegistry
from model_input.render import render_input
from model_input.rules import Clock

logger = logging.getLogger(__name__)


class InputGenerator:
    """Orchestrates model lookup, column introspection and markup rendering.

    Usage::

        generator = InputGenerator(
            DeclarativeModelRegistry(Base),
            MetadataSchemaProvider(Base.metadata),
        )
        generator.render("User", "email", {"label_text": "E-mail"})
    """

    def __init__(
        self,
        registry: ModelRegistry,
        provider: SchemaProvider,
        *,
        settings: ModelInputSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.registry = registry
        self.provider = provider
        self.settings = settings or ModelInputSettings()
        self.clock = clock

    def render(
        self,
        model: str,
        field: str,
        options: InputOptions | Mapping[str, Any] | str | None = None,
    ) -> Markup:
        """Render the label/input markup for ``model.field``.

        Options are validated before any lookup, so malformed options never
        reach the database.

        Raises:
            MalformedOptionsError: If the options are malformed.
            ModelNotFoundError: If the model cannot be resolved.
            ColumnNotFoundError: If the column does not exist.
            SchemaReadError: If the column metadata cannot be read.
            UnknownColumnTypeError: If strict and the column type is unmapped.
        """
        parsed = parse_options(options)

        table_name = self.registry.table_for(model)
        column = self.provider.get_column(table_name, field)
        logger.debug("Rendering %s.%s (table %s, type %s)", model, field, table_name, column.type)

        return render_input(
            field,
            column,
            parsed,
            clock=self.clock,
            strict=self.settings.strict,
            fallback=self.settings.fallback_input_type,
        )

    def render_directive(self, expression: str) -> Markup:
        """Parse a ``"Model, field[, {options}]"`` expression and render it."""
        call = parse_directive(expression)
        return self.render(call.model, call.field, call.options)
