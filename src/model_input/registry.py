"""Model registries — map a model identifier to its backing table name."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Table

from model_input.exceptions import ModelNotFoundError

logger = logging.getLogger(__name__)


class ModelRegistry(ABC):
    """Resolves the model identifiers used in templates to table names."""

    @abstractmethod
    def table_for(self, model: str) -> str:
        """Return the table name backing *model*.

        Raises:
            ModelNotFoundError: If the identifier is unknown.
        """


class DeclarativeModelRegistry(ModelRegistry):
    """Looks models up in a SQLAlchemy declarative base.

    Models are matched by class name (``"User"``) or by fully-qualified
    name (``"app.models.User"``).

    Usage::

        class Base(DeclarativeBase):
            pass

        registry = DeclarativeModelRegistry(Base)
        registry.table_for("User")  # -> "users"
    """

    def __init__(self, base: Any) -> None:
        self._base = base

    def _candidates(self) -> dict[str, list[Any]]:
        by_name: dict[str, list[Any]] = {}
        for mapper in self._base.registry.mappers:
            cls = mapper.class_
            by_name.setdefault(cls.__name__, []).append(mapper)
            by_name.setdefault(f"{cls.__module__}.{cls.__qualname__}", []).append(mapper)
        return by_name

    def table_for(self, model: str) -> str:
        mappers = self._candidates().get(model, [])
        if not mappers:
            raise ModelNotFoundError(model)
        if len(mappers) > 1:
            raise ModelNotFoundError(model, "ambiguous class name, use the fully-qualified name")

        table = mappers[0].local_table
        if not isinstance(table, Table):
            raise ModelNotFoundError(model, "model is not mapped to a table")
        logger.debug("Resolved model %r to table %r", model, table.name)
        return table.name


class StaticModelRegistry(ModelRegistry):
    """Resolves models from an explicit identifier -> table mapping."""

    def __init__(self, tables: Mapping[str, str]) -> None:
        self._tables = dict(tables)

    @classmethod
    def from_table_names(cls, table_names: list[str]) -> StaticModelRegistry:
        """Build a registry where every table is addressed by its own name."""
        return cls({name: name for name in table_names})

    def table_for(self, model: str) -> str:
        try:
            return self._tables[model]
        except KeyError:
            raise ModelNotFoundError(model) from None
