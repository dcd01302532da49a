"""Abstract base for column schema providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from model_input.column import ColumnSchema


class SchemaProvider(ABC):
    """Protocol for column metadata lookups.

    A provider wraps whatever metadata API a database stack offers and turns a
    single column into a :class:`ColumnSchema`. Rendering code depends only on
    this interface, never on a specific driver.
    """

    @abstractmethod
    def get_column(self, table_name: str, field_name: str) -> ColumnSchema:
        """Return metadata for one column.

        Args:
            table_name: Name of the table that owns the column.
            field_name: Column name.

        Raises:
            ColumnNotFoundError: If the table or the column does not exist.
        """
