"""Domain exceptions for model-input rendering.

Driver and metadata errors raised while resolving a directive are re-raised as
one of these so that callers only need to catch :class:`ModelInputError`.
"""

from __future__ import annotations


class ModelInputError(Exception):
    """Base exception for all model-input errors."""


class ModelNotFoundError(ModelInputError):
    """Raised when a model identifier cannot be resolved to a table.

    Attributes:
        model: The identifier the caller asked for.
    """

    def __init__(self, model: str, detail: str | None = None) -> None:
        self.model = model
        msg = f"Model {model!r} not found"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ColumnNotFoundError(ModelInputError):
    """Raised when a table or a column in it does not exist.

    Attributes:
        table: Table name that was inspected.
        field: Column name that was requested.
    """

    def __init__(self, table: str, field: str, detail: str | None = None) -> None:
        self.table = table
        self.field = field
        msg = f"Column {field!r} not found in table {table!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class UnknownColumnTypeError(ModelInputError):
    """Raised in strict mode when a column type has no HTML input mapping."""

    def __init__(self, column_type: str) -> None:
        self.column_type = column_type
        super().__init__(f"No input type mapping for column type {column_type!r}")


class MalformedOptionsError(ModelInputError):
    """Raised when directive text or caller options are not well formed."""


class SchemaReadError(ModelInputError):
    """Raised when column metadata cannot be read or is inconsistent.

    Wraps database driver failures (unreachable server, permission errors)
    and metadata that cannot describe a column, such as a scale larger than
    the precision.

    Attributes:
        table: Table name being read, if known.
        field: Column name being read, if known.
    """

    def __init__(self, detail: str, table: str | None = None, field: str | None = None) -> None:
        self.table = table
        self.field = field
        if table and field:
            msg = f"Cannot read column {field!r} of table {table!r}: {detail}"
        elif table:
            msg = f"Cannot read table {table!r}: {detail}"
        else:
            msg = f"Cannot read schema: {detail}"
        super().__init__(msg)
