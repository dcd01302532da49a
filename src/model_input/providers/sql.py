"""SQL column schema providers using SQLAlchemy (Postgres/MySQL/SQLite)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy import Column, MetaData, inspect
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError
from sqlalchemy.sql import sqltypes
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.types import TypeDecorator, TypeEngine

from model_input.column import ColumnSchema
from model_input.exceptions import ColumnNotFoundError, SchemaReadError
from model_input.providers.base import SchemaProvider

logger = logging.getLogger(__name__)

# Checked in order, so subclasses must come before their bases
# (BigInteger before Integer, Float before Numeric, Text before String).
_SQL_TYPE_MAP: tuple[tuple[type[TypeEngine[Any]], str], ...] = (
    (sqltypes.PickleType, "object"),
    (sqltypes.Interval, "interval"),
    (JSONB, "jsonb"),
    (sqltypes.JSON, "json"),
    (sqltypes.ARRAY, "array"),
    (sqltypes.Uuid, "guid"),
    (sqltypes.Boolean, "boolean"),
    (sqltypes.BigInteger, "bigint"),
    (sqltypes.SmallInteger, "smallint"),
    (sqltypes.Integer, "integer"),
    (sqltypes.Float, "float"),
    (sqltypes.Numeric, "decimal"),
    (sqltypes.DateTime, "datetime"),
    (sqltypes.Date, "date"),
    (sqltypes.Time, "time"),
    (sqltypes.Text, "text"),
    (sqltypes.String, "string"),
    (sqltypes.LargeBinary, "blob"),
    (sqltypes.BINARY, "binary"),
    (sqltypes.VARBINARY, "binary"),
)

_FIXED_WIDTH_TYPES = (sqltypes.CHAR, sqltypes.NCHAR)


def canonical_type_name(sa_type: TypeEngine[Any]) -> str:
    """Map a SQLAlchemy column type to a canonical type name.

    ``TypeDecorator`` wrappers are unwrapped to their implementation type.
    Types with no mapping fall back to their lowercased visit name so that the
    caller can still report (or map) them.
    """
    for sa_class, name in _SQL_TYPE_MAP:
        if isinstance(sa_type, sa_class):
            return name
    if isinstance(sa_type, TypeDecorator):
        return canonical_type_name(sa_type.impl_instance)
    visit_name = getattr(sa_type, "__visit_name__", None) or type(sa_type).__name__
    return str(visit_name).lower()


def _int_or_none(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def _build_column_schema(
    table_name: str,
    field_name: str,
    sa_type: TypeEngine[Any],
    *,
    nullable: bool,
    autoincrement: bool,
    default: Any,
    comment: str | None,
) -> ColumnSchema:
    impl = sa_type.impl_instance if isinstance(sa_type, TypeDecorator) else sa_type
    precision = scale = None
    if isinstance(impl, sqltypes.Numeric):
        precision = _int_or_none(getattr(impl, "precision", None))
        scale = _int_or_none(getattr(impl, "scale", None))

    try:
        return ColumnSchema(
            type=canonical_type_name(sa_type),
            length=_int_or_none(getattr(impl, "length", None)),
            precision=precision,
            scale=scale,
            unsigned=bool(getattr(impl, "unsigned", False)),
            fixed=isinstance(impl, _FIXED_WIDTH_TYPES),
            notnull=not nullable,
            autoincrement=autoincrement,
            default=default,
            comment=comment,
        )
    except ValidationError as exc:
        detail = "; ".join(err["msg"] for err in exc.errors())
        raise SchemaReadError(detail, table_name, field_name) from exc


def _column_default(column: Column[Any]) -> Any:
    """Return a scalar Python-side default, else the server default text."""
    if column.default is not None and getattr(column.default, "is_scalar", False):
        return column.default.arg  # type: ignore[union-attr]
    server_default = column.server_default
    if server_default is not None:
        arg = getattr(server_default, "arg", None)
        if isinstance(arg, TextClause):
            return arg.text
        return arg
    return None


class MetadataSchemaProvider(SchemaProvider):
    """Reads column metadata from a SQLAlchemy ``MetaData`` without a database.

    Typically fed with ``Base.metadata`` of a declarative base, so rendering
    works from the mapped models alone.
    """

    def __init__(self, metadata: MetaData) -> None:
        self._metadata = metadata

    def get_column(self, table_name: str, field_name: str) -> ColumnSchema:
        table = self._metadata.tables.get(table_name)
        if table is None:
            raise ColumnNotFoundError(table_name, field_name, "table does not exist")
        column = table.columns.get(field_name)
        if column is None:
            raise ColumnNotFoundError(table_name, field_name)

        autoincrement = column.autoincrement is True or (
            column.autoincrement == "auto" and table.autoincrement_column is column
        )
        schema = _build_column_schema(
            table_name,
            field_name,
            column.type,
            nullable=bool(column.nullable),
            autoincrement=autoincrement,
            default=_column_default(column),
            comment=column.comment,
        )
        logger.debug("Read %s.%s from metadata: %r", table_name, field_name, schema)
        return schema


class SQLSchemaProvider(SchemaProvider):
    """Reflects column metadata from a live SQL database via ``sqlalchemy.inspect``.

    A fresh inspector is created for each lookup so schema changes made while
    the process runs are picked up.
    """

    def __init__(self, bind: Engine | Connection) -> None:
        self._bind = bind

    def table_names(self) -> list[str]:
        """Return the names of all tables visible through the bind."""
        try:
            return inspect(self._bind).get_table_names()
        except SQLAlchemyError as exc:
            raise SchemaReadError(str(exc)) from exc

    def get_column(self, table_name: str, field_name: str) -> ColumnSchema:
        try:
            columns = inspect(self._bind).get_columns(table_name)
        except NoSuchTableError:
            raise ColumnNotFoundError(table_name, field_name, "table does not exist") from None
        except SQLAlchemyError as exc:
            raise SchemaReadError(str(exc), table_name) from exc
        if not columns:
            raise ColumnNotFoundError(table_name, field_name, "table does not exist")

        col = next((c for c in columns if c["name"] == field_name), None)
        if col is None:
            raise ColumnNotFoundError(table_name, field_name)

        schema = _build_column_schema(
            table_name,
            field_name,
            col["type"],
            nullable=col.get("nullable", True),
            autoincrement=col.get("autoincrement") is True,
            default=col.get("default"),
            comment=col.get("comment"),
        )
        logger.debug("Reflected %s.%s: %r", table_name, field_name, schema)
        return schema
