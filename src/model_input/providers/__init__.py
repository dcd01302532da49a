"""Column schema providers backed by SQLAlchemy."""

from model_input.providers.base import SchemaProvider
from model_input.providers.sql import MetadataSchemaProvider, SQLSchemaProvider, canonical_type_name

__all__ = [
    "MetadataSchemaProvider",
    "SQLSchemaProvider",
    "SchemaProvider",
    "canonical_type_name",
]
