"""model-input — render HTML form inputs from database column metadata."""

from model_input.attributes import merge_attributes, render_attributes
from model_input.column import ColumnSchema
from model_input.config import ModelInputSettings
from model_input.exceptions import (
    ColumnNotFoundError,
    MalformedOptionsError,
    ModelInputError,
    ModelNotFoundError,
    SchemaReadError,
    UnknownColumnTypeError,
)
from model_input.extension import ModelInputExtension, create_environment
from model_input.generator import InputGenerator
from model_input.input_types import INPUT_TYPE_MAP, resolve_input_type
from model_input.options import DirectiveCall, InputOptions, parse_directive, parse_options
from model_input.providers import MetadataSchemaProvider, SchemaProvider, SQLSchemaProvider, canonical_type_name
from model_input.registry import DeclarativeModelRegistry, ModelRegistry, StaticModelRegistry
from model_input.render import input_id, render_input
from model_input.rules import derive_rules

__all__ = [
    "INPUT_TYPE_MAP",
    "ColumnNotFoundError",
    "ColumnSchema",
    "DeclarativeModelRegistry",
    "DirectiveCall",
    "InputGenerator",
    "InputOptions",
    "MalformedOptionsError",
    "MetadataSchemaProvider",
    "ModelInputError",
    "ModelInputExtension",
    "ModelInputSettings",
    "ModelNotFoundError",
    "ModelRegistry",
    "SQLSchemaProvider",
    "SchemaProvider",
    "SchemaReadError",
    "StaticModelRegistry",
    "UnknownColumnTypeError",
    "canonical_type_name",
    "create_environment",
    "derive_rules",
    "input_id",
    "merge_attributes",
    "parse_directive",
    "parse_options",
    "render_attributes",
    "render_input",
    "resolve_input_type",
]
