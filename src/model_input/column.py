"""Column metadata snapshot used to derive input attributes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ColumnSchema(BaseModel):
    """Immutable snapshot of a single database column.

    Built fresh by a schema provider for every directive invocation and never
    cached.
    """

    type: str = Field(min_length=1, description="Canonical column type name (e.g. 'integer', 'string').")
    length: int | None = Field(default=None, ge=0, description="Maximum character length for string types.")
    precision: int | None = Field(default=None, ge=0, description="Total number of digits for numeric types.")
    scale: int | None = Field(default=None, ge=0, description="Digits after the decimal point.")
    unsigned: bool = False
    fixed: bool = Field(default=False, description="Fixed-width string column (CHAR).")
    notnull: bool = False
    autoincrement: bool = False
    default: Any = None
    comment: str | None = None

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_scale(self) -> ColumnSchema:
        if self.precision is not None and self.scale is not None and self.scale > self.precision:
            raise ValueError(f"scale ({self.scale}) cannot exceed precision ({self.precision})")
        return self
