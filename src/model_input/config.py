"""Rendering configuration loaded from .model_input.json or the environment."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from model_input.input_types import DEFAULT_FALLBACK_INPUT_TYPE

logger = logging.getLogger(__name__)

CONFIG_FILE = ".model_input.json"
ENV_UNKNOWN_TYPE = "MODEL_INPUT_UNKNOWN_TYPE"
ENV_FALLBACK_TYPE = "MODEL_INPUT_FALLBACK_TYPE"

_HTML_INPUT_TYPES = frozenset(
    {
        "text",
        "textarea",
        "number",
        "checkbox",
        "date",
        "datetime-local",
        "time",
        "file",
        "email",
        "hidden",
        "password",
        "search",
        "tel",
        "url",
    }
)


class ModelInputSettings(BaseModel):
    """How the renderer treats column types missing from the input type map."""

    unknown_type: Literal["fallback", "error"] = Field(
        default="fallback",
        description="'fallback' renders unmapped types as fallback_input_type, 'error' raises.",
    )
    fallback_input_type: str = Field(default=DEFAULT_FALLBACK_INPUT_TYPE, description="Input type for unmapped types.")

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("fallback_input_type")
    @classmethod
    def _check_fallback(cls, value: str) -> str:
        if value not in _HTML_INPUT_TYPES:
            raise ValueError(f"fallback_input_type must be one of {sorted(_HTML_INPUT_TYPES)}, got {value!r}")
        return value

    @property
    def strict(self) -> bool:
        return self.unknown_type == "error"

    @classmethod
    def from_file(cls, path: str | Path = CONFIG_FILE) -> ModelInputSettings:
        """Load settings from a JSON file, falling back to defaults.

        Raises:
            ValueError: If the file is not a JSON object.
            ValidationError: If the file contains invalid settings.
        """
        return cls.model_validate(_read_file(Path(path)))

    @classmethod
    def from_env(cls) -> ModelInputSettings:
        """Load settings from ``MODEL_INPUT_*`` environment variables."""
        return cls.model_validate(_read_env())

    @classmethod
    def load(cls, path: str | Path = CONFIG_FILE) -> ModelInputSettings:
        """Load settings from *path*, then apply ``MODEL_INPUT_*`` overrides."""
        data = _read_file(Path(path))
        data.update(_read_env())
        return cls.model_validate(data)


def _read_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    logger.debug("Loaded model-input settings from %s", path)
    return data


def _read_env() -> dict[str, Any]:
    data: dict[str, Any] = {}
    unknown = os.environ.get(ENV_UNKNOWN_TYPE)
    if unknown:
        data["unknown_type"] = unknown.lower()
    fallback = os.environ.get(ENV_FALLBACK_TYPE)
    if fallback:
        data["fallback_input_type"] = fallback
    return data
