"""Store settings loaded from a YAML file.

The file is optional; when it is missing every setting takes its default.
"""
from __future__ import annotations
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("data/config/simplekv.yml")


class MissingKeyPolicy(str, Enum):
    """How `intersection` treats an operand whose key does not exist."""

    FAIL = "fail"
    EMPTY = "empty"


class StoreSettings(BaseModel):
    log_level: str = "WARNING"
    intersection_missing_key: MissingKeyPolicy = MissingKeyPolicy.FAIL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(getattr(logging, level, None), int):
            raise ValueError(f"unknown log level: {v}")
        return level


def load_settings(config_path: Optional[Path] = None) -> StoreSettings:
    """Load `StoreSettings` from `config_path` (or the default location).

    Raises `ValueError` if the file exists but is not a valid settings
    mapping.
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return StoreSettings()

    with path.open("r", encoding="utf-8") as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError("invalid config format: parse error") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("invalid config format: expected mapping")

    try:
        settings = StoreSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"invalid config format: {e}") from e
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
