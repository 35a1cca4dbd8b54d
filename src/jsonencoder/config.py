"""Runtime configuration loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from jsonencoder.constants import LOG_LEVELS
from jsonencoder.errors import ConfigError


class EncoderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sort_keys: bool = True
    ensure_ascii: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")
        return level


def load_config(config_path: Path | None) -> EncoderConfig:
    """Load and validate YAML config; defaults when no path is given."""
    if config_path is None:
        return EncoderConfig()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(str(exc)) from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path}: expected a mapping at the top level.")
    try:
        return EncoderConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
