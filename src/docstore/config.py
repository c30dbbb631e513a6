"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    app_name:      str = "docstore"
    save_mode:     str = Field(default="append", pattern="^(append|replace)$",
                               description="append keeps duplicate ids; replace swaps the first match")
    output_format: str = Field(default="json", pattern="^(json|yaml)$", description="CLI output format")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                               description="Root logging level for the CLI; case-insensitive")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def _read_config_file(path: Path) -> dict[str, Any]:
    """Mapping from a YAML config file; empty if the file does not exist."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    return data


def _env_values() -> dict[str, str]:
    """Non-empty DOCSTORE_<FIELD> environment variables keyed by field name."""
    found = {}
    for name in Settings.model_fields:
        value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if value:
            found[name] = value
    return found


def load_config(overrides: dict[str, Any] = None, config_file: str | Path = CONFIG_FILE) -> Settings:
    """Build Settings from config_file, then environment, then non-None overrides (last wins).

    Raises ValueError for an unreadable config file or an invalid setting value.
    """
    data = _read_config_file(Path(config_file))
    data.update(_env_values())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
