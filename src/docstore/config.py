"""Application configuration: settings schema and layered loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    app_name:        str = "docstore"
    log_level:       str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                 description="Root log level used by the CLI")
    output_format:   str = Field(default="json", pattern="^(json|table)$", description="json or table")
    max_id_attempts: int = Field(default=0, ge=0, description="Id collisions tolerated per save; 0 = unlimited")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    return data


def _read_env() -> dict[str, Any]:
    return {
        name: val for name in Settings.model_fields
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}"))
    }


def load_config(overrides: dict[str, Any] = None, config_file: Path | str | None = None) -> Settings:
    """Merge config file, DOCSTORE_<FIELD> env vars and non-None CLI overrides; later layers win.

    config_file defaults to ./config.yaml and is skipped when that file is absent;
    an explicit config_file that does not exist raises ValueError.
    """
    path = Path(config_file) if config_file else Path(CONFIG_FILE)
    data: dict[str, Any] = {}
    if path.exists():
        data.update(_read_yaml(path))
    elif config_file:
        raise ValueError(f"Config file not found: {path}")

    data.update(_read_env())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
