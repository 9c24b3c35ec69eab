"""Application configuration: settings schema and config.yaml loader"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


class Settings(BaseModel):
    app_name:        str = "mdauto"
    workspace_root:  str = Field(default=".",    description="Base directory for create/rebuild paths")
    docs_root:       str = Field(default="docs", description="Documents root, relative to workspace_root")
    sidebar_command: Optional[str] = Field(default=None, description="External sidebar-position assigner; unset skips it")
    log_level:       str = Field(default="INFO", description="Root logger level name")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def docs_path(self) -> Path:
        """Absolute documents root."""
        return (Path(self.workspace_root) / self.docs_root).resolve()


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDAUTO_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDAUTO_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def configure_logging(settings: Settings) -> None:
    """Install the root handler once; later calls only adjust the level."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)
