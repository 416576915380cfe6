from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, field_validator

CONFIG_FILENAMES = ("name-match.yaml", "name-match.yml")


class LoggingSettings(BaseModel):
    level: str = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class OutputSettings(BaseModel):
    format: Literal["text", "json"] = "text"
    show_strategy: bool = False


class Settings(BaseModel):
    logging: LoggingSettings = LoggingSettings()
    output: OutputSettings = OutputSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_FILENAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    config_path = find_config(explicit_path)
    if config_path is None:
        return Settings()
    return Settings.load(config_path)
