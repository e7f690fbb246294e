"""
Configuration - Environment-driven settings.

Variables:
    TICTAC_ENV            Deployment label (default: development)
    TICTAC_LOG_LEVEL      Log level name (default: WARNING)
    TICTAC_MODE           Default game mode, pvp or pvc (default: pvc)
    TICTAC_AUTOMA_DELAY   Automated player delay in seconds (default: 0.35)
"""

from __future__ import annotations
from typing import Mapping, Optional
import logging
import os

from pydantic import BaseModel, Field, field_validator

from .session.game_loop import GameMode, DEFAULT_AUTOMA_DELAY

ENV_PREFIX = "TICTAC_"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Validated runtime settings."""
    env: str = "development"
    log_level: str = "WARNING"
    mode: GameMode = GameMode.PVC
    automa_delay: float = Field(DEFAULT_AUTOMA_DELAY, ge=0.0, le=10.0)

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings from the environment.

    Unset variables fall back to the model defaults.

    Raises:
        pydantic.ValidationError: a variable has an invalid value
    """
    environ = os.environ if environ is None else environ
    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            values[name] = raw
    return Settings(**values)


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
