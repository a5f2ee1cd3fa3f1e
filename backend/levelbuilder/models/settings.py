"""Package configuration using pydantic-settings."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_BACKEND_DIR = Path(__file__).resolve().parents[2]
_ENV_FILE = _BACKEND_DIR / ".env"

_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    # ===== Logging =====
    LOG_LEVEL: str = "INFO"  # stdlib level name; unknown names fall back to INFO

    # ===== Generator registry =====
    # Modules imported by load_generators() at startup; each registers its
    # generators on import.
    GENERATOR_MODULES: list[str] = ["levelbuilder.generators.features"]

    # ===== Export =====
    EXPORT_INDENT: int | None = None  # None keeps the export string on one line

    model_config = SettingsConfigDict(env_prefix="LEVELBUILDER_", env_file=_ENV_FILE, extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, value: str | None) -> str:
        name = (value or "").strip().upper()
        name = _LEVEL_ALIASES.get(name, name)
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name

    @field_validator("GENERATOR_MODULES", mode="before")
    @classmethod
    def _dedupe_modules(cls, value: list[str] | None) -> list[str]:
        # Env values arrive JSON-decoded, e.g. '["pkg.walls", "pkg.lights"]'
        if value is None:
            return []
        return list(dict.fromkeys(value))

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
