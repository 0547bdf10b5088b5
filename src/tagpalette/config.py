"""Centralised application configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagpalette.palette import DEFAULT_PALETTE, load_palette, validate_palette

logger = logging.getLogger(__name__)

# src/tagpalette/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class PaletteConfig(BaseModel):
    """Colours handed out to newly created tags, in rotation order.

    ``file`` points at a JSON array of colour strings and, when set,
    replaces ``colors``. ``seed`` fixes the random starting colour.
    """

    colors: tuple[str, ...] = DEFAULT_PALETTE
    file: Path | None = None
    seed: int | None = None

    @field_validator("colors")
    @classmethod
    def _colors_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return validate_palette(value)

    @model_validator(mode="after")
    def _load_palette_file(self) -> PaletteConfig:
        if self.file is not None:
            self.colors = load_palette(self.file)
        return self


class AppConfig(BaseModel):
    """Application runtime configuration."""

    port: int = 8080
    storage_secret: SecretStr = SecretStr("dev-secret-change-me")
    log_dir: Path = Path("logs")


class DevConfig(BaseModel):
    """Development toggles."""

    enable_demo_pages: bool = True


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Application settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``PALETTE__COLORS``, ``PALETTE__SEED``, ``APP__PORT``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    palette: PaletteConfig = PaletteConfig()
    app: AppConfig = AppConfig()
    dev: DevConfig = DevConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
