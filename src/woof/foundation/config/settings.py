"""Environment-based configuration using pydantic-settings.

Opt-in: woof never reads WOOF_* variables on its own. Call
`configure_from_env()` at startup to apply them.

Example:
    # WOOF_LEVEL=info WOOF_FORMAT=json WOOF_COLORS=never
    >>> from woof.foundation.config import configure_from_env
    >>> configure_from_env()
    >>> woof.get_config().level
    <Level.INFO: 1>
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from woof.core import Level, parse_level
from woof.foundation.errors import ConfigurationError
from woof.formatting.formats import parse_color_mode, parse_format
from woof.runtime.state import configure


class WoofSettings(BaseSettings):
    """Logging settings loaded from WOOF_LEVEL, WOOF_FORMAT and WOOF_COLORS."""

    model_config = SettingsConfigDict(
        env_prefix="WOOF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"
    format: Literal["text", "compact", "json"] = Field(default="text", description="Built-in output format")
    colors: Literal["auto", "always", "never"] = "auto"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept any case and the "warn" alias."""
        return parse_level(v).name if isinstance(v, str) else v

    @field_validator("format", "colors", mode="before")
    @classmethod
    def _lowercase(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


@lru_cache(maxsize=1)
def get_settings() -> WoofSettings:
    """Load settings from the environment (cached).

    Raises:
        ConfigurationError: If a WOOF_* variable holds an unknown value
    """
    try:
        return WoofSettings()
    except ValidationError as e:
        err = e.errors()[0]
        setting = str(err["loc"][0]) if err.get("loc") else "setting"
        raise ConfigurationError(setting, err.get("input")) from e


def clear_settings_cache() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def configure_from_env(settings: WoofSettings | None = None) -> WoofSettings:
    """Apply level, format and colors from settings (default: the environment). Global context is kept."""
    s = settings or get_settings()
    configure(Level[s.level], parse_format(s.format), parse_color_mode(s.colors))
    return s
