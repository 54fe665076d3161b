"""Configuration from environment variables using pydantic-settings."""

from .settings import WoofSettings, clear_settings_cache, configure_from_env, get_settings

__all__ = ["WoofSettings", "clear_settings_cache", "configure_from_env", "get_settings"]
