"""Tests for environment-driven settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

import woof
from woof import ColorMode, Compact, ConfigurationError, Json, Level, Text
from woof.foundation.config import WoofSettings, clear_settings_cache, configure_from_env, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate from the real environment and the settings cache."""
    for var in ("WOOF_LEVEL", "WOOF_FORMAT", "WOOF_COLORS"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_settings_defaults_match_logger_defaults() -> None:
    s = WoofSettings(_env_file=None)
    assert (s.level, s.format, s.colors) == ("DEBUG", "text", "auto")


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WOOF_LEVEL", "warn")
    monkeypatch.setenv("WOOF_FORMAT", "JSON")
    monkeypatch.setenv("WOOF_COLORS", "Never")
    
    s = get_settings()
    assert (s.level, s.format, s.colors) == ("WARNING", "json", "never")
    assert get_settings() is s


def test_configure_from_env_applies_and_keeps_global_context(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WOOF_LEVEL", "error")
    monkeypatch.setenv("WOOF_FORMAT", "compact")
    woof.set_global_context([("app", "svc")])
    
    configure_from_env()
    
    cfg = woof.get_config()
    assert (cfg.level, cfg.format, cfg.colors) == (Level.ERROR, Compact, ColorMode.AUTO)
    assert cfg.global_context == (("app", "svc"),)


def test_configure_from_explicit_settings() -> None:
    configure_from_env(WoofSettings(level="INFO", format="json", colors="always", _env_file=None))
    
    cfg = woof.get_config()
    assert (cfg.level, cfg.format, cfg.colors) == (Level.INFO, Json, ColorMode.ALWAYS)


def test_unknown_values_raise_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WOOF_FORMAT", "yaml")
    
    with pytest.raises(ConfigurationError, match="format"):
        get_settings()
    assert woof.get_config().format is Text


def test_parse_helpers() -> None:
    from woof.formatting import parse_color_mode, parse_format
    
    assert parse_format("Compact") is Compact
    assert parse_format(Json) is Json
    assert parse_color_mode("ALWAYS") is ColorMode.ALWAYS
    with pytest.raises(ConfigurationError):
        parse_color_mode("sometimes")
    with pytest.raises(ConfigurationError):
        parse_color_mode(1)  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        parse_format("xml")
