"""Tests for levels, the level filter and level parsing."""

from __future__ import annotations

import pytest

from woof import ConfigurationError, Level, level_name, should_log
from woof.core import level_tag, parse_level


@pytest.mark.parametrize("minimum", list(Level))
@pytest.mark.parametrize("candidate", list(Level))
def test_should_log_matches_rank(candidate: Level, minimum: Level) -> None:
    ranks = {Level.DEBUG: 0, Level.INFO: 1, Level.WARNING: 2, Level.ERROR: 3}
    assert should_log(candidate, minimum) is (ranks[candidate] >= ranks[minimum])


def test_level_names_are_full_lowercase_words() -> None:
    assert [level_name(lvl) for lvl in Level] == ["debug", "info", "warning", "error"]


def test_level_tags_shorten_warning() -> None:
    assert [level_tag(lvl) for lvl in Level] == ["DEBUG", "INFO", "WARN", "ERROR"]


@pytest.mark.parametrize(("text", "expected"), [
    ("debug", Level.DEBUG),
    ("INFO", Level.INFO),
    (" Warning ", Level.WARNING),
    ("warn", Level.WARNING),
    ("error", Level.ERROR),
    (Level.ERROR, Level.ERROR),
])
def test_parse_level(text: str | Level, expected: Level) -> None:
    assert parse_level(text) is expected


def test_parse_level_rejects_unknown() -> None:
    with pytest.raises(ConfigurationError, match="Unknown level: 'critical'"):
        parse_level("critical")
    
    # Still catchable as ValueError
    with pytest.raises(ValueError):
        parse_level("trace")


@pytest.mark.parametrize("value", [2, None, 1.5, ["info"]])
def test_parse_level_rejects_non_text(value: object) -> None:
    with pytest.raises(ConfigurationError, match="Unknown level"):
        parse_level(value)  # type: ignore[arg-type]
