"""Shared fixtures: fixed clock, captured output, clean global state."""

from __future__ import annotations

import threading
from collections.abc import Iterator

import pytest

from woof import reset, reset_provider, set_provider

FIXED_TIME = "2026-02-11T10:30:45.123Z"


class RecordingProvider:
    """Fixed clock, scripted monotonic ticks, fake terminal/env, captured lines."""
    
    def __init__(self, *, tty: bool = False, env: dict[str, str] | None = None) -> None:
        self.lines: list[str] = []
        self.tty = tty
        self.env: dict[str, str] = dict(env or {})
        self.ticks: list[int] = []
        self.now = FIXED_TIME
        self._lock = threading.Lock()
    
    def wall_clock_now(self) -> str:
        return self.now
    
    def monotonic_millis(self) -> int:
        return self.ticks.pop(0) if self.ticks else 0
    
    def stdout_is_tty(self) -> bool:
        return self.tty
    
    def lookup_env(self, name: str) -> str | None:
        return self.env.get(name)
    
    def write_line(self, line: str) -> None:
        with self._lock:
            self.lines.append(line)


@pytest.fixture(autouse=True)
def output() -> Iterator[RecordingProvider]:
    """Default config and a recording provider for every test."""
    reset()
    set_provider(rec := RecordingProvider())
    yield rec
    reset()
    reset_provider()
