"""Clock, terminal, environment and output services used by the logger.

Everything woof needs from the outside world goes through a `Provider`, so
tests can swap in a fixed clock and capture output without touching stdout.

Example:
    >>> class Recorder(SystemProvider):
    ...     def __init__(self) -> None:
    ...         self.lines: list[str] = []
    ...     def write_line(self, line: str) -> None:
    ...         self.lines.append(line)
    >>> set_provider(rec := Recorder())
"""

from __future__ import annotations

import os
import sys
import time
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Provider(Protocol):
    """External services the logging core depends on."""
    
    def wall_clock_now(self) -> str: ...
    def monotonic_millis(self) -> int: ...
    def stdout_is_tty(self) -> bool: ...
    def lookup_env(self, name: str) -> str | None: ...
    def write_line(self, line: str) -> None: ...


class SystemProvider:
    """Real clock, real environment, real stdout. `sys.stdout` is looked up per call."""
    
    __slots__ = ()
    
    def wall_clock_now(self) -> str:
        """UTC ISO-8601 with millisecond precision: YYYY-MM-DDTHH:MM:SS.sssZ."""
        return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    
    def monotonic_millis(self) -> int:
        return time.monotonic_ns() // 1_000_000
    
    def stdout_is_tty(self) -> bool:
        return getattr(sys.stdout, "isatty", lambda: False)()
    
    def lookup_env(self, name: str) -> str | None:
        return os.environ.get(name)
    
    def write_line(self, line: str) -> None:
        print(line, file=sys.stdout)


_DEFAULT = SystemProvider()
_provider: Provider = _DEFAULT


def get_provider() -> Provider:
    return _provider


def set_provider(provider: Provider) -> None:
    """Install a provider process-wide (tests, embedding hosts)."""
    global _provider
    _provider = provider


def reset_provider() -> None:
    """Restore the system provider."""
    set_provider(_DEFAULT)
