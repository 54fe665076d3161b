"""Output format variants and color modes.

`Format` is a closed union: the three built-in encodings are singletons and
`Custom` carries a caller function that receives the Entry directly.

Example:
    >>> woof.set_format(Json)
    >>> woof.set_format(Custom(lambda e: f"{e.level.name} {e.message}"))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

from woof.foundation.errors import ConfigurationError

if TYPE_CHECKING:
    from woof.core import Entry


class ColorMode(StrEnum):
    """ANSI color policy for Text output. AUTO defers to TTY + NO_COLOR at render time."""
    
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True, slots=True)
class TextFormat:
    """Human-readable multi-line output, optionally colored."""
    
    def __repr__(self) -> str:
        return "Text"


@dataclass(frozen=True, slots=True)
class CompactFormat:
    """Single-line key=value output, never colored."""
    
    def __repr__(self) -> str:
        return "Compact"


@dataclass(frozen=True, slots=True)
class JsonFormat:
    """One JSON object per line."""
    
    def __repr__(self) -> str:
        return "Json"


@dataclass(frozen=True, slots=True)
class Custom:
    """Delegate rendering to a caller function. Its result is written verbatim."""
    
    render: Callable[[Entry], str]


Format: TypeAlias = TextFormat | CompactFormat | JsonFormat | Custom

Text = TextFormat()
Compact = CompactFormat()
Json = JsonFormat()

_BY_NAME: dict[str, Format] = {"text": Text, "compact": Compact, "json": Json}


def parse_format(name: str | Format) -> Format:
    """Resolve "text", "compact" or "json". Format values pass through.
    
    Raises:
        ConfigurationError: If the name is unknown
    """
    if not isinstance(name, str):
        return name
    if (fmt := _BY_NAME.get(name.strip().lower())) is None:
        raise ConfigurationError("format", name, tuple(_BY_NAME))
    return fmt


def parse_color_mode(name: str | ColorMode) -> ColorMode:
    """Resolve "auto", "always" or "never" case-insensitively."""
    if isinstance(name, ColorMode):
        return name
    if not isinstance(name, str):
        raise ConfigurationError("color mode", name, tuple(m.value for m in ColorMode))
    try:
        return ColorMode(name.strip().lower())
    except ValueError:
        raise ConfigurationError("color mode", name, tuple(m.value for m in ColorMode)) from None
