"""JSON string escaping (RFC 8259) for hand-built JSON output.

Only the escapes below are applied. Backslash goes first so the backslashes
introduced by later replacements are not doubled. Non-ASCII text passes
through untouched.
"""

from __future__ import annotations

_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ("\b", "\\b"),
    ("\f", "\\f"),
)


def escape_json(text: str) -> str:
    """Escape `text` for use inside a JSON string literal (without the quotes)."""
    for raw, escaped in _ESCAPES:
        if raw in text:
            text = text.replace(raw, escaped)
    return text


def json_pair(key: str, value: str) -> str:
    """Render one `"key":"value"` member."""
    return f'"{escape_json(key)}":"{escape_json(value)}"'
