"""Field model: ordered (key, value) pairs with typed constructors.

Values are always text by the time they reach an Entry. The typed helpers do
the conversion at the call site so nothing downstream inspects value types.
Duplicate keys are legal and kept in order everywhere.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

Field: TypeAlias = tuple[str, str]
FieldList: TypeAlias = tuple[Field, ...]

EMPTY: FieldList = ()


def field(key: str, value: str) -> Field:
    """Plain string field."""
    return (key, value)


def int_field(key: str, value: int) -> Field:
    return (key, str(value))


def float_field(key: str, value: float) -> Field:
    return (key, repr(value))


def bool_field(key: str, value: bool) -> Field:
    """Boolean field rendered as "true"/"false"."""
    return (key, "true" if value else "false")


def to_fields(fields: Iterable[Field]) -> FieldList:
    """Freeze any iterable of pairs into a FieldList. Order and duplicates preserved."""
    return fields if isinstance(fields, tuple) else tuple((k, v) for k, v in fields)
