"""Two-variant Result type used to signal success or failure to `log_error`.

Example:
    >>> def parse_port(s: str) -> Result[int, str]:
    ...     return Ok(int(s)) if s.isdigit() else Err(f"bad port: {s}")
    >>> woof.log_error(parse_port("http"), "Config rejected")
    # => [ERROR] 10:30:45 Config rejected
    Err('bad port: http')
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class Result(Generic[T, E]):
    """Ok(value) or Err(error). Carries no behavior beyond telling the two apart."""

    __slots__ = ("_value", "_is_ok")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value, self._is_ok = value, is_ok

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def unwrap(self) -> T:
        """Value of an Ok.

        Raises:
            RuntimeError: On an Err, naming the error value
        """
        if not self._is_ok:
            raise RuntimeError(f"unwrap() on Err: {self._value!r}")
        return self._value  # type: ignore[return-value]

    def unwrap_err(self) -> E:
        if self._is_ok:
            raise RuntimeError(f"unwrap_err() on Ok: {self._value!r}")
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self._is_ok, self._value) == (other._is_ok, other._value)


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    return Result(value, is_ok=True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    return Result(error, is_ok=False)


def attempt(fn: Callable[[], T], *catch: type[Exception]) -> Result[T, Exception]:
    """Run fn, capturing listed exceptions (default: Exception) as Err.

    Example:
        >>> attempt(lambda: int("x"), ValueError).is_err()
        True
    """
    try:
        return Ok(fn())
    except catch or (Exception,) as e:
        return Err(e)
