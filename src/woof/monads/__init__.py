"""Result type for success/failure values passed to `log_error`.

Example:
    >>> from woof.monads import Err
    >>> woof.log_error(Err("timeout"), "Fetch failed")
    Err('timeout')
"""

from .result import Err, Ok, Result, attempt

__all__ = ["Err", "Ok", "Result", "attempt"]
