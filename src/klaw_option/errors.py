"""Error types: the absent-value exception and the dual struct+exception Failure."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'UNWRAP_NOTHING_MESSAGE',
    'Failure',
    'FailureError',
    'Propagate',
    'ValueAbsentError',
    'failure_message',
]

UNWRAP_NOTHING_MESSAGE = 'unwrap: Expected Some(), was None()'


class ValueAbsentError(Exception):
    """Raised by expect() and unwrap() when the option holds no value."""

    def __init__(self, message: str = UNWRAP_NOTHING_MESSAGE) -> None:
        self.message = message
        super().__init__(message)


# --- Failure ---


class Failure(msgspec.Struct, frozen=True, gc=False):
    """Failure outcome payload - struct variant for Result[T, Failure]."""

    message: str
    code: Any = None

    def to_exception(self) -> FailureError:
        """Convert to exception for raise-based code."""
        return FailureError(self.message, self.code)


class FailureError(Exception):
    """Failure outcome payload - exception variant."""

    def __init__(self, message: str, code: Any = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def to_struct(self) -> Failure:
        """Convert to struct for Result-based code."""
        return Failure(self.message, self.code)


def failure_message(error: object) -> str:
    """Extract a human-readable message from an Err payload.

    Failure structs and FailureError exceptions expose their message field,
    other exceptions use str(), anything else is stringified as-is.
    """
    if isinstance(error, Failure | FailureError):
        return error.message
    return str(error)


# --- Control flow ---


class Propagate(Exception):  # noqa: N818
    """Early-return signal raised by bail() on Nothing or Err.

    The @result decorator catches it and returns the carried value, giving
    the effect of Rust's ? operator. Not an error, hence no Error suffix.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The absent Option or Err being carried up the stack."""
        return self._value
