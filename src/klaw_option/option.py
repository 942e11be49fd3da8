"""Option type: a value that is either present (Some) or absent (Nothing).

Option is a single mutable class with an explicit presence tag, so any
payload, Python's None included, can be held by a Some. Only the explicit
constructor Option.from_() and map() treat a None input as absence.

Most methods leave the receiver untouched and return an Option or a plain
value. take(), replace(), get_or_insert() and get_or_insert_with() change
the receiver in place; an Option is meant to have a single owner, and
callers sharing one across threads must lock around those calls.

Examples:
    >>> Option.from_(None)
    Nothing()
    >>> Some(2).and_then(lambda n: Some(n * n)).map(str)
    Some('4')
    >>> slot = Some('a')
    >>> slot.take(), slot
    (Some('a'), Nothing())
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_option._config import get_config
from klaw_option._logging import get_logger
from klaw_option.async_.result import AsyncResult
from klaw_option.errors import (
    UNWRAP_NOTHING_MESSAGE,
    Failure,
    Propagate,
    ValueAbsentError,
    failure_message,
)
from klaw_option.result import Err, Ok

__all__ = ['Nothing', 'Option', 'Some']

_logger = get_logger(__name__)


def _trace(event: str, **fields: Any) -> None:
    # Without a log level, logging is unconfigured and stays silent.
    config = get_config()
    if config.trace and config.log_level is not None:
        _logger.debug(event, **fields)


class Option[T]:
    """Container for a value of type T that may be absent.

    Build instances with Some(value), Nothing() or Option.from_(value)
    rather than calling the class directly; Option() is an empty option.

    Two options are equal when both are empty, or both hold equal values.
    Options are mutable, so they are not hashable.
    """

    __slots__ = ('_is_some', '_value')

    _is_some: bool
    _value: T | None

    def __init__(self) -> None:
        self._is_some = False
        self._value = None

    # --- Construction ---

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Create an option holding value, even if value is None."""
        option: Option[T] = cls()
        option._is_some = True
        option._value = value
        return option

    @classmethod
    def nothing(cls) -> Option[Any]:
        """Create a fresh empty option."""
        return cls()

    @classmethod
    def from_(cls, value: T | None = None) -> Option[T]:
        """Create an option from a value that may be None.

        Args:
            value: Any value. None (or no argument) means absence.

        Returns:
            Some(value) if value is not None, else Nothing().
        """
        if value is None:
            return cls()
        return cls.some(value)

    def _copy(self) -> Option[T]:
        copied: Option[T] = Option()
        copied._is_some = self._is_some
        copied._value = self._value
        return copied

    # --- Queries ---

    def is_some(self) -> bool:
        """Return True if the option holds a value."""
        return self._is_some

    def is_none(self) -> bool:
        """Return True if the option is empty."""
        return not self._is_some

    # --- Unwrapping ---

    def expect(self, msg: str) -> T:
        """Return the contained value, or raise with a custom message.

        Args:
            msg: Message carried verbatim by the raised error.

        Raises:
            ValueAbsentError: If the option is empty.
        """
        if not self._is_some:
            raise ValueAbsentError(msg)
        return self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            ValueAbsentError: If the option is empty, with the message
                "unwrap: Expected Some(), was None()".
        """
        if not self._is_some:
            raise ValueAbsentError(UNWRAP_NOTHING_MESSAGE)
        return self._value  # type: ignore[return-value]

    def unwrap_or[U](self, default: U) -> T | U:
        """Return the contained value or default (evaluated by the caller)."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        return default

    def unwrap_or_else[U](self, f: Callable[[], U]) -> T | U:
        """Return the contained value, or compute one; f runs only when empty."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        return f()

    # --- Transformation ---

    def map[U](self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply f to the contained value.

        The result goes through Option.from_(), so an f that returns None
        produces Nothing().

        Args:
            f: Function applied to the value; not called when empty.

        Returns:
            The receiver itself if empty, else Option.from_(f(value)).
        """
        if not self._is_some:
            return self  # type: ignore[return-value]
        return Option.from_(f(self._value))  # type: ignore[arg-type]

    def map_or[U, V](self, default: V, f: Callable[[T], U]) -> U | V:
        """Return f(value) if present, else default."""
        if self._is_some:
            return f(self._value)  # type: ignore[arg-type]
        return default

    def map_or_else[U, V](self, default: Callable[[], V], f: Callable[[T], U]) -> U | V:
        """Return f(value) if present, else default(); exactly one is called."""
        if self._is_some:
            return f(self._value)  # type: ignore[arg-type]
        return default()

    # --- Outcome interop ---

    def ok_or(self, message: str, code: Any = None) -> Ok[T] | Err[Failure]:
        """Convert to an outcome.

        Args:
            message: Failure message used when the option is empty.
            code: Optional failure code.

        Returns:
            Ok(value) if present, else Err(Failure(message, code)).
        """
        if self._is_some:
            return Ok(self._value)  # type: ignore[arg-type]
        return Err.failure(message, code)

    def ok_or_else(
        self, f: Callable[[], str | tuple[str, Any] | list[Any]]
    ) -> Ok[T] | Err[Failure]:
        """Convert to an outcome, computing the failure lazily.

        Args:
            f: Called only when empty. Returns a message, or a
                (message, code) pair as a tuple or list.

        Returns:
            Ok(value) if present, else Err(Failure(...)) built from f().
        """
        if self._is_some:
            return Ok(self._value)  # type: ignore[arg-type]
        args = f()
        if isinstance(args, tuple | list):
            return Err.failure(*args)
        return Err.failure(args)

    async def transpose(self) -> Ok[Option[Any]] | Err[Failure]:
        """Turn an Option of an outcome into an outcome of an Option.

        The payload may be an Ok/Err or an AsyncResult, which is awaited
        to get its Ok/Err. Errors raised while awaiting propagate.

        Returns:
            Ok(Nothing()) if empty. Err(Failure(message)) if the outcome is
            an Err, with the message taken from its error. Ok(Option.from_(v))
            if the outcome is Ok(v). Ok(Nothing()) if the payload is not an
            outcome at all.
        """
        if not self._is_some:
            return Ok(Nothing())

        outcome = self._value
        if isinstance(outcome, AsyncResult):
            outcome = await outcome

        if isinstance(outcome, Err):
            return Err.failure(failure_message(outcome.error))
        if isinstance(outcome, Ok):
            return Ok(Option.from_(outcome.value))

        _trace('option.transpose', discarded=type(outcome).__name__)
        return Ok(Nothing())

    # --- Boolean combinators ---

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other if both options hold a value, else Nothing()."""
        if not self._is_some or not other._is_some:
            return Nothing()
        return other

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function (flatmap).

        The option returned by f is passed through as-is, so a chain stops
        at the first Nothing and skips every later step.

        Args:
            f: Function taking the value; not called when empty.

        Returns:
            The receiver if empty, else f(value).
        """
        if not self._is_some:
            return self  # type: ignore[return-value]
        return f(self._value)  # type: ignore[arg-type]

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate(value) is true.

        Returns:
            The receiver if empty (predicate not called), a new Some(value)
            if the predicate holds, else Nothing().
        """
        if not self._is_some:
            return self
        if predicate(self._value):  # type: ignore[arg-type]
            return Option.some(self._value)  # type: ignore[arg-type]
        return Nothing()

    def or_(self, other: Option[T]) -> Option[T]:
        """Return the receiver if it holds a value, else other."""
        if self._is_some:
            return self
        return other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return the receiver if it holds a value, else f()."""
        if self._is_some:
            return self
        return f()

    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever option holds a value when exactly one does.

        Returns:
            The receiver or other, whichever is the only one present;
            Nothing() if both or neither hold a value.
        """
        if self._is_some and not other._is_some:
            return self
        if not self._is_some and other._is_some:
            return other
        return Nothing()

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two values: Some((a, b)) if both are present, else Nothing()."""
        if self._is_some and other._is_some:
            return Option.some((self._value, other._value))  # type: ignore[arg-type]
        return Nothing()

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting: Some(Some(x)) becomes Some(x).

        A present payload that is not an Option leaves the receiver as-is.
        """
        if self._is_some and isinstance(self._value, Option):
            return self._value
        return self

    # --- In-place operations ---

    def get_or_insert(self, value: T) -> Option[T]:
        """Store value if empty, then return the receiver.

        Mutates the receiver. If it already holds a value, value is ignored.
        """
        if not self._is_some:
            self._is_some = True
            self._value = value
            _trace('option.get_or_insert', inserted=True)
        return self

    def get_or_insert_with(self, f: Callable[[], T]) -> Option[T]:
        """Store f() if empty, then return the receiver; f runs only when empty.

        Mutates the receiver.
        """
        if not self._is_some:
            self._is_some = True
            self._value = f()
            _trace('option.get_or_insert', inserted=True, lazy=True)
        return self

    def take(self) -> Option[T]:
        """Move the value out, leaving the receiver empty.

        Mutates the receiver.

        Returns:
            A new option holding what the receiver held before the call.
        """
        previous = self._copy()
        self._is_some = False
        self._value = None
        _trace('option.take', had_value=previous._is_some)
        return previous

    def replace(self, value: T) -> Option[T]:
        """Store value in the receiver and return the previous contents.

        Mutates the receiver, which holds Some(value) afterwards.

        Returns:
            A new option holding what the receiver held before the call.
        """
        previous = self._copy()
        self._is_some = True
        self._value = value
        _trace('option.replace', had_value=previous._is_some)
        return previous

    # --- Early return ---

    def bail(self) -> T:
        """Return the value, or raise Propagate(self) when empty.

        This is the equivalent of Rust's ? operator: inside a function
        decorated with @result, an empty option is returned early.

        Raises:
            Propagate: If the option is empty.
        """
        if not self._is_some:
            raise Propagate(self)
        return self._value  # type: ignore[return-value]

    def unwrap_or_return(self) -> T:
        """Alias for bail()."""
        return self.bail()

    def __enter__(self) -> T:
        """Yield the value; an empty option raises Propagate instead."""
        return self.bail()

    def __exit__(self, *_: object) -> None:
        pass

    def __or__[U](self, f: Callable[[T], U | Option[U]]) -> Option[U]:
        """Pipe operator: Some(x) | f is f(x) if f returns an Option, else Option.from_(f(x))."""
        if not self._is_some:
            return self  # type: ignore[return-value]
        mapped = f(self._value)  # type: ignore[arg-type]
        if isinstance(mapped, Option):
            return mapped
        return Option.from_(mapped)

    # --- Dunder protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._is_some != other._is_some:
            return False
        return not self._is_some or self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_some:
            return f'Some({self._value!r})'
        return 'Nothing()'


def Some[T](value: T) -> Option[T]:  # noqa: N802
    """Create an option holding value.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(None).is_some()
        True
    """
    return Option.some(value)


def Nothing() -> Option[Any]:  # noqa: N802
    """Create a fresh empty option.

    Each call returns a new instance, since take()/replace() mutate in place.

    Examples:
        >>> Nothing().unwrap_or(0)
        0
    """
    return Option()
