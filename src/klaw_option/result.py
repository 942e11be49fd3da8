"""Outcome type: Ok[T] | Err[E], the success/failure counterpart of Option."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_option.errors import Failure, Propagate

if TYPE_CHECKING:
    from klaw_option.option import Option

__all__ = ['Err', 'Ok', 'Result', 'collect']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success outcome holding a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(2).map(lambda x: x + 1)
        Ok(value=3)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True; narrows the type to Ok[T]."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to extract.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        return self.value

    def expect(self, _msg: str) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the success value."""
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a Result-returning function (flatmap)."""
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from klaw_option.option import Some

        return Some(self.value)

    def err(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Ok."""
        from klaw_option.option import Nothing

        return Nothing()

    def bail(self) -> T:
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failure outcome holding an error of type E.

    Options build their failures through Err.failure(), which wraps a
    message and optional code in a Failure struct.

    Examples:
        >>> Err.failure('missing', code=404)
        Err(error=Failure(message='missing', code=404))
        >>> Err('boom').unwrap_or(0)
        0
    """

    error: E

    @classmethod
    def failure(cls, message: str, code: Any = None) -> Err[Failure]:
        """Build a failure outcome from a message and an optional code."""
        return Err(Failure(message, code))

    def is_ok(self) -> TypeIs[Ok[object]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True; narrows the type to Err[E]."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no success value.

        Raises:
            FailureError: If the error is a Failure struct.
            RuntimeError: For any other error payload.
        """
        if isinstance(self.error, Failure):
            raise self.error.to_exception()
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise RuntimeError with msg and the error repr."""
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the error value."""
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Recover from the error with a Result-returning function."""
        return f(self.error)

    def ok(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Err."""
        from klaw_option.option import Nothing

        return Nothing()

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from klaw_option.option import Some

        return Some(self.error)

    def bail(self) -> NoReturn:
        """Raise Propagate carrying this Err, caught by @result."""
        raise Propagate(self)


type Result[T, E = Failure] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect Results into a Result of list, stopping at the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2)])
        Ok(value=[1, 2])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for item in results:
        if isinstance(item, Err):
            return item
        values.append(item.value)
    return Ok(values)
