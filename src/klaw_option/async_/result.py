"""AsyncResult: an awaitable outcome for async-aware Result operations.

An AsyncResult stored inside an Option is what Option.transpose() treats as
an asynchronous outcome: it is awaited once to obtain the underlying Ok/Err.

Example:
    ```python
    async def lookup(key: str) -> Result[int]:
        ...

    pending = Some(AsyncResult(lookup('a')).amap(lambda n: n + 1))
    outcome = await pending.transpose()  # Ok(Some(...)) or Err(Failure(...))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import TYPE_CHECKING, Any

import anyio

from klaw_option.result import Err, Ok, Result

if TYPE_CHECKING:
    from klaw_option.option import Option

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Async-aware wrapper around an Awaitable[Result[T, E]].

    Transformation methods return new AsyncResult instances, so a chain is
    only executed when the final one is awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Awaiting it twice raises RuntimeError. Wrap a Task/Future, or use
        from_ok/from_err/from_result per await, when the value is shared.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to an existing Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value once resolved.

        Example:
            ```python
            assert await AsyncResult.from_ok(5).amap(lambda x: x * 2) == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Ok(f(result.value))
            return result

        return AsyncResult(_mapped())

    def aand_then[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain a sync Result-returning function once resolved."""

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return f(result.value)
            return result  # type: ignore[return-value]

        return AsyncResult(_chained())

    def ais_ok(self) -> Coroutine[Any, Any, bool]:
        """Resolve and report whether the outcome is Ok."""

        async def _is_ok() -> bool:
            result = await self._awaitable
            return result.is_ok()

        return _is_ok()

    def ais_err(self) -> Coroutine[Any, Any, bool]:
        async def _is_err() -> bool:
            result = await self._awaitable
            return result.is_err()

        return _is_err()

    def aunwrap(self) -> Coroutine[Any, Any, T]:
        """Resolve and unwrap, raising like Err.unwrap() on failure."""

        async def _unwrap() -> T:
            result = await self._awaitable
            return result.unwrap()

        return _unwrap()

    def aunwrap_err(self) -> Coroutine[Any, Any, E]:
        async def _unwrap_err() -> E:
            result = await self._awaitable
            return result.unwrap_err()

        return _unwrap_err()

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        async def _unwrap_or() -> T:
            result = await self._awaitable
            if isinstance(result, Ok):
                return result.value
            return default

        return _unwrap_or()

    def aok(self) -> Coroutine[Any, Any, Option[T]]:
        """Resolve and convert to Option: Some(value) for Ok, else Nothing."""

        async def _ok() -> Option[T]:
            result = await self._awaitable
            return result.ok()

        return _ok()

    def azip[U](self, other: AsyncResult[U, E]) -> AsyncResult[tuple[T, U], E]:
        """Resolve both outcomes concurrently and pair their values.

        If either is Err, the first Err by position (self, then other) wins.
        """

        async def _zipped() -> Result[tuple[T, U], E]:
            results: dict[str, Result[Any, E]] = {}

            async def run(key: str, awaitable: Awaitable[Result[Any, E]]) -> None:
                results[key] = await awaitable

            async with anyio.create_task_group() as tg:
                tg.start_soon(run, 'self', self._awaitable)
                tg.start_soon(run, 'other', other._awaitable)

            first, second = results['self'], results['other']
            if isinstance(first, Err):
                return first
            if isinstance(second, Err):
                return second
            return Ok((first.value, second.value))

        return AsyncResult(_zipped())

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
