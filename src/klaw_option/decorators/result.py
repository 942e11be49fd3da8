"""@result decorator: turn bail() calls into early returns."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from klaw_option.errors import Propagate

__all__ = ['result']


def result[**P, R](
    func: Callable[P, R] | Callable[P, Awaitable[R]],
) -> Callable[P, R] | Callable[P, Awaitable[R]]:
    """Catch Propagate raised inside func and return the value it carries.

    Inside a decorated function, `opt.bail()` returns the payload of a Some
    and makes the function return the Nothing itself; `res.bail()` does the
    same for Ok/Err. Async functions are detected and wrapped accordingly.

    Example:
        ```python
        @result
        def first_char(name: Option[str]) -> Option[str]:
            value = name.bail()
            return Option.from_(value[:1] or None)

        assert first_char(Nothing()).is_none()
        assert first_char(Some('klaw')) == Some('k')
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[R]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> R:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                return p.value

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value

    return sync_wrapper(func)  # type: ignore[return-value]
