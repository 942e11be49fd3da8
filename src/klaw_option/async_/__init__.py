"""Async utilities: AsyncResult, the awaitable outcome consumed by Option.transpose()."""

from klaw_option.async_.result import AsyncResult

__all__ = ['AsyncResult']
