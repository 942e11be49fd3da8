"""Decorators: @result for bail()-style early returns."""

from klaw_option.decorators.result import result

__all__ = ['result']
