"""Pytest configuration and shared fixtures for klaw-option tests."""

import pytest

from klaw_option import _config
from klaw_option._logging import clear_log_hooks


@pytest.fixture
def fresh_config(monkeypatch: pytest.MonkeyPatch):
    """Reset the global configuration, log hooks and KLAW_OPTION_* variables."""
    monkeypatch.delenv('KLAW_OPTION_TRACE', raising=False)
    monkeypatch.delenv('KLAW_OPTION_LOG_LEVEL', raising=False)
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_option import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample empty option for testing."""
    from klaw_option import Nothing

    return Nothing()


class CallCounter:
    """Wrap a function and count how often it is called."""

    def __init__(self, func):
        self.func = func
        self.calls: list[tuple] = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.func(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter():
    """Factory fixture: counter(func) returns a CallCounter wrapping func."""
    return CallCounter
