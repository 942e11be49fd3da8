"""Library configuration: OptionConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        trace: Emit debug events for the in-place operations and transpose().
        json_logs: Render logs as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    trace: bool = False
    json_logs: bool = True


# Global configuration (set by init() or lazily from the environment)
_config: OptionConfig | None = None


def _env_trace() -> bool:
    """Read KLAW_OPTION_TRACE, defaulting to off."""
    raw = os.environ.get('KLAW_OPTION_TRACE', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logging.warning("Unknown KLAW_OPTION_TRACE value '%s', tracing disabled", raw)
    return False


def _env_log_level() -> str | None:
    raw = os.environ.get('KLAW_OPTION_LOG_LEVEL', '').strip().upper()
    return raw or None


def init(
    log_level: str | None = None,
    *,
    trace: bool | None = None,
    json_logs: bool = True,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None falls back to
            KLAW_OPTION_LOG_LEVEL, and stays silent if that is unset too.
        trace: Enable trace events. None falls back to KLAW_OPTION_TRACE.
        json_logs: Render logs as JSON instead of console output.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from klaw_option import init

        init(log_level='DEBUG', trace=True, json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _env_log_level()
    _config = OptionConfig(
        log_level=resolved_level,
        trace=_env_trace() if trace is None else trace,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    When init() has not been called, the configuration is read from the
    environment and cached. A KLAW_OPTION_LOG_LEVEL found there configures
    logging the same way init(log_level=...) does.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        level = _env_log_level()
        _config = OptionConfig(log_level=level, trace=_env_trace())
        if level is not None:
            configure_logging(level)
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads it."""
    global _config  # noqa: PLW0603

    _config = None
