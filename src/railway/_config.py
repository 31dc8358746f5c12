"""Library configuration: logging of swallowed observation-hook failures."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from railway._logging import configure_logging

__all__ = [
    'RailwayConfig',
    'get_config',
    'init',
    'reset',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class RailwayConfig:
    """Configuration for the railway library.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "WARNING"). None = silent:
            failures inside AsyncResult observation hooks are dropped without
            a trace.
        json_output: Render log entries as JSON (True) or for the console.
    """

    log_level: str | None = None
    json_output: bool = True

    @property
    def logging_enabled(self) -> bool:
        return self.log_level is not None


_config: RailwayConfig | None = None


def _detect_log_level() -> str | None:
    """Read RAILWAY_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('RAILWAY_LOG_LEVEL', '').strip().upper()
    if not level:
        return None
    if level not in _LOG_LEVELS:
        logging.warning("Unknown RAILWAY_LOG_LEVEL value '%s', defaulting to WARNING", level)
        return 'WARNING'
    return level


def _detect_json_output() -> bool:
    """Read RAILWAY_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get('RAILWAY_LOG_FORMAT', '').strip().lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown RAILWAY_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> RailwayConfig:
    """Initialize the library configuration.

    Unspecified arguments are read from the environment
    (``RAILWAY_LOG_LEVEL``, ``RAILWAY_LOG_FORMAT``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from env, else silent.
        json_output: JSON (True) or console (False) rendering. None = from env.

    Returns:
        The RailwayConfig that was set.

    Example:
        ```python
        import railway

        railway.init(log_level='WARNING', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = RailwayConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> RailwayConfig:
    """Get the current configuration.

    Before any ``init`` call the configuration is read from the environment
    and stored, but logging is left as the host application set it up. Only
    ``init`` installs railway's log handler.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = RailwayConfig(log_level=_detect_log_level(), json_output=_detect_json_output())
    return _config


def reset() -> None:
    """Forget the current configuration; the next ``get_config`` re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
