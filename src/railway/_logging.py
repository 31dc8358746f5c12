"""Structured logging for the railway library.

The only thing railway logs is an ``AsyncResult`` observation hook that
raised. The chain swallows such exceptions; this module is where they become
visible once ``railway.init`` has been given a log level.

Output goes through structlog's ProcessorFormatter, so records from structlog
and from plain stdlib loggers of the host application render the same way.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_log_hooks: list[LogHook] = []


def _dispatch_to_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing a copy of each entry to the registered hooks."""
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: S110
            pass
    return event_dict


def _enrichers() -> list[Any]:
    """Processors applied to both structlog entries and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _dispatch_to_hooks,
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'WARNING', *, json_output: bool = True) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: Render JSON lines when True, console output otherwise.
    """
    structlog.configure(
        processors=[
            *_enrichers(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every log entry's event dict.

    Useful for metrics, alerting, or capturing entries in tests. A hook that
    raises is ignored.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
