"""Structured logging configuration for selector-monads.

Uses structlog's ProcessorFormatter so structlog events and stdlib records
from other libraries render through the same JSON or console pipeline.
The containers never log; selectors emit debug events only when tracing
is enabled (see selector_monads._config).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            pass  # a failing hook must not break logging
    return event_dict


def _shared_processors() -> list[Any]:
    """Processors shared between structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        _hook_processor,
    ]


def _renderer(json_output: bool) -> Any:  # noqa: FBT001
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: Emit JSON lines if True, colored console output otherwise.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name, usually the caller's __name__.

    Returns:
        A structlog BoundLogger (lazy until first use).
    """
    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of every log event dict.

    Hooks only see events once configure_logging() has installed the
    processor chain.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
