"""Library configuration: LibraryConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from selector_monads._logging import configure_logging

__all__ = [
    "LibraryConfig",
    "get_config",
    "init",
    "reset",
]

ENV_LOG_LEVEL = "SELECTOR_MONADS_LOG_LEVEL"
ENV_LOG_FORMAT = "SELECTOR_MONADS_LOG_FORMAT"
ENV_TRACE = "SELECTOR_MONADS_TRACE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibraryConfig:
    """Configuration for selector-monads.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or for the console (False).
        trace_selectors: Emit a debug event on every selector invocation.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_selectors: bool = False


_config: LibraryConfig | None = None
_detected: LibraryConfig | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get(ENV_LOG_LEVEL, "").strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from the environment.

    "json" (the default) or "console". Anything else warns and falls back
    to JSON.
    """
    fmt = os.environ.get(ENV_LOG_FORMAT, "").strip().lower()
    if fmt in ("", "json"):
        return True
    if fmt == "console":
        return False
    logger.warning("Unknown %s value '%s', defaulting to json", ENV_LOG_FORMAT, fmt)
    return True


def _detect_trace() -> bool:
    return os.environ.get(ENV_TRACE, "").strip().lower() in _TRUTHY


def _from_environment() -> LibraryConfig:
    return LibraryConfig(
        log_level=_detect_log_level(),
        json_output=_detect_json_output(),
        trace_selectors=_detect_trace(),
    )


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    trace_selectors: bool | None = None,
) -> LibraryConfig:
    """Initialize selector-monads.

    Arguments left as None are read from the environment
    (SELECTOR_MONADS_LOG_LEVEL, SELECTOR_MONADS_LOG_FORMAT,
    SELECTOR_MONADS_TRACE).

    Args:
        log_level: Logging level. If resolved, logging is configured.
        json_output: JSON (True) or console (False) log rendering.
        trace_selectors: Log every selector invocation at debug level.

    Returns:
        The LibraryConfig that was set.

    Example:
        ```python
        from selector_monads import init

        init("DEBUG", json_output=False, trace_selectors=True)
        ```
    """
    global _config  # noqa: PLW0603

    detected = _from_environment()
    _config = LibraryConfig(
        log_level=log_level.upper() if log_level is not None else detected.log_level,
        json_output=detected.json_output if json_output is None else json_output,
        trace_selectors=detected.trace_selectors if trace_selectors is None else trace_selectors,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> LibraryConfig:
    """Get the current configuration.

    Before init() is called the environment is read once and cached until
    reset(). Logging is never configured from here.
    """
    global _detected  # noqa: PLW0603

    if _config is not None:
        return _config
    if _detected is None:
        _detected = _from_environment()
    return _detected


def reset() -> None:
    """Forget the configuration set by init() and the cached environment."""
    global _config, _detected  # noqa: PLW0603
    _config = None
    _detected = None
