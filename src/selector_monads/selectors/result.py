"""result_selector: lift a selector factory over the Result container."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any

from selector_monads._config import get_config
from selector_monads._logging import get_logger
from selector_monads.errors import UndefinedResultError
from selector_monads.selectors.selection import Selection, container_of
from selector_monads.types.result import Err, Result, is_result, result

__all__ = ["ResultSelector", "result_selector"]

logger = get_logger(__name__)

type ResultSelector[S, T] = Callable[
    [S, T | Result[T, Any] | BaseException | None], Selection[Result[T, Any]]
]


def _normalize(value: Any) -> tuple[Result[Any, Any], str]:
    # A missing result is a failure for this family, not an empty value.
    if value is None:
        return Err(UndefinedResultError()), "missing"
    if is_result(value):
        return container_of(value), "container"
    return result(value), "wrapped"


def result_selector[S, T](
    factory: Callable[[S, Result[T, Any]], Mapping[str, Callable[..., Any]]],
) -> ResultSelector[S, T]:
    """Wrap a selector factory so it can be chained over a Result.

    Like maybe_selector(), except that a None result becomes
    Err(UndefinedResultError()) ("result is undefined") and raw values,
    exceptions included, go through result().
    """

    @functools.wraps(factory)
    def selector(
        state: S, result: T | Result[T, Any] | BaseException | None = None
    ) -> Selection[Result[T, Any]]:
        container, source = _normalize(result)
        if get_config().trace_selectors:
            logger.debug(
                "selector.invoked",
                selector=getattr(factory, "__qualname__", repr(factory)),
                family="result",
                variant="ok" if container.is_ok else "err",
                source=source,
            )
        return Selection(container, factory(state, container))

    return selector
