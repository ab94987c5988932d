"""maybe_selector: lift a selector factory over the Maybe container."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any

from selector_monads._config import get_config
from selector_monads._logging import get_logger
from selector_monads.selectors.selection import Selection, container_of
from selector_monads.types.maybe import Maybe, Nothing, is_maybe, maybe

__all__ = ["MaybeSelector", "maybe_selector"]

logger = get_logger(__name__)

type MaybeSelector[S, T] = Callable[[S, T | Maybe[T] | None], Selection[Maybe[T]]]


def _normalize(value: Any) -> tuple[Maybe[Any], str]:
    if value is None:
        return Nothing, "missing"
    if is_maybe(value):
        return container_of(value), "container"
    return maybe(value), "wrapped"


def maybe_selector[S, T](
    factory: Callable[[S, Maybe[T]], Mapping[str, Callable[..., Any]]],
) -> MaybeSelector[S, T]:
    """Wrap a selector factory so it can be chained over a Maybe.

    The returned selector takes the state and a result that may be None,
    a raw value, or an existing Maybe (or selection). None becomes
    Nothing, a Maybe is used as is, and anything else goes through
    maybe(). The factory is called with the state and that container,
    and the accessors it returns are merged over the container's own
    operations.

    Examples:
        >>> @maybe_selector
        ... def user(state, result):
        ...     return {"name": lambda: result.map(lambda u: u.get("name"))}
        >>> user({}, {"name": "ada"}).name().get()
        'ada'
        >>> user({}, None).name().value is None
        True
    """

    @functools.wraps(factory)
    def selector(state: S, result: T | Maybe[T] | None = None) -> Selection[Maybe[T]]:
        container, source = _normalize(result)
        if get_config().trace_selectors:
            logger.debug(
                "selector.invoked",
                selector=getattr(factory, "__qualname__", repr(factory)),
                family="maybe",
                variant="nothing" if container.is_nothing else "just",
                source=source,
            )
        return Selection(container, factory(state, container))

    return selector
