"""Selection: a container merged with a mapping of named accessors.

Attribute access is forwarded to the accessors first and the container
second, so a selection behaves like the Maybe or Result it wraps while
also exposing the accessors a selector factory defined.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

__all__ = ["Selection", "container_of"]


class Selection[C]:
    """A container plus named accessors, built fresh per selector call.

    Accessors override container operations of the same name.

    Examples:
        >>> from selector_monads import Just
        >>> s = Selection(Just(2), {"double": lambda: Just(4)})
        >>> s.double().get()
        4
        >>> s.map(lambda x: x + 1)
        Just(value=3)
        >>> s == Just(2)
        True
    """

    __slots__ = ("_container", "_selectors")

    def __init__(self, container: C, selectors: Mapping[str, Callable[..., Any]]) -> None:
        self._container = container
        self._selectors = dict(selectors)

    def __getattr__(self, name: str) -> Any:
        # Unset slots land here during copy/pickle.
        if name in Selection.__slots__ or name.startswith("__"):
            raise AttributeError(name)
        selectors = self._selectors
        if name in selectors:
            return selectors[name]
        return getattr(self._container, name)

    def __dir__(self) -> list[str]:
        return sorted({*dir(self._container), *self._selectors})

    def __eq__(self, other: object) -> bool:
        return self._container == container_of(other)

    def __hash__(self) -> int:
        return hash(self._container)

    def __repr__(self) -> str:
        return f"Selection({self._container!r}, selectors={sorted(self._selectors)!r})"


def container_of(value: Any) -> Any:
    """Return the container underneath a Selection, or value unchanged."""
    if isinstance(value, Selection):
        return value._container  # noqa: SLF001
    return value
