"""Maybe type: Just[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from selector_monads.errors import InvalidArgumentError, ValueAbsentError

if TYPE_CHECKING:
    from selector_monads.types.result import Err, Ok

__all__ = [
    "Just",
    "Maybe",
    "Nothing",
    "NothingType",
    "is_maybe",
    "just",
    "maybe",
    "nothing",
]


class Just[T](msgspec.Struct, frozen=True, gc=False):
    """Just variant of Maybe holding a value that is never None.

    Use maybe() when the value may be None; constructing Just directly
    with None is a programming error.

    Examples:
        >>> Just("hello").map(str.upper)
        Just(value='HELLO')
        >>> Just("hello").map(lambda _: None)
        NothingType()
        >>> Just(None)
        Traceback (most recent call last):
        ...
        selector_monads.errors.InvalidArgumentError: invalid argument provided to Just: None is not allowed
    """

    value: T

    is_nothing = False

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError("Just", "None is not allowed")

    def map[U](self, f: Callable[[T], U | None], /) -> Maybe[U]:
        """Transform the value, re-checking the result for absence.

        Args:
            f: Function to apply to the value.

        Returns:
            Just(f(value)), or Nothing if f returned None.
        """
        return maybe(f(self.value))

    def flat_map[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        """Apply a function that itself returns a Maybe.

        The returned Maybe is passed through untouched.

        Examples:
            >>> Just("a").flat_map(lambda a: Just("b").map(lambda b: a == b))
            Just(value=False)
        """
        return f(self.value)

    def for_each(self, f: Callable[[T], object], /) -> None:
        """Call f on the value for its side effect."""
        f(self.value)

    def use(self, f: Callable[[T], object], /) -> None:
        """Alias for for_each()."""
        f(self.value)

    def get(self) -> T:
        """Return the value. Never fails for Just."""
        return self.value

    def get_or(self, default: T) -> T:  # noqa: ARG002
        """Return the value, ignoring the default."""
        return self.value

    def join[B](self, on_nothing: Callable[[], B], on_just: Callable[[T], B]) -> B:  # noqa: ARG002
        """Coalesce into another type by calling on_just(value)."""
        return on_just(self.value)

    def to_result(self) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from selector_monads.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing an absent value.

    This is a singleton in practice; use the `Nothing` constant or
    nothing() rather than instantiating it.

    Examples:
        >>> Nothing.map(str.upper) is Nothing
        True
        >>> Nothing.join(lambda: "no message", str.upper)
        'no message'
    """

    is_nothing = True

    @property
    def value(self) -> None:
        """Always None."""
        return None

    def map(self, _f: Callable[[Any], object], /) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def flat_map(self, _f: Callable[[Any], Maybe[Any]], /) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def for_each(self, _f: Callable[[Any], object], /) -> None:
        """Do nothing."""

    def use(self, _f: Callable[[Any], object], /) -> None:
        """Alias for for_each()."""

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            ValueAbsentError: Always.
        """
        raise ValueAbsentError()

    def get_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def join[B](self, on_nothing: Callable[[], B], on_just: Callable[[Any], B]) -> B:  # noqa: ARG002
        """Coalesce into another type by calling on_nothing() with no arguments."""
        return on_nothing()

    def to_result(self) -> Err[ValueAbsentError]:
        """Convert to Result, returning Err(ValueAbsentError())."""
        from selector_monads.types.result import Err

        return Err(ValueAbsentError())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Just[T] | NothingType


def maybe[T](value: T | None = None) -> Maybe[T]:
    """Create a Maybe from a value that may be None.

    Examples:
        >>> maybe(1)
        Just(value=1)
        >>> maybe(None) is Nothing
        True
    """
    if value is None:
        return Nothing
    return Just(value)


def just[T](value: T) -> Just[T]:
    """Create a Just. Raises InvalidArgumentError if value is None."""
    return Just(value)


def nothing() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def is_maybe(value: object) -> TypeIs[Maybe[Any]]:
    """Return True if value is a Maybe.

    The check is keyed on the `is_nothing` tag, so selections built by
    maybe_selector() are recognized as well.
    """
    return isinstance(getattr(value, "is_nothing", None), bool)
