"""Result type: Ok[T] | Err[E] for values that may instead be an exception."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from selector_monads.errors import InvalidArgumentError

if TYPE_CHECKING:
    from selector_monads.types.maybe import Maybe, NothingType

__all__ = [
    "Err",
    "Ok",
    "Result",
    "err",
    "is_error",
    "is_result",
    "ok",
    "result",
]


def is_error(value: object) -> TypeIs[BaseException]:
    """Return True if value is an exception instance."""
    return isinstance(value, BaseException)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Any value except an exception instance is a valid payload, None
    included.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok(None).get() is None
        True
    """

    value: T

    is_ok = True

    def __post_init__(self) -> None:
        if is_error(self.value):
            raise InvalidArgumentError("Ok", "exception values are not allowed")

    def map[U](self, f: Callable[[T], U | BaseException], /) -> Result[U]:
        """Transform the value, re-checking the result for an exception.

        Args:
            f: Function to apply to the value.

        Returns:
            Ok(f(value)), or Err if f returned an exception instance.
        """
        return result(f(self.value))

    def flat_map[U, E: BaseException](self, f: Callable[[T], Result[U, E]], /) -> Result[U, E]:
        """Apply a function that itself returns a Result.

        Also known as bind. The returned Result is passed through untouched.
        """
        return f(self.value)

    def for_each(self, f: Callable[[T], object], /) -> None:
        """Call f on the value for its side effect."""
        f(self.value)

    def use(self, f: Callable[[T], object], /) -> None:
        """Alias for for_each()."""
        f(self.value)

    def get(self) -> T:
        """Return the value. Never fails for Ok."""
        return self.value

    def get_or(self, default: T) -> T:  # noqa: ARG002
        """Return the value, ignoring the default."""
        return self.value

    def get_error(self) -> None:
        """Return None since there is no error."""
        return None

    def get_value(self) -> T:
        """Return the value."""
        return self.value

    def join[B](self, on_err: Callable[[Any], B], on_ok: Callable[[T], B]) -> B:  # noqa: ARG002
        """Coalesce into another type by calling on_ok(value)."""
        return on_ok(self.value)

    def to_maybe(self) -> Maybe[T]:
        """Convert to Maybe. An Ok(None) becomes Nothing."""
        from selector_monads.types.maybe import maybe

        return maybe(self.value)


class Err[E: BaseException](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an exception.

    Every operation except get(), get_error() and join() is a no-op that
    returns this same Err.

    Examples:
        >>> e = Err(ValueError("fail"))
        >>> e.map(str.upper) is e
        True
        >>> e.join(lambda exc: str(exc), str.upper)
        'fail'
    """

    error: E

    is_ok = False

    def __post_init__(self) -> None:
        if not is_error(self.error):
            raise InvalidArgumentError("Err", "only exception values are allowed")

    @property
    def value(self) -> E:
        """The wrapped exception."""
        return self.error

    def map(self, _f: Callable[[Any], object], /) -> Err[E]:
        """Return self without calling f."""
        return self

    def flat_map(self, _f: Callable[[Any], Result[Any, Any]], /) -> Err[E]:
        """Return self without calling f."""
        return self

    def for_each(self, _f: Callable[[Any], object], /) -> None:
        """Do nothing."""

    def use(self, _f: Callable[[Any], object], /) -> None:
        """Alias for for_each()."""

    def get(self) -> NoReturn:
        """Raise the wrapped exception."""
        raise self.error

    def get_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def get_error(self) -> E:
        """Return the wrapped exception."""
        return self.error

    def get_value(self) -> None:
        """Return None since there is no value."""
        return None

    def join[B](self, on_err: Callable[[E], B], on_ok: Callable[[Any], B]) -> B:  # noqa: ARG002
        """Coalesce into another type by calling on_err(error)."""
        return on_err(self.error)

    def to_maybe(self) -> NothingType:
        """Convert to Maybe, dropping the error."""
        from selector_monads.types.maybe import Nothing

        return Nothing


type Result[T, E = Exception] = Ok[T] | Err[E]


def result[T](value: T | BaseException) -> Result[T, BaseException]:
    """Create a Result, routing exception instances to Err.

    Unlike maybe(), None is a valid Ok payload here.

    Examples:
        >>> result(1)
        Ok(value=1)
        >>> result(None)
        Ok(value=None)
        >>> result(ValueError("fail")).is_ok
        False
    """
    if is_error(value):
        return Err(value)
    return Ok(value)


def ok[T](value: T) -> Ok[T]:
    """Create an Ok. Raises InvalidArgumentError if value is an exception."""
    return Ok(value)


def err[E: BaseException](error: E) -> Err[E]:
    """Create an Err. Raises InvalidArgumentError if error is not an exception."""
    return Err(error)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True if value is a Result.

    The check is keyed on the `is_ok` tag, so selections built by
    result_selector() are recognized as well.
    """
    return isinstance(getattr(value, "is_ok", None), bool)
