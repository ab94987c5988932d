"""Exception types raised by the containers and selectors."""

from __future__ import annotations

__all__ = [
    "InvalidArgumentError",
    "UndefinedResultError",
    "ValueAbsentError",
]


class InvalidArgumentError(TypeError):
    """A direct constructor received a value that violates its contract.

    Raised by Just (None), Ok (an exception) and Err (a non-exception).
    """

    def __init__(self, constructor: str, reason: str) -> None:
        self.constructor = constructor
        self.reason = reason
        super().__init__(f"invalid argument provided to {constructor}: {reason}")


class ValueAbsentError(TypeError):
    """get() was called on Nothing."""

    def __init__(self) -> None:
        super().__init__("value is absent")


class UndefinedResultError(ValueError):
    """A result selector was invoked without a result."""

    def __init__(self) -> None:
        super().__init__("result is undefined")
