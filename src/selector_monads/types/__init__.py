"""Core types: Maybe (Just, Nothing) and Result (Ok, Err)."""

from selector_monads.types.maybe import (
    Just,
    Maybe,
    Nothing,
    NothingType,
    is_maybe,
    just,
    maybe,
    nothing,
)
from selector_monads.types.result import (
    Err,
    Ok,
    Result,
    err,
    is_error,
    is_result,
    ok,
    result,
)

__all__ = [
    "Err",
    "Just",
    "Maybe",
    "Nothing",
    "NothingType",
    "Ok",
    "Result",
    "err",
    "is_error",
    "is_maybe",
    "is_result",
    "just",
    "maybe",
    "nothing",
    "ok",
    "result",
]
