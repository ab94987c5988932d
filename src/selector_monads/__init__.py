"""selector-monads: Maybe and Result containers with chainable selectors.

Flat imports (preferred):
    from selector_monads import Maybe, Just, Nothing, maybe
    from selector_monads import Result, Ok, Err, result
    from selector_monads import maybe_selector, result_selector

Submodule imports (for organization):
    from selector_monads.types import Maybe, Result
    from selector_monads.selectors import maybe_selector, Selection
    from selector_monads.errors import InvalidArgumentError
"""

# Configuration
from selector_monads._config import LibraryConfig, get_config, init

# Errors
from selector_monads.errors import (
    InvalidArgumentError,
    UndefinedResultError,
    ValueAbsentError,
)

# Selectors
from selector_monads.selectors import (
    MaybeSelector,
    ResultSelector,
    Selection,
    container_of,
    maybe_selector,
    result_selector,
)

# Types
from selector_monads.types import (
    Err,
    Just,
    Maybe,
    Nothing,
    NothingType,
    Ok,
    Result,
    err,
    is_error,
    is_maybe,
    is_result,
    just,
    maybe,
    nothing,
    ok,
    result,
)

__all__ = [
    "Err",
    "InvalidArgumentError",
    "Just",
    "LibraryConfig",
    "Maybe",
    "MaybeSelector",
    "Nothing",
    "NothingType",
    "Ok",
    "Result",
    "ResultSelector",
    "Selection",
    "UndefinedResultError",
    "ValueAbsentError",
    "container_of",
    "err",
    "get_config",
    "init",
    "is_error",
    "is_maybe",
    "is_result",
    "just",
    "maybe",
    "maybe_selector",
    "nothing",
    "ok",
    "result",
    "result_selector",
]
