"""Selector wrappers: maybe_selector, result_selector and Selection."""

from selector_monads.selectors.maybe import MaybeSelector, maybe_selector
from selector_monads.selectors.result import ResultSelector, result_selector
from selector_monads.selectors.selection import Selection, container_of

__all__ = [
    "MaybeSelector",
    "ResultSelector",
    "Selection",
    "container_of",
    "maybe_selector",
    "result_selector",
]
