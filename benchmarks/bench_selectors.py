"""Benchmarks for selector invocation.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from selector_monads import Just, maybe_selector, result_selector

STATE = {"users": {"1": {"profile_url": "http://website.test/user/1/profile"}}}


@maybe_selector
def maybe_user(state, result):
    return {"profile_url": lambda: result.map(lambda user: user["profile_url"])}


@result_selector
def result_user(state, result):
    return {"profile_url": lambda: result.map(lambda user: user["profile_url"])}


class TestSelectorInvocation:
    """Benchmark building and reading selections."""

    def test_maybe_selector_raw_value(self, benchmark):
        """Benchmark a maybe selector wrapping a raw value."""
        benchmark(lambda: maybe_user(STATE, STATE["users"]["1"]).profile_url())

    def test_maybe_selector_container(self, benchmark):
        """Benchmark a maybe selector given an existing Just."""
        user = Just(STATE["users"]["1"])
        benchmark(lambda: maybe_user(STATE, user).profile_url())

    def test_result_selector_missing(self, benchmark):
        """Benchmark a result selector given no result."""
        benchmark(lambda: result_user(STATE).profile_url())
