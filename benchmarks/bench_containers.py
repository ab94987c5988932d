"""Benchmarks for Maybe and Result.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from selector_monads import Just, Nothing, Ok, maybe, result


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark container creation."""

    def test_just_creation(self, benchmark):
        """Benchmark Just creation (includes the None check)."""
        benchmark(Just, 42)

    def test_maybe_smart_creation(self, benchmark):
        """Benchmark maybe() on a present value."""
        benchmark(maybe, 42)

    def test_ok_creation(self, benchmark):
        """Benchmark Ok creation (includes the exception check)."""
        benchmark(Ok, 42)

    def test_result_smart_creation(self, benchmark):
        """Benchmark result() on a plain value."""
        benchmark(result, 42)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark map/flat_map chains."""

    def test_just_map_chain(self, benchmark):
        """Benchmark three chained Just.map calls."""
        j = Just(5)
        benchmark(lambda: j.map(lambda x: x + 1).map(lambda x: x * 2).map(str))

    def test_nothing_map_chain(self, benchmark):
        """Benchmark three chained Nothing.map calls."""
        benchmark(lambda: Nothing.map(str).map(str).map(str))

    def test_ok_flat_map(self, benchmark):
        """Benchmark Ok.flat_map."""
        o = Ok(5)
        benchmark(o.flat_map, Ok)
