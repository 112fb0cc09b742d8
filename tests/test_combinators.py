"""Tests for generators/combinators.py.

Python 3.13+.
"""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gencheck import (
    ConfigurationError,
    Generator,
    PythonRandomSource,
    booleans,
    bounded_int,
    choose,
    constant,
    dicts_of,
    frequency,
    get_default_source,
    integers,
    list_of,
    one_of,
    optional_of,
    pair_of,
    set_default_source,
    sets_of,
    tuple_of,
)
from gencheck.constants import INT32_MAX, INT32_MIN
from gencheck.diagnostics import DiagnosticCode
from tests.strategies import choice_pools, empty_int_ranges, int_ranges, seeds

# ============================================================================
# Leaf generators
# ============================================================================


class TestConstant:
    """Test constant()."""

    def test_always_same_value(self) -> None:
        """Every draw returns the value unchanged."""
        marker = object()

        assert all(x is marker for x in constant(marker).sample(50))


class TestBoundedInt:
    """Test bounded_int()."""

    def test_scenario_zero_to_ten(self, source: PythonRandomSource) -> None:
        """bounded_int(0, 10) sampled 1000 times stays in [0, 10)."""
        samples = bounded_int(0, 10, source=source).sample(1000)

        assert all(0 <= x < 10 for x in samples)

    def test_covers_whole_range(self, source: PythonRandomSource) -> None:
        """Both endpoints of a small range are reachable; hi is not."""
        seen = set(bounded_int(3, 6, source=source).sample(500))

        assert seen == {3, 4, 5}

    def test_singleton_range(self, source: PythonRandomSource) -> None:
        """[lo, lo + 1) always yields lo."""
        assert set(bounded_int(7, 8, source=source).sample(20)) == {7}

    @given(bounds=int_ranges(), seed=seeds)
    def test_range_invariant(self, bounds: tuple[int, int], seed: int) -> None:
        """Property: lo <= r < hi for every draw."""
        lo, hi = bounds
        gen = bounded_int(lo, hi, source=PythonRandomSource(seed))

        assert all(lo <= r < hi for r in gen.sample(20))

    @given(bounds=empty_int_ranges())
    def test_empty_range_rejected(self, bounds: tuple[int, int]) -> None:
        """Property: hi <= lo is a configuration error."""
        lo, hi = bounds

        with pytest.raises(ConfigurationError) as exc_info:
            bounded_int(lo, hi)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_RANGE

    @pytest.mark.parametrize(
        ("lo", "hi", "parameter"),
        [(0, 2.5, "hi"), (0, None, "hi"), (False, True, "lo"), (0.5, 3, "lo"), (0, True, "hi")],
    )
    def test_non_integer_bounds_rejected(self, lo: object, hi: object, parameter: str) -> None:
        """Bounds that are not ints fail at construction, not on generate()."""
        with pytest.raises(ConfigurationError) as exc_info:
            bounded_int(lo, hi)  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_RANGE
        assert exc_info.value.diagnostic.parameter == parameter

    def test_captures_default_source_at_construction(self) -> None:
        """source=None binds the current default, which later swaps don't change."""
        first = PythonRandomSource(seed=1)
        set_default_source(first)
        gen = bounded_int(0, 10)

        set_default_source(PythonRandomSource(seed=2))

        assert gen.source is first
        assert get_default_source() is not first


class TestBooleansAndIntegers:
    """Test booleans() and integers()."""

    def test_booleans_yields_both(self, source: PythonRandomSource) -> None:
        """A fair coin shows both faces over 200 flips."""
        assert set(booleans(source=source).sample(200)) == {True, False}

    def test_integers_within_int32(self, source: PythonRandomSource) -> None:
        """integers() stays inside the signed 32-bit range."""
        assert all(INT32_MIN <= x <= INT32_MAX for x in integers(source=source).sample(200))


class TestOneOf:
    """Test one_of()."""

    def test_returns_only_choices(self, source: PythonRandomSource) -> None:
        """Every draw is one of the given values, and all appear."""
        seen = set(one_of(["a", "b", "c"], source=source).sample(300))

        assert seen == {"a", "b", "c"}

    def test_empty_rejected(self) -> None:
        """An empty choice set is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            one_of([])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.EMPTY_CHOICES

    def test_snapshot_of_choices(self, source: PythonRandomSource) -> None:
        """Mutating the caller's list after construction has no effect."""
        choices = [1, 2]
        gen = one_of(choices, source=source)

        choices.append(99)

        assert 99 not in gen.sample(200)

    @given(pool=choice_pools, seed=seeds)
    def test_membership(self, pool: list[int], seed: int) -> None:
        """Property: draws are members of the pool."""
        gen = one_of(pool, source=PythonRandomSource(seed))

        assert all(x in pool for x in gen.sample(10))


class TestChooseAndFrequency:
    """Test choose() and frequency()."""

    def test_choose_draws_from_each(self, source: PythonRandomSource) -> None:
        """choose picks among generators and draws from the chosen one."""
        gen = choose(constant("x"), bounded_int(0, 2, source=source), source=source)

        assert set(gen.sample(300)) == {"x", 0, 1}

    def test_choose_requires_generators(self) -> None:
        """choose() with nothing is a configuration error."""
        with pytest.raises(ConfigurationError):
            choose()

    def test_frequency_respects_weights(self, source: PythonRandomSource) -> None:
        """A 9:1 weighting shows up in the counts."""
        gen = frequency([(9, constant("common")), (1, constant("rare"))], source=source)

        counts = Counter(gen.sample(2000))

        assert counts["common"] > counts["rare"] > 0

    def test_frequency_single_entry(self, source: PythonRandomSource) -> None:
        """One entry is always chosen."""
        assert set(frequency([(3, constant(1))], source=source).sample(20)) == {1}

    @pytest.mark.parametrize("weight", [0, -2, 1.5, True])
    def test_frequency_rejects_bad_weight(self, weight: object) -> None:
        """Weights must be positive ints."""
        with pytest.raises(ConfigurationError) as exc_info:
            frequency([(1, constant(0)), (weight, constant(1))])  # type: ignore[list-item]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_WEIGHT

    def test_frequency_rejects_empty(self) -> None:
        """No entries is a configuration error."""
        with pytest.raises(ConfigurationError):
            frequency([])


class TestOptionalOf:
    """Test optional_of()."""

    def test_yields_none_and_values(self, source: PythonRandomSource) -> None:
        """Both the absent and present cases occur."""
        samples = optional_of(constant(5), source=source).sample(200)

        assert set(samples) == {None, 5}


# ============================================================================
# Composite generators
# ============================================================================


class TestPairAndTuple:
    """Test pair_of() and tuple_of()."""

    def test_pair_draw_order(self) -> None:
        """The first component is drawn before the second."""
        order: list[str] = []
        first = Generator(lambda: order.append("a") or "a")
        second = Generator(lambda: order.append("b") or "b")

        assert pair_of(first, second).generate() == ("a", "b")
        assert order == ["a", "b"]

    def test_pair_components_are_independent(self, source: PythonRandomSource) -> None:
        """Pairing a generator with itself does not correlate the components."""
        die = bounded_int(0, 6, source=source)

        pairs = pair_of(die, die).sample(300)

        assert any(a != b for a, b in pairs)

    def test_pair_is_fresh_per_call(self, source: PythonRandomSource) -> None:
        """Each call redraws both components."""
        gen = pair_of(bounded_int(0, 1000, source=source), bounded_int(0, 1000, source=source))

        assert len(set(gen.sample(50))) > 1

    def test_tuple_of(self) -> None:
        """tuple_of draws each generator once, in order."""
        gen = tuple_of(constant(1), constant("two"), constant(3.0))

        assert gen.generate() == (1, "two", 3.0)

    def test_tuple_of_empty(self) -> None:
        """Zero generators produce the empty tuple."""
        assert tuple_of().generate() == ()

    def test_tuple_of_source(self, source: PythonRandomSource) -> None:
        """The first generator with a source provides it."""
        gen = tuple_of(constant(0), bounded_int(0, 2, source=source))

        assert gen.source is source

    def test_pair_source_falls_back_to_second(self, source: PythonRandomSource) -> None:
        """A pair led by a constant still reports the seeded source of its second part."""
        gen = pair_of(constant("k"), bounded_int(0, 2, source=source))

        assert gen.source is source

    def test_pair_source_prefers_first(self, source: PythonRandomSource) -> None:
        """When both parts carry a source, the first one wins."""
        other = PythonRandomSource(seed=7)
        gen = pair_of(bounded_int(0, 2, source=source), bounded_int(0, 2, source=other))

        assert gen.source is source


class TestListOf:
    """Test list_of()."""

    def test_scenario_fixed_size(self, source: PythonRandomSource) -> None:
        """list_of(bounded_int(0, 5), constant(3)) has 3 elements in [0, 5)."""
        result = list_of(bounded_int(0, 5, source=source), constant(3)).generate()

        assert len(result) == 3
        assert all(0 <= x < 5 for x in result)

    def test_zero_size(self) -> None:
        """Size 0 gives an empty list without drawing elements."""
        drawn: list[int] = []
        element = Generator(lambda: drawn.append(1) or 1)

        assert list_of(element, constant(0)).generate() == []
        assert drawn == []

    def test_large_size_does_not_recurse(self) -> None:
        """Long lists are built iteratively."""
        result = list_of(constant(0), constant(10_000)).generate()

        assert len(result) == 10_000

    def test_negative_size_rejected(self) -> None:
        """A size generator drawing below zero is reported on draw."""
        with pytest.raises(ConfigurationError) as exc_info:
            list_of(constant(0), constant(-1)).generate()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NEGATIVE_SIZE

    @pytest.mark.parametrize("size", [2.0, "3", None, True])
    def test_non_integer_size_rejected(self, size: object) -> None:
        """A size generator drawing a non-int is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            list_of(constant(0), constant(size)).generate()  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NEGATIVE_SIZE
        assert "non-integer" in exc_info.value.diagnostic.message

    def test_elements_in_draw_order(self) -> None:
        """Elements appear in the order they were drawn."""
        counter = iter(range(100))

        assert list_of(Generator(lambda: next(counter)), constant(4)).generate() == [0, 1, 2, 3]

    @given(seed=seeds, max_size=st.integers(1, 30))
    def test_length_bounded_by_size(self, seed: int, max_size: int) -> None:
        """Property: length is a value the size generator can produce."""
        source = PythonRandomSource(seed)
        gen = list_of(booleans(source=source), bounded_int(0, max_size, source=source))

        assert all(0 <= len(xs) < max_size for xs in gen.sample(10))


class TestSetsAndDicts:
    """Test sets_of() and dicts_of()."""

    def test_sets_collapse_duplicates(self) -> None:
        """Repeated elements collapse into one."""
        assert sets_of(constant("a"), constant(5)).generate() == frozenset({"a"})

    def test_sets_size_bound(self, source: PythonRandomSource) -> None:
        """A set never exceeds the drawn size."""
        gen = sets_of(bounded_int(0, 100, source=source), constant(10))

        assert all(len(s) <= 10 for s in gen.sample(50))

    def test_dicts_of(self, source: PythonRandomSource) -> None:
        """Keys and values come from their generators."""
        gen = dicts_of(
            one_of(["k1", "k2", "k3"], source=source),
            bounded_int(0, 3, source=source),
            constant(4),
        )

        for mapping in gen.sample(50):
            assert set(mapping) <= {"k1", "k2", "k3"}
            assert all(0 <= v < 3 for v in mapping.values())
            assert 1 <= len(mapping) <= 3
