"""Stateless constructors for Generator values.

Leaf combinators (bounded_int, booleans, integers, one_of, choose,
frequency, optional_of) take an optional keyword-only `source`. When None,
the process-wide default source is resolved once, here, and stored in the
generator; later calls to set_default_source() do not affect it.

Composite combinators (pair_of, tuple_of, list_of, sets_of, dicts_of) draw
from their operands in argument order. Their collection lengths come from a
size generator and are filled iteratively, never by self-recursion.

All parameters are validated eagerly. Invalid values raise
ConfigurationError before any draw happens.

Python 3.13+.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING, Any

from gencheck.constants import INT32_MAX, INT32_MIN
from gencheck.core import is_strict_int
from gencheck.diagnostics import ConfigurationError, ErrorTemplate

from .generator import Generator
from .source import resolve_source

if TYPE_CHECKING:
    from .source import RandomSource

__all__ = [
    "booleans",
    "bounded_int",
    "choose",
    "constant",
    "dicts_of",
    "frequency",
    "integers",
    "list_of",
    "one_of",
    "optional_of",
    "pair_of",
    "sets_of",
    "tuple_of",
]


# ============================================================================
# Leaf generators
# ============================================================================


def constant[T](value: T) -> Generator[T]:
    """Generator that always returns value. Consumes no randomness."""
    return Generator(lambda: value, label=f"constant({value!r})")


def bounded_int(lo: int, hi: int, *, source: RandomSource | None = None) -> Generator[int]:
    """Uniform integers in [lo, hi).

    Raises:
        ConfigurationError: If lo or hi is not an int, or hi <= lo
    """
    if not is_strict_int(lo):
        raise ConfigurationError(ErrorTemplate.non_integer_bound("lo", lo))
    if not is_strict_int(hi):
        raise ConfigurationError(ErrorTemplate.non_integer_bound("hi", hi))
    if hi <= lo:
        raise ConfigurationError(ErrorTemplate.invalid_range(lo, hi))
    src = resolve_source(source)

    def draw() -> int:
        return src.next_int(lo, hi)

    return Generator(draw, source=src, label=f"bounded_int({lo}, {hi})")


def booleans(*, source: RandomSource | None = None) -> Generator[bool]:
    """Uniform booleans."""
    src = resolve_source(source)
    return Generator(src.next_bool, source=src, label="booleans()")


def integers(*, source: RandomSource | None = None) -> Generator[int]:
    """Uniform integers over the signed 32-bit range (both ends inclusive)."""
    return bounded_int(INT32_MIN, INT32_MAX + 1, source=source)


def one_of[T](choices: Sequence[T], *, source: RandomSource | None = None) -> Generator[T]:
    """Uniform choice among fixed values.

    The sequence is copied at construction; later mutation of the caller's
    sequence is not observed.

    Raises:
        ConfigurationError: If choices is empty
    """
    items = tuple(choices)
    if not items:
        raise ConfigurationError(ErrorTemplate.empty_choices("choices"))
    index = bounded_int(0, len(items), source=source)
    return Generator(
        index.map(items.__getitem__).generate,
        source=index.source,
        label=f"one_of({list(items)!r})",
    )


def choose[T](*generators: Generator[T], source: RandomSource | None = None) -> Generator[T]:
    """Pick one of the generators uniformly, then draw from it.

    Raises:
        ConfigurationError: If no generators are given
    """
    if not generators:
        raise ConfigurationError(ErrorTemplate.empty_choices("generators"))
    picker = one_of(generators, source=source)
    return picker.flat_map(lambda g: g)._derive(
        picker.source,
        f"choose({len(generators)} generators)",
        max(g.recursion_depth for g in generators),
    )


def frequency[T](
    weighted: Sequence[tuple[int, Generator[T]]], *, source: RandomSource | None = None
) -> Generator[T]:
    """Pick a generator with probability proportional to its weight.

    Args:
        weighted: (weight, generator) pairs; weights must be positive ints

    Raises:
        ConfigurationError: If weighted is empty or a weight is not positive
    """
    entries = tuple(weighted)
    if not entries:
        raise ConfigurationError(ErrorTemplate.empty_choices("weighted"))
    cumulative: list[int] = []
    total = 0
    for weight, _ in entries:
        if not is_strict_int(weight) or weight <= 0:
            raise ConfigurationError(ErrorTemplate.invalid_weight(weight))
        total += weight
        cumulative.append(total)

    def pick(ticket: int) -> Generator[T]:
        return entries[bisect_right(cumulative, ticket)][1]

    ticket = bounded_int(0, total, source=source)
    return ticket.flat_map(pick)._derive(
        ticket.source,
        f"frequency({len(entries)} generators)",
        max(g.recursion_depth for _, g in entries),
    )


def optional_of[T](
    generator: Generator[T], *, source: RandomSource | None = None
) -> Generator[T | None]:
    """None or a draw from generator, chosen by a fair coin."""
    absent: Generator[T | None] = constant(None)
    coin = booleans(source=source)
    return coin.flat_map(lambda present: generator if present else absent)._derive(
        coin.source, f"optional_of({generator.label})", generator.recursion_depth
    )


# ============================================================================
# Composite generators
# ============================================================================


def pair_of[A, B](first: Generator[A], second: Generator[B]) -> Generator[tuple[A, B]]:
    """Independent pair: draw first, then second.

    The pair reports the source of first, or of second when first has none.
    """
    composed = first.flat_map(lambda a: second.map(lambda b: (a, b)))
    return composed._derive(
        first.source if first.source is not None else second.source,
        f"pair_of({first.label}, {second.label})",
        max(first.recursion_depth, second.recursion_depth),
    )


def tuple_of(*generators: Generator[Any]) -> Generator[tuple[Any, ...]]:
    """Independent tuple, one draw per generator, in argument order."""
    parts = tuple(generators)
    source = next((g.source for g in parts if g.source is not None), None)

    def draw() -> tuple[Any, ...]:
        return tuple(g.generate() for g in parts)

    return Generator(
        draw,
        source=source,
        label=f"tuple_of({len(parts)} generators)",
        recursion_depth=max((g.recursion_depth for g in parts), default=0),
    )


def _draw_size(size: Generator[int]) -> int:
    n = size.generate()
    if not is_strict_int(n) or n < 0:
        raise ConfigurationError(ErrorTemplate.negative_size(n))
    return n


def list_of[T](element: Generator[T], size: Generator[int]) -> Generator[list[T]]:
    """Lists whose length is drawn from size, elements drawn in order.

    Raises:
        ConfigurationError: From generate(), if size draws a negative or
            non-integer length
    """

    def draw() -> list[T]:
        n = _draw_size(size)
        return [element.generate() for _ in range(n)]

    return Generator(
        draw,
        source=size.source if size.source is not None else element.source,
        label=f"list_of({element.label}, {size.label})",
        recursion_depth=max(element.recursion_depth, size.recursion_depth),
    )


def sets_of[T: Hashable](element: Generator[T], size: Generator[int]) -> Generator[frozenset[T]]:
    """Frozensets built from size draws of element.

    Duplicate draws collapse, so the set may be smaller than the drawn size.
    """
    return list_of(element, size).map(frozenset)


def dicts_of[K: Hashable, V](
    keys: Generator[K], values: Generator[V], size: Generator[int]
) -> Generator[dict[K, V]]:
    """Dicts built from size drawn (key, value) pairs.

    Later pairs overwrite earlier ones with an equal key.
    """
    return list_of(pair_of(keys, values), size).map(dict)
