"""Monadic sampler abstraction.

Generator[T] wraps a zero-argument draw procedure. Everything else in the
library is built from one primitive, generate(), plus the ability to embed
one generator's output in another:

    map       apply a pure function to each draw
    flat_map  choose the next generator from the drawn value
    filter    rejection sampling with a bounded retry count

Derived generators capture explicit references to their parent and
function. Nothing is memoized: every generate() call is an independent draw,
and composing never mutates the operands.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from itertools import islice
from typing import TYPE_CHECKING

from gencheck.constants import DEFAULT_MAX_RETRIES
from gencheck.core import require_non_negative_int, require_positive_int
from gencheck.diagnostics import ErrorTemplate, RejectionExhaustedError

if TYPE_CHECKING:
    from .source import RandomSource

__all__ = ["Generator"]

logger = logging.getLogger(__name__)


def _describe(func: Callable[..., object]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


class Generator[T]:
    """Composable sampler producing one value of type T per generate() call.

    Attributes:
        source: RandomSource the generator (or its first parent) draws from,
            None for generators that consume no randomness
        label: Human-readable description of how the generator was built
        recursion_depth: Depth-budget levels a draw may nest, summed across
            nested recursive generators

    Example:
        >>> from gencheck import PythonRandomSource, bounded_int
        >>> dice = bounded_int(1, 7, source=PythonRandomSource(seed=1))
        >>> doubled = dice.map(lambda x: x * 2)
        >>> 2 <= doubled.generate() <= 12
        True
    """

    __slots__ = ("_draw", "_label", "_recursion_depth", "_source")

    def __init__(
        self,
        draw: Callable[[], T],
        *,
        source: RandomSource | None = None,
        label: str | None = None,
        recursion_depth: int = 0,
    ) -> None:
        """Initialize Generator.

        Args:
            draw: Procedure returning one fresh sample per call
            source: RandomSource used by draw, recorded for reproducibility
            label: Description shown in repr (default: draw's qualname)
            recursion_depth: Depth-budget levels one draw may nest (default: 0)
        """
        self._draw = draw
        self._source = source
        self._label = label if label is not None else _describe(draw)
        self._recursion_depth = recursion_depth

    @property
    def source(self) -> RandomSource | None:
        """RandomSource this generator draws from, if known."""
        return self._source

    @property
    def label(self) -> str:
        """Description of how the generator was built."""
        return self._label

    @property
    def recursion_depth(self) -> int:
        """Most depth-budget levels a single draw can nest.

        Zero for generators built without recursive(). Composite
        combinators report the deepest of their operands, and recursive()
        adds its budget on top of whatever its terminal and step generators
        report, so nested recursive generators are checked as a whole.
        """
        return self._recursion_depth

    def with_recursion_depth(self, depth: int) -> Generator[T]:
        """Copy of this generator reporting depth as its recursion_depth.

        flat_map cannot see the generators its function will return. When
        those are recursive, declare their depth here so an enclosing
        recursive() accounts for it.

        Raises:
            ConfigurationError: If depth is not a non-negative int
        """
        declared = require_non_negative_int(depth, ErrorTemplate.negative_depth_budget)
        return self._derive(self._source, self._label, declared)

    def _derive(
        self, source: RandomSource | None, label: str, recursion_depth: int
    ) -> Generator[T]:
        # Shares the draw procedure, so no extra frame per generate().
        return Generator(
            self._draw, source=source, label=label, recursion_depth=recursion_depth
        )

    def generate(self) -> T:
        """Draw one sample."""
        return self._draw()

    def map[U](self, func: Callable[[T], U]) -> Generator[U]:
        """Return a generator applying func to each draw of this one.

        Consumes exactly the randomness this generator consumes.
        """
        parent = self

        def draw() -> U:
            return func(parent.generate())

        return Generator(
            draw,
            source=self._source,
            label=f"{self._label}.map({_describe(func)})",
            recursion_depth=self._recursion_depth,
        )

    def flat_map[U](self, func: Callable[[T], Generator[U]]) -> Generator[U]:
        """Return a generator that draws x here, then draws from func(x).

        The generator returned by func may differ on every call, which lets
        the shape of the second draw depend on the first. The result reports
        this generator's recursion_depth; see with_recursion_depth() when
        func returns recursive generators.
        """
        parent = self

        def draw() -> U:
            return func(parent.generate()).generate()

        return Generator(
            draw,
            source=self._source,
            label=f"{self._label}.flat_map({_describe(func)})",
            recursion_depth=self._recursion_depth,
        )

    def filter(
        self, predicate: Callable[[T], bool], max_retries: int = DEFAULT_MAX_RETRIES
    ) -> Generator[T]:
        """Return a generator yielding only draws that satisfy predicate.

        Each generate() call draws at most max_retries times.

        Args:
            predicate: Acceptance test
            max_retries: Draw cap per generated value (must be positive)

        Raises:
            ConfigurationError: If max_retries is not a positive int (raised here)
            RejectionExhaustedError: From generate(), when no draw within the
                cap satisfies predicate
        """
        cap = require_positive_int(max_retries, ErrorTemplate.invalid_retry_cap)
        parent = self

        def draw() -> T:
            for _ in range(cap):
                value = parent.generate()
                if predicate(value):
                    return value
            logger.warning(
                "Filter %s rejected %d consecutive draws from %s",
                _describe(predicate),
                cap,
                parent.label,
            )
            raise RejectionExhaustedError(
                ErrorTemplate.rejection_exhausted(cap), attempts=cap
            )

        return Generator(
            draw,
            source=self._source,
            label=f"{self._label}.filter({_describe(predicate)})",
            recursion_depth=self._recursion_depth,
        )

    def sample(self, count: int) -> list[T]:
        """Return count independent draws, in order."""
        n = require_non_negative_int(count, ErrorTemplate.invalid_count)
        return list(islice(self, n))

    def __iter__(self) -> Iterator[T]:
        """Iterate over an endless stream of independent draws."""
        while True:
            yield self._draw()

    def __repr__(self) -> str:
        return f"Generator({self._label})"
