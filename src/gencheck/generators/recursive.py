"""Depth-budgeted recursive generators.

A generator for a recursive structure flips a coin at each level to choose
between the terminal case and the recursive case. With a constant coin the
recursion depth is an unbounded random variable, so every recursive
generator here carries a depth budget instead:

    budget == 0   only the terminal case is produced
    budget  > 0   coin flip: terminal case, or the recursive case built
                  from children with budget - 1

The levels are built bottom-up in a loop. The generator for budget d holds
a reference to the one for d - 1 and nothing else recursive, so a draw
descends at most d levels.

Each generator reports the levels its draws may nest as recursion_depth.
A level adds one to the deeper of its terminal and recursive cases, so a
recursive generator drawing from another one carries both budgets. The sum
is checked against the interpreter stack at construction.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gencheck.core import validate_depth_budget, validate_recursion_depth

from .combinators import booleans, constant, pair_of
from .generator import Generator

if TYPE_CHECKING:
    from .source import RandomSource

__all__ = ["cons_lists", "recursive"]

logger = logging.getLogger(__name__)


def recursive[T](
    terminal: Generator[T],
    step: Callable[[Generator[T]], Generator[T]],
    depth_budget: int,
    *,
    source: RandomSource | None = None,
) -> Generator[T]:
    """Build a generator for a recursive structure with bounded depth.

    Args:
        terminal: Generator for the base case
        step: Given the generator one level down, returns the generator for
            the recursive case. It must build children only from its argument.
        depth_budget: Maximum number of recursive steps per draw (>= 0)
        source: RandomSource for the per-level coin flips

    Returns:
        Generator whose draws recurse at most depth_budget times

    Raises:
        ConfigurationError: If depth_budget is negative, not an int, or too
            large for the interpreter stack, alone or added to the
            recursion_depth of the generators it draws from

    Example:
        >>> nested = recursive(constant(0), lambda child: child.map(lambda n: n + 1), 3)
        >>> 0 <= nested.generate() <= 3
        True
    """
    budget = validate_depth_budget(depth_budget)
    coin = booleans(source=source)

    level = terminal
    for depth in range(1, budget + 1):
        level = _branch(coin, terminal, step(level), depth)
    validate_recursion_depth(budget, level.recursion_depth)
    logger.debug("Built recursive generator over %s with budget %d", terminal.label, budget)
    return level


def _branch[T](
    coin: Generator[bool], terminal: Generator[T], deeper: Generator[T], depth: int
) -> Generator[T]:
    def choose(stop: bool) -> Generator[T]:
        return terminal if stop else deeper

    return coin.flat_map(choose)._derive(
        coin.source,
        f"recursive({terminal.label}, budget={depth})",
        max(terminal.recursion_depth, deeper.recursion_depth) + 1,
    )


def cons_lists[T](
    element: Generator[T], depth_budget: int, *, source: RandomSource | None = None
) -> Generator[list[T]]:
    """Lists built as "empty, or head followed by a shorter list".

    Each level flips a coin between the empty list and one more element, so
    a draw has at most depth_budget elements.

    Raises:
        ConfigurationError: If depth_budget is invalid
    """
    empty: Generator[list[T]] = constant([]).map(list)

    def prepend(tail: Generator[list[T]]) -> Generator[list[T]]:
        return pair_of(element, tail).map(lambda pair: [pair[0], *pair[1]])

    return recursive(empty, prepend, depth_budget, source=source)
