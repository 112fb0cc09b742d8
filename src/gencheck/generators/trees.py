"""Binary trees: a closed sum type and its depth-budgeted generator.

    Tree = Leaf(value) | Inner(left, right)

Every function that branches on a Tree matches both cases explicitly and
ends in assert_never(), so adding a case is a type error until each
branch handles it. Traversals use an explicit stack and never recurse on
the Python call stack.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from gencheck.constants import DEFAULT_DEPTH_BUDGET

from .combinators import pair_of
from .recursive import recursive

if TYPE_CHECKING:
    from .generator import Generator
    from .source import RandomSource

__all__ = [
    "Inner",
    "Leaf",
    "Tree",
    "leaves",
    "tree_depth",
    "tree_size",
    "trees",
]


@dataclass(frozen=True, slots=True)
class Leaf[T]:
    """Terminal tree node holding a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Inner[T]:
    """Internal tree node with two subtrees."""

    left: Tree[T]
    right: Tree[T]


type Tree[T] = Leaf[T] | Inner[T]


def trees[T](
    leaf_values: Generator[T],
    depth_budget: int = DEFAULT_DEPTH_BUDGET,
    *,
    source: RandomSource | None = None,
) -> Generator[Tree[T]]:
    """Random binary trees of depth at most depth_budget.

    With depth_budget == 0 every draw is a Leaf. Otherwise each level flips
    a coin between a Leaf and an Inner whose subtrees are drawn
    independently with one less unit of budget.

    Args:
        leaf_values: Generator for Leaf payloads
        depth_budget: Maximum tree depth (a lone Leaf has depth 0)
        source: RandomSource for the per-level coin flips

    Raises:
        ConfigurationError: If depth_budget is invalid
    """
    leaf: Generator[Tree[T]] = leaf_values.map(Leaf)

    def inner(subtree: Generator[Tree[T]]) -> Generator[Tree[T]]:
        return pair_of(subtree, subtree).map(lambda pair: Inner(pair[0], pair[1]))

    return recursive(leaf, inner, depth_budget, source=source)


def tree_depth[T](tree: Tree[T]) -> int:
    """Number of Inner nodes on the longest root-to-leaf path."""
    deepest = 0
    stack: list[tuple[Tree[T], int]] = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        match node:
            case Leaf():
                deepest = max(deepest, depth)
            case Inner(left=left, right=right):
                stack.append((left, depth + 1))
                stack.append((right, depth + 1))
            case _ as unreachable:
                assert_never(unreachable)
    return deepest


def tree_size[T](tree: Tree[T]) -> int:
    """Total number of nodes, Leaf and Inner."""
    count = 0
    stack: list[Tree[T]] = [tree]
    while stack:
        node = stack.pop()
        count += 1
        match node:
            case Leaf():
                pass
            case Inner(left=left, right=right):
                stack.append(right)
                stack.append(left)
            case _ as unreachable:
                assert_never(unreachable)
    return count


def leaves[T](tree: Tree[T]) -> Iterator[T]:
    """Leaf values, left to right."""
    stack: list[Tree[T]] = [tree]
    while stack:
        node = stack.pop()
        match node:
            case Leaf(value=value):
                yield value
            case Inner(left=left, right=right):
                stack.append(right)
                stack.append(left)
            case _ as unreachable:
                assert_never(unreachable)
