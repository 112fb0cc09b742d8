"""Depth-budget validation for recursive generators.

Recursive generators thread an explicit budget that shrinks by one per level
and bottoms out in the terminal case at zero. That bounds recursion depth
structurally; this module makes sure the bound itself fits the interpreter
stack:

- Negative or non-integer budgets are rejected
- Budgets above MAX_DEPTH_BUDGET are rejected
- Budgets whose worst-case frame usage exceeds sys.getrecursionlimit()
  are rejected
- Nested recursive generators are checked on their summed depth

Budgets are never clamped: an unusable budget is a configuration error.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from gencheck.constants import MAX_DEPTH_BUDGET, RESERVED_FRAMES
from gencheck.diagnostics import ConfigurationError, ErrorTemplate

__all__ = [
    "FRAMES_PER_LEVEL",
    "max_safe_budget",
    "validate_depth_budget",
    "validate_recursion_depth",
]

logger = logging.getLogger(__name__)

# Upper estimate of interpreter frames one budget level costs during
# generate(). A tree or cons-list level uses eight (branch selection, the map
# building the node, and the pair composition of its children); the rest is
# headroom for callers that add their own map or flat_map layers in step().
FRAMES_PER_LEVEL: int = 12


def max_safe_budget(reserve_frames: int = RESERVED_FRAMES) -> int:
    """Largest depth budget usable under the current recursion limit.

    Args:
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        min(MAX_DEPTH_BUDGET, frames available / FRAMES_PER_LEVEL)

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(650)
        >>> max_safe_budget()
        50
    """
    available = sys.getrecursionlimit() - reserve_frames
    return max(0, min(MAX_DEPTH_BUDGET, available // FRAMES_PER_LEVEL))


def validate_depth_budget(depth_budget: object) -> int:
    """Check a depth budget and return it unchanged.

    Args:
        depth_budget: Requested budget

    Returns:
        The budget, as an int

    Raises:
        ConfigurationError: If the budget is not a non-negative int, or
            exceeds max_safe_budget()
    """
    if (
        not isinstance(depth_budget, int)
        or isinstance(depth_budget, bool)
        or depth_budget < 0
    ):
        raise ConfigurationError(ErrorTemplate.negative_depth_budget(depth_budget))

    limit = max_safe_budget()
    if depth_budget > limit:
        logger.warning(
            "Depth budget %d rejected: recursion limit %d supports at most %d",
            depth_budget,
            sys.getrecursionlimit(),
            limit,
        )
        raise ConfigurationError(ErrorTemplate.depth_budget_exceeded(depth_budget, limit))
    return depth_budget


def validate_recursion_depth(depth_budget: int, recursion_depth: int) -> int:
    """Check the total nesting of a recursive generator and its operands.

    A recursive generator whose terminal or step draws from other recursive
    generators nests their levels inside its own, so their frames add up.

    Args:
        depth_budget: Budget of the outermost generator, already validated
        recursion_depth: Levels a single draw may nest, inner ones included

    Returns:
        recursion_depth, unchanged

    Raises:
        ConfigurationError: If recursion_depth exceeds max_safe_budget()
    """
    limit = max_safe_budget()
    if recursion_depth > limit:
        logger.warning(
            "Nested depth %d (outer budget %d) rejected: recursion limit %d supports at most %d",
            recursion_depth,
            depth_budget,
            sys.getrecursionlimit(),
            limit,
        )
        raise ConfigurationError(
            ErrorTemplate.nested_depth_exceeded(depth_budget, recursion_depth, limit)
        )
    return recursion_depth
