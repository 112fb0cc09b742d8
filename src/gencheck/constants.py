"""Shared constants for gencheck.

This module provides centralized configuration defaults used across the
generator and runner packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Trial limits: Default sample count for property runs
- Retry limits: Bound on rejection sampling
- Depth limits: Budget for recursive generators
- Integer range: Bounds for the unconstrained integer generator

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Trial limits
    "DEFAULT_TRIALS",
    # Retry limits
    "DEFAULT_MAX_RETRIES",
    # Depth limits
    "DEFAULT_DEPTH_BUDGET",
    "MAX_DEPTH_BUDGET",
    "RESERVED_FRAMES",
    # Integer range
    "INT32_MIN",
    "INT32_MAX",
]

# ============================================================================
# TRIAL LIMITS
# ============================================================================

# Number of samples drawn by PropertyRunner when no trial count is given.
DEFAULT_TRIALS: int = 100

# ============================================================================
# RETRY LIMITS
# ============================================================================

# Maximum draws a filtered generator makes per generate() call.
# A predicate accepting 1% of values still succeeds with probability
# 1 - 0.99**1000 (about 0.99996) under this cap.
DEFAULT_MAX_RETRIES: int = 1000

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Recursive generators thread an explicit budget that shrinks by one per
# level. With a fair coin at every level the expected depth is small, but the
# budget is what makes termination certain.
#
# MAX_DEPTH_BUDGET is a hard ceiling independent of the interpreter:
# each budget level costs a handful of Python frames (flat_map -> generate ->
# factory), so budgets above this are rejected as configuration errors.
#
# ============================================================================

# Default budget for recursive generators (trees, cons lists).
DEFAULT_DEPTH_BUDGET: int = 8

# Largest accepted depth budget.
MAX_DEPTH_BUDGET: int = 100

# Stack frames reserved for caller overhead when checking a budget against
# sys.getrecursionlimit().
RESERVED_FRAMES: int = 50

# ============================================================================
# INTEGER RANGE
# ============================================================================

# Signed 32-bit bounds for integers(); upper bound is inclusive.
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
