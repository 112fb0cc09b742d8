"""Core utilities shared across the generator and runner layers.

By isolating these utilities here, we maintain a clean dependency graph:

    diagnostics <- core <- generators <- runner

Exports:
    validate_depth_budget: Reject unusable recursive-generator budgets
    validate_recursion_depth: Reject nested generators deeper than the stack
    max_safe_budget: Largest budget the current stack supports
    require_positive_int: Eager check for trial counts and retry caps
    require_non_negative_int: Eager check for sample counts

Python 3.13+.
"""

from .budget import max_safe_budget, validate_depth_budget, validate_recursion_depth
from .validation import is_strict_int, require_non_negative_int, require_positive_int

__all__ = [
    "is_strict_int",
    "max_safe_budget",
    "require_non_negative_int",
    "require_positive_int",
    "validate_depth_budget",
    "validate_recursion_depth",
]
