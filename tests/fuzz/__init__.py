"""Fuzz testing infrastructure for gencheck.

This package contains:
- test_recursive_budget_exhaustion: Boundary testing for depth budgets

Python 3.13+.
"""
