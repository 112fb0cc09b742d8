"""Enumerations for gencheck type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class OutcomeStatus(StrEnum):
    """Status of a property run.

    StrEnum provides automatic string conversion: str(OutcomeStatus.PASSED) == "passed"
    """

    PASSED = "passed"
    """Every trial satisfied the predicate."""

    FAILED = "failed"
    """A trial produced a counterexample."""


__all__ = [
    "OutcomeStatus",
]
