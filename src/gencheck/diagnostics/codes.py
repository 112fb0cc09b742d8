"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for GenCheckError.

    Categories:
        CONFIGURATION: Invalid combinator, runner, or budget parameters
        GENERATION: A generator could not produce a value (retry cap hit)
        PROPERTY: A predicate was falsified by a sample
    """

    CONFIGURATION = "configuration"
    GENERATION = "generation"
    PROPERTY = "property"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (rejected before any draw)
        2000-2999: Generation errors (raised during generate())
        3000-3999: Property errors (falsified predicates)
    """

    # Configuration errors (1000-1999)
    INVALID_RANGE = 1001
    EMPTY_CHOICES = 1002
    NON_POSITIVE_TRIALS = 1003
    INVALID_RETRY_CAP = 1004
    NEGATIVE_DEPTH_BUDGET = 1005
    DEPTH_BUDGET_EXCEEDED = 1006
    NEGATIVE_SIZE = 1007
    INVALID_WEIGHT = 1008
    INVALID_COUNT = 1009

    # Generation errors (2000-2999)
    REJECTION_EXHAUSTED = 2001

    # Property errors (3000-3999)
    PROPERTY_FALSIFIED = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.CONFIGURATION
        if self.value < 3000:
            return ErrorCategory.GENERATION
        return ErrorCategory.PROPERTY


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        parameter: Name of the offending parameter (configuration errors)
        received: repr of the offending value (configuration errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    parameter: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_RANGE]: Empty integer range [5, 5)
              = parameter: hi
              = received: 5
              = help: Pass hi strictly greater than lo

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
