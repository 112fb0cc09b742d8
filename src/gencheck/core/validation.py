"""Eager parameter checks shared by combinators and the runner.

Each helper returns its argument unchanged so it can be used inline:

    self._max_retries = require_positive_int(max_retries, ErrorTemplate.invalid_retry_cap)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable

from gencheck.diagnostics import ConfigurationError, Diagnostic

__all__ = ["is_strict_int", "require_non_negative_int", "require_positive_int"]


def is_strict_int(value: object) -> bool:
    """True for int values other than bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_positive_int(value: object, template: Callable[[object], Diagnostic]) -> int:
    """Return value if it is an int > 0, else raise ConfigurationError.

    Args:
        value: Candidate value
        template: ErrorTemplate factory building the diagnostic

    Raises:
        ConfigurationError: If value is not a positive int
    """
    if not is_strict_int(value) or value <= 0:  # type: ignore[operator]
        raise ConfigurationError(template(value))
    return value  # type: ignore[return-value]


def require_non_negative_int(value: object, template: Callable[[object], Diagnostic]) -> int:
    """Return value if it is an int >= 0, else raise ConfigurationError."""
    if not is_strict_int(value) or value < 0:  # type: ignore[operator]
        raise ConfigurationError(template(value))
    return value  # type: ignore[return-value]
