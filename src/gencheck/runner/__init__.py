"""Property runner and its outcome types.

Exports:
    PropertyRunner: Draws samples and checks a predicate against each
    RunnerConfig: Immutable runner configuration
    Passed, Failed: TestOutcome variants
    for_all: Raise-on-failure convenience wrapper

Python 3.13+.
"""

from .config import RunnerConfig
from .outcome import Failed, Passed, TestOutcome
from .property_runner import PropertyRunner, for_all

__all__ = [
    "Failed",
    "Passed",
    "PropertyRunner",
    "RunnerConfig",
    "TestOutcome",
    "for_all",
]
