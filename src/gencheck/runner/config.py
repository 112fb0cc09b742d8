"""Runner configuration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from gencheck.constants import DEFAULT_TRIALS
from gencheck.core import require_positive_int
from gencheck.diagnostics import ErrorTemplate

__all__ = ["RunnerConfig"]


@dataclass(frozen=True, slots=True)
class RunnerConfig:
    """Immutable configuration for PropertyRunner.

    Attributes:
        trials: Samples drawn per run when run() is not given a count
            (default: 100)

    Example:
        >>> from gencheck import PropertyRunner, RunnerConfig
        >>> runner = PropertyRunner(RunnerConfig(trials=500))
        >>> runner.config.trials
        500
    """

    trials: int = DEFAULT_TRIALS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If trials is not a positive int.
        """
        require_positive_int(self.trials, ErrorTemplate.non_positive_trials)
