"""Result types for property runs.

    TestOutcome = Passed | Failed

Both are frozen values created once per run and handed to the caller.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from gencheck.diagnostics import ErrorTemplate, PropertyFailure
from gencheck.enums import OutcomeStatus

__all__ = ["Failed", "Passed", "TestOutcome"]


@dataclass(frozen=True, slots=True)
class Passed:
    """Every trial satisfied the predicate.

    Attributes:
        trials: Number of samples drawn and checked
    """

    trials: int

    @property
    def status(self) -> OutcomeStatus:
        """Always OutcomeStatus.PASSED."""
        return OutcomeStatus.PASSED

    @property
    def is_success(self) -> bool:
        """Always True."""
        return True

    def raise_for_failure(self) -> None:
        """No-op for a passing run."""


@dataclass(frozen=True, slots=True)
class Failed[T]:
    """A sample falsified the predicate; no further samples were drawn.

    Attributes:
        counterexample: The failing sample
        trial_index: Zero-based index of the failing trial
        seed: Seed of the generator's random source, if it exposes one.
            Rebuilding the same generator on PythonRandomSource(seed)
            replays the run up to and including the counterexample.
    """

    counterexample: T
    trial_index: int
    seed: int | None = None

    @property
    def status(self) -> OutcomeStatus:
        """Always OutcomeStatus.FAILED."""
        return OutcomeStatus.FAILED

    @property
    def is_success(self) -> bool:
        """Always False."""
        return False

    def to_error(self) -> PropertyFailure:
        """PropertyFailure describing this outcome."""
        return PropertyFailure(
            ErrorTemplate.property_falsified(self.counterexample, self.trial_index, self.seed),
            counterexample=self.counterexample,
            trial_index=self.trial_index,
            seed=self.seed,
        )

    def raise_for_failure(self) -> NoReturn:
        """Raise PropertyFailure for this outcome."""
        raise self.to_error()


type TestOutcome[T] = Passed | Failed[T]
