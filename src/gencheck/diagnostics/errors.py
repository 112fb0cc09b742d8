"""gencheck exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class GenCheckError(Exception):
    """Base exception for all gencheck errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GenCheckError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(GenCheckError):
    """Invalid combinator, runner, or budget parameters.

    Raised eagerly, before any value is drawn. Never retried.

    Examples:
    - bounded_int(5, 5): empty range
    - one_of([]): nothing to choose from
    - RunnerConfig(trials=0)
    """

    category = ErrorCategory.CONFIGURATION


class RejectionExhaustedError(GenCheckError):
    """A filtered generator hit its retry cap without an accepted value.

    Attributes:
        attempts: Number of draws made before giving up
    """

    category = ErrorCategory.GENERATION

    def __init__(self, message: str | Diagnostic, *, attempts: int) -> None:
        """Initialize RejectionExhaustedError.

        Args:
            message: Error message string OR Diagnostic object
            attempts: Number of draws made before giving up
        """
        super().__init__(message)
        self.attempts = attempts


class PropertyFailure(GenCheckError):
    """A predicate returned False for a generated sample.

    Not a system fault: this is how a falsified property is reported when
    the caller asks for an exception instead of a TestOutcome.

    Attributes:
        counterexample: The sample that falsified the predicate
        trial_index: Zero-based index of the failing trial
        seed: Seed of the generator's random source, if known
    """

    category = ErrorCategory.PROPERTY

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        counterexample: object,
        trial_index: int,
        seed: int | None = None,
    ) -> None:
        """Initialize PropertyFailure.

        Args:
            message: Error message string OR Diagnostic object
            counterexample: The sample that falsified the predicate
            trial_index: Zero-based index of the failing trial
            seed: Seed of the generator's random source, if known
        """
        super().__init__(message)
        self.counterexample = counterexample
        self.trial_index = trial_index
        self.seed = seed
