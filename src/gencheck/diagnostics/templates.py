"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_range(lo: int, hi: int) -> Diagnostic:
        """Integer range is empty or reversed.

        Args:
            lo: Inclusive lower bound
            hi: Exclusive upper bound

        Returns:
            Diagnostic for INVALID_RANGE
        """
        msg = f"Empty integer range [{lo}, {hi})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RANGE,
            message=msg,
            hint="Pass hi strictly greater than lo",
            parameter="hi",
            received=repr(hi),
        )

    @staticmethod
    def non_integer_bound(parameter: str, value: object) -> Diagnostic:
        """Range bound is not an int (bool is rejected too).

        Args:
            parameter: "lo" or "hi"
            value: The rejected bound

        Returns:
            Diagnostic for INVALID_RANGE
        """
        msg = f"Range bound '{parameter}' must be an integer, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RANGE,
            message=msg,
            hint="Convert the bound with int() before building the generator",
            parameter=parameter,
            received=repr(value),
        )

    @staticmethod
    def empty_choices(parameter: str) -> Diagnostic:
        """Nothing to choose from.

        Args:
            parameter: Name of the empty argument

        Returns:
            Diagnostic for EMPTY_CHOICES
        """
        msg = f"Cannot choose from an empty '{parameter}'"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CHOICES,
            message=msg,
            hint="Supply at least one choice",
            parameter=parameter,
        )

    @staticmethod
    def non_positive_trials(trials: object) -> Diagnostic:
        """Trial count is not a positive integer.

        Args:
            trials: The rejected trial count

        Returns:
            Diagnostic for NON_POSITIVE_TRIALS
        """
        msg = f"Trial count must be a positive integer, got {trials!r}"
        return Diagnostic(
            code=DiagnosticCode.NON_POSITIVE_TRIALS,
            message=msg,
            hint="Run at least one trial",
            parameter="trials",
            received=repr(trials),
        )

    @staticmethod
    def invalid_retry_cap(max_retries: object) -> Diagnostic:
        """Rejection sampling retry cap is not a positive integer.

        Args:
            max_retries: The rejected cap

        Returns:
            Diagnostic for INVALID_RETRY_CAP
        """
        msg = f"Retry cap must be a positive integer, got {max_retries!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RETRY_CAP,
            message=msg,
            hint="Allow at least one draw per generated value",
            parameter="max_retries",
            received=repr(max_retries),
        )

    @staticmethod
    def negative_depth_budget(depth_budget: object) -> Diagnostic:
        """Depth budget is negative or not an integer.

        Args:
            depth_budget: The rejected budget

        Returns:
            Diagnostic for NEGATIVE_DEPTH_BUDGET
        """
        msg = f"Depth budget must be a non-negative integer, got {depth_budget!r}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_DEPTH_BUDGET,
            message=msg,
            hint="Use 0 to generate only the terminal case",
            parameter="depth_budget",
            received=repr(depth_budget),
        )

    @staticmethod
    def depth_budget_exceeded(depth_budget: int, max_budget: int) -> Diagnostic:
        """Depth budget is larger than the stack can support.

        Args:
            depth_budget: The rejected budget
            max_budget: Largest budget accepted in this interpreter

        Returns:
            Diagnostic for DEPTH_BUDGET_EXCEEDED
        """
        msg = f"Depth budget {depth_budget} exceeds maximum of {max_budget}"
        return Diagnostic(
            code=DiagnosticCode.DEPTH_BUDGET_EXCEEDED,
            message=msg,
            hint="Lower the budget or raise sys.setrecursionlimit()",
            parameter="depth_budget",
            received=repr(depth_budget),
        )

    @staticmethod
    def nested_depth_exceeded(
        depth_budget: int, recursion_depth: int, max_budget: int
    ) -> Diagnostic:
        """Nested recursive generators together need more stack than exists.

        Args:
            depth_budget: Budget of the outermost recursive generator
            recursion_depth: Levels a draw may nest, inner generators included
            max_budget: Largest total depth accepted in this interpreter

        Returns:
            Diagnostic for DEPTH_BUDGET_EXCEEDED
        """
        msg = (
            f"Depth budget {depth_budget} nests {recursion_depth} levels with inner "
            f"recursive generators, exceeding maximum of {max_budget}"
        )
        return Diagnostic(
            code=DiagnosticCode.DEPTH_BUDGET_EXCEEDED,
            message=msg,
            hint=f"Keep the nested budgets summed to at most {max_budget}",
            parameter="depth_budget",
            received=repr(depth_budget),
        )

    @staticmethod
    def negative_size(size: object) -> Diagnostic:
        """Size generator produced a negative or non-integer length.

        Args:
            size: The drawn length

        Returns:
            Diagnostic for NEGATIVE_SIZE
        """
        msg = (
            f"Size generator produced negative length {size}"
            if isinstance(size, int) and not isinstance(size, bool)
            else f"Size generator produced non-integer length {size!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_SIZE,
            message=msg,
            hint="Draw sizes from a non-negative range, e.g. bounded_int(0, n)",
            parameter="size",
            received=repr(size),
        )

    @staticmethod
    def invalid_weight(weight: object) -> Diagnostic:
        """Frequency weight is not a positive integer.

        Args:
            weight: The rejected weight

        Returns:
            Diagnostic for INVALID_WEIGHT
        """
        msg = f"Weight must be a positive integer, got {weight!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_WEIGHT,
            message=msg,
            hint="Drop zero-weight entries instead of passing them",
            parameter="weighted",
            received=repr(weight),
        )

    @staticmethod
    def invalid_count(count: object) -> Diagnostic:
        """Sample count is negative or not an integer.

        Args:
            count: The rejected count

        Returns:
            Diagnostic for INVALID_COUNT
        """
        msg = f"Sample count must be a non-negative integer, got {count!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_COUNT,
            message=msg,
            parameter="count",
            received=repr(count),
        )

    @staticmethod
    def rejection_exhausted(attempts: int) -> Diagnostic:
        """Filtered generator gave up after its retry cap.

        Args:
            attempts: Number of draws made

        Returns:
            Diagnostic for REJECTION_EXHAUSTED
        """
        msg = f"No value satisfied the filter predicate after {attempts} draws"
        return Diagnostic(
            code=DiagnosticCode.REJECTION_EXHAUSTED,
            message=msg,
            hint="Generate accepted values directly instead of filtering, "
            "or raise max_retries",
        )

    @staticmethod
    def property_falsified(
        counterexample: object, trial_index: int, seed: int | None
    ) -> Diagnostic:
        """Predicate returned False for a sample.

        Args:
            counterexample: The failing sample
            trial_index: Zero-based index of the failing trial
            seed: Seed of the random source, if known

        Returns:
            Diagnostic for PROPERTY_FALSIFIED
        """
        msg = f"Property falsified at trial {trial_index} by {counterexample!r}"
        hint = (
            f"Rebuild the generator on PythonRandomSource(seed={seed}) to reproduce"
            if seed is not None
            else None
        )
        return Diagnostic(
            code=DiagnosticCode.PROPERTY_FALSIFIED,
            message=msg,
            hint=hint,
            received=repr(counterexample),
        )
