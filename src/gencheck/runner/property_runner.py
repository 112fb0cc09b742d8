"""Fixed-trial-count property runner.

PropertyRunner draws samples from a Generator and applies a predicate to
each, in trial-index order, stopping at the first sample the predicate
rejects. It holds only its configuration: runs share no state.

Exceptions raised by the generator or the predicate propagate unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, assert_never

from gencheck.constants import DEFAULT_TRIALS
from gencheck.core import require_positive_int
from gencheck.diagnostics import ErrorTemplate
from gencheck.generators.source import source_seed

from .config import RunnerConfig
from .outcome import Failed, Passed

if TYPE_CHECKING:
    from gencheck.generators import Generator

    from .outcome import TestOutcome

__all__ = ["PropertyRunner", "for_all"]

logger = logging.getLogger(__name__)


class PropertyRunner:
    """Runs a predicate against many samples of a generator.

    Example:
        >>> from gencheck import PropertyRunner, constant, Passed
        >>> PropertyRunner().run(constant(4), lambda x: x == 4, trials=50)
        Passed(trials=50)
    """

    __slots__ = ("_config",)

    def __init__(self, config: RunnerConfig | None = None) -> None:
        """Initialize runner.

        Args:
            config: Runner configuration (default: RunnerConfig())
        """
        self._config = config if config is not None else RunnerConfig()

    @property
    def config(self) -> RunnerConfig:
        """Runner configuration."""
        return self._config

    def run[T](
        self,
        generator: Generator[T],
        predicate: Callable[[T], bool],
        trials: int | None = None,
    ) -> TestOutcome[T]:
        """Check predicate against trials independent samples.

        Args:
            generator: Source of samples
            predicate: Property to check; a falsy result is a failure
            trials: Number of samples (default: config.trials)

        Returns:
            Passed(trials) if every sample satisfied predicate, otherwise
            Failed for the first sample that did not

        Raises:
            ConfigurationError: If trials is not a positive int, before any draw
        """
        count = self._config.trials if trials is None else require_positive_int(
            trials, ErrorTemplate.non_positive_trials
        )
        logger.debug("Checking %s over %d trials", generator.label, count)

        for index in range(count):
            value = generator.generate()
            if not predicate(value):
                seed = source_seed(generator.source)
                logger.info(
                    "Property falsified at trial %d of %d by %r (seed=%s)",
                    index,
                    count,
                    value,
                    seed,
                )
                return Failed(value, index, seed)

        logger.debug("Property held for %d trials", count)
        return Passed(count)

    def check[T](
        self,
        generator: Generator[T],
        predicate: Callable[[T], bool],
        trials: int | None = None,
    ) -> Passed:
        """Like run(), but raise on failure.

        Raises:
            ConfigurationError: If trials is not a positive int
            PropertyFailure: If a sample falsified predicate
        """
        outcome = self.run(generator, predicate, trials)
        match outcome:
            case Passed():
                return outcome
            case Failed():
                outcome.raise_for_failure()
            case _ as unreachable:
                assert_never(unreachable)


def for_all[T](
    generator: Generator[T],
    predicate: Callable[[T], bool],
    trials: int = DEFAULT_TRIALS,
) -> Passed:
    """Assert predicate over trials samples; raise PropertyFailure otherwise.

    Example:
        >>> from gencheck import bounded_int, for_all
        >>> for_all(bounded_int(0, 10), lambda x: 0 <= x < 10)
        Passed(trials=100)
    """
    return PropertyRunner(RunnerConfig(trials=trials)).check(generator, predicate)
