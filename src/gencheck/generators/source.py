"""Uniform random sources consumed by leaf generators.

A RandomSource is the only external capability the library needs: one
uniform integer in a half-open range, or one uniform boolean, per call.

Implementations:
    PythonRandomSource: private random.Random, seedable and reproducible
    LockedRandomSource: serializes access to another source with a lock

Process-wide default:
    get_default_source() lazily creates one unseeded PythonRandomSource.
    Leaf combinators called with source=None resolve the default once, at
    construction, and keep that reference for their lifetime.

Thread Safety:
    PythonRandomSource is not synchronized. Sharing one across threads
    requires wrapping it in LockedRandomSource.

Python 3.13+.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Protocol, runtime_checkable

__all__ = [
    "LockedRandomSource",
    "PythonRandomSource",
    "RandomSource",
    "get_default_source",
    "resolve_source",
    "set_default_source",
    "source_seed",
]

logger = logging.getLogger(__name__)

# Seeds drawn for unseeded sources are 64-bit so they can be printed and
# passed back to PythonRandomSource(seed=...).
_SEED_BITS: int = 64


@runtime_checkable
class RandomSource(Protocol):
    """Capability producing uniformly distributed integers and booleans."""

    def next_int(self, lo: int, hi: int) -> int:
        """Return a uniform integer in [lo, hi). Caller guarantees hi > lo."""
        ...

    def next_bool(self) -> bool:
        """Return a uniform boolean."""
        ...


class PythonRandomSource:
    """RandomSource backed by a private random.Random instance.

    The seed is always known: when none is given, one is drawn from
    random.SystemRandom and recorded, so any run can be replayed.

    Example:
        >>> source = PythonRandomSource(seed=42)
        >>> replay = PythonRandomSource(seed=source.seed)
        >>> [source.next_int(0, 10) for _ in range(5)] == [
        ...     replay.next_int(0, 10) for _ in range(5)
        ... ]
        True
    """

    __slots__ = ("_random", "_seed")

    def __init__(self, seed: int | None = None) -> None:
        """Initialize source.

        Args:
            seed: Seed for the underlying generator (None: draw one)
        """
        if seed is None:
            seed = random.SystemRandom().getrandbits(_SEED_BITS)
            logger.debug("PythonRandomSource seeded with %d", seed)
        self._seed = seed
        self._random = random.Random(seed)  # noqa: S311 - not cryptographic

    @property
    def seed(self) -> int:
        """Seed this source was created with."""
        return self._seed

    def next_int(self, lo: int, hi: int) -> int:
        """Return a uniform integer in [lo, hi)."""
        return self._random.randrange(lo, hi)

    def next_bool(self) -> bool:
        """Return a uniform boolean."""
        return self._random.getrandbits(1) == 1

    def __repr__(self) -> str:
        return f"PythonRandomSource(seed={self._seed})"


class LockedRandomSource:
    """RandomSource wrapper serializing every draw with a mutex.

    Use when generators built on one source are drawn from several threads.
    The interleaving of draws across threads is still scheduler-dependent;
    the lock only guarantees each draw sees a consistent inner state.
    """

    __slots__ = ("_inner", "_lock")

    def __init__(self, inner: RandomSource) -> None:
        """Initialize wrapper around inner source."""
        self._inner = inner
        self._lock = threading.Lock()

    @property
    def inner(self) -> RandomSource:
        """The wrapped source."""
        return self._inner

    @property
    def seed(self) -> int | None:
        """Seed of the wrapped source, if it exposes one."""
        return source_seed(self._inner)

    def next_int(self, lo: int, hi: int) -> int:
        """Return a uniform integer in [lo, hi) under the lock."""
        with self._lock:
            return self._inner.next_int(lo, hi)

    def next_bool(self) -> bool:
        """Return a uniform boolean under the lock."""
        with self._lock:
            return self._inner.next_bool()

    def __repr__(self) -> str:
        return f"LockedRandomSource({self._inner!r})"


def source_seed(source: RandomSource | None) -> int | None:
    """Seed exposed by source, or None if it has none."""
    seed = getattr(source, "seed", None)
    return seed if isinstance(seed, int) else None


# Process-wide default source, created on first use.
_default_source: RandomSource | None = None
_default_lock = threading.Lock()


def get_default_source() -> RandomSource:
    """Return the process-wide default source, creating it if needed."""
    global _default_source  # noqa: PLW0603 - module-level singleton
    with _default_lock:
        if _default_source is None:
            _default_source = PythonRandomSource()
        return _default_source


def set_default_source(source: RandomSource | None) -> None:
    """Replace the process-wide default source.

    Generators already built keep the source they captured. Passing None
    resets the slot so the next get_default_source() creates a fresh one.
    """
    global _default_source  # noqa: PLW0603 - module-level singleton
    with _default_lock:
        _default_source = source
    logger.debug("Default random source set to %r", source)


def resolve_source(source: RandomSource | None) -> RandomSource:
    """Return source, or the process-wide default when None."""
    return source if source is not None else get_default_source()
