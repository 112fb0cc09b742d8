"""gencheck - composable random generators and a property-driven test runner.

Builds samplers of structured data from small pieces and checks assertions
against many random samples, reporting the first counterexample with the
seed needed to reproduce it.

Public API:
    Generator - Monadic sampler with map, flat_map, filter
    constant, bounded_int, booleans, integers, one_of, choose, frequency,
    optional_of, pair_of, tuple_of, list_of, sets_of, dicts_of - Combinators
    recursive, cons_lists, trees - Depth-budgeted recursive generators
    PythonRandomSource, LockedRandomSource - Random sources
    PropertyRunner, RunnerConfig, Passed, Failed, for_all - Test runner

Exceptions:
    GenCheckError - Base exception class
    ConfigurationError - Invalid parameters, raised before any draw
    RejectionExhaustedError - filter() retry cap exceeded
    PropertyFailure - Falsified property (raise-on-failure APIs)

Submodules:
    gencheck.generators.trees - Tree sum type and traversal helpers
    gencheck.diagnostics - Diagnostic codes, templates, formatter
    gencheck.constants - Default trial count, retry cap, depth budget
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ConfigurationError,
    GenCheckError,
    PropertyFailure,
    RejectionExhaustedError,
)
from .generators import (
    Generator,
    LockedRandomSource,
    PythonRandomSource,
    RandomSource,
    booleans,
    bounded_int,
    choose,
    cons_lists,
    constant,
    dicts_of,
    frequency,
    get_default_source,
    integers,
    list_of,
    one_of,
    optional_of,
    pair_of,
    recursive,
    set_default_source,
    sets_of,
    trees,
    tuple_of,
)
from .runner import Failed, Passed, PropertyRunner, RunnerConfig, for_all

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("gencheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "Failed",
    "GenCheckError",
    "Generator",
    "LockedRandomSource",
    "Passed",
    "PropertyFailure",
    "PropertyRunner",
    "PythonRandomSource",
    "RandomSource",
    "RejectionExhaustedError",
    "RunnerConfig",
    "__version__",
    "booleans",
    "bounded_int",
    "choose",
    "cons_lists",
    "constant",
    "dicts_of",
    "for_all",
    "frequency",
    "get_default_source",
    "integers",
    "list_of",
    "one_of",
    "optional_of",
    "pair_of",
    "recursive",
    "set_default_source",
    "sets_of",
    "trees",
    "tuple_of",
]
