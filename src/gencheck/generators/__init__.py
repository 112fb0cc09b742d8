"""Generator core, combinator library, and recursive generators.

Modules:
    source: RandomSource protocol, seedable and locked implementations
    generator: Generator[T] with map, flat_map, filter
    combinators: constant, bounded_int, one_of, pair_of, list_of, ...
    recursive: depth-budgeted recursion pattern and cons lists
    trees: Tree sum type and its generator

Python 3.13+.
"""

from .combinators import (
    booleans,
    bounded_int,
    choose,
    constant,
    dicts_of,
    frequency,
    integers,
    list_of,
    one_of,
    optional_of,
    pair_of,
    sets_of,
    tuple_of,
)
from .generator import Generator
from .recursive import cons_lists, recursive
from .source import (
    LockedRandomSource,
    PythonRandomSource,
    RandomSource,
    get_default_source,
    set_default_source,
)
from .trees import Inner, Leaf, Tree, leaves, tree_depth, tree_size, trees

__all__ = [
    "Generator",
    "Inner",
    "Leaf",
    "LockedRandomSource",
    "PythonRandomSource",
    "RandomSource",
    "Tree",
    "booleans",
    "bounded_int",
    "choose",
    "cons_lists",
    "constant",
    "dicts_of",
    "frequency",
    "get_default_source",
    "integers",
    "leaves",
    "list_of",
    "one_of",
    "optional_of",
    "pair_of",
    "recursive",
    "set_default_source",
    "sets_of",
    "tree_depth",
    "tree_size",
    "trees",
    "tuple_of",
]
