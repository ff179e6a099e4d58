"""Stateless helpers for sequences, mappings and strings."""

from .arrays import chunk, concat, drop, drop_right, fill, flatten
from .core.errors import InvalidArgumentError
from .core.rng import get_random_state, use_random_state
from .mappings import keys, values
from .random import sample, shuffle
from .search import Partition, filter, find, find_index, partition, remove
from .sets import compact, intersection, union
from .stats import max, mean, min, sum
from .strings import repeat, split

__version__ = "0.1.0"

__all__ = [
    # Sequence shaping
    "chunk",
    "concat",
    "drop",
    "drop_right",
    "fill",
    "flatten",
    # Set-like operations
    "compact",
    "intersection",
    "union",
    # Filtering and search
    "Partition",
    "filter",
    "find",
    "find_index",
    "partition",
    "remove",
    # Randomization
    "get_random_state",
    "sample",
    "shuffle",
    "use_random_state",
    # Aggregation
    "max",
    "mean",
    "min",
    "sum",
    # Mappings
    "keys",
    "values",
    # Strings
    "repeat",
    "split",
    # Errors
    "InvalidArgumentError",
]
