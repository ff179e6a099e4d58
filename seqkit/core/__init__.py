"""Core helpers shared by seqkit operations."""

from .constants import (
    ATOMIC_SEQUENCE_TYPES,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DROP_COUNT,
    DEFAULT_REPEAT_COUNT,
    NOT_FOUND_INDEX,
)
from .errors import InvalidArgumentError
from .rng import get_random_state, use_random_state
from .validation import is_sequence

__all__ = [
    "ATOMIC_SEQUENCE_TYPES",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_DROP_COUNT",
    "DEFAULT_REPEAT_COUNT",
    "NOT_FOUND_INDEX",
    "InvalidArgumentError",
    "get_random_state",
    "is_sequence",
    "use_random_state",
]
