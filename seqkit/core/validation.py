"""Argument validation shared by seqkit operations."""

import inspect
import numbers
from collections.abc import Mapping, MutableSequence, Sequence

import numpy as np

from .constants import ATOMIC_SEQUENCE_TYPES
from .errors import InvalidArgumentError

__all__ = [
    "_predicate_caller",
    "_validate_int",
    "_validate_mapping",
    "_validate_mutable_sequence",
    "_validate_predicate",
    "_validate_sequence",
    "_validate_string",
    "is_sequence",
]


def is_sequence(value):
    """Return True if *value* is an index-addressable sequence of elements.

    Strings and bytes are atomic values here, and zero-dimensional arrays are
    scalars.
    """
    if isinstance(value, ATOMIC_SEQUENCE_TYPES):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence)


def _validate_sequence(seq, name="seq"):
    """Validate that *seq* is a sequence and return it."""
    if not is_sequence(seq):
        raise TypeError(f"{name} must be a sequence, got {type(seq).__name__}.")
    return seq


def _validate_mutable_sequence(seq, name="seq", allow_array=False):
    """Validate that *seq* can be modified in place and return it."""
    if allow_array and isinstance(seq, np.ndarray) and seq.ndim >= 1:
        if not seq.flags.writeable:
            raise TypeError(f"{name} is a read-only array and cannot be modified in place.")
        return seq
    if isinstance(seq, ATOMIC_SEQUENCE_TYPES) or not isinstance(seq, MutableSequence):
        raise TypeError(f"{name} must be a mutable sequence, got {type(seq).__name__}.")
    return seq


def _validate_mapping(mapping, name="mapping"):
    if not isinstance(mapping, Mapping):
        raise TypeError(f"{name} must be a mapping, got {type(mapping).__name__}.")
    return mapping


def _validate_string(value, name="string"):
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}.")
    return value


def _validate_int(value, name, minimum=None):
    """Validate an integer argument, optionally bounded below.

    Booleans are rejected even though they are integers. Values below
    *minimum* raise :class:`InvalidArgumentError`.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}.")
    value = int(value)
    if minimum is not None and value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value}.")
    return value


def _validate_predicate(predicate):
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}.")
    return predicate


def _predicate_caller(predicate):
    """Adapt *predicate* to the ``(value, index, sequence)`` calling protocol.

    Predicates may accept one, two or three positional arguments; they are
    passed the element, then its index, then the whole sequence, as many as
    their signature takes. Callables without an inspectable signature (some
    builtins) receive the element only.

    Parameters
    ----------
    predicate : callable
        The user-supplied test function.

    Returns
    -------
    callable
        A function ``call(value, index, seq)`` returning the predicate result
        as a bool.
    """
    _validate_predicate(predicate)
    n_args = _positional_arity(predicate)

    if n_args >= 3:
        return lambda value, index, seq: bool(predicate(value, index, seq))
    if n_args == 2:
        return lambda value, index, seq: bool(predicate(value, index))
    return lambda value, index, seq: bool(predicate(value))


def _positional_arity(func):
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return 3
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            # optional parameters beyond the first are left to their defaults
            if param.default is not inspect.Parameter.empty and count >= 1:
                break
            count += 1
    return max(count, 1)
