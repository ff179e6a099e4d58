"""Set-like operations over sequences."""

import logging

import numpy as np

from .core.validation import _validate_sequence

__all__ = [
    "compact",
    "intersection",
    "union",
]

log = logging.getLogger("seqkit.sets")


def intersection(*seqs):
    """Return the values present in every input sequence.

    Parameters
    ----------
    *seqs : Sequence
        Sequences to compare.

    Returns
    -------
    list
        Distinct common values, in first-occurrence order of the first
        sequence. Empty when called with no sequences.

    Notes
    -----
    Values match when they compare equal with ``==``, so ``1`` and ``1.0``
    are the same value. Booleans never match the numbers ``0`` and ``1``, and
    arrays match when :func:`numpy.array_equal` holds.

    Examples
    --------
    .. ipython::

        In [1]: from seqkit import intersection
           ...: intersection([2, 1, 2, 3], [3, 2], [2, 3, 4])
        Out[1]: [2, 3]
    """
    if not seqs:
        return []
    for i, seq in enumerate(seqs):
        _validate_sequence(seq, name=f"seqs[{i}]")

    first, *rest = seqs
    lookups = [_lookup(seq) for seq in rest]
    return [item for item in _unique(first) if all(_contains(lookup, item) for lookup in lookups)]


def union(*seqs):
    """Return every distinct value across the input sequences exactly once.

    Values are listed in the order they are first seen, scanning the
    sequences left to right.

    Values are compared as in :func:`intersection`: ``1`` and ``1.0`` are
    one value, ``True`` and ``1`` are two.
    """
    for i, seq in enumerate(seqs):
        _validate_sequence(seq, name=f"seqs[{i}]")
    return _unique(item for seq in seqs for item in seq)


def compact(seq):
    """Return a new list without falsy values.

    Falsy values are ``None``, ``False``, zero, empty strings and containers,
    and NaN.
    """
    _validate_sequence(seq)
    return [item for item in seq if _is_truthy(item)]


def _is_truthy(item):
    if isinstance(item, (float, np.floating)):
        return not np.isnan(item) and item != 0
    if isinstance(item, np.ndarray):
        return item.size > 0
    return bool(item)


def _unique(items):
    """Deduplicate *items* preserving first-occurrence order."""
    seen_keys = set()
    seen_other = []
    result = []
    for item in items:
        try:
            if _hash_key(item) in seen_keys:
                continue
            seen_keys.add(_hash_key(item))
        except TypeError:
            if any(_equal(item, other) for other in seen_other):
                continue
            seen_other.append(item)
        result.append(item)
    return result


def _hash_key(item):
    # booleans never collide with the numbers 0 and 1
    if isinstance(item, (bool, np.bool_)):
        return (bool, bool(item))
    return (object, item)


def _equal(a, b):
    """Compare two unhashable values, element-wise for arrays."""
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    if isinstance(a, (bool, np.bool_)) != isinstance(b, (bool, np.bool_)):
        return False
    return bool(a == b)


def _contains(lookup, item):
    keys, others = lookup
    try:
        return _hash_key(item) in keys
    except TypeError:
        return any(_equal(item, other) for other in others)


def _lookup(seq):
    """Return ``(hash_keys, unhashable_items)`` for membership tests against *seq*."""
    keys = set()
    others = []
    for item in seq:
        try:
            keys.add(_hash_key(item))
        except TypeError:
            others.append(item)
    if others:
        log.debug("%d unhashable elements in %s, using linear membership scans", len(others), type(seq).__name__)
    return keys, others
