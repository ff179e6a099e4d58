"""Filtering, search and partitioning with predicates.

Predicates are called as ``predicate(value)``, ``predicate(value, index)`` or
``predicate(value, index, seq)``, depending on how many positional
parameters they accept. Indices always refer to positions in the sequence
passed by the caller.
"""

import logging
from typing import NamedTuple

from .core.constants import NOT_FOUND_INDEX
from .core.validation import (
    _predicate_caller,
    _validate_int,
    _validate_mutable_sequence,
    _validate_sequence,
)

__all__ = [
    "Partition",
    "filter",
    "find",
    "find_index",
    "partition",
    "remove",
]

log = logging.getLogger("seqkit.search")


class Partition(NamedTuple):
    """Result of :func:`partition`.

    Attributes
    ----------
    matching : list
        Elements the predicate accepted, in original order.
    non_matching : list
        Elements the predicate rejected, in original order.
    """

    matching: list
    non_matching: list


def filter(seq, predicate):  # noqa: A001
    """Return the elements of *seq* that satisfy *predicate*, in order."""
    _validate_sequence(seq)
    test = _predicate_caller(predicate)
    return [item for i, item in enumerate(seq) if test(item, i, seq)]


def find(seq, predicate, from_index=0):
    """Return the first element at or after *from_index* satisfying *predicate*.

    Parameters
    ----------
    seq : Sequence
        The sequence to search.
    predicate : callable
        Test applied to each candidate element.
    from_index : int, default 0
        Index to start searching from. Negative values count from the end
        and are clamped to the start; values past the end find nothing.

    Returns
    -------
    object or None
        The matching element, or ``None`` when nothing matches.
    """
    index = find_index(seq, predicate, from_index)
    if index == NOT_FOUND_INDEX:
        return None
    return seq[index]


def find_index(seq, predicate, from_index=0):
    """Return the index of the first match at or after *from_index*, or ``-1``.

    *from_index* is interpreted as in :func:`find`.
    """
    _validate_sequence(seq)
    test = _predicate_caller(predicate)
    from_index = _validate_int(from_index, "from_index")

    length = len(seq)
    if from_index < 0:
        from_index = max(length + from_index, 0)

    for i in range(from_index, length):
        if test(seq[i], i, seq):
            return i
    return NOT_FOUND_INDEX


def remove(seq, predicate):
    """Remove every element satisfying *predicate* from *seq*, in place.

    The predicate is evaluated against the untouched sequence first, then the
    matching positions are deleted. Elements are removed by position, so
    equal values that do not match are never removed by mistake.

    Parameters
    ----------
    seq : MutableSequence
        The sequence to modify.
    predicate : callable
        Test selecting the elements to remove.

    Returns
    -------
    list
        The removed elements, in their original order.

    Examples
    --------
    .. ipython::

        In [1]: from seqkit import remove
           ...: values = [1, 2, 2, 3]
           ...: remove(values, lambda x: x == 2), values
        Out[1]: ([2, 2], [1, 3])
    """
    _validate_mutable_sequence(seq)
    test = _predicate_caller(predicate)

    indices = [i for i, item in enumerate(seq) if test(item, i, seq)]
    removed = [seq[i] for i in indices]
    for i in reversed(indices):
        del seq[i]

    log.debug("removed %d of %d elements in place", len(indices), len(indices) + len(seq))
    return removed


def partition(seq, predicate):
    """Split *seq* into elements that satisfy *predicate* and those that do not.

    *seq* is not modified.

    Parameters
    ----------
    seq : Sequence
        The sequence to split.
    predicate : callable
        Test deciding which half each element goes to.

    Returns
    -------
    Partition
        Named tuple ``(matching, non_matching)`` of new lists.
    """
    _validate_sequence(seq)
    test = _predicate_caller(predicate)

    matching = []
    non_matching = []
    for i, item in enumerate(seq):
        if test(item, i, seq):
            matching.append(item)
        else:
            non_matching.append(item)
    return Partition(matching, non_matching)
