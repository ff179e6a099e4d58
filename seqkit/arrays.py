"""Sequence partitioning and shaping."""

import logging

from .core.constants import DEFAULT_CHUNK_SIZE, DEFAULT_DROP_COUNT
from .core.validation import (
    _validate_int,
    _validate_mutable_sequence,
    _validate_sequence,
    is_sequence,
)

__all__ = [
    "chunk",
    "concat",
    "drop",
    "drop_right",
    "fill",
    "flatten",
]

log = logging.getLogger("seqkit.arrays")


def chunk(seq, size=DEFAULT_CHUNK_SIZE):
    """Split a sequence into consecutive chunks of a given size.

    Parameters
    ----------
    seq : Sequence
        The sequence to split.
    size : int, default 1
        Length of each chunk. The last chunk holds the remainder and may be
        shorter.

    Returns
    -------
    list of list
        The chunks, in order. Empty when *seq* is empty.

    Raises
    ------
    InvalidArgumentError
        If *size* is not positive.

    Examples
    --------
    .. ipython::

        In [1]: from seqkit import chunk
           ...: chunk(["a", "b", "c", "d", "e"], 2)
        Out[1]: [['a', 'b'], ['c', 'd'], ['e']]
    """
    _validate_sequence(seq)
    size = _validate_int(size, "size", minimum=1)
    items = list(seq)
    return [items[i : i + size] for i in range(0, len(items), size)]


def drop(seq, n=DEFAULT_DROP_COUNT):
    """Return a new list without the first *n* elements.

    *n* larger than the sequence yields an empty list. Negative *n* raises
    :class:`~seqkit.core.errors.InvalidArgumentError`.
    """
    _validate_sequence(seq)
    n = _validate_int(n, "n", minimum=0)
    return list(seq)[n:]


def drop_right(seq, n=DEFAULT_DROP_COUNT):
    """Return a new list without the last *n* elements.

    *n* larger than the sequence yields an empty list. Negative *n* raises
    :class:`~seqkit.core.errors.InvalidArgumentError`.
    """
    _validate_sequence(seq)
    n = _validate_int(n, "n", minimum=0)
    items = list(seq)
    return items[: max(len(items) - n, 0)]


def flatten(seq):
    """Flatten a sequence a single level deep.

    Nested sequences are spread into the result; every other element,
    strings included, passes through unchanged. Deeper nesting is kept.

    Parameters
    ----------
    seq : Sequence
        The sequence to flatten.

    Returns
    -------
    list
        The flattened elements.
    """
    _validate_sequence(seq)
    result = []
    for item in seq:
        if is_sequence(item):
            result.extend(item)
        else:
            result.append(item)
    return result


def concat(seq, *others):
    """Concatenate *others* onto a copy of *seq*.

    Sequence arguments are spread one level; any other argument is appended
    as a single element. *seq* itself is not modified.

    Parameters
    ----------
    seq : Sequence
        The leading sequence.
    *others
        Sequences or values appended in order.

    Returns
    -------
    list
        A new list.
    """
    _validate_sequence(seq)
    result = list(seq)
    for other in others:
        if is_sequence(other):
            result.extend(other)
        else:
            result.append(other)
    return result


def fill(seq, value, start=0, end=None):
    """Overwrite ``seq[start:end]`` with *value*, in place.

    Bounds follow slice semantics: negative values count from the end and
    out-of-range values are clamped, so the call never raises for bounds.

    Parameters
    ----------
    seq : MutableSequence or ndarray
        The sequence to modify.
    value : object
        The value written at every index in range.
    start : int, default 0
        First index to fill.
    end : int or None, default None
        Index to stop before. ``None`` fills to the end.

    Returns
    -------
    MutableSequence or ndarray
        *seq* itself.
    """
    _validate_mutable_sequence(seq, allow_array=True)
    start = _validate_int(start, "start")
    if end is not None:
        end = _validate_int(end, "end")

    length = len(seq)
    lo, hi, _ = slice(start, end).indices(length)
    if start > length or (end is not None and (end > length or end < -length)):
        log.debug("fill bounds (%s, %s) clamped to (%d, %d) for length %d", start, end, lo, hi, length)

    for i in range(lo, hi):
        seq[i] = value
    return seq
