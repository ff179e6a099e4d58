"""Randomized sequence operations."""

import logging

import numpy as np

from .core.errors import InvalidArgumentError
from .core.rng import get_random_state
from .core.validation import _validate_mutable_sequence, _validate_sequence

__all__ = [
    "sample",
    "shuffle",
]

log = logging.getLogger("seqkit.random")


def shuffle(seq, random_state=None, inplace=False):
    r"""Return the elements of *seq* in uniformly random order.

    Uses the Fisher-Yates shuffle: walking from the last position down, each
    position receives an element drawn uniformly from those not yet placed.
    Every one of the :math:`n!` orderings is equally likely.

    Parameters
    ----------
    seq : Sequence
        The sequence to shuffle.
    random_state : int, Generator, optional
        Seed or generator for the draws. Defaults to the source set by
        :func:`~seqkit.core.rng.use_random_state`, if any.
    inplace : bool, default False
        If True, rearrange *seq* itself (which must be mutable) and return it.
        Otherwise *seq* is left untouched and a new list is returned.

    Returns
    -------
    list or MutableSequence
        The shuffled elements.

    Examples
    --------
    .. ipython::

        In [1]: from seqkit import shuffle
           ...: sorted(shuffle([3, 1, 2], random_state=7))
        Out[1]: [1, 2, 3]
    """
    if inplace:
        items = _validate_mutable_sequence(seq)
        log.debug("shuffling %d elements in place", len(items))
    else:
        items = list(_validate_sequence(seq))

    rng = get_random_state(random_state)
    n = len(items)
    if n < 2:
        return items

    # draws[k] is uniform over the n - k positions still unplaced
    draws = rng.integers(0, np.arange(n, 1, -1))
    for i, j in zip(range(n - 1, 0, -1), draws, strict=True):
        j = int(j)
        items[i], items[j] = items[j], items[i]
    return items


def sample(seq, random_state=None):
    """Return one element of *seq* chosen uniformly at random.

    Raises
    ------
    InvalidArgumentError
        If *seq* is empty.
    """
    _validate_sequence(seq)
    if len(seq) == 0:
        raise InvalidArgumentError("Cannot sample from an empty sequence.")
    rng = get_random_state(random_state)
    return seq[int(rng.integers(len(seq)))]
