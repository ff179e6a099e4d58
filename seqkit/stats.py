"""Numeric aggregation over sequences."""

import numbers
import warnings

import numpy as np

from .core.errors import InvalidArgumentError
from .core.validation import _validate_sequence

__all__ = [
    "max",
    "mean",
    "min",
    "sum",
]


def mean(seq):
    r"""Compute the arithmetic mean of a numeric sequence.

    .. math::

        \bar{x} = \frac{1}{n} \sum_{i=1}^{n} x_i

    Parameters
    ----------
    seq : Sequence of real numbers
        The values to average. Booleans are not accepted as numbers.

    Returns
    -------
    float
        The mean.

    Raises
    ------
    InvalidArgumentError
        If *seq* is empty, or if the mean of integer input is too large to
        represent as a float.
    TypeError
        If an element is not a real number.
    """
    items = _validate_numeric(seq, "mean")
    if not items:
        raise InvalidArgumentError("Cannot compute the mean of an empty sequence.")
    if _all_integral(items):
        try:
            return _exact_int_sum(items) / len(items)
        except OverflowError as exc:
            raise InvalidArgumentError("The mean is too large to represent as a float.") from exc

    values = _as_float_array(items, "mean")
    return float(np.mean(values))


def sum(seq):  # noqa: A001
    """Compute the arithmetic sum of a numeric sequence.

    Integer-only input is summed exactly and returns an ``int``; any other
    input is reduced in float64 and returns a ``float``. An empty sequence
    sums to ``0``.
    """
    items = _validate_numeric(seq, "sum")
    if _all_integral(items):
        return _exact_int_sum(items)

    values = _as_float_array(items, "sum")
    return float(np.sum(values))


def max(seq):  # noqa: A001
    """Return the largest element of *seq* by natural ordering.

    The element itself is returned, the first one if several compare equal.

    Raises
    ------
    InvalidArgumentError
        If *seq* is empty.
    """
    return _extreme(seq, "max", lambda candidate, best: candidate > best)


def min(seq):  # noqa: A001
    """Return the smallest element of *seq* by natural ordering.

    The element itself is returned, the first one if several compare equal.

    Raises
    ------
    InvalidArgumentError
        If *seq* is empty.
    """
    return _extreme(seq, "min", lambda candidate, best: candidate < best)


def _extreme(seq, name, better):
    _validate_sequence(seq)
    if len(seq) == 0:
        raise InvalidArgumentError(f"Cannot compute the {name} of an empty sequence.")

    iterator = iter(seq)
    best = next(iterator)
    for item in iterator:
        if better(item, best):
            best = item
    return best


def _validate_numeric(seq, name):
    """Return the elements of *seq* as a list, checking they are real numbers."""
    _validate_sequence(seq)
    items = list(seq)
    for i, item in enumerate(items):
        if isinstance(item, (bool, np.bool_)) or not isinstance(item, numbers.Real):
            raise TypeError(f"{name} requires real numbers; element {i} is {type(item).__name__}.")
    return items


def _all_integral(items):
    return all(isinstance(item, numbers.Integral) for item in items)


def _exact_int_sum(items):
    total = 0
    for item in items:
        total += int(item)
    return total


def _as_float_array(items, name):
    values = np.asarray(items, dtype=float)
    if np.isnan(values).any():
        warnings.warn(f"Input to {name} contains NaN. Result will be NaN.", UserWarning)
    return values
