"""Random source configuration for randomized operations."""

from __future__ import annotations

import contextlib
import numbers
from contextvars import ContextVar

import numpy as np

from .errors import InvalidArgumentError

__all__ = [
    "get_random_state",
    "use_random_state",
]

_default_random_state: ContextVar[int | np.random.Generator | None] = ContextVar(
    "seqkit_random_state", default=None
)


def get_random_state(random_state=None):
    """Return a :class:`numpy.random.Generator` for a randomized operation.

    An explicit *random_state* always wins. Otherwise the value set by the
    innermost :func:`use_random_state` block is used, and outside any block a
    freshly seeded generator is returned.

    Parameters
    ----------
    random_state : int, Generator, optional
        Seed or generator to draw from.

    Returns
    -------
    numpy.random.Generator
        Generator to draw from.
    """
    if random_state is None:
        random_state = _default_random_state.get()
    _validate_random_state(random_state)
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


@contextlib.contextmanager
def use_random_state(random_state):
    """Context manager that temporarily sets the default random source.

    The previous default is restored when the context exits, even if an
    exception is raised. An int seed gives each randomized call inside the
    block its own generator seeded identically, so repeated calls are
    reproducible but not independent. Pass a Generator to share one stream
    across calls.

    Parameters
    ----------
    random_state : int, Generator or None
        Seed or generator used by randomized operations called without an
        explicit ``random_state``.
    """
    _validate_random_state(random_state)
    token = _default_random_state.set(random_state)
    try:
        yield
    finally:
        _default_random_state.reset(token)


def _validate_random_state(random_state):
    if random_state is None or isinstance(random_state, np.random.Generator):
        return
    if isinstance(random_state, bool) or not isinstance(random_state, numbers.Integral):
        raise TypeError(f"random_state must be None, an int or a numpy Generator, got {type(random_state).__name__}.")
    if random_state < 0:
        raise InvalidArgumentError(f"random_state seed must be non-negative, got {random_state}.")
