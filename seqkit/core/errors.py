"""Exceptions raised by seqkit."""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when an argument is well typed but outside the operation's domain.

    Examples are an empty sequence passed to :func:`~seqkit.stats.mean` or a
    non-positive size passed to :func:`~seqkit.arrays.chunk`. Subclasses
    :class:`ValueError` so code catching the builtin keeps working.
    """
