"""String operations."""

import re

from .core.constants import DEFAULT_REPEAT_COUNT
from .core.validation import _validate_int, _validate_string

__all__ = [
    "repeat",
    "split",
]


def repeat(string="", n=DEFAULT_REPEAT_COUNT):
    """Return *string* repeated *n* times.

    A non-positive *n* yields an empty string.
    """
    _validate_string(string)
    n = _validate_int(n, "n")
    return string * n if n > 0 else ""


def split(string="", separator=None, limit=None):
    """Split *string* on *separator*, keeping at most *limit* segments.

    Parameters
    ----------
    string : str, default ""
        The string to split.
    separator : str, re.Pattern or None, default None
        Where to split. ``None`` splits on runs of whitespace and drops
        leading and trailing whitespace, as :meth:`str.split` does. It does
        not return ``[string]`` unsplit, as some split functions do when the
        separator is omitted. An empty string splits into single characters.
        A compiled pattern splits on its matches, with captured groups
        included in the result.
    limit : int or None, default None
        Maximum number of leading segments to return. The result is never
        padded, so fewer segments come back when the string has fewer.
        A non-positive limit returns an empty list.

    Returns
    -------
    list of str
        The segments.

    Examples
    --------
    .. ipython::

        In [1]: from seqkit import split
           ...: split("a,b,c", ",", 2), split("a,b", ",", 5)
        Out[1]: (['a', 'b'], ['a', 'b'])
    """
    _validate_string(string)
    if limit is not None:
        limit = _validate_int(limit, "limit")
        if limit <= 0:
            return []

    if isinstance(separator, re.Pattern):
        parts = separator.split(string)
    elif separator is None:
        parts = string.split()
    elif isinstance(separator, str):
        parts = list(string) if separator == "" else string.split(separator)
    else:
        raise TypeError(f"separator must be a str, a compiled pattern or None, got {type(separator).__name__}.")

    if limit is None:
        return parts
    return parts[:limit]
