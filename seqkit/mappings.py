"""Mapping introspection."""

from .core.validation import _validate_mapping

__all__ = [
    "keys",
    "values",
]


def keys(mapping):
    """Return a list of the keys of *mapping*, in iteration order."""
    return list(_validate_mapping(mapping).keys())


def values(mapping):
    """Return a list of the values of *mapping*, in the same order as :func:`keys`."""
    return list(_validate_mapping(mapping).values())
