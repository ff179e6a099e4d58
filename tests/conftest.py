"""Shared test fixtures for seqkit."""

from __future__ import annotations

import numpy as np
import pytest

_SEED = 20240917


@pytest.fixture
def rng():
    return np.random.default_rng(_SEED)


@pytest.fixture
def nested():
    return [1, [2, 3], (4, [5]), "ab", [], np.array([6, 7])]
