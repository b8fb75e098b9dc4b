"""
Shared pytest fixtures for order-statistic tree tests.
"""

import random

import pytest

from orderstat.models.sortedcontainers import OrderStatisticTree

SCENARIO_KEYS = [5, 7, 6, 3, 8, 4, 2]


@pytest.fixture
def tree():
    """Provide a fresh, validating OrderStatisticTree."""
    return OrderStatisticTree(validate_on_write=True)


@pytest.fixture
def scenario_tree():
    """Provide the reference tree built from [5, 7, 6, 3, 8, 4, 2]."""
    tree = OrderStatisticTree(validate_on_write=True)
    for key in SCENARIO_KEYS:
        tree.put(key, f"value{key}")
    return tree


@pytest.fixture
def rng():
    """Provide a deterministic random generator."""
    return random.Random(1234)


@pytest.fixture
def random_keys(rng):
    """Provide 500 distinct keys, including negatives, in random order."""
    keys = rng.sample(range(-1000, 1000), 500)
    return keys
