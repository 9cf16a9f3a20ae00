"""Pytest configuration and shared fixtures."""

import random

import pytest

from rankset.data.models import Item
from rankset.structures.item_set import OrderedItemSet


def random_items(seed: int, count: int, key_space: int = 50) -> list[Item]:
    """Generate items with possibly repeating keys and signed weights."""
    rng = random.Random(seed)
    return [
        Item(
            owner=f"user{rng.randrange(5)}",
            key=f"k{rng.randrange(key_space):03d}",
            weight=rng.randint(-20, 20),
        )
        for _ in range(count)
    ]


@pytest.fixture
def sample_items() -> list[Item]:
    """Three items with distinct keys and weights."""
    return [
        Item("a", "k1", 5),
        Item("b", "k2", 9),
        Item("c", "k3", 1),
    ]


@pytest.fixture
def sample_set(sample_items) -> OrderedItemSet:
    """Set built by inserting the sample items in order."""
    return OrderedItemSet.from_items(sample_items)


@pytest.fixture
def make_items():
    """Factory for seeded random item lists."""
    return random_items


@pytest.fixture(params=[0, 1, 2, 3, 4])
def random_set(request) -> OrderedItemSet:
    """Seeded random sets, including repeated keys and tied weights."""
    return OrderedItemSet.from_items(random_items(request.param, 40))


@pytest.fixture
def sample_records() -> list[dict]:
    """Raw item records as a caller would supply them."""
    return [
        {"owner": "gizmodo", "key": "new android phone", "weight": 42},
        {"owner": "engadget", "key": "iphone teardown", "weight": 17},
        {"owner": "techcrunch", "key": "galaxy tab review", "weight": "8"},
    ]
