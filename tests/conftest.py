"""Shared fixtures for the engine test suite."""

import random

import pytest

from engine import StatsAggregator


class CountingRandom(random.Random):
    """Seeded Random that counts shuffle() calls."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.shuffles = 0

    def shuffle(self, x, *args, **kwargs):
        self.shuffles += 1
        super().shuffle(x, *args, **kwargs)


@pytest.fixture
def rng():
    return CountingRandom(1234)


@pytest.fixture
def stats():
    return StatsAggregator()


@pytest.fixture
def make_rng():
    return CountingRandom
