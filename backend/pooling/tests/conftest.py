"""Shared fixtures for pooling tests."""

import random

import pytest

from pooling.session.registry import GameRegistry
from pooling.tests.helpers import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def registry(clock, rng):
    return GameRegistry(max_age_seconds=3600, sweep_interval_seconds=1800, rng=rng, clock=clock)
