import os

# Headless display for the pygame backend tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_grid.game_state import GameState
from flappy_grid.rng import RandomNumberGenerator
from flappy_grid.terminal import Console


class FixedRng:
    """Always returns the same gap row."""

    def __init__(self, value=25):
        self.value = value
        self.calls = []

    def range(self, low, high):
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def ctx():
    return Console()


@pytest.fixture
def fixed_rng():
    return FixedRng()


@pytest.fixture
def state():
    return GameState(rng=RandomNumberGenerator(seed=7))
