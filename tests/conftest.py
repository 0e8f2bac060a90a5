"""
Shared pytest fixtures.
"""

import random

import pytest

from game_logic import apply_move, make_initial_gamestate, start_game


class ScriptedRandom:
    """Stand-in for random.Random whose choice() walks a fixed index sequence."""

    def __init__(self, indices=(0,)):
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq):
        idx = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return seq[idx % len(seq)]


@pytest.fixture
def scripted_rng():
    return ScriptedRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def started_game():
    """tech (player 1) vs space (player 2), player 1 to move."""
    return start_game(make_initial_gamestate(), "tech", "space")


def play(state, positions, rng=None):
    """Apply moves in order, asserting each one is accepted."""
    rng = rng if rng is not None else ScriptedRandom()
    for pos in positions:
        assert apply_move(state, pos, rng), f"move at {pos} was rejected"
    return state
