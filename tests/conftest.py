"""Shared fixtures: seeded randomness, virtual time and controller factories."""

import random

import pytest

from wordhunt.game import GameController, Timings
from wordhunt.letters import LetterSource
from wordhunt.scheduler import ManualClock
from wordhunt.tracker import DifficultyRules


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_grid():
    """Build a square grid filled with one letter plus explicit cells."""

    def _make(size=10, fill="Z", cells=None):
        rows = [[fill] * size for _ in range(size)]
        for (r, c), ch in (cells or {}).items():
            rows[r][c] = ch
        return tuple(tuple(row) for row in rows)

    return _make


@pytest.fixture
def make_game(rng, clock):
    """Controller with virtual time and a fixed vocabulary (default: CAT)."""

    def _make(vocabulary=("CAT",), rules=None, timings=None):
        return GameController(
            letters=LetterSource(vocabulary, rng=rng),
            rules=rules or DifficultyRules(),
            timings=timings or Timings(),
            rng=rng,
            now_fn=clock,
        )

    return _make
