"""Grid engine: a square matrix of letters handled as immutable values.

Every operation returns a new grid (a tuple of row tuples) and leaves its
input untouched, so the front end can never observe a half-written grid.
"""
from __future__ import annotations

import random
from collections import Counter
from typing import Dict, List, Optional

from .letters import LetterSource
from .models import Grid


class GridError(Exception):
    pass


class SeedingError(GridError):
    """No cell can take the letter without overwriting an identical one."""


def _freeze(rows: List[List[str]]) -> Grid:
    return tuple(tuple(row) for row in rows)


def create_grid(size: int, letters: LetterSource) -> Grid:
    if size < 1:
        raise ValueError(f"grid size must be positive, got {size}")
    return _freeze([[letters.random_letter() for _ in range(size)] for _ in range(size)])


def letter_at(grid: Grid, row: int, col: int) -> Optional[str]:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def contains_letter(grid: Grid, letter: str) -> bool:
    return any(letter in row for row in grid)


def letter_counts(grid: Grid) -> Dict[str, int]:
    return dict(Counter(ch for row in grid for ch in row))


def _with_cell(grid: Grid, row: int, col: int, letter: str) -> Grid:
    rows = [list(r) for r in grid]
    rows[row][col] = letter
    return _freeze(rows)


def seed_letter(grid: Grid, letter: str, rng: random.Random) -> Grid:
    """Write ``letter`` into a random cell that currently holds something else.

    The target cell is uniform over the cells that differ from ``letter``,
    the same distribution as re-rolling random cells until one differs.
    """
    candidates = [
        (r, c)
        for r, row in enumerate(grid)
        for c, ch in enumerate(row)
        if ch != letter
    ]
    if not candidates:
        raise SeedingError(f"every cell already holds {letter!r}; nothing to seed")
    row, col = rng.choice(candidates)
    return _with_cell(grid, row, col, letter)


def replace_cell(grid: Grid, row: int, col: int, letters: LetterSource) -> Grid:
    if letter_at(grid, row, col) is None:
        raise IndexError(f"cell ({row}, {col}) is outside a {len(grid)}x{len(grid)} grid")
    return _with_cell(grid, row, col, letters.random_letter())


def shuffle(grid: Grid, rng: random.Random) -> Grid:
    """Unbiased full-grid permutation (Fisher-Yates), reshaped row-major."""
    size = len(grid)
    flat = [ch for row in grid for ch in row]
    for i in range(len(flat) - 1, 0, -1):
        j = rng.randint(0, i)
        flat[i], flat[j] = flat[j], flat[i]
    return _freeze([flat[r * size:(r + 1) * size] for r in range(size)])


__all__ = [
    "GridError",
    "SeedingError",
    "create_grid",
    "letter_at",
    "contains_letter",
    "letter_counts",
    "seed_letter",
    "replace_cell",
    "shuffle",
]
