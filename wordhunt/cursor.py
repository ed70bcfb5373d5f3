from __future__ import annotations

from typing import Tuple

from .models import Direction


class Cursor:
    """Keyboard cursor over the grid; clamps at the edges, never wraps."""

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self.row = row
        self.col = col

    @property
    def pos(self) -> Tuple[int, int]:
        return self.row, self.col

    def reset(self) -> None:
        self.row = 0
        self.col = 0

    def move(self, direction: Direction, size: int) -> bool:
        """Step one cell; returns False when already at that edge."""
        dr, dc = direction.delta
        row = max(0, min(size - 1, self.row + dr))
        col = max(0, min(size - 1, self.col + dc))
        if (row, col) == self.pos:
            return False
        self.row, self.col = row, col
        return True

    def place(self, row: int, col: int, size: int) -> None:
        self.row = max(0, min(size - 1, row))
        self.col = max(0, min(size - 1, col))

    def clamp(self, size: int) -> None:
        self.place(self.row, self.col, size)


__all__ = ["Cursor"]
