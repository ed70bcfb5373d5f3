from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import CELL_MAX_PX, CELL_MIN_PX


@dataclass(frozen=True)
class GridLayout:
    """Pixel placement of the letter grid; maps clicks back to cells."""

    left: int
    top: int
    cell: int
    size: int

    @classmethod
    def fit(cls, area: Tuple[int, int, int, int], size: int) -> "GridLayout":
        x, y, w, h = area
        cell = max(CELL_MIN_PX, min(CELL_MAX_PX, min(w, h) // max(1, size)))
        span = cell * size
        return cls(left=x + (w - span) // 2, top=y + (h - span) // 2, cell=cell, size=size)

    @property
    def span(self) -> int:
        return self.cell * self.size

    def cell_rect(self, row: int, col: int) -> Tuple[int, int, int, int]:
        return self.left + col * self.cell, self.top + row * self.cell, self.cell, self.cell

    def cell_at(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        dx, dy = x - self.left, y - self.top
        if dx < 0 or dy < 0 or dx >= self.span or dy >= self.span:
            return None
        return dy // self.cell, dx // self.cell


__all__ = ["GridLayout"]
