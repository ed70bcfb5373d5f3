from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

Grid = Tuple[Tuple[str, ...], ...]


class GamePhase(Enum):
    NOT_STARTED = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Outcome(Enum):
    IGNORED = auto()
    WRONG = auto()
    CORRECT = auto()
    WORD_COMPLETED = auto()


class NoticeKind(str, Enum):
    WRONG_LETTER = "WRONG_LETTER"
    WORD_FOUND = "WORD_FOUND"
    LETTER_UNREACHABLE = "LETTER_UNREACHABLE"


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    text: str


@dataclass(frozen=True)
class Difficulty:
    grid_size: int
    shuffle_interval_ms: int


@dataclass(frozen=True)
class GameView:
    """Everything the front end needs to draw one frame."""

    phase: GamePhase
    grid: Grid
    word: str
    next_index: int
    letter_marks: Tuple[Tuple[str, bool], ...]
    score: int
    grid_size: int
    shuffle_interval_ms: int
    shuffle_speed: int
    message: str
    notice_kind: Optional[NoticeKind]
    cursor: Tuple[int, int]
    blink: bool


__all__ = [
    "Grid",
    "GamePhase",
    "Direction",
    "Outcome",
    "NoticeKind",
    "Notice",
    "Difficulty",
    "GameView",
]
