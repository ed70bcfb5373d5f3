from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from .config import CFG
from .constants import (
    MSG_LETTER_UNREACHABLE,
    MSG_WORD_FOUND,
    MSG_WRONG_LETTER,
    SHUFFLE_SPEED_BASE_MS,
    SHUFFLE_SPEED_DIVISOR,
)
from .cursor import Cursor
from .grid import contains_letter, create_grid, letter_at, replace_cell, seed_letter, shuffle
from .input_queue import InputQueue
from .letters import ALPHABET, LetterSource
from .models import Direction, GamePhase, GameView, Grid, Notice, NoticeKind, Outcome
from .scheduler import Scheduler, ShuffleScheduler
from .tracker import DifficultyRules, ProgressTracker

logger = logging.getLogger(__name__)

MESSAGE_TASK = "message"
BLINK_TASK = "blink"


@dataclass(frozen=True)
class Timings:
    wrong_letter_ms: int = 1000
    word_found_ms: int = 1500
    blink_ms: int = 200

    @classmethod
    def from_cfg(cls, cfg: Dict[str, Any]) -> "Timings":
        t = cfg.get("timing", {}) or {}
        return cls(
            wrong_letter_ms=int(t.get("wrong_letter_ms", cls.wrong_letter_ms)),
            word_found_ms=int(t.get("word_found_ms", cls.word_found_ms)),
            blink_ms=int(t.get("blink_ms", cls.blink_ms)),
        )


class GameController:
    """One game session: grid, progress, cursor, timers and messages.

    All mutation goes through this object and runs on the caller's loop;
    ``update`` pumps the scheduler and the input queue.
    """

    # ---- Core lifecycle wiring ----

    def __init__(
        self,
        *,
        letters: Optional[LetterSource] = None,
        rules: Optional[DifficultyRules] = None,
        timings: Optional[Timings] = None,
        rng: Optional[random.Random] = None,
        now_fn: Optional[Callable[[], float]] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.letters = letters if letters is not None else LetterSource(CFG.get("vocabulary") or None, rng=self.rng)
        self.rules = rules or DifficultyRules.from_cfg(CFG)
        self.timings = timings or Timings.from_cfg(CFG)

        self.scheduler = Scheduler(now_fn or time.monotonic)
        self.shuffler = ShuffleScheduler(self.scheduler, self._on_shuffle_tick)

        self.phase: GamePhase = GamePhase.NOT_STARTED
        self.tracker = ProgressTracker(self.rules)
        self.cursor = Cursor()
        self.grid: Grid = ()
        self.notice: Optional[Notice] = None
        self.blink = False
        self.shuffle_count = 0

    def start(self) -> None:
        self.scheduler.cancel_all()
        self.shuffler.disarm()
        self.notice = None
        self.blink = False
        self.shuffle_count = 0

        word = self.letters.random_word()
        self.tracker.reset(word)
        self.cursor.reset()
        self.grid = self._fresh_grid(self.tracker.difficulty.grid_size, word[0])
        self.phase = GamePhase.PLAYING
        logger.info("Game started: word %s, grid %dx%d", word, len(self.grid), len(self.grid))

        self._sync_shuffle()
        self.check_state()

    def end_game(self, missing: str) -> None:
        self.phase = GamePhase.GAME_OVER
        self.scheduler.cancel(MESSAGE_TASK)
        self._sync_shuffle()
        self.notice = Notice(NoticeKind.LETTER_UNREACHABLE, MSG_LETTER_UNREACHABLE.format(letter=missing))
        logger.info("Game over: letter %s missing, score %d", missing, self.tracker.score)

    def close(self) -> None:
        self.shuffler.disarm()
        self.scheduler.cancel_all()

    def __enter__(self) -> "GameController":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- Timing utilities ----

    def _sync_shuffle(self) -> None:
        if self.phase is GamePhase.PLAYING:
            self.shuffler.ensure(self.tracker.difficulty.shuffle_interval_ms)
        else:
            self.shuffler.disarm()

    def _flash(self, notice: Notice, ms: int) -> None:
        self.notice = notice
        self.scheduler.call_later(MESSAGE_TASK, ms / 1000.0, self._clear_message)

    def _clear_message(self) -> None:
        self.notice = None

    def _clear_blink(self) -> None:
        self.blink = False

    def _on_shuffle_tick(self) -> None:
        self.grid = shuffle(self.grid, self.rng)
        self.shuffle_count += 1
        self.check_state()

    # ---- Grid / progress transitions ----

    def _fresh_grid(self, size: int, first_letter: str) -> Grid:
        return seed_letter(create_grid(size, self.letters), first_letter, self.rng)

    def replace_grid(self, grid: Grid) -> None:
        """Publish a grid built outside the controller and re-check the state."""
        size = len(grid)
        if size == 0 or any(len(row) != size for row in grid):
            raise ValueError("grid must be a non-empty square")
        if any(ch not in ALPHABET for row in grid for ch in row):
            raise ValueError("grid cells must be single uppercase letters")
        self.grid = tuple(tuple(row) for row in grid)
        self.cursor.clamp(size)
        self.check_state()

    def check_state(self) -> None:
        if self.phase is not GamePhase.PLAYING:
            return
        if self.tracker.is_word_complete:
            self._complete_word()
        letter = self.tracker.expected_letter
        if letter is not None and not contains_letter(self.grid, letter):
            self.end_game(letter)

    def _complete_word(self) -> None:
        found = self.tracker.word
        new_word = self.letters.random_word()
        difficulty = self.tracker.complete_word(new_word)
        self.grid = self._fresh_grid(difficulty.grid_size, new_word[0])
        self.cursor.reset()
        self._flash(Notice(NoticeKind.WORD_FOUND, MSG_WORD_FOUND), self.timings.word_found_ms)
        self._sync_shuffle()
        logger.info(
            "Found %s (score %d); next %s, grid %d, shuffle every %d ms",
            found, self.tracker.score, new_word, difficulty.grid_size, difficulty.shuffle_interval_ms,
        )

    def on_cell_activated(self, letter: str, row: int, col: int) -> Outcome:
        if self.phase is not GamePhase.PLAYING or letter_at(self.grid, row, col) is None:
            return Outcome.IGNORED

        expected = self.tracker.expected_letter
        if self.tracker.matches(letter):
            completes = self.tracker.next_index + 1 == len(self.tracker.word)
            self.grid = replace_cell(self.grid, row, col, self.letters)
            self.tracker.advance()
            self.check_state()
            return Outcome.WORD_COMPLETED if completes else Outcome.CORRECT

        self._flash(
            Notice(NoticeKind.WRONG_LETTER, MSG_WRONG_LETTER.format(letter=expected)),
            self.timings.wrong_letter_ms,
        )
        logger.debug("Wrong letter %s at (%d, %d); looking for %s", letter, row, col, expected)
        return Outcome.WRONG

    # ---- Commands ----

    def move_cursor(self, direction: Union[Direction, str]) -> bool:
        direction = Direction(direction)
        if self.phase is not GamePhase.PLAYING:
            return False
        return self.cursor.move(direction, len(self.grid))

    def select(self) -> Outcome:
        if self.phase is not GamePhase.PLAYING:
            return Outcome.IGNORED
        row, col = self.cursor.pos
        letter = letter_at(self.grid, row, col)
        if letter is None:
            return Outcome.IGNORED
        self.blink = True
        self.scheduler.call_later(BLINK_TASK, self.timings.blink_ms / 1000.0, self._clear_blink)
        return self.on_cell_activated(letter, row, col)

    def activate_cell(self, row: int, col: int) -> Outcome:
        if self.phase is not GamePhase.PLAYING:
            return Outcome.IGNORED
        letter = letter_at(self.grid, row, col)
        if letter is None:
            return Outcome.IGNORED
        self.cursor.place(row, col, len(self.grid))
        return self.on_cell_activated(letter, row, col)

    def handle_command(self, name: str) -> None:
        if name == "START":
            self.start()
        elif name == "SELECT":
            self.select()
        else:
            self.move_cursor(name)

    def update(self, iq: Optional[InputQueue] = None) -> None:
        self.scheduler.run_due()
        if iq is not None:
            for name in iq.pop_all():
                self.handle_command(name)

    # ---- Output surface ----

    @property
    def shuffle_speed(self) -> int:
        raw = (SHUFFLE_SPEED_BASE_MS - self.tracker.difficulty.shuffle_interval_ms) / SHUFFLE_SPEED_DIVISOR
        return int(math.floor(raw + 0.5))

    @property
    def message(self) -> str:
        return self.notice.text if self.notice else ""

    def view(self) -> GameView:
        return GameView(
            phase=self.phase,
            grid=self.grid,
            word=self.tracker.word,
            next_index=self.tracker.next_index,
            letter_marks=self.tracker.letter_marks(),
            score=self.tracker.score,
            grid_size=self.tracker.difficulty.grid_size,
            shuffle_interval_ms=self.tracker.difficulty.shuffle_interval_ms,
            shuffle_speed=self.shuffle_speed,
            message=self.message,
            notice_kind=self.notice.kind if self.notice else None,
            cursor=self.cursor.pos,
            blink=self.blink,
        )


__all__ = ["GameController", "Timings", "MESSAGE_TASK", "BLINK_TASK"]
