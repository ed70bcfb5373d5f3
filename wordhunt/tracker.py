from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .letters import is_valid_word
from .models import Difficulty


@dataclass(frozen=True)
class DifficultyRules:
    initial_size: int = 10
    max_size: int = 19
    size_step: int = 1
    interval_initial_ms: int = 10000
    interval_min_ms: int = 300
    interval_step_ms: int = 50

    @classmethod
    def from_cfg(cls, cfg: Dict[str, Any]) -> "DifficultyRules":
        g = cfg.get("grid", {}) or {}
        s = cfg.get("shuffle", {}) or {}
        return cls(
            initial_size=int(g.get("initial_size", cls.initial_size)),
            max_size=int(g.get("max_size", cls.max_size)),
            size_step=int(g.get("size_step", cls.size_step)),
            interval_initial_ms=int(s.get("interval_initial_ms", cls.interval_initial_ms)),
            interval_min_ms=int(s.get("interval_min_ms", cls.interval_min_ms)),
            interval_step_ms=int(s.get("interval_step_ms", cls.interval_step_ms)),
        )

    def initial(self) -> Difficulty:
        return Difficulty(self.initial_size, self.interval_initial_ms)

    def harder(self, current: Difficulty) -> Difficulty:
        size = min(current.grid_size + self.size_step, self.max_size)
        interval = max(current.shuffle_interval_ms - self.interval_step_ms, self.interval_min_ms)
        # never shrink/slow down, even if the config moved the bounds
        return Difficulty(max(size, current.grid_size), min(interval, current.shuffle_interval_ms))


class ProgressTracker:
    """Target word, position inside it, score and difficulty of one session."""

    def __init__(self, rules: Optional[DifficultyRules] = None) -> None:
        self.rules = rules or DifficultyRules()
        self.word = ""
        self.next_index = 0
        self.score = 0
        self.difficulty = self.rules.initial()

    def reset(self, word: str) -> None:
        self.score = 0
        self.difficulty = self.rules.initial()
        self.begin_word(word)

    def begin_word(self, word: str) -> None:
        if not is_valid_word(word):
            raise ValueError(f"target word must be an uppercase A-Z word, got {word!r}")
        self.word = word
        self.next_index = 0

    @property
    def expected_letter(self) -> Optional[str]:
        if self.next_index < len(self.word):
            return self.word[self.next_index]
        return None

    @property
    def is_word_complete(self) -> bool:
        return bool(self.word) and self.next_index >= len(self.word)

    def matches(self, letter: str) -> bool:
        return letter is not None and letter == self.expected_letter

    def advance(self) -> None:
        if self.is_word_complete or not self.word:
            raise RuntimeError("no letter left to advance past")
        self.next_index += 1

    def complete_word(self, next_word: str) -> Difficulty:
        if not self.is_word_complete:
            raise RuntimeError(f"word {self.word!r} is not complete ({self.next_index}/{len(self.word)})")
        self.score += 1
        self.difficulty = self.rules.harder(self.difficulty)
        self.begin_word(next_word)
        return self.difficulty

    def letter_marks(self) -> Tuple[Tuple[str, bool], ...]:
        return tuple((ch, i < self.next_index) for i, ch in enumerate(self.word))


__all__ = ["DifficultyRules", "ProgressTracker"]
