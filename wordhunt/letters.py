from __future__ import annotations

import random
import string
from typing import Iterable, List, Optional

ALPHABET = string.ascii_uppercase

VOCABULARY: List[str] = [
    "HOUSE", "BALL", "CAT", "FIRE", "LIGHT", "PEACE", "SUN", "SEA", "BREAD", "TEA",
    "BOOK", "FLOWER", "BRIDGE", "CITY", "LOVE", "TIME", "GREEN", "BLUE", "HAPPY", "DREAM",
    "STAR", "MOUNTAIN", "TRAVEL", "SILENCE", "HOPE", "FREEDOM", "FUTURE", "JOY", "HEART", "MUSIC",
    "PINEAPPLE", "ELEPHANT", "COMPUTER", "UNIVERSE", "KNOWLEDGE", "IMAGINATION", "ADVENTURE",
    "DISCOVERY", "CREATIVITY", "INSPIRATION",
]


def is_valid_word(word: str) -> bool:
    return bool(word) and all(ch in ALPHABET for ch in word)


class LetterSource:
    """Random letters and target words, all drawn from one ``random.Random``."""

    def __init__(self, vocabulary: Optional[Iterable[str]] = None, *, rng: Optional[random.Random] = None) -> None:
        words = list(vocabulary) if vocabulary is not None else list(VOCABULARY)
        if not words:
            raise ValueError("vocabulary must not be empty")
        bad = [w for w in words if not is_valid_word(w)]
        if bad:
            raise ValueError(f"vocabulary entries must be uppercase A-Z words: {bad!r}")
        self.vocabulary: tuple[str, ...] = tuple(words)
        self.rng = rng if rng is not None else random.Random()

    def random_letter(self) -> str:
        return self.rng.choice(ALPHABET)

    def random_word(self) -> str:
        return self.rng.choice(self.vocabulary)


__all__ = ["ALPHABET", "VOCABULARY", "LetterSource", "is_valid_word"]
