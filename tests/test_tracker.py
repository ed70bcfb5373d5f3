"""Tests for word progress and difficulty scaling."""

import pytest

from wordhunt.models import Difficulty
from wordhunt.tracker import DifficultyRules, ProgressTracker


class TestProgress:
    """Index moves forward one letter at a time and resets per word."""

    def test_reset_state(self):
        tracker = ProgressTracker()
        tracker.reset("CAT")
        assert tracker.word == "CAT"
        assert tracker.next_index == 0
        assert tracker.score == 0
        assert tracker.expected_letter == "C"
        assert tracker.difficulty == Difficulty(10, 10000)

    def test_advance_is_strictly_plus_one(self):
        tracker = ProgressTracker()
        tracker.reset("CAT")
        seen = [tracker.next_index]
        for _ in range(3):
            tracker.advance()
            seen.append(tracker.next_index)
        assert seen == [0, 1, 2, 3]
        assert tracker.is_word_complete
        assert tracker.expected_letter is None

    def test_cannot_advance_past_end(self):
        tracker = ProgressTracker()
        tracker.reset("AB")
        tracker.advance()
        tracker.advance()
        with pytest.raises(RuntimeError):
            tracker.advance()

    def test_matches(self):
        tracker = ProgressTracker()
        tracker.reset("CAT")
        assert tracker.matches("C")
        assert not tracker.matches("A")

    def test_complete_word_scores_and_resets_index(self):
        tracker = ProgressTracker()
        tracker.reset("AB")
        tracker.advance()
        tracker.advance()
        tracker.complete_word("DOG")
        assert tracker.score == 1
        assert tracker.word == "DOG"
        assert tracker.next_index == 0

    def test_complete_requires_finished_word(self):
        tracker = ProgressTracker()
        tracker.reset("AB")
        tracker.advance()
        with pytest.raises(RuntimeError):
            tracker.complete_word("DOG")

    def test_letter_marks(self):
        tracker = ProgressTracker()
        tracker.reset("CAT")
        tracker.advance()
        assert tracker.letter_marks() == (("C", True), ("A", False), ("T", False))

    def test_rejects_invalid_word(self):
        with pytest.raises(ValueError):
            ProgressTracker().reset("cat")


class TestDifficulty:
    """Grid size grows to the cap, shuffle interval shrinks to the floor."""

    def test_one_step(self):
        rules = DifficultyRules()
        assert rules.harder(rules.initial()) == Difficulty(11, 9950)

    def test_bounds_hold_over_many_words(self):
        rules = DifficultyRules()
        current = rules.initial()
        for _ in range(500):
            nxt = rules.harder(current)
            assert nxt.grid_size >= current.grid_size
            assert nxt.shuffle_interval_ms <= current.shuffle_interval_ms
            assert 10 <= nxt.grid_size <= 19
            assert 300 <= nxt.shuffle_interval_ms <= 10000
            current = nxt
        assert current == Difficulty(19, 300)

    def test_cap_at_initial_size_keeps_size_fixed(self):
        rules = DifficultyRules(max_size=10)
        current = rules.initial()
        for _ in range(5):
            current = rules.harder(current)
        assert current.grid_size == 10
        assert current.shuffle_interval_ms == 9750

    def test_from_cfg(self):
        cfg = {
            "grid": {"initial_size": 12, "max_size": 14, "size_step": 2},
            "shuffle": {"interval_initial_ms": 5000, "interval_min_ms": 1000, "interval_step_ms": 500},
        }
        rules = DifficultyRules.from_cfg(cfg)
        assert rules.initial() == Difficulty(12, 5000)
        assert rules.harder(rules.harder(rules.initial())) == Difficulty(14, 4000)

    def test_score_and_difficulty_reset_on_new_session(self):
        tracker = ProgressTracker()
        tracker.reset("A")
        tracker.advance()
        tracker.complete_word("B")
        tracker.reset("C")
        assert tracker.score == 0
        assert tracker.difficulty == Difficulty(10, 10000)
