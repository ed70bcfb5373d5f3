"""Tests for the grid engine and the letter source."""

import random
from collections import Counter

import pytest

from wordhunt.grid import (
    SeedingError,
    contains_letter,
    create_grid,
    letter_at,
    letter_counts,
    replace_cell,
    seed_letter,
    shuffle,
)
from wordhunt.letters import ALPHABET, VOCABULARY, LetterSource


class TestLetterSource:
    """Random letters and words."""

    def test_letters_are_uppercase(self, rng):
        letters = LetterSource(rng=rng)
        drawn = {letters.random_letter() for _ in range(2000)}
        assert drawn <= set(ALPHABET)
        assert len(drawn) == 26

    def test_words_come_from_vocabulary(self, rng):
        letters = LetterSource(["CAT", "DOG"], rng=rng)
        assert {letters.random_word() for _ in range(200)} == {"CAT", "DOG"}

    def test_default_vocabulary(self, rng):
        letters = LetterSource(rng=rng)
        assert letters.vocabulary == tuple(VOCABULARY)
        assert len(VOCABULARY) == 40

    def test_same_seed_same_sequence(self):
        a = LetterSource(rng=random.Random(7))
        b = LetterSource(rng=random.Random(7))
        assert [a.random_word() for _ in range(10)] == [b.random_word() for _ in range(10)]

    @pytest.mark.parametrize("vocab", [[], ["cat"], ["CAT", ""], ["CA T"]])
    def test_rejects_bad_vocabulary(self, vocab):
        with pytest.raises(ValueError):
            LetterSource(vocab)


class TestCreateGrid:
    """Grid shape and contents."""

    @pytest.mark.parametrize("size", [1, 2, 10, 19])
    def test_shape(self, rng, size):
        grid = create_grid(size, LetterSource(rng=rng))
        assert len(grid) == size
        for row in grid:
            assert len(row) == size
            assert all(len(ch) == 1 and ch in ALPHABET for ch in row)

    def test_rejects_non_positive_size(self, rng):
        with pytest.raises(ValueError):
            create_grid(0, LetterSource(rng=rng))


class TestShuffle:
    """Full-grid Fisher-Yates permutation."""

    def test_same_multiset(self, rng):
        grid = create_grid(10, LetterSource(rng=rng))
        shuffled = shuffle(grid, rng)
        assert letter_counts(shuffled) == letter_counts(grid)
        assert len(shuffled) == 10 and all(len(r) == 10 for r in shuffled)

    def test_positions_change(self, rng, make_grid):
        grid = make_grid(size=4, cells={(r, c): ALPHABET[r * 4 + c] for r in range(4) for c in range(4)})
        assert shuffle(grid, rng) != grid

    def test_input_untouched(self, rng, make_grid):
        grid = make_grid(cells={(0, 0): "A", (9, 9): "B"})
        before = [list(r) for r in grid]
        shuffle(grid, rng)
        assert [list(r) for r in grid] == before

    def test_every_position_reachable(self, make_grid):
        grid = make_grid(size=3, cells={(0, 0): "A"})
        seen = Counter()
        rng = random.Random(99)
        for _ in range(900):
            out = shuffle(grid, rng)
            seen[next((r, c) for r in range(3) for c in range(3) if out[r][c] == "A")] += 1
        assert len(seen) == 9
        assert min(seen.values()) > 50


class TestSeedLetter:
    """Seeding guarantees the required letter is present."""

    def test_letter_present_after_seeding(self, rng):
        letters = LetterSource(rng=rng)
        for letter in ALPHABET:
            grid = seed_letter(create_grid(10, letters), letter, rng)
            assert contains_letter(grid, letter)

    def test_only_one_cell_changes(self, rng, make_grid):
        grid = make_grid()
        seeded = seed_letter(grid, "Q", rng)
        diffs = [(r, c) for r in range(10) for c in range(10) if grid[r][c] != seeded[r][c]]
        assert len(diffs) == 1
        r, c = diffs[0]
        assert seeded[r][c] == "Q"

    def test_picks_the_only_differing_cell(self, rng, make_grid):
        grid = make_grid(fill="E", cells={(3, 4): "X"})
        seeded = seed_letter(grid, "E", rng)
        assert letter_counts(seeded) == {"E": 100}

    def test_degenerate_grid_fails_fast(self, rng, make_grid):
        with pytest.raises(SeedingError):
            seed_letter(make_grid(fill="E"), "E", rng)


class TestCellAccess:
    """Single-cell reads and replacement."""

    def test_letter_at(self, make_grid):
        grid = make_grid(cells={(2, 3): "K"})
        assert letter_at(grid, 2, 3) == "K"
        assert letter_at(grid, -1, 0) is None
        assert letter_at(grid, 0, 10) is None

    def test_replace_cell_returns_new_grid(self, rng, make_grid):
        grid = make_grid(cells={(5, 5): "C"})
        out = replace_cell(grid, 5, 5, LetterSource(rng=rng))
        assert grid[5][5] == "C"
        assert out[5][5] in ALPHABET
        assert [out[r][c] for r in range(10) for c in range(10) if (r, c) != (5, 5)] == ["Z"] * 99

    def test_replace_cell_out_of_range(self, rng, make_grid):
        with pytest.raises(IndexError):
            replace_cell(make_grid(), 10, 0, LetterSource(rng=rng))

    def test_contains_letter(self, make_grid):
        assert contains_letter(make_grid(cells={(9, 0): "Y"}), "Y")
        assert not contains_letter(make_grid(), "Y")
