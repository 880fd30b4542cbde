"""Tests for mataha.core.stars – shuffling and star placement."""

from __future__ import annotations

import random

import pytest

from mataha.core.maze import Position
from mataha.core.stars import TOTAL_STARS, fisher_yates_shuffle, place_stars


class _ZeroRng:
    """Always picks index 0 and records the ranges it was asked for."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return 0


def _path(length: int) -> list[Position]:
    return [Position(i, 0) for i in range(length)]


# ---------------------------------------------------------------------------
# fisher_yates_shuffle
# ---------------------------------------------------------------------------

class TestFisherYates:
    def test_walks_from_last_index_down_to_one(self):
        rng = _ZeroRng()
        fisher_yates_shuffle(list("abcd"), rng)
        assert rng.calls == [(0, 3), (0, 2), (0, 1)]

    def test_swaps_with_chosen_index(self):
        items = list("abcd")
        fisher_yates_shuffle(items, _ZeroRng())
        # swap(3, 0) -> dbca, swap(2, 0) -> cbda, swap(1, 0) -> bcda
        assert items == list("bcda")

    def test_is_a_permutation(self):
        items = list(range(50))
        fisher_yates_shuffle(items, random.Random(5))
        assert sorted(items) == list(range(50))

    def test_short_sequences_untouched(self):
        rng = _ZeroRng()
        single = ["x"]
        fisher_yates_shuffle(single, rng)
        fisher_yates_shuffle([], rng)
        assert single == ["x"]
        assert rng.calls == []


# ---------------------------------------------------------------------------
# place_stars
# ---------------------------------------------------------------------------

class TestPlaceStars:
    @pytest.mark.parametrize("length", [0, 1, 2])
    def test_too_short_paths_get_no_stars(self, length):
        assert place_stars(_path(length), random.Random(0)) == []

    def test_single_interior_cell(self):
        assert place_stars(_path(3), random.Random(0)) == [Position(1, 0)]

    def test_two_interior_cells(self):
        stars = place_stars(_path(4), random.Random(0))
        assert sorted(stars) == [Position(1, 0), Position(2, 0)]

    @pytest.mark.parametrize("seed", range(10))
    def test_stars_are_unique_interior_cells(self, seed):
        path = _path(20)
        stars = place_stars(path, random.Random(seed))
        assert len(stars) == TOTAL_STARS
        assert len(set(stars)) == len(stars)
        assert set(stars) <= set(path[1:-1])
        assert path[0] not in stars
        assert path[-1] not in stars

    def test_custom_total(self):
        assert len(place_stars(_path(20), random.Random(0), total=5)) == 5

    def test_zero_total(self):
        assert place_stars(_path(20), random.Random(0), total=0) == []

    def test_input_path_not_modified(self):
        path = _path(10)
        place_stars(path, random.Random(1))
        assert path == _path(10)

    def test_reproducible_with_seed(self):
        assert place_stars(_path(30), random.Random(7)) == place_stars(_path(30), random.Random(7))
