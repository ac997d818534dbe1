"""Tests for gridsnake.food module."""

from __future__ import annotations

from random import Random

import pytest

from gridsnake.constants import FOODS
from gridsnake.errors import ConfigurationError, FreeCellsExhausted
from gridsnake.food import free_cell_count, spawn
from gridsnake.grid import all_cells
from gridsnake.maps import generate

SNAKE = [(4, 2), (3, 2), (2, 2)]


class TestSpawn:
    def test_never_on_snake_or_obstacle(self) -> None:
        obstacles = generate("fortress")
        rng = Random(5)
        for _ in range(300):
            food = spawn(SNAKE, obstacles, "fortress", "mixed", rng)
            assert food.cell not in SNAKE
            assert food.cell not in obstacles

    def test_finds_the_last_free_cell(self) -> None:
        obstacles = set(all_cells()) - {(3, 7)} - set(SNAKE)
        food = spawn(SNAKE, obstacles, "classic", "apple", Random(0))
        assert food.cell == (3, 7)

    def test_full_grid_raises(self) -> None:
        obstacles = set(all_cells()) - set(SNAKE)
        with pytest.raises(FreeCellsExhausted) as excinfo:
            spawn(SNAKE, obstacles, "classic", "apple", Random(0))
        assert excinfo.value.map_id == "classic"
        assert excinfo.value.occupied == 400

    def test_same_seed_same_cell(self) -> None:
        a = spawn(SNAKE, frozenset(), "classic", "mixed", Random(42))
        b = spawn(SNAKE, frozenset(), "classic", "mixed", Random(42))
        assert a == b


class TestCategory:
    def test_fixed_category_emoji(self) -> None:
        food = spawn(SNAKE, frozenset(), "classic", "banana", Random(1))
        assert food.category == "banana"
        assert food.emoji == "🍌"

    def test_mixed_picks_from_every_fruit(self) -> None:
        rng = Random(2)
        emojis = {spawn(SNAKE, frozenset(), "classic", "mixed", rng).emoji for _ in range(200)}
        assert emojis <= set(FOODS["mixed"])
        assert len(emojis) > 1

    def test_category_does_not_change_placement(self) -> None:
        a = spawn(SNAKE, frozenset(), "classic", "apple", Random(9))
        b = spawn(SNAKE, frozenset(), "classic", "grapes", Random(9))
        assert a.cell == b.cell

    def test_unknown_category(self) -> None:
        with pytest.raises(ConfigurationError):
            spawn(SNAKE, frozenset(), "classic", "pizza", Random(0))


def test_free_cell_count() -> None:
    assert free_cell_count(set(SNAKE)) == 397
