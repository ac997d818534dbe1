"""Food placement."""

import logging
import random

from .constants import FOODS, GRID_SIZE
from .errors import ConfigurationError, FreeCellsExhausted
from .grid import Cell, all_cells
from .models import Food

logger = logging.getLogger(__name__)


def check_category(food_category: str) -> str:
    if food_category not in FOODS:
        raise ConfigurationError(f"unknown food category {food_category!r}")
    return food_category


def free_cell_count(occupied: set[Cell], size: int = GRID_SIZE) -> int:
    return sum(1 for cell in all_cells(size) if cell not in occupied)


def spawn(snake, obstacles, map_id: str, food_category: str,
          rng: random.Random = None, size: int = GRID_SIZE) -> Food:
    """Pick a uniformly random cell that is neither snake nor obstacle.

    Raises FreeCellsExhausted instead of sampling forever on a full grid.
    The category only decides which emoji the food carries.
    """
    rng = rng or random.Random()
    emojis = FOODS[check_category(food_category)]

    occupied = set(snake) | set(obstacles)
    if free_cell_count(occupied, size) == 0:
        raise FreeCellsExhausted(map_id, len(occupied))

    while True:
        cell = (rng.randrange(size), rng.randrange(size))
        if cell not in occupied:
            break

    food = Food(cell=cell, category=food_category, emoji=rng.choice(emojis))
    logger.debug("food %s spawned at %s on %s", food.emoji, cell, map_id)
    return food
