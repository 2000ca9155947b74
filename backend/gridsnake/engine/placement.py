"""
Food placement and free-cell sampling.
"""

import logging
import random
from typing import Iterable

from gridsnake.domain.constants import FOOD_TYPES, GRID_SIZE, SPECIAL_FOOD_TYPES
from gridsnake.domain.food import Food, FoodType
from gridsnake.domain.level import LevelConfig
from gridsnake.domain.position import Position

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 1000


class NoFreeCellError(RuntimeError):
    """Raised when every cell on the board is occupied."""


def random_free_cell(
    occupied: Iterable[Position],
    grid_size: int = GRID_SIZE,
    rng=None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Position:
    """
    Return a uniformly random cell that is not in `occupied`.

    Rejection sampling is capped at `max_attempts`; after that the board is
    scanned row by row and a random free cell is picked from the scan.

    Raises:
        NoFreeCellError: if the board has no free cell
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive, got {grid_size}")
    rng = rng or random
    taken = set(occupied)

    for _ in range(max_attempts):
        cell = Position(rng.randrange(grid_size), rng.randrange(grid_size))
        if cell not in taken:
            return cell

    free = [
        Position(x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in taken
    ]
    if not free:
        raise NoFreeCellError(f"No free cell left on a {grid_size}x{grid_size} board")
    logger.warning(
        f"Rejection sampling gave up after {max_attempts} attempts; "
        f"picking from {len(free)} scanned free cells"
    )
    return rng.choice(free)


def choose_food_type(special_food_frequency: float, rng=None) -> FoodType:
    rng = rng or random
    if rng.random() < special_food_frequency:
        return rng.choice(SPECIAL_FOOD_TYPES)
    return FoodType.REGULAR


def generate_food(
    snake: Iterable[Position],
    obstacles: Iterable[Position],
    level_config: LevelConfig,
    rng=None,
    grid_size: int = GRID_SIZE,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Food:
    """
    Place a new food on a cell free of snake and obstacles.

    The type is special (bonus, speed or slow, equally likely) with the
    level's special_food_frequency, regular otherwise. Value comes from
    FOOD_TYPES.
    """
    occupied = set(snake) | set(obstacles)
    position = random_free_cell(occupied, grid_size, rng, max_attempts)
    food_type = choose_food_type(level_config.special_food_frequency, rng)
    food = Food(position=position, type=food_type, value=FOOD_TYPES[food_type].value)
    logger.debug(f"Placed {food_type.value} food at {tuple(position)}")
    return food
