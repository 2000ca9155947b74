"""
Level catalog: hand-authored levels plus procedural generation past them.
"""

import logging
import random
from typing import Dict, Tuple

from gridsnake.domain.constants import BASE_GAME_SPEED, GRID_SIZE, MIN_SPEED
from gridsnake.domain.level import LevelConfig
from gridsnake.domain.position import Position
from .placement import MAX_PLACEMENT_ATTEMPTS, random_free_cell

logger = logging.getLogger(__name__)

DEFAULT_SNAKE_PATH: Tuple[Position, ...] = (Position(5, 5), Position(4, 5), Position(3, 5))

PREDEFINED_LEVELS: Tuple[LevelConfig, ...] = (
    # Level 1 - open board
    LevelConfig(
        id=1,
        speed=BASE_GAME_SPEED,
        has_walls=False,
        obstacles=(),
        initial_snake_position=DEFAULT_SNAKE_PATH,
        initial_food_position=Position(10, 10),
        special_food_frequency=0.1,
        required_score=5,
    ),
    # Level 2 - short vertical barrier
    LevelConfig(
        id=2,
        speed=BASE_GAME_SPEED - 10,
        has_walls=False,
        obstacles=(Position(10, 5), Position(10, 6), Position(10, 7)),
        initial_snake_position=DEFAULT_SNAKE_PATH,
        initial_food_position=Position(15, 10),
        special_food_frequency=0.2,
        required_score=10,
    ),
)


def get_level(level_number: int, rng=None, grid_size: int = GRID_SIZE) -> LevelConfig:
    """
    Return the config for a 1-based level number.

    Known levels come from PREDEFINED_LEVELS unchanged. Later levels are
    generated, and a fresh random layout is drawn on every call.
    """
    if level_number < 1:
        raise ValueError(f"Level number must be >= 1, got {level_number}")
    if level_number <= len(PREDEFINED_LEVELS):
        return PREDEFINED_LEVELS[level_number - 1]
    return generate_procedural_level(level_number, rng=rng, grid_size=grid_size)


def generate_procedural_level(
    level: int,
    rng=None,
    grid_size: int = GRID_SIZE,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> LevelConfig:
    """
    Build a level whose difficulty scales with its number.

    obstacles: level // 2 + 2, none on the starting snake, the first food
    or each other. Walls switch on after level 3.
    """
    rng = rng or random
    obstacle_count = level // 2 + 2
    snake_path = DEFAULT_SNAKE_PATH

    initial_food_position = random_free_cell(snake_path, grid_size, rng, max_attempts)

    occupied = set(snake_path)
    occupied.add(initial_food_position)
    obstacles = []
    for _ in range(obstacle_count):
        cell = random_free_cell(occupied, grid_size, rng, max_attempts)
        obstacles.append(cell)
        occupied.add(cell)

    logger.debug(f"Generated level {level} with {obstacle_count} obstacles")
    return LevelConfig(
        id=level,
        speed=max(MIN_SPEED, BASE_GAME_SPEED - level * 5),
        has_walls=level > 3,
        obstacles=tuple(obstacles),
        initial_snake_position=snake_path,
        initial_food_position=initial_food_position,
        special_food_frequency=min(0.8, 0.1 + level * 0.05),
        required_score=level * 5,
    )


class LevelCatalog:
    """
    Memoising front for get_level.

    Procedural levels change on every get_level call; a catalog hands back
    the same LevelConfig for repeated lookups of one level number.
    """

    def __init__(self, rng=None, grid_size: int = GRID_SIZE):
        self.rng = rng
        self.grid_size = grid_size
        self._levels: Dict[int, LevelConfig] = {}

    def get(self, level_number: int) -> LevelConfig:
        if level_number not in self._levels:
            self._levels[level_number] = get_level(
                level_number, rng=self.rng, grid_size=self.grid_size
            )
        return self._levels[level_number]

    __call__ = get

    def clear(self) -> None:
        self._levels.clear()
