"""
Domain entities for the grid snake engine.

This module contains the value types the engine passes around. They are
independent of rules, randomness and presentation.
"""

from .position import Position, Direction, VALID_MOVES
from .food import Food, FoodType, FoodSpec
from .level import LevelConfig
from .game_state import GameState
from .constants import (
    GRID_SIZE,
    CELL_SIZE,
    BASE_GAME_SPEED,
    MIN_SPEED,
    MAX_SPEED,
    FOOD_TYPES,
    SPECIAL_FOOD_TYPES,
)

__all__ = [
    'Position', 'Direction', 'VALID_MOVES',
    'Food', 'FoodType', 'FoodSpec',
    'LevelConfig',
    'GameState',
    'GRID_SIZE', 'CELL_SIZE', 'BASE_GAME_SPEED', 'MIN_SPEED', 'MAX_SPEED',
    'FOOD_TYPES', 'SPECIAL_FOOD_TYPES',
]
