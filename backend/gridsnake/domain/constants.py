"""
Game constants for the grid engine.
"""

from .food import FoodType, FoodSpec

# Board settings
GRID_SIZE = 20
CELL_SIZE = 15  # pixels per cell, only used by render collaborators

# Tick interval in milliseconds
BASE_GAME_SPEED = 150
MIN_SPEED = 50
MAX_SPEED = 300
SPEED_UP_FACTOR = 0.8
SLOW_DOWN_FACTOR = 1.2

DEFAULT_SCORE_BONUS = 5

# Food type -> score value, effect on eating, display color
FOOD_TYPES = {
    FoodType.REGULAR: FoodSpec(value=1, effect="grow", color="#FF0000"),
    FoodType.BONUS: FoodSpec(value=3, effect="grow", color="#FFFF00"),
    FoodType.SPEED: FoodSpec(value=1, effect="speedUp", color="#00FFFF"),
    FoodType.SLOW: FoodSpec(value=1, effect="slowDown", color="#FF00FF"),
    FoodType.DANGER: FoodSpec(value=0, effect="die", color="#808080"),
}

SPECIAL_FOOD_TYPES = (FoodType.BONUS, FoodType.SPEED, FoodType.SLOW)
