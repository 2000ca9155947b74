"""
Food entity and food type definitions.
"""

from dataclasses import dataclass
from enum import Enum

from .position import Position


class FoodType(str, Enum):
    REGULAR = "regular"
    BONUS = "bonus"
    SPEED = "speed"
    SLOW = "slow"
    DANGER = "danger"  # reserved, never placed by the engine


@dataclass(frozen=True)
class FoodSpec:
    """Static properties shared by every food of one type."""

    value: int
    effect: str
    color: str


@dataclass(frozen=True)
class Food:
    """
    The single food item on the board.

    Attributes:
        position: cell the food occupies
        type: one of FoodType
        value: score awarded when eaten
    """

    position: Position
    type: FoodType = FoodType.REGULAR
    value: int = 1

    def __post_init__(self):
        object.__setattr__(self, "position", Position(*self.position))
        object.__setattr__(self, "type", FoodType(self.type))
