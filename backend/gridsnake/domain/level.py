"""
LevelConfig entity - the static description of one level.
"""

from dataclasses import dataclass
from typing import Tuple

from .position import Position


@dataclass(frozen=True)
class LevelConfig:
    """
    Attributes:
        id: 1-based level number
        speed: milliseconds between ticks at the start of the level
        has_walls: edges kill when True, wrap around when False
        obstacles: fixed obstacle cells for the level
        initial_snake_position: starting body, head first
        initial_food_position: where the first food is placed
        special_food_frequency: probability in [0, 1] that placed food is special
        required_score: score at which the next level starts
    """

    id: int
    speed: int
    has_walls: bool
    obstacles: Tuple[Position, ...]
    initial_snake_position: Tuple[Position, ...]
    initial_food_position: Position
    special_food_frequency: float
    required_score: int

    def __post_init__(self):
        if self.id < 1:
            raise ValueError(f"Level id must be >= 1, got {self.id}")
        if not self.initial_snake_position:
            raise ValueError("Level must define a non-empty initial snake")
        if not 0.0 <= self.special_food_frequency <= 1.0:
            raise ValueError(
                f"special_food_frequency must be within [0, 1], got {self.special_food_frequency}"
            )
        object.__setattr__(self, "obstacles", tuple(Position(*p) for p in self.obstacles))
        object.__setattr__(
            self, "initial_snake_position", tuple(Position(*p) for p in self.initial_snake_position)
        )
        object.__setattr__(self, "initial_food_position", Position(*self.initial_food_position))
