"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .constants import BASE_GAME_SPEED, GRID_SIZE
from .food import Food, FoodType
from .position import Direction, Position

FOOD_MARKERS = {
    FoodType.REGULAR: "F",
    FoodType.BONUS: "B",
    FoodType.SPEED: "+",
    FoodType.SLOW: "-",
    FoodType.DANGER: "X",
}


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific tick.

    Every tick consumes one GameState and produces a new one; instances are
    never mutated.

    Attributes:
        snake: body cells from head (index 0) to tail
        food: the food currently on the board
        direction: direction used by the last movement
        next_direction: pending direction, adopted on the next tick
        score: points collected so far
        level: current level number (1-based)
        is_game_over: terminal flag, never cleared by the engine
        is_paused: suspension flag, owned by the caller
        obstacles: obstacle cells of the active level
        speed: milliseconds between ticks, honoured by the tick driver
    """

    snake: Tuple[Position, ...]
    food: Food
    direction: Direction = Direction.RIGHT
    next_direction: Direction = Direction.RIGHT
    score: int = 0
    level: int = 1
    is_game_over: bool = False
    is_paused: bool = False
    obstacles: Tuple[Position, ...] = ()
    speed: float = BASE_GAME_SPEED

    def __post_init__(self):
        if not self.snake:
            raise ValueError("GameState requires a non-empty snake")
        if self.level < 1:
            raise ValueError(f"Level must be >= 1, got {self.level}")
        # Normalise so states built from lists, bare tuples or strings compare equal
        object.__setattr__(self, "snake", tuple(Position(*p) for p in self.snake))
        object.__setattr__(self, "obstacles", tuple(Position(*p) for p in self.obstacles))
        object.__setattr__(self, "direction", Direction.parse(self.direction))
        object.__setattr__(self, "next_direction", Direction.parse(self.next_direction))

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    def print_board(self, grid_size: int = GRID_SIZE) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        # = obstacle
        H = snake head
        S = snake body
        F/B/+/-/X = food (regular, bonus, speed, slow, danger)
        Row 0 is printed first since UP decreases y.
        """
        board = [['.' for _ in range(grid_size)] for _ in range(grid_size)]

        for ox, oy in self.obstacles:
            board[oy][ox] = '#'

        fx, fy = self.food.position
        board[fy][fx] = FOOD_MARKERS[self.food.type]

        # Draw tail first so the head wins on overlap
        for x, y in reversed(self.snake[1:]):
            if 0 <= x < grid_size and 0 <= y < grid_size:
                board[y][x] = 'S'
        hx, hy = self.head
        if 0 <= hx < grid_size and 0 <= hy < grid_size:
            board[hy][hx] = 'H'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(grid_size)]
        result.append("   " + " ".join(str(i % 10) for i in range(grid_size)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot for render collaborators."""
        return {
            "snake": [list(p) for p in self.snake],
            "food": {
                "position": list(self.food.position),
                "type": self.food.type.value,
                "value": self.food.value,
            },
            "direction": self.direction.value,
            "next_direction": self.next_direction.value,
            "score": self.score,
            "level": self.level,
            "is_game_over": self.is_game_over,
            "is_paused": self.is_paused,
            "obstacles": [list(p) for p in self.obstacles],
            "speed": self.speed,
        }

    def __repr__(self):
        return (
            f"<GameState level={self.level}, score={self.score}, "
            f"length={len(self.snake)}, head={tuple(self.head)}, "
            f"game_over={self.is_game_over}>"
        )
