"""
Collision evaluation for the grid engine.

Every function here is pure: it classifies where the head landed and maps
that classification to a gameplay effect, without touching any state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

from gridsnake.domain.constants import (
    DEFAULT_SCORE_BONUS,
    FOOD_TYPES,
    MAX_SPEED,
    MIN_SPEED,
    SLOW_DOWN_FACTOR,
    SPEED_UP_FACTOR,
)
from gridsnake.domain.food import Food
from gridsnake.domain.position import Direction, Position


class CollisionType(str, Enum):
    NONE = "none"
    WALL = "wall"
    SNAKE = "snake"
    OBSTACLE = "obstacle"
    FOOD = "food"


class Effect(str, Enum):
    NONE = "none"
    GROW = "grow"
    DIE = "die"
    SPEED_UP = "speedUp"
    SLOW_DOWN = "slowDown"
    SCORE_BONUS = "scoreBonus"


FATAL_TYPES = frozenset({CollisionType.WALL, CollisionType.SNAKE, CollisionType.OBSTACLE})


@dataclass(frozen=True)
class CollisionResult:
    collided: bool
    type: CollisionType = CollisionType.NONE
    effect: Effect = Effect.NONE
    value: int = 0
    food: Optional[Food] = None

    @property
    def is_fatal(self) -> bool:
        return self.collided and self.effect == Effect.DIE


NO_COLLISION = CollisionResult(collided=False)


class EffectOutcome(NamedTuple):
    new_snake: Tuple[Position, ...]
    new_score: int
    new_speed: float
    is_game_over: bool


def _fatal_or_clear(collided: bool, collision_type: CollisionType) -> CollisionResult:
    if not collided:
        return CollisionResult(collided=False, type=collision_type)
    return CollisionResult(collided=True, type=collision_type, effect=Effect.DIE)


def check_wall_collision(head: Position, grid_size: int, has_walls: bool = False) -> CollisionResult:
    """
    Report a wall hit when the head left the board.

    Without walls the board is toroidal, so this never collides.
    """
    if not has_walls:
        return CollisionResult(collided=False, type=CollisionType.WALL)
    x, y = head
    collided = x < 0 or x >= grid_size or y < 0 or y >= grid_size
    return _fatal_or_clear(collided, CollisionType.WALL)


def check_self_collision(snake: Sequence[Position]) -> CollisionResult:
    """Collided iff the head shares a cell with any other segment."""
    if not snake:
        raise ValueError("Snake must contain at least one segment")
    head = snake[0]
    collided = any(segment == head for segment in snake[1:])
    return _fatal_or_clear(collided, CollisionType.SNAKE)


def check_obstacle_collision(head: Position, obstacles: Sequence[Position]) -> CollisionResult:
    return _fatal_or_clear(head in set(obstacles), CollisionType.OBSTACLE)


def check_food_collision(head: Position, food: Food) -> CollisionResult:
    """Collided iff the head is on the food; the effect follows the food type."""
    if head != food.position:
        return CollisionResult(collided=False, type=CollisionType.FOOD, food=food)
    spec = FOOD_TYPES[food.type]
    return CollisionResult(
        collided=True,
        type=CollisionType.FOOD,
        effect=Effect(spec.effect),
        value=spec.value,
        food=food,
    )


def check_all_collisions(
    snake: Sequence[Position],
    food: Food,
    grid_size: int,
    has_walls: bool = False,
    obstacles: Sequence[Position] = (),
) -> CollisionResult:
    """
    Return the first collision for the snake's head.

    Order is wall, self, obstacle, food: a fatal hit is never shadowed by
    food sitting on the same cell.
    """
    if not snake:
        raise ValueError("Snake must contain at least one segment")
    head = snake[0]

    checks = (
        lambda: check_wall_collision(head, grid_size, has_walls),
        lambda: check_self_collision(snake),
        lambda: check_obstacle_collision(head, obstacles),
        lambda: check_food_collision(head, food),
    )
    for check in checks:
        result = check()
        if result.collided:
            return result
    return NO_COLLISION


def get_new_head(
    head: Position,
    direction: Direction,
    grid_size: int,
    has_walls: bool = False,
) -> Position:
    """
    Translate the head one cell in `direction`.

    Without walls the moving coordinate wraps modulo grid_size. With walls
    it may leave the board so that check_wall_collision can report it.
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive, got {grid_size}")
    dx, dy = Direction.parse(direction).delta
    x, y = head[0] + dx, head[1] + dy
    if not has_walls:
        x = (x + grid_size) % grid_size
        y = (y + grid_size) % grid_size
    return Position(x, y)


def speed_up(speed: float) -> float:
    return max(speed * SPEED_UP_FACTOR, MIN_SPEED)


def slow_down(speed: float) -> float:
    return min(speed * SLOW_DOWN_FACTOR, MAX_SPEED)


def handle_collision_effect(
    result: CollisionResult,
    snake: Sequence[Position],
    score: int,
    speed: float,
) -> EffectOutcome:
    """
    Apply exactly one effect from a collision result.

    grow appends `value` copies of the tail and adds `value` to score;
    speedUp/slowDown rescale speed within [MIN_SPEED, MAX_SPEED] and add
    `value`; scoreBonus only adds to score; die ends the game.
    """
    new_snake = tuple(snake)
    new_score = score
    new_speed = speed
    is_game_over = False

    if not result.collided:
        return EffectOutcome(new_snake, new_score, new_speed, is_game_over)

    effect = result.effect
    if effect == Effect.GROW:
        grow_by = result.value or 1
        new_snake = new_snake + (new_snake[-1],) * grow_by
        new_score += grow_by
    elif effect == Effect.SPEED_UP:
        new_speed = speed_up(speed)
        new_score += result.value or 1
    elif effect == Effect.SLOW_DOWN:
        new_speed = slow_down(speed)
        new_score += result.value or 1
    elif effect == Effect.SCORE_BONUS:
        new_score += result.value or DEFAULT_SCORE_BONUS
    elif effect == Effect.DIE:
        is_game_over = True

    return EffectOutcome(new_snake, new_score, new_speed, is_game_over)
