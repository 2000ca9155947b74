"""
Game engine: the single state transition of the simulation.

update_game_state consumes one GameState and returns the next. Callers
drive it once per tick, strictly one call at a time, and own pausing,
restarting and scheduling.
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from gridsnake.domain.constants import FOOD_TYPES, GRID_SIZE
from gridsnake.domain.food import Food, FoodType
from gridsnake.domain.game_state import GameState
from gridsnake.domain.level import LevelConfig
from gridsnake.domain.position import Direction
from .collision import (
    CollisionType,
    Effect,
    check_all_collisions,
    get_new_head,
    slow_down,
    speed_up,
)
from .level_catalog import LevelCatalog
from .placement import generate_food

logger = logging.getLogger(__name__)

LevelLookup = Callable[[int], LevelConfig]


def _default_levels(levels: Optional[LevelLookup], rng, grid_size: int) -> LevelLookup:
    # Generated levels draw from the caller's rng, never the module-level one
    if levels is None:
        return LevelCatalog(rng=rng, grid_size=grid_size)
    return levels


def initialize_game(
    level: int = 1,
    levels: Optional[LevelLookup] = None,
    rng=None,
    grid_size: int = GRID_SIZE,
) -> GameState:
    """Build the opening state for a level: its snake, obstacles, first food and speed."""
    config = _default_levels(levels, rng, grid_size)(level)
    return GameState(
        snake=config.initial_snake_position,
        food=Food(position=config.initial_food_position, type=FoodType.REGULAR, value=1),
        direction=Direction.RIGHT,
        next_direction=Direction.RIGHT,
        score=0,
        level=level,
        is_game_over=False,
        is_paused=False,
        obstacles=config.obstacles,
        speed=config.speed,
    )


def is_reversal(current: Direction, requested: Direction) -> bool:
    """True when `requested` would turn the snake straight back onto itself."""
    return Direction.parse(requested) == Direction.parse(current).opposite


def queue_direction(state: GameState, direction) -> GameState:
    """
    Store a pending direction for the next tick.

    Only the latest accepted request survives until the tick. A request for
    the opposite of the effective direction is ignored.
    """
    requested = Direction.parse(direction)
    if is_reversal(state.direction, requested):
        logger.debug(f"Ignoring reversal {requested.value} while moving {state.direction.value}")
        return state
    if requested == state.next_direction:
        return state
    return replace(state, next_direction=requested)


def set_paused(state: GameState, paused: bool) -> GameState:
    if state.is_paused == paused:
        return state
    return replace(state, is_paused=paused)


def toggle_pause(state: GameState) -> GameState:
    return set_paused(state, not state.is_paused)


def restart(state: GameState, levels: Optional[LevelLookup] = None, rng=None) -> GameState:
    """Start over at the state's current level."""
    return initialize_game(state.level, levels=levels, rng=rng)


def update_game_state(
    state: GameState,
    rng=None,
    levels: Optional[LevelLookup] = None,
    grid_size: int = GRID_SIZE,
) -> GameState:
    """
    Advance the game by one tick.

    1) Game-over and paused states are returned unchanged
    2) Adopt the pending direction (a reversal keeps the current one)
    3) Compute the new head and evaluate collisions against it
    4) A fatal collision ends the game without moving the snake
    5) Food grows the snake by one, scores, re-places food and may level up
    6) Otherwise the snake moves: new head in, tail out
    """
    if state.is_game_over or state.is_paused:
        return state

    levels = _default_levels(levels, rng, grid_size)
    level_config = levels(state.level)

    direction = state.next_direction
    if is_reversal(state.direction, direction):
        direction = state.direction

    new_head = get_new_head(state.head, direction, grid_size, level_config.has_walls)

    # The tail vacates its cell during the same tick
    candidate = (new_head,) + state.snake[:-1]
    collision = check_all_collisions(
        candidate,
        state.food,
        grid_size,
        level_config.has_walls,
        state.obstacles,
    )

    if collision.is_fatal:
        logger.info(
            f"Game over on level {state.level}: {collision.type.value} collision "
            f"at {tuple(new_head)} with score {state.score}"
        )
        return replace(state, is_game_over=True)

    if collision.type == CollisionType.FOOD:
        return _eat_food(state, new_head, direction, collision.effect, level_config, rng, levels, grid_size)

    return replace(
        state,
        snake=(new_head,) + state.snake[:-1],
        direction=direction,
    )


def _eat_food(state, new_head, direction, effect, level_config, rng, levels, grid_size) -> GameState:
    new_snake = (new_head,) + state.snake
    new_score = state.score + FOOD_TYPES[state.food.type].value

    new_speed = state.speed
    if effect == Effect.SPEED_UP:
        new_speed = speed_up(state.speed)
    elif effect == Effect.SLOW_DOWN:
        new_speed = slow_down(state.speed)

    new_food = generate_food(new_snake, state.obstacles, level_config, rng=rng, grid_size=grid_size)

    new_level = state.level
    if new_score >= level_config.required_score:
        new_level = state.level + 1
        new_speed = levels(new_level).speed
        logger.info(f"Level up: {state.level} -> {new_level} at score {new_score}")

    return replace(
        state,
        snake=new_snake,
        food=new_food,
        score=new_score,
        level=new_level,
        direction=direction,
        speed=new_speed,
    )
