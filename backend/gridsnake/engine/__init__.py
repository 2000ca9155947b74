"""
Rules of the grid snake simulation.

collision      - pure collision classification and effects
level_catalog  - predefined and procedural LevelConfig lookup
placement      - free-cell sampling and food generation
game_engine    - initialize_game / update_game_state
"""

from .collision import (
    CollisionType,
    Effect,
    CollisionResult,
    EffectOutcome,
    check_wall_collision,
    check_self_collision,
    check_obstacle_collision,
    check_food_collision,
    check_all_collisions,
    get_new_head,
    handle_collision_effect,
)
from .level_catalog import PREDEFINED_LEVELS, LevelCatalog, get_level, generate_procedural_level
from .placement import NoFreeCellError, generate_food, random_free_cell
from .game_engine import (
    initialize_game,
    update_game_state,
    queue_direction,
    is_reversal,
    set_paused,
    toggle_pause,
    restart,
)

__all__ = [
    'CollisionType', 'Effect', 'CollisionResult', 'EffectOutcome',
    'check_wall_collision', 'check_self_collision', 'check_obstacle_collision',
    'check_food_collision', 'check_all_collisions', 'get_new_head',
    'handle_collision_effect',
    'PREDEFINED_LEVELS', 'LevelCatalog', 'get_level', 'generate_procedural_level',
    'NoFreeCellError', 'generate_food', 'random_free_cell',
    'initialize_game', 'update_game_state', 'queue_direction', 'is_reversal',
    'set_paused', 'toggle_pause', 'restart',
]
