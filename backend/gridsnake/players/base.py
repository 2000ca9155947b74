"""
Base player interface for the game engine.
"""

import random
from typing import List

from gridsnake.domain.constants import GRID_SIZE
from gridsnake.domain.game_state import GameState
from gridsnake.domain.position import Direction
from gridsnake.engine.collision import get_new_head
from gridsnake.engine.level_catalog import LevelCatalog

SEARCH_ORDER = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class Player:
    """
    Base class/interface for direction policies.

    A player never moves the snake itself: it returns the direction the
    tick driver should queue before the next tick.
    """

    name = "player"

    def __init__(self, grid_size: int = GRID_SIZE, levels=None, rng=None):
        self.grid_size = grid_size
        self.rng = rng or random
        # One cached config per level number
        self.levels = levels if levels is not None else LevelCatalog(rng=rng, grid_size=grid_size)

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of the Direction members
        """
        raise NotImplementedError

    def has_walls(self, game_state: GameState) -> bool:
        return self.levels(game_state.level).has_walls

    def candidate_moves(self, game_state: GameState) -> List[Direction]:
        """Every direction except an instant reversal, in SEARCH_ORDER."""
        reverse = game_state.direction.opposite
        return [d for d in SEARCH_ORDER if d != reverse]

    def is_safe(self, game_state: GameState, direction: Direction) -> bool:
        """True if moving in `direction` hits no wall, obstacle or body cell (tail excluded)."""
        x, y = get_new_head(game_state.head, direction, self.grid_size, self.has_walls(game_state))
        if x < 0 or x >= self.grid_size or y < 0 or y >= self.grid_size:
            return False
        if (x, y) in game_state.obstacles:
            return False
        # Tail moves away this tick
        return (x, y) not in game_state.snake[:-1]
