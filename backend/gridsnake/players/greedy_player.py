"""
Greedy player - heads straight for the food.
"""

from gridsnake.domain.game_state import GameState
from gridsnake.domain.position import Direction
from .base import Player


class GreedyPlayer(Player):
    """
    Moves toward the food along the shortest signed delta.

    Horizontal moves are tried before vertical ones so the snake does not
    fold itself into a vertical column. Without walls the delta wraps
    across the nearer edge.
    """

    name = "greedy"

    def _delta(self, start: int, end: int, wraps: bool) -> int:
        delta = end - start
        if wraps and abs(delta) > self.grid_size / 2:
            delta = delta - self.grid_size if delta > 0 else delta + self.grid_size
        return delta

    def get_move(self, game_state: GameState) -> Direction:
        head = game_state.head
        food = game_state.food.position
        wraps = not self.has_walls(game_state)
        dx = self._delta(head.x, food.x, wraps)
        dy = self._delta(head.y, food.y, wraps)

        preferred = []
        if dx != 0:
            preferred.append(Direction.RIGHT if dx > 0 else Direction.LEFT)
        if dy != 0:
            preferred.append(Direction.DOWN if dy > 0 else Direction.UP)

        reverse = game_state.direction.opposite
        for direction in preferred:
            if direction != reverse and self.is_safe(game_state, direction):
                return direction

        for direction in self.candidate_moves(game_state):
            if self.is_safe(game_state, direction):
                return direction

        return game_state.direction
