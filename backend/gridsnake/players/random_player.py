"""
Random player implementation - picks random safe moves.
"""

from typing import List

from gridsnake.domain.game_state import GameState
from gridsnake.domain.position import Direction
from .base import Player


class RandomPlayer(Player):
    """
    A random policy that picks a direction avoiding walls, obstacles and its own body.
    """

    name = "random"

    def get_move(self, game_state: GameState) -> Direction:
        candidates = self.candidate_moves(game_state)
        safe_moves: List[Direction] = [d for d in candidates if self.is_safe(game_state, d)]

        # If no safe moves, pick any non-reversal (we'll die anyway)
        if not safe_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(safe_moves)
