"""
Registry for direction policies.

Maps player keys (e.g. 'greedy', 'random') to player classes. To add a
policy, subclass Player and add an entry to PLAYER_CLASSES.
"""

from typing import Dict, List, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer

DEFAULT_PLAYER = "greedy"

PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "greedy": GreedyPlayer,
    "random": RandomPlayer,
}

# Canonical list of available player keys (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of AVAILABLE_PLAYERS. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = DEFAULT_PLAYER

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]


def list_players() -> List[dict]:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "greedy", "description": "Shortest path toward the food, horizontal first"},
        {"key": "random", "description": "Uniformly random among safe moves"},
    ]
