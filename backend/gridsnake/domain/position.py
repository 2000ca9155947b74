"""
Position and Direction value types.
"""

from enum import Enum
from typing import NamedTuple


class Position(NamedTuple):
    """A grid cell. Compares equal to a plain (x, y) tuple."""

    x: int
    y: int


class Direction(str, Enum):
    """
    Movement directions.

    Screen coordinates are used: `UP` decreases y, `DOWN` increases y.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Position:
        return _DELTAS[self]

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction or a case-insensitive name like 'UP' or 'left'."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown direction {value!r}. Expected one of: {valid}")


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
    Direction.RIGHT: Position(1, 0),
}

VALID_MOVES = frozenset(Direction)
