import os
import sys
from itertools import cycle

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class ScriptedRandom:
    """
    Stand-in for random.Random with scripted answers.

    cells: (x, y) pairs handed out by successive randrange calls, cycled
    randoms: values for random(), cycled (default 0.99 -> regular food)
    choices: indexes used by choice(), cycled (default 0)
    """

    def __init__(self, cells=((0, 0),), randoms=(0.99,), choices=(0,)):
        self._ints = cycle([v for cell in cells for v in cell])
        self._randoms = cycle(randoms)
        self._choices = cycle(choices)
        self.randrange_calls = 0

    def randrange(self, stop):
        self.randrange_calls += 1
        value = next(self._ints)
        assert 0 <= value < stop
        return value

    def random(self):
        return next(self._randoms)

    def choice(self, seq):
        return seq[next(self._choices) % len(seq)]


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
