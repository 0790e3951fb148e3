import random

from .base import Agent
from ..core.rules import random_move
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Uniform opponent: every round draws Rock, Paper or Scissors with equal probability.
    This is the engine's default opponent.
    """
    def __init__(self, rng=None):
        """
        Args:
            rng: Optional random number generator. The engine passes its own so a seeded session is reproducible.
        """
        self.rng = rng or random.Random()

    def choose_move(self, view):
        return random_move(self.rng)
