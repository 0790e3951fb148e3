import random

from .base import Agent
from ..core.moves import Move
from ..core.pattern import PatternAnalyzer
from ..core.rules import counter_move, random_move
from . import register_agent


@register_agent("pattern")
class PatternAgent(Agent):
    """
    Exploits a predictable player: runs a PatternAnalyzer over the player's recent moves and
    plays the counter of the predicted move. Falls back to a uniform move until `min_history`
    moves are known, and mixes in random moves with probability `noise`.
    """
    def __init__(self, rng=None, history_size=10, min_history=3, noise=0.1):
        """
        Args:
            rng: Optional random number generator.
            history_size: Window of player moves considered (int >= 1).
            min_history: Player moves required before predictions are trusted.
            noise: Probability of playing a uniform move instead of the counter (float 0-1).
        """
        self.rng = rng or random.Random()
        self.history_size = history_size
        self.min_history = min_history
        self.noise = noise

    def predict(self, view) -> Move:
        """Return the player's predicted next move, or Move.NONE when there is too little data."""
        history = self.player_history(view)
        if len(history) < self.min_history:
            return Move.NONE
        analyzer = PatternAnalyzer(self.history_size)
        for move in history:
            analyzer.record_move(move)
        return analyzer.predict_next_move()

    def choose_move(self, view):
        predicted = self.predict(view)
        if predicted == Move.NONE or self.rng.random() < self.noise:
            return random_move(self.rng)
        return counter_move(predicted)


@register_agent("pattern_strict")
class StrictPatternAgent(PatternAgent):
    """Always counters the prediction once enough history exists."""
    def __init__(self, rng=None):
        super().__init__(rng=rng, noise=0.0)
