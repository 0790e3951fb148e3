"""
moves.py
Shared vocabulary for the RPS arena: hand moves, round outcomes and match results.
Related modules:
- rules.py: Compares moves and produces a RoundOutcome.
- match.py: Produces a MatchResult when a side runs out of HP.
"""

from enum import Enum


class Move(Enum):
    """A hand shape. NONE means no move was made and is never scored."""
    NONE = "none"
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @classmethod
    def playable(cls):
        return (cls.ROCK, cls.PAPER, cls.SCISSORS)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Parse user input such as 'r', 'Rock' or 'scissors'.
        Raises:
            ValueError: If the text does not name a playable move.
        """
        t = text.strip().lower()
        for move in cls.playable():
            if t == move.value or t == move.value[0]:
                return move
        raise ValueError(f"Unknown move: {text!r}")

    def __str__(self):
        return self.value.capitalize()


class RoundOutcome(Enum):
    """Result of a round from the player's perspective."""
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class MatchResult(Enum):
    VICTORY = "victory"
    DEFEAT = "defeat"
