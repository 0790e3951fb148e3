"""
rules.py
Defines the win rule and move helpers for the RPS arena.
Related modules:
- engine.py: Uses resolve_round to settle a round and random_move for draws and auto-selection.
- agents: Use counter_move to exploit a predicted move.
"""

import random

from .moves import Move, RoundOutcome

# each move maps to the move it beats
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


def resolve_round(player: Move, opponent: Move) -> RoundOutcome:
    """
    Compare two moves from the player's perspective.
    Args:
        player (Move): The player's move.
        opponent (Move): The opponent's move.
    Returns:
        RoundOutcome: WIN, LOSE or DRAW.
    Raises:
        ValueError: If either move is Move.NONE.
    """
    if player not in BEATS or opponent not in BEATS:
        raise ValueError("both moves must be Rock, Paper or Scissors")
    if player == opponent:
        return RoundOutcome.DRAW
    if BEATS[player] == opponent:
        return RoundOutcome.WIN
    return RoundOutcome.LOSE


def counter_move(move: Move) -> Move:
    """Return the move that beats `move`."""
    for candidate, beaten in BEATS.items():
        if beaten == move:
            return candidate
    raise ValueError(f"{move} has no counter")


def random_move(rng: random.Random) -> Move:
    """Draw a playable move uniformly at random."""
    return rng.choice(Move.playable())
