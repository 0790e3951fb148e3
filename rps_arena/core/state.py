"""
state.py
Defines the round phase enum and the transient per-round state owned by the engine.
Related modules:
- engine.py: Mutates RoundState while driving the phases.
- moves.py: Move and RoundOutcome stored on the round.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .moves import Move, RoundOutcome


class RoundPhase(Enum):
    IDLE = "idle"
    ANALYSIS = "analysis"
    SELECTING = "selecting"
    REVEALING = "revealing"
    ROUND_END = "round_end"
    MATCH_END = "match_end"


@dataclass
class RoundState:
    """
    Transient state of the round in progress. Discarded on every match start or restart.
    Fields:
        phase (RoundPhase): Active phase.
        timer (float): Time left in the active phase (the countdown while selecting).
        player_move (Move): Move recorded for the player, NONE until submitted.
        opponent_move (Move): Move drawn for the opponent when selection starts.
        auto_selected (bool): True if the player's move was picked by the engine on timeout.
        outcome (RoundOutcome|None): Result once the round is revealed.
    """
    phase: RoundPhase = RoundPhase.IDLE
    timer: float = 0.0
    player_move: Move = Move.NONE
    opponent_move: Move = Move.NONE
    auto_selected: bool = False
    outcome: Optional[RoundOutcome] = None
