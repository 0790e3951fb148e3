"""
rps_arena
Rock-paper-scissors match engine: timed round state machine, HP match resolution,
opponent pattern analysis, and streak, rank and currency ledgers.
"""

from .core.config import GameConfig
from .core.moves import MatchResult, Move, RoundOutcome
from .core.state import RoundPhase
from .session import GameSession

__all__ = ["GameConfig", "GameSession", "MatchResult", "Move", "RoundOutcome", "RoundPhase"]
