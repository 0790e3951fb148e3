"""
session.py
Defines GameSession, the single owner of every ledger for one player session. It builds the ledgers from
a GameConfig and hands them to the RoundEngine explicitly.
Related modules:
- core/engine.py: RoundEngine driven through the session.
- agents: Opponent strategies selectable by name.
"""

import logging
import random
from typing import Optional

from .agents import create_agent
from .core.config import GameConfig
from .core.engine import RoundEngine
from .core.match import MatchState
from .core.moves import Move
from .core.pattern import PatternAnalyzer
from .core.rank import RankLedger
from .core.reward import RewardLedger
from .core.state import RoundPhase
from .core.streak import StreakTracker

logger = logging.getLogger(__name__)


class GameSession:
    """
    Long-lived player session. Match state is rebuilt on every match start; streak, rank,
    currency and pattern history survive across matches until reset_progression() is called.
    """
    def __init__(self, config: Optional[GameConfig] = None, opponent: str = "random", opponent_agent=None):
        """
        Args:
            config (GameConfig|None): Session configuration; defaults to GameConfig().
            opponent (str): Registered agent name used when opponent_agent is not given.
            opponent_agent (Agent|None): Ready-made opponent, takes precedence over `opponent`.
        """
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.rng_seed)
        self.match = MatchState(self.config.max_hp, self.config.damage_per_round)
        self.streak = StreakTracker(self.config.max_streak_multiplier, self.config.streak_gold_rewards)
        self.rank = RankLedger(self.config.base_win_points, self.config.base_lose_points, self.config.draw_points)
        self.rewards = RewardLedger(self.config.starting_gold, self.config.starting_gems,
                                    self.config.base_match_reward)
        self.pattern = PatternAnalyzer(self.config.history_size)
        if opponent_agent is None:
            opponent_agent = create_agent(opponent, rng=self.rng)
        self.engine = RoundEngine(self.config, self.match, self.streak, self.rank, self.rewards,
                                  self.pattern, opponent=opponent_agent, rng=self.rng)
        logger.info(f"Session ready (opponent {type(opponent_agent).__name__}, "
                    f"gold {self.rewards.gold}, rank {self.rank.rank_display})")

    def observables(self):
        """Every object in the session that fires notifications."""
        return (self.engine, self.match, self.streak, self.rank, self.rewards, self.pattern)

    @property
    def phase(self) -> RoundPhase:
        return self.engine.phase

    def start_match(self) -> None:
        self.engine.start_match()

    def restart(self) -> None:
        self.engine.restart()

    def select_move(self, move: Move) -> bool:
        return self.engine.select_move(move)

    def advance(self, dt: float) -> RoundPhase:
        return self.engine.advance(dt)

    def reset_progression(self) -> None:
        """Explicitly wipe streak, rank points, currency and pattern history."""
        self.streak.reset()
        self.rank.reset()
        self.rewards.reset()
        self.pattern.reset()
        logger.info("Session progression reset")
