"""
streak.py
Implements the StreakTracker: the player's consecutive round wins, the capped point multiplier
and the gold reward table.
Related modules:
- engine.py: Records wins and non-wins after each revealed round.
- rank.py: Consumes current_multiplier when scoring a win.
"""

import logging
from typing import Sequence

from .events import STREAK_CHANGED, STREAK_REWARD
from .moves import RoundOutcome
from .observers import Observable

logger = logging.getLogger(__name__)


class StreakTracker(Observable):
    def __init__(self, max_multiplier: int = 4, gold_rewards: Sequence[int] = (10, 20, 30, 40)):
        super().__init__()
        if max_multiplier < 1:
            raise ValueError("max_multiplier must be at least 1")
        if not gold_rewards:
            raise ValueError("gold_rewards must not be empty")
        self.max_multiplier = max_multiplier
        self.gold_rewards = tuple(gold_rewards)
        self._current_streak = 0

    @property
    def current_streak(self) -> int:
        return self._current_streak

    @property
    def current_multiplier(self) -> int:
        return min(self._current_streak, self.max_multiplier)

    def _reward_for(self, streak: int) -> int:
        if streak <= 0:
            return 0
        index = min(streak - 1, len(self.gold_rewards) - 1)
        return self.gold_rewards[index]

    def gold_reward(self) -> int:
        """Gold earned by the current streak; 0 without a streak."""
        return self._reward_for(self._current_streak)

    def next_reward(self) -> int:
        """Gold the next win would earn."""
        return self._reward_for(self._current_streak + 1)

    def record_win(self) -> int:
        """
        Extend the streak by one win.
        Returns:
            int: Gold reward for the new streak length.
        """
        self._current_streak += 1
        reward = self.gold_reward()
        logger.info(f"Streak increased to {self._current_streak} "
                    f"(multiplier x{self.current_multiplier}, gold +{reward})")
        self._notify(STREAK_CHANGED, streak=self._current_streak)
        self._notify(STREAK_REWARD, streak=self._current_streak, gold=reward)
        return reward

    def record_non_win(self, outcome: RoundOutcome = RoundOutcome.LOSE) -> None:
        """
        Record a round the player did not win. Only a loss breaks the streak;
        a draw leaves it untouched.
        """
        if outcome == RoundOutcome.WIN:
            raise ValueError("use record_win for a won round")
        if outcome == RoundOutcome.LOSE:
            self.reset()

    def reset(self) -> None:
        logger.info(f"Streak reset (was {self._current_streak})")
        self._current_streak = 0
        self._notify(STREAK_CHANGED, streak=0)

    def defend_streak(self) -> None:
        """Keep the current streak through a loss the caller chose to forgive."""
        logger.info(f"Streak defended at {self._current_streak}")
