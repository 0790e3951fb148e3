"""
reward.py
Implements the RewardLedger: gold and gem balances with guarded grant and spend operations,
plus the match, daily and ad reward schemes.
Related modules:
- engine.py: Grants the per-round reward after each revealed round.
- streak.py: Supplies the streak bonus added to a won round.
"""

import logging

from .events import CURRENCY_CHANGED
from .moves import RoundOutcome
from .observers import Observable

logger = logging.getLogger(__name__)

DAILY_REWARD_PER_DAY = 10
DAILY_REWARD_CAP = 100
DAILY_REWARD_AFTER_WEEK = 50
AD_REWARD = 50


class RewardLedger(Observable):
    """
    Spendable balances. Neither balance can go negative: spends that exceed the balance fail
    and leave both balances unchanged.
    """
    def __init__(self, starting_gold: int = 100, starting_gems: int = 0, base_match_reward: int = 10):
        super().__init__()
        if starting_gold < 0 or starting_gems < 0:
            raise ValueError("starting balances must not be negative")
        self.starting_gold = starting_gold
        self.starting_gems = starting_gems
        self.base_match_reward = base_match_reward
        self._gold = starting_gold
        self._gems = starting_gems

    @property
    def gold(self) -> int:
        return self._gold

    @property
    def gems(self) -> int:
        return self._gems

    def _changed(self):
        self._notify(CURRENCY_CHANGED, gold=self._gold, gems=self._gems)

    def add_gold(self, amount: int) -> None:
        if amount <= 0:
            return
        self._gold += amount
        logger.info(f"Gold added: +{amount} (total {self._gold})")
        self._changed()

    def add_gems(self, amount: int) -> None:
        if amount <= 0:
            return
        self._gems += amount
        logger.info(f"Gems added: +{amount} (total {self._gems})")
        self._changed()

    def spend_gold(self, amount: int) -> bool:
        """
        Debit gold if the balance covers it.
        Returns:
            bool: False (balance unchanged) if the balance is insufficient or amount is negative.
        """
        if amount < 0:
            logger.warning(f"Refusing to spend a negative gold amount: {amount}")
            return False
        if self._gold < amount:
            logger.warning(f"Not enough gold: have {self._gold}, need {amount}")
            return False
        self._gold -= amount
        logger.info(f"Gold spent: -{amount} (total {self._gold})")
        self._changed()
        return True

    def spend_gems(self, amount: int) -> bool:
        if amount < 0:
            logger.warning(f"Refusing to spend a negative gem amount: {amount}")
            return False
        if self._gems < amount:
            logger.warning(f"Not enough gems: have {self._gems}, need {amount}")
            return False
        self._gems -= amount
        logger.info(f"Gems spent: -{amount} (total {self._gems})")
        self._changed()
        return True

    def has_enough_gold(self, amount: int) -> bool:
        return self._gold >= amount

    def has_enough_gems(self, amount: int) -> bool:
        return self._gems >= amount

    def grant_match_reward(self, outcome: RoundOutcome, streak_bonus: int = 0) -> int:
        """
        Pay out for a round. Only a win pays: base reward plus streak bonus.
        Returns:
            int: Gold granted (0 for a loss or draw).
        """
        if outcome != RoundOutcome.WIN:
            return 0
        total = self.base_match_reward + streak_bonus
        self.add_gold(total)
        return total

    def grant_daily_reward(self, day: int) -> int:
        """Day 1 pays 10, growing by 10 per day up to 100; from day 8 on the reward is a flat 50."""
        if day > 7:
            reward = DAILY_REWARD_AFTER_WEEK
        else:
            reward = min(day * DAILY_REWARD_PER_DAY, DAILY_REWARD_CAP)
        self.add_gold(reward)
        return max(0, reward)

    def grant_ad_reward(self) -> int:
        self.add_gold(AD_REWARD)
        return AD_REWARD

    def reset(self) -> None:
        self._gold = self.starting_gold
        self._gems = self.starting_gems
        self._changed()
