"""
rank.py
Implements the RankLedger: cumulative rank points floored at zero, with tier and division derived
from the point total on every read.
Related modules:
- engine.py: Scores every revealed round through calculate_points and add_points.
- streak.py: Supplies the multiplier applied to wins.
"""

import logging
from enum import IntEnum

from .events import POINTS_CHANGED, RANK_CHANGED
from .moves import RoundOutcome
from .observers import Observable

logger = logging.getLogger(__name__)

TIER_SPAN = 500
DIVISION_SPAN = 125


class RankTier(IntEnum):
    BRONZE = 0
    SILVER = 1
    GOLD = 2
    PLATINUM = 3
    DIAMOND = 4
    MASTER = 5
    GRANDMASTER = 6

    @property
    def threshold(self) -> int:
        """Inclusive lower bound in points."""
        return self.value * TIER_SPAN

    @property
    def display_name(self) -> str:
        return "GrandMaster" if self is RankTier.GRANDMASTER else self.name.capitalize()


class Division(IntEnum):
    IV = 0
    III = 1
    II = 2
    I = 3


def tier_for_points(points: int) -> RankTier:
    for tier in reversed(RankTier):
        if points >= tier.threshold:
            return tier
    return RankTier.BRONZE


def division_for_points(points: int) -> Division:
    """
    Division inside the tier: the 500-point span is cut into four 125-point bands,
    and band b maps to Division(3 - b).
    """
    band = (points % TIER_SPAN) // DIVISION_SPAN
    return Division(max(0, min(3, 3 - band)))


class RankLedger(Observable):
    """
    Cumulative competitive score. Tier and division are never stored; they are recomputed
    from the point total so they cannot drift out of sync.
    """
    def __init__(self, base_win_points: int = 20, base_lose_points: int = -15, draw_points: int = 5):
        super().__init__()
        self.base_win_points = base_win_points
        self.base_lose_points = base_lose_points
        self.draw_points = draw_points
        self._current_points = 0

    @property
    def current_points(self) -> int:
        return self._current_points

    @property
    def current_tier(self) -> RankTier:
        return tier_for_points(self._current_points)

    @property
    def current_division(self) -> Division:
        return division_for_points(self._current_points)

    @property
    def rank_display(self) -> str:
        return f"{self.current_tier.display_name} {self.current_division.name}"

    def calculate_points(self, outcome: RoundOutcome, streak_multiplier: int) -> int:
        """
        Points earned (or lost) for a round.
        Args:
            outcome (RoundOutcome): Round result for the player.
            streak_multiplier (int): Current streak multiplier; only applied to wins.
        Returns:
            int: Point delta, negative for a loss.
        """
        if outcome == RoundOutcome.WIN:
            return self.base_win_points * streak_multiplier
        if outcome == RoundOutcome.LOSE:
            return self.base_lose_points
        return self.draw_points

    def add_points(self, delta: int) -> int:
        """
        Apply a point delta, flooring the total at zero. Fires RankChanged only when the tier changes.
        Returns:
            int: New point total.
        """
        old_tier = self.current_tier
        self._current_points = max(0, self._current_points + delta)
        logger.info(f"Points changed: {delta:+d} (total {self._current_points})")
        self._notify(POINTS_CHANGED, points=self._current_points, delta=delta)
        new_tier = self.current_tier
        if new_tier != old_tier:
            logger.info(f"Rank changed: {old_tier.display_name} -> {new_tier.display_name}")
            self._notify(RANK_CHANGED, tier=new_tier, division=self.current_division)
        return self._current_points

    def points_to_next_tier(self) -> int:
        """Points missing to reach the next tier; 0 at the top tier."""
        tier = self.current_tier
        if tier == RankTier.GRANDMASTER:
            return 0
        return RankTier(tier + 1).threshold - self._current_points

    def reset(self) -> None:
        old_tier = self.current_tier
        delta = -self._current_points
        self._current_points = 0
        logger.info("Rank points reset")
        self._notify(POINTS_CHANGED, points=0, delta=delta)
        if old_tier != RankTier.BRONZE:
            self._notify(RANK_CHANGED, tier=RankTier.BRONZE, division=self.current_division)
