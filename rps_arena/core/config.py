"""
config.py
Defines the GameConfig dataclass, which centralizes all numeric constants and timings for the RPS arena engine.
Related modules:
- engine.py: Uses GameConfig for phase timings.
- match.py, streak.py, rank.py, reward.py, pattern.py: Read their tuning values from GameConfig.
"""

from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options and numeric constraints for an RPS arena session.
    Fields:
        max_hp (int): Starting and maximum HP for both sides.
        damage_per_round (int): HP removed from the loser of a round.
        countdown_time (float): Time the player has to pick a move.
        analysis_delay (float): Pause before the selection countdown.
        reveal_delay (float): Pause while both moves are shown.
        round_end_delay (float): Pause after a round before the next one starts.
        history_size (int): Window size of the pattern analyzer.
        max_streak_multiplier (int): Cap for the win streak point multiplier.
        streak_gold_rewards (tuple): Gold per streak length; the last entry repeats.
        base_win_points (int): Rank points per win, multiplied by the streak.
        base_lose_points (int): Rank points for a loss (negative).
        draw_points (int): Rank points for a draw.
        base_match_reward (int): Gold granted for a won round before streak bonus.
        starting_gold (int): Initial gold balance.
        starting_gems (int): Initial gem balance.
        rng_seed (int|None): Seed for deterministic sessions.
    """
    max_hp: int = 30
    damage_per_round: int = 10
    countdown_time: float = 5.0
    analysis_delay: float = 1.0
    reveal_delay: float = 1.0
    round_end_delay: float = 2.5
    history_size: int = 10
    max_streak_multiplier: int = 4
    streak_gold_rewards: Tuple[int, ...] = (10, 20, 30, 40)
    base_win_points: int = 20
    base_lose_points: int = -15
    draw_points: int = 5
    base_match_reward: int = 10
    starting_gold: int = 100
    starting_gems: int = 0
    rng_seed: Optional[int] = 69

    def __post_init__(self):
        if self.max_hp <= 0:
            raise ValueError("max_hp must be positive")
        if self.damage_per_round < 0:
            raise ValueError("damage_per_round must not be negative")
        if self.countdown_time <= 0:
            raise ValueError("countdown_time must be positive")
        for name in ("analysis_delay", "reveal_delay", "round_end_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.history_size < 1:
            raise ValueError("history_size must be at least 1")
        if self.max_streak_multiplier < 1:
            raise ValueError("max_streak_multiplier must be at least 1")
        if not self.streak_gold_rewards:
            raise ValueError("streak_gold_rewards must not be empty")
        if any(r < 0 for r in self.streak_gold_rewards):
            raise ValueError("streak_gold_rewards must not contain negative amounts")
        if self.starting_gold < 0 or self.starting_gems < 0:
            raise ValueError("starting balances must not be negative")
