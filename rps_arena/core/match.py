"""
match.py
Implements MatchState: HP for both sides, the round counter and match-end classification.
Related modules:
- engine.py: Starts rounds and applies every round outcome.
- moves.py: RoundOutcome in, MatchResult out.
"""

import logging
from typing import Optional

from .events import HP_CHANGED, MATCH_ENDED, ROUND_ENDED, ROUND_STARTED
from .moves import MatchResult, RoundOutcome
from .observers import Observable

logger = logging.getLogger(__name__)


class MatchState(Observable):
    """
    One ongoing match. 0 <= hp <= max_hp holds for both sides at all times;
    the match is over as soon as either side is at 0.
    """
    def __init__(self, max_hp: int = 30, damage_per_round: int = 10):
        super().__init__()
        if max_hp <= 0:
            raise ValueError("max_hp must be positive")
        if damage_per_round < 0:
            raise ValueError("damage_per_round must not be negative")
        self.max_hp = max_hp
        self.damage_per_round = damage_per_round
        self._player_hp = max_hp
        self._opponent_hp = max_hp
        self._current_round = 0
        self._result: Optional[MatchResult] = None

    @property
    def player_hp(self) -> int:
        return self._player_hp

    @property
    def opponent_hp(self) -> int:
        return self._opponent_hp

    @property
    def current_round(self) -> int:
        return self._current_round

    @property
    def is_match_ended(self) -> bool:
        return self._player_hp == 0 or self._opponent_hp == 0

    @property
    def match_result(self) -> Optional[MatchResult]:
        """Result of the finished match, None while it is still running."""
        return self._result

    def start_match(self) -> None:
        self._reset()
        logger.info(f"New match started (max HP {self.max_hp}, damage {self.damage_per_round})")
        self._notify(HP_CHANGED, player_hp=self._player_hp, opponent_hp=self._opponent_hp)

    def reset_match(self) -> None:
        self._reset()
        logger.info("Match reset")
        self._notify(HP_CHANGED, player_hp=self._player_hp, opponent_hp=self._opponent_hp)

    def _reset(self):
        self._player_hp = self.max_hp
        self._opponent_hp = self.max_hp
        self._current_round = 0
        self._result = None

    def start_next_round(self) -> bool:
        """
        Advance the round counter.
        Returns:
            bool: False if the match has already ended (nothing changes).
        """
        if self.is_match_ended:
            logger.warning("Cannot start the next round: match already ended")
            return False
        self._current_round += 1
        logger.info(f"Round {self._current_round} started "
                    f"(player {self._player_hp} HP, opponent {self._opponent_hp} HP)")
        self._notify(ROUND_STARTED, round=self._current_round)
        return True

    def apply_round_result(self, outcome: RoundOutcome) -> None:
        """Damage the loser of the round (nobody on a draw), then check for match end."""
        if outcome == RoundOutcome.WIN:
            self._opponent_hp = max(0, self._opponent_hp - self.damage_per_round)
        elif outcome == RoundOutcome.LOSE:
            self._player_hp = max(0, self._player_hp - self.damage_per_round)
        logger.info(f"Round {self._current_round}: {outcome.value} "
                    f"(player {self._player_hp} HP, opponent {self._opponent_hp} HP)")
        self._notify(ROUND_ENDED, round=self._current_round, outcome=outcome)
        self._notify(HP_CHANGED, player_hp=self._player_hp, opponent_hp=self._opponent_hp)
        self._check_match_end()

    def set_hp(self, player_hp: int, opponent_hp: int) -> None:
        """Override both HP values, clamped to [0, max_hp]."""
        self._player_hp = max(0, min(self.max_hp, player_hp))
        self._opponent_hp = max(0, min(self.max_hp, opponent_hp))
        if not self.is_match_ended:
            self._result = None
        logger.info(f"HP set manually (player {self._player_hp}, opponent {self._opponent_hp})")
        self._notify(HP_CHANGED, player_hp=self._player_hp, opponent_hp=self._opponent_hp)
        self._check_match_end()

    def _check_match_end(self):
        if not self.is_match_ended or self._result is not None:
            return
        if self._player_hp == 0 and self._opponent_hp == 0:
            # double KO counts against the player
            result = MatchResult.DEFEAT
            logger.info("Double KO: both sides at 0 HP, scored as defeat")
        elif self._player_hp == 0:
            result = MatchResult.DEFEAT
            logger.info(f"Player defeated (opponent {self._opponent_hp} HP left)")
        else:
            result = MatchResult.VICTORY
            logger.info(f"Player victorious ({self._player_hp} HP left)")
        self._result = result
        self._notify(MATCH_ENDED, result=result)
