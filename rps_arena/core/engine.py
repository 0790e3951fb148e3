"""
engine.py
Implements the RoundEngine class, the round state machine. It advances timed phases, accepts the player's move,
applies the win rule and pushes every round outcome into the match, streak, rank, reward and pattern ledgers.
Related modules:
- config.py: GameConfig supplies phase timings.
- state.py: RoundPhase and RoundState hold the transient per-round data.
- match.py, streak.py, rank.py, reward.py, pattern.py: The ledgers the engine reports outcomes to.
- rules.py: Win rule and uniform move draws.
"""

import logging
import random
from collections import deque
from typing import Dict, List, Optional

from ..agents.random_agent import RandomAgent
from .config import GameConfig
from .events import MOVE_AUTO_SELECTED, MOVE_SELECTED, PHASE_CHANGED, ROUND_RESOLVED
from .match import MatchState
from .moves import Move, RoundOutcome
from .observers import Observable
from .pattern import PatternAnalyzer
from .rank import RankLedger
from .reward import RewardLedger
from .rules import random_move, resolve_round
from .state import RoundPhase, RoundState
from .streak import StreakTracker

logger = logging.getLogger(__name__)

# phases in which time does not pass
_STOPPED = (RoundPhase.IDLE, RoundPhase.MATCH_END)


class IllegalMoveError(Exception):
    """
    Raised when a move outside Rock/Paper/Scissors is submitted or drawn.
    """
    pass


class RoundEngine(Observable):
    """
    Main state machine for a match. Driven by an external scheduler through advance(dt);
    the only asynchronous input is select_move during the selection countdown.
    The engine owns only the transient round state. Ledgers are passed in and mutated
    exclusively through their public operations.
    """
    def __init__(self, config: GameConfig, match: MatchState, streak: StreakTracker, rank: RankLedger,
                 rewards: RewardLedger, pattern: PatternAnalyzer, opponent=None, rng: Optional[random.Random] = None):
        """
        Initialize the engine with its collaborators.
        Args:
            config (GameConfig): Game configuration.
            match, streak, rank, rewards, pattern: Ledgers owned by the session.
            opponent (Agent|None): Chooses the opponent's move; defaults to a uniform RandomAgent.
            rng (random.Random|None): RNG for auto-selection; seeded from config.rng_seed if omitted.
        """
        super().__init__()
        self.config = config
        self.match = match
        self.streak = streak
        self.rank = rank
        self.rewards = rewards
        self.pattern = pattern
        self.rng = rng or random.Random(config.rng_seed)
        if opponent is None:
            opponent = RandomAgent(rng=self.rng)
        self.opponent = opponent
        self.round = RoundState()
        self.player_history = deque(maxlen=config.history_size)
        self._events: List[Dict] = []
        # round_log holds one snapshot per resolved round
        self.round_log: List[Dict] = []

    @property
    def phase(self) -> RoundPhase:
        return self.round.phase

    @property
    def timer(self) -> float:
        return self.round.timer

    def _emit(self, event_type: str, **payload) -> None:
        """
        Internal: Notify subscribers and record the event for later retrieval.
        """
        self._events.append(self._notify(event_type, **payload))

    def pop_events(self):
        """
        Return and clear all engine events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all engine events emitted so far (does not clear).
        """
        return list(self._events)

    def get_view(self) -> Dict:
        """
        View handed to the opponent agent when it picks a move.
        """
        return {
            "round": self.match.current_round,
            "player_hp": self.match.player_hp,
            "opponent_hp": self.match.opponent_hp,
            "player_history": tuple(self.player_history),
            "config": self.config,
        }

    def _set_phase(self, phase: RoundPhase, timer: float = 0.0) -> None:
        self.round.phase = phase
        self.round.timer = timer
        logger.debug(f"Phase -> {phase.value} (timer {timer})")
        self._emit(PHASE_CHANGED, phase=phase)

    # -- match control ---------------------------------------------------

    def start_match(self) -> None:
        """
        Start a fresh match from any phase. In-flight timers and round state are discarded;
        streak, rank and currency are left alone.
        """
        self._discard_match_state()
        self.match.start_match()
        self._enter_analysis()

    def restart(self) -> None:
        """
        Abandon the current match and return to Idle.
        """
        self._discard_match_state()
        self.match.reset_match()
        self._set_phase(RoundPhase.IDLE)

    def _discard_match_state(self) -> None:
        # round_log and the event buffer are per match
        self.round = RoundState()
        self.player_history.clear()
        self.round_log = []
        self._events.clear()

    def is_terminal(self) -> bool:
        return self.round.phase == RoundPhase.MATCH_END

    # -- time --------------------------------------------------------------

    def advance(self, dt: float) -> RoundPhase:
        """
        Let `dt` time units pass. Time left over after a phase expires carries into the next phase,
        so one large step can cross several phases. Nothing happens in Idle or MatchEnd.
        Args:
            dt (float): Elapsed time since the previous tick.
        Returns:
            RoundPhase: The phase after advancing.
        """
        if dt < 0:
            raise ValueError("dt must not be negative")
        remaining = dt
        while self.round.phase not in _STOPPED:
            if self.round.timer > remaining:
                self.round.timer -= remaining
                break
            remaining -= self.round.timer
            self.round.timer = 0.0
            self._on_timer_expired()
        return self.round.phase

    def _on_timer_expired(self) -> None:
        phase = self.round.phase
        if phase == RoundPhase.ANALYSIS:
            self._enter_selecting()
        elif phase == RoundPhase.SELECTING:
            self._auto_select()
        elif phase == RoundPhase.REVEALING:
            self._enter_round_end()
        elif phase == RoundPhase.ROUND_END:
            self._enter_analysis()

    # -- player input ------------------------------------------------------

    def select_move(self, move: Move) -> bool:
        """
        Submit the player's move. Accepted only while selecting; the round is revealed immediately.
        Args:
            move (Move): Rock, Paper or Scissors.
        Returns:
            bool: True if the move was accepted, False if the engine is not in the selecting phase.
        Raises:
            IllegalMoveError: If move is not a playable Move.
        """
        if move not in Move.playable():
            raise IllegalMoveError(f"Not a playable move: {move!r}")
        if self.round.phase != RoundPhase.SELECTING:
            logger.debug(f"Ignoring {move} submitted during {self.round.phase.value}")
            return False
        self.round.player_move = move
        self._emit(MOVE_SELECTED, move=move)
        self._enter_revealing()
        return True

    def _auto_select(self) -> None:
        move = random_move(self.rng)
        self.round.player_move = move
        self.round.auto_selected = True
        logger.info(f"Countdown expired, auto-selected {move} for the player")
        self._emit(MOVE_AUTO_SELECTED, move=move)
        self._enter_revealing()

    # -- phase entry -------------------------------------------------------

    def _enter_analysis(self) -> None:
        if not self.match.start_next_round():
            self._set_phase(RoundPhase.MATCH_END)
            return
        self.round = RoundState()
        self._set_phase(RoundPhase.ANALYSIS, self.config.analysis_delay)

    def _end_if_match_over(self) -> bool:
        """
        Internal: Jump to MatchEnd when the match was decided outside round resolution (set_hp).
        """
        if not self.match.is_match_ended:
            return False
        logger.info(f"Match already decided ({self.match.match_result.value}), pending round dropped")
        self._set_phase(RoundPhase.MATCH_END)
        return True

    def _enter_selecting(self) -> None:
        if self._end_if_match_over():
            return
        self.round.player_move = Move.NONE
        self.round.auto_selected = False
        opponent_move = self.opponent.choose_move(self.get_view())
        if opponent_move not in Move.playable():
            raise IllegalMoveError(f"Opponent chose an unplayable move: {opponent_move!r}")
        self.round.opponent_move = opponent_move
        self._set_phase(RoundPhase.SELECTING, self.config.countdown_time)

    def _enter_revealing(self) -> None:
        if self._end_if_match_over():
            return
        self._set_phase(RoundPhase.REVEALING, self.config.reveal_delay)
        self._resolve_round()

    def _enter_round_end(self) -> None:
        if self.match.is_match_ended:
            self._set_phase(RoundPhase.ROUND_END)
            logger.info(f"Match over after {self.match.current_round} rounds: {self.match.match_result.value}")
            self._set_phase(RoundPhase.MATCH_END)
        else:
            self._set_phase(RoundPhase.ROUND_END, self.config.round_end_delay)

    def _resolve_round(self) -> None:
        """
        Internal: Apply the win rule and report the outcome to every ledger.
        """
        player_move = self.round.player_move
        opponent_move = self.round.opponent_move
        outcome = resolve_round(player_move, opponent_move)
        self.round.outcome = outcome

        self.match.apply_round_result(outcome)

        streak_bonus = 0
        if outcome == RoundOutcome.WIN:
            streak_bonus = self.streak.record_win()
        else:
            self.streak.record_non_win(outcome)

        points = self.rank.calculate_points(outcome, self.streak.current_multiplier)
        self.rank.add_points(points)
        self.rewards.grant_match_reward(outcome, streak_bonus)
        self.pattern.record_move(opponent_move)
        self.player_history.append(player_move)

        self.round_log.append({
            "round": self.match.current_round,
            "player_move": player_move,
            "opponent_move": opponent_move,
            "auto_selected": self.round.auto_selected,
            "outcome": outcome,
            "points": points,
            "player_hp": self.match.player_hp,
            "opponent_hp": self.match.opponent_hp,
        })
        self._emit(ROUND_RESOLVED, round=self.match.current_round, player_move=player_move,
                   opponent_move=opponent_move, outcome=outcome)
