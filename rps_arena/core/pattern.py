"""
pattern.py
Implements the PatternAnalyzer: a bounded sliding window over the opponent's recent moves with
incrementally maintained per-move counts, frequency percentages and a naive next-move prediction.
Related modules:
- engine.py: Feeds the opponent's move after every revealed round.
- agents/pattern_agent.py: Reuses the analyzer over the player's own moves.
"""

import logging
from collections import Counter, deque
from typing import Dict, List

from .events import PATTERN_UPDATED
from .moves import Move
from .observers import Observable

logger = logging.getLogger(__name__)

# percentage reported for every move while the window is empty
NO_DATA_PERCENTAGE = 33.3


class PatternAnalyzer(Observable):
    """
    Frequency tracker over the last `history_size` moves.
    Counts always equal the occurrences inside the retained window; the oldest move is evicted
    and its count decremented when the window overflows, without rescanning.
    """
    def __init__(self, history_size: int = 10):
        super().__init__()
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self.history_size = history_size
        self._history = deque()
        self._counts = Counter()

    @property
    def total_moves(self) -> int:
        return len(self._history)

    def count(self, move: Move) -> int:
        return self._counts[move]

    def record_move(self, move: Move) -> None:
        """Append a move to the window. Move.NONE is ignored."""
        if move == Move.NONE:
            return
        self._history.append(move)
        self._counts[move] += 1
        if len(self._history) > self.history_size:
            oldest = self._history.popleft()
            self._counts[oldest] -= 1
        percentages = self.percentages()
        logger.debug(f"Move recorded: {move} ({self.statistics_string()})")
        self._notify(PATTERN_UPDATED, move=move, percentages=percentages)

    def percentages(self) -> Dict[Move, float]:
        """
        Share of each playable move in the window, in percent.
        Returns:
            dict[Move, float]: 33.3 for every move while no data exists.
        """
        total = self.total_moves
        if total == 0:
            return {m: NO_DATA_PERCENTAGE for m in Move.playable()}
        return {m: self._counts[m] / total * 100.0 for m in Move.playable()}

    @property
    def rock_percentage(self) -> float:
        return self.percentages()[Move.ROCK]

    @property
    def paper_percentage(self) -> float:
        return self.percentages()[Move.PAPER]

    @property
    def scissors_percentage(self) -> float:
        return self.percentages()[Move.SCISSORS]

    def recent_moves(self, count: int) -> List[Move]:
        """Return up to `count` most recent moves, oldest first."""
        if count <= 0:
            return []
        return list(self._history)[-count:]

    def most_frequent_move(self) -> Move:
        """Most common move in the window. Ties resolve to Rock, then Paper, then Scissors."""
        best = Move.ROCK
        for move in Move.playable():
            if self._counts[move] > self._counts[best]:
                best = move
        return best

    def predict_next_move(self) -> Move:
        # frequency only, no sequence modelling
        return self.most_frequent_move()

    def has_consecutive_pattern(self, move: Move, count: int) -> bool:
        """
        True iff the newest `count` entries all equal `move`.
        Returns False when fewer than `count` entries exist. A run of length 0 always matches.
        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return True
        if len(self._history) < count:
            return False
        consecutive = 0
        for recorded in reversed(self._history):
            if recorded != move:
                break
            consecutive += 1
            if consecutive >= count:
                return True
        return False

    def reset(self) -> None:
        self._history = deque()
        self._counts = Counter()
        logger.info("Pattern history reset")

    def statistics_string(self) -> str:
        if self.total_moves == 0:
            return "No data yet"
        return (f"Pattern: Rock {self.rock_percentage:.1f}% | "
                f"Paper {self.paper_percentage:.1f}% | "
                f"Scissors {self.scissors_percentage:.1f}%")
