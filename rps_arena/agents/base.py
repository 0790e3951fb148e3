from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..core.moves import Move


class Agent(ABC):
    """
    Abstract base class for all RPS arena opponents.
    Agents must implement choose_move(view), called once per round when the selection countdown starts.
    The returned move is hidden from the player until the reveal.
    """

    @abstractmethod
    def choose_move(self, view: Any) -> Move:
        """
        Given the engine view, return the opponent's move for this round.
        Args:
            view (dict): Engine view with keys 'round', 'player_hp', 'opponent_hp', 'player_history' and 'config'.
        Returns:
            Move: Rock, Paper or Scissors.
        """
        raise NotImplementedError

    def player_history(self, view: Any) -> Iterable[Move]:
        """
        Moves the player made in earlier rounds of the match, oldest first.
        """
        if hasattr(view, "get"):
            return tuple(view.get("player_history", ()))
        return ()
