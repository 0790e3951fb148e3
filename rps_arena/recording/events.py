"""
events.py
Defines the GameEvent dataclass used to record the notifications of a session for replay or analysis.
Used by recorder.py.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class GameEvent:
    """
    Represents a single notification fired by the session (e.g. round started, HP changed, rank changed).
    Fields:
        session_id (str): Identifier of the recording session.
        sequence (int): Position of the event in the recording, starting at 0.
        event_type (str): Type of event (e.g., 'HPChanged').
        payload (dict): Event-specific data.
        source (str|None): Class name of the object that fired the event.
    """
    session_id: str
    sequence: int
    event_type: str
    payload: Dict[str, Any]
    source: str = None
