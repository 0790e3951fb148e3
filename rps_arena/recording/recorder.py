"""
recorder.py
Implements event recording for RPS arena sessions. Captures every notification as a GameEvent in memory.
Related modules:
- events.py: Defines GameEvent type.
- session.py: GameSession.observables() lists what gets attached.
"""

from typing import List, Optional

from ..core.observers import ALL_EVENTS
from .events import GameEvent


class InMemoryRecorder:
    """
    Records GameEvent objects in memory for later retrieval.
    Methods:
        attach(session): Subscribe to every notification of a session.
        record(event): Add a new event.
        events(event_type=None): Get recorded events, optionally filtered by type.
        clear(): Drop everything recorded so far.
    """
    def __init__(self, session_id: str = "session"):
        self.session_id = session_id
        self._events: List[GameEvent] = []
        self._attached = []

    def attach(self, session) -> None:
        """Subscribe to all observables of `session`."""
        for observable in session.observables():
            handler = self._handler_for(type(observable).__name__)
            observable.subscribe_all(handler)
            self._attached.append((observable, handler))

    def detach(self) -> None:
        for observable, handler in self._attached:
            observable.unsubscribe(ALL_EVENTS, handler)
        self._attached = []

    def _handler_for(self, source: str):
        def handle(event):
            payload = {k: v for k, v in event.items() if k != "type"}
            self.record(GameEvent(self.session_id, len(self._events), event["type"], payload, source))
        return handle

    def record(self, event: GameEvent) -> None:
        """Add a new event to the recorder."""
        self._events.append(event)

    def events(self, event_type: Optional[str] = None):
        """Return recorded events as a list, optionally only those of `event_type`."""
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e.event_type == event_type]

    def clear(self):
        self._events = []
