"""
observers.py
Synchronous callback registration shared by the engine and every ledger.
Handlers receive a single event dict: {"type": <event name>, ...payload}.
Related modules:
- events.py: Event type names.
"""

from collections import defaultdict
from typing import Callable, Dict, List

Handler = Callable[[Dict], None]

# subscribe key for handlers that want every event
ALL_EVENTS = "*"


class Observable:
    """
    Base class for objects that fire notifications on state change.
    Dispatch is synchronous, in subscription order. Handlers must not mutate the engine.
    """
    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: Handler) -> None:
        """Register `handler` for `event_type`. Registering the same handler twice is a no-op."""
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: Handler) -> None:
        self.subscribe(ALL_EVENTS, handler)

    def unsubscribe(self, event_type: str, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def _notify(self, event_type: str, **payload) -> Dict:
        event = {"type": event_type, **payload}
        for handler in list(self._handlers.get(event_type, ())):
            handler(event)
        for handler in list(self._handlers.get(ALL_EVENTS, ())):
            handler(event)
        return event
