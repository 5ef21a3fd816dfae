"""
Event
A named occurrence passed to every listener of an EventManager
"""
from typing import Any, Optional, Dict


class Event:
    """
    Event object passed to listeners

    Example:
        event = Event('Controller.startup', controller, {'request': request})
        manager.dispatch(event)
        if event.is_stopped():
            ...
    """

    def __init__(self, name: str, subject: Any = None, data: Optional[Dict[str, Any]] = None):
        self.name = name
        self.subject = subject
        self.data: Dict[str, Any] = dict(data or {})
        self.result: Any = None
        self._stopped = False

    def stop_propagation(self):
        """Prevent any remaining listeners from running"""
        self._stopped = True

    def is_stopped(self) -> bool:
        return self._stopped

    def __repr__(self):
        return f'Event(name={self.name!r}, stopped={self._stopped})'
