"""
Events Package
Lifecycle events for controllers, views and the dispatcher
"""
from viewkit.events.event import Event
from viewkit.events.event_manager import EventManager

__all__ = [
    'Event',
    'EventManager',
]
