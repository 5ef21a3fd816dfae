"""
Event Manager
Registers listeners and dispatches events to them in priority order
"""
from typing import Any, Callable, Dict, List, Optional, Union
from viewkit.events.event import Event

DEFAULT_PRIORITY = 10


class EventManager:
    """
    Event manager

    Listeners are either plain callables attached to an event name, or
    objects exposing ``implemented_events()``. The latter maps event names
    to a method name, a callable, or ``{'callable': ..., 'priority': ...}``.

    Lower priorities run first; equal priorities run in attach order.

    Example:
        manager = EventManager()
        manager.on('Controller.startup', lambda event: print(event.subject))
        manager.on(component)  # uses component.implemented_events()
        manager.dispatch(Event('Controller.startup', controller))
    """

    def __init__(self):
        self._listeners: Dict[str, List[tuple]] = {}
        self._sequence = 0

    def on(
        self,
        event_key: Union[str, Any],
        callable_: Optional[Callable] = None,
        priority: int = DEFAULT_PRIORITY
    ) -> 'EventManager':
        """
        Attach a listener

        Args:
            event_key: Event name, or an object implementing implemented_events()
            callable_: Listener callable (when event_key is a name)
            priority: Listener priority (lower runs first)

        Returns:
            The manager, for chaining
        """
        if not isinstance(event_key, str):
            self._attach_subscriber(event_key)
            return self

        if callable_ is None:
            raise ValueError(f"A callable is required to listen to '{event_key}'")

        self._add(event_key, callable_, priority)
        return self

    def _attach_subscriber(self, subscriber: Any):
        events = getattr(subscriber, 'implemented_events', None)
        if events is None:
            raise TypeError(
                f"{subscriber.__class__.__name__} does not implement implemented_events()"
            )

        for name, handler in events().items():
            priority = getattr(subscriber, 'priority', DEFAULT_PRIORITY)
            if isinstance(handler, dict):
                priority = handler.get('priority', priority)
                handler = handler['callable']
            if isinstance(handler, str):
                handler = getattr(subscriber, handler)
            self._add(name, handler, priority)

    def _add(self, name: str, listener: Callable, priority: int):
        self._sequence += 1
        self._listeners.setdefault(name, []).append((priority, self._sequence, listener))

    def off(self, event_key: Union[str, Any], callable_: Optional[Callable] = None) -> 'EventManager':
        """
        Detach listeners

        off('name') removes all listeners of an event, off('name', fn) a single
        one, off(subscriber) every method bound to that object.
        """
        if isinstance(event_key, str):
            if callable_ is None:
                self._listeners.pop(event_key, None)
            else:
                self._listeners[event_key] = [
                    entry for entry in self._listeners.get(event_key, [])
                    if entry[2] != callable_
                ]
            return self

        for name in list(self._listeners):
            self._listeners[name] = [
                entry for entry in self._listeners[name]
                if getattr(entry[2], '__self__', None) is not event_key
            ]
        return self

    def listeners(self, name: str) -> List[Callable]:
        """Get listeners for an event in call order"""
        return [entry[2] for entry in sorted(self._listeners.get(name, []), key=lambda e: (e[0], e[1]))]

    def dispatch(self, event: Union[str, Event]) -> Event:
        """
        Dispatch an event to its listeners

        A listener returning False stops propagation; any other non-None
        return value becomes the event result.

        Returns:
            The dispatched event
        """
        if isinstance(event, str):
            event = Event(event)

        for listener in self.listeners(event.name):
            if event.is_stopped():
                break
            result = listener(event)
            if result is False:
                event.stop_propagation()
            elif result is not None:
                event.result = result

        return event
