"""
Dispatcher
Dispatcher lifecycle events and the configurable filter chain
"""
from typing import Any, Dict, List, Optional, Type, Union
from viewkit.events import Event, EventManager


class DispatcherFilter:
    """
    Base dispatcher filter

    Filters hook into 'Dispatcher.beforeDispatch' and 'Dispatcher.afterDispatch'.
    An after_dispatch hook may replace ``event.data['response']``.

    Configuration:
    - priority: Lower runs first (default 10)
    - for: Only run for request paths starting with this prefix

    Example:
        class PoweredByFilter(DispatcherFilter):
            def after_dispatch(self, event):
                event.data['response'].headers['X-Powered-By'] = 'viewkit'

        DispatcherFactory.add(PoweredByFilter, {'priority': 5})
    """

    priority = 10

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = dict(config or {})
        if 'priority' in self.config:
            self.priority = self.config['priority']

    def implemented_events(self) -> Dict[str, Any]:
        return {
            'Dispatcher.beforeDispatch': {'callable': 'handle', 'priority': self.priority},
            'Dispatcher.afterDispatch': {'callable': 'handle', 'priority': self.priority},
        }

    def handle(self, event: Event):
        """Route an event to before_dispatch or after_dispatch"""
        if not self.matches(event):
            return None

        if event.name == 'Dispatcher.beforeDispatch':
            return self.before_dispatch(event)
        return self.after_dispatch(event)

    def matches(self, event: Event) -> bool:
        """Check the 'for' path condition against the event's request"""
        prefix = self.config.get('for')
        if not prefix:
            return True

        request = event.data.get('request')
        path = getattr(request, 'path', None)
        return path is not None and path.startswith(prefix)

    def before_dispatch(self, event: Event):
        return None

    def after_dispatch(self, event: Event):
        return None


class Dispatcher:
    """
    Dispatcher holding an ordered filter list and an event manager

    Filters are not attached to the event manager until the caller
    decides which lifecycle step to run.
    """

    def __init__(self, event_manager: Optional[EventManager] = None):
        self._filters: List[DispatcherFilter] = []
        self._event_manager = event_manager or EventManager()

    @property
    def event_manager(self) -> EventManager:
        return self._event_manager

    def add_filter(self, dispatch_filter: DispatcherFilter) -> 'Dispatcher':
        self._filters.append(dispatch_filter)
        return self

    def filters(self) -> List[DispatcherFilter]:
        return list(self._filters)

    def dispatch_event(self, name: str, data: Optional[Dict[str, Any]] = None) -> Event:
        """
        Dispatch a lifecycle event with this dispatcher as subject

        Returns:
            The dispatched event
        """
        return self._event_manager.dispatch(Event(name, self, data))


class DispatcherFactory:
    """
    Builds dispatchers with the application's configured filter stack

    Example:
        DispatcherFactory.add('app.filters.CacheFilter', {'for': '/pages'})
        DispatcherFactory.add(PoweredByFilter)
        dispatcher = DispatcherFactory.create()
    """

    _stack: List[DispatcherFilter] = []

    @classmethod
    def add(
        cls,
        dispatch_filter: Union[str, Type[DispatcherFilter], DispatcherFilter],
        options: Optional[Dict[str, Any]] = None
    ) -> DispatcherFilter:
        """
        Add a filter to the stack

        Args:
            dispatch_filter: Filter instance, filter class, or dotted class path
            options: Config passed to the filter constructor

        Returns:
            The filter instance
        """
        if isinstance(dispatch_filter, str):
            from viewkit.support import ClassLoader
            dispatch_filter = ClassLoader.load(dispatch_filter)

        if isinstance(dispatch_filter, type):
            dispatch_filter = dispatch_filter(options)

        cls._stack.append(dispatch_filter)
        return dispatch_filter

    @classmethod
    def create(cls) -> Dispatcher:
        """Create a dispatcher with every registered filter added"""
        dispatcher = Dispatcher()
        for dispatch_filter in cls._stack:
            dispatcher.add_filter(dispatch_filter)
        return dispatcher

    @classmethod
    def filters(cls) -> List[DispatcherFilter]:
        return list(cls._stack)

    @classmethod
    def clear(cls):
        cls._stack.clear()
