"""
Controller Components
Reusable controller logic hooked into the controller lifecycle
"""
from typing import Any, Dict, Iterator, Optional
from viewkit.exceptions import FrameworkException


class MissingComponentException(FrameworkException):
    """
    Raised when a component name does not resolve

    Attributes:
        class: Component name
    """
    message_template = 'Component class "{class}" could not be found.'


class Component:
    """
    Base component

    Lifecycle hooks are attached to the controller's event manager only
    when a subclass defines them:

        before_filter(event)  -> Controller.initialize
        startup(event)        -> Controller.startup
        before_render(event)  -> Controller.beforeRender
        shutdown(event)       -> Controller.shutdown
    """

    HOOKS = {
        'Controller.initialize': 'before_filter',
        'Controller.startup': 'startup',
        'Controller.beforeRender': 'before_render',
        'Controller.shutdown': 'shutdown',
    }

    def __init__(self, controller, config: Optional[Dict[str, Any]] = None):
        self.controller = controller
        self.config = dict(config or {})
        self.initialize(self.config)

    def initialize(self, config: Dict[str, Any]):
        """Hook for subclasses, called from the constructor"""
        pass

    def implemented_events(self) -> Dict[str, str]:
        return {
            event: method
            for event, method in self.HOOKS.items()
            if callable(getattr(self, method, None))
        }


class ComponentRegistry:
    """
    Components loaded on a controller, keyed by short name

    Example:
        controller.components.load('RequestHandler')
        controller.components.get('RequestHandler').startup(event)
    """

    def __init__(self, controller):
        self._controller = controller
        self._loaded: Dict[str, Component] = {}

    def load(self, name: str, config: Optional[Dict[str, Any]] = None) -> Component:
        """
        Load a component and attach its hooks to the controller's events

        Raises:
            MissingComponentException: If the name does not resolve
        """
        alias = name.split('.')[-1]
        if alias in self._loaded:
            return self._loaded[alias]

        from viewkit.support import ClassLoader

        component_class = ClassLoader.class_name(name, 'Controller/Component', 'Component')
        if component_class is None:
            raise MissingComponentException(attributes={'class': name})

        component = component_class(self._controller, config)
        self._loaded[alias] = component
        self._controller.event_manager.on(component)
        return component

    def get(self, name: str) -> Optional[Component]:
        return self._loaded.get(name)

    def has(self, name: str) -> bool:
        return name in self._loaded

    def loaded(self):
        return list(self._loaded)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._loaded.values())
