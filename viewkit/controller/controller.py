"""
Controller
Owns the request/response pair and orchestrates view rendering
"""
from typing import Any, Dict, List, Optional
from sanic.response import HTTPResponse
from viewkit.controller.component import ComponentRegistry
from viewkit.events import Event, EventManager
from viewkit.view import ViewBuilder


class Controller:
    """
    Base controller

    The controller listens to its own lifecycle events:

        Controller.initialize   -> before_filter(event)
        Controller.beforeRender -> before_render(event)
        Controller.shutdown     -> after_filter(event)

    Components loaded in initialize() are attached before the controller
    itself, so their hooks run first.

    Example:
        class PagesController(Controller):
            helpers = ['Html']

            def initialize(self):
                self.load_component('RequestHandler')

        controller = PagesController(request)
        controller.set('title', 'About')
        response = controller.render('about')
    """

    helpers: List[str] = []

    def __init__(
        self,
        request=None,
        response: Optional[HTTPResponse] = None,
        name: Optional[str] = None,
        event_manager: Optional[EventManager] = None
    ):
        self.request = request
        self.response = response if response is not None else HTTPResponse()

        if name is None:
            name = self.__class__.__name__
            if name.endswith('Controller') and name != 'Controller':
                name = name[:-len('Controller')]
        self.name = name

        self.plugin: Optional[str] = None
        self.view_vars: Dict[str, Any] = {}
        self.helpers = list(self.__class__.helpers)
        self.event_manager = event_manager or EventManager()
        self.components = ComponentRegistry(self)
        self._view_builder: Optional[ViewBuilder] = None

        self.initialize()
        self.event_manager.on(self)

    def initialize(self):
        """Hook for subclasses to load components and set defaults"""
        pass

    def implemented_events(self) -> Dict[str, str]:
        return {
            'Controller.initialize': 'before_filter',
            'Controller.beforeRender': 'before_render',
            'Controller.shutdown': 'after_filter',
        }

    def before_filter(self, event: Event):
        return None

    def before_render(self, event: Event):
        return None

    def after_filter(self, event: Event):
        return None

    def load_component(self, name: str, config: Optional[Dict[str, Any]] = None):
        """Load a component by short name (e.g., 'RequestHandler')"""
        return self.components.load(name, config)

    def view_builder(self) -> ViewBuilder:
        """Get the view builder, creating it on first use"""
        if self._view_builder is None:
            self._view_builder = ViewBuilder()
        return self._view_builder

    def set(self, name, value=None) -> 'Controller':
        """
        Set one view variable, or several from a dict

        Example:
            controller.set('title', 'Home')
            controller.set({'title': 'Home', 'items': items})
        """
        if isinstance(name, dict):
            self.view_vars.update(name)
        else:
            self.view_vars[name] = value
        return self

    def dispatch_event(self, name: str, data: Optional[Dict[str, Any]] = None, subject: Any = None) -> Event:
        """Dispatch an event on the controller's event manager"""
        return self.event_manager.dispatch(Event(name, subject if subject is not None else self, data))

    def startup_process(self) -> Optional[HTTPResponse]:
        """
        Run the initialize and startup events

        Returns:
            A response produced by a listener, or None
        """
        event = self.dispatch_event('Controller.initialize')
        if isinstance(event.result, HTTPResponse):
            return event.result

        event = self.dispatch_event('Controller.startup')
        if isinstance(event.result, HTTPResponse):
            return event.result

        return None

    def shutdown_process(self) -> Optional[HTTPResponse]:
        """Run the shutdown event"""
        event = self.dispatch_event('Controller.shutdown')
        if isinstance(event.result, HTTPResponse):
            return event.result
        return None

    def create_view(self, view_class=None):
        """
        Build a view from the controller's view builder

        Args:
            view_class: Optional view class override (e.g., 'View' or 'Json')
        """
        builder = self.view_builder()
        if view_class:
            builder.with_class_name(view_class)
        if builder.name is None:
            builder.with_name(self.name)
        builder.with_plugin(self.plugin)
        if self.helpers:
            builder.with_helpers(self.helpers)

        return builder.build(self.view_vars, self.request, self.response, self.event_manager)

    def render(self, template: Optional[str] = None, layout: Optional[str] = None) -> HTTPResponse:
        """
        Render a template into the controller's response

        Returns:
            The new response
        """
        builder = self.view_builder()
        if builder.template_path is None:
            builder.with_template_path(self.name)

        event = self.dispatch_event('Controller.beforeRender')
        if isinstance(event.result, HTTPResponse):
            self.response = event.result
            return self.response
        if event.is_stopped():
            return self.response

        view = self.create_view()
        body = view.render(template, layout)

        self.response = HTTPResponse(
            body,
            status=self.response.status,
            headers=self.response.headers,
            content_type=view.content_type,
        )
        return self.response
