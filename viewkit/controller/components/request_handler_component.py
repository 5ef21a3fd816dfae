"""
Request Handler Component
Content-type negotiation for controller responses
"""
from viewkit.controller.component import Component
from viewkit.events import Event


class RequestHandlerComponent(Component):
    """
    Switches the view class to Json for JSON requests

    A request is treated as JSON when its path ends in '.json' or its
    Accept header lists application/json before text/html.

    Config:
        view_class_map: Extension -> view class (default {'json': 'Json'})
    """

    def initialize(self, config):
        self.view_class_map = {'json': 'Json', **config.get('view_class_map', {})}
        self.ext = None

    def startup(self, event: Event):
        request = self.controller.request
        self.ext = self.negotiate(request)
        if self.ext and self.ext in self.view_class_map:
            self.controller.view_builder().with_class_name(self.view_class_map[self.ext])

    @staticmethod
    def negotiate(request):
        """Detect the response extension for a request, or None for HTML"""
        if request is None:
            return None

        path = getattr(request, 'path', '') or ''
        if path.endswith('.json'):
            return 'json'

        headers = getattr(request, 'headers', None) or {}
        accept = headers.get('accept', '') or ''
        accepted = [part.split(';', 1)[0].strip().lower() for part in accept.split(',')]
        if 'application/json' in accepted:
            html_index = accepted.index('text/html') if 'text/html' in accepted else len(accepted)
            if accepted.index('application/json') < html_index:
                return 'json'

        return None
