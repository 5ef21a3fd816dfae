"""
Error Controller
Controller used by the exception renderer
"""
from viewkit.controller.controller import Controller
from viewkit.defaults import ERROR_TEMPLATE_PATH


class ErrorController(Controller):
    """
    Renders error pages from the 'Error' template directory

    Applications override it by providing their own ErrorController in
    '<app namespace>.controller'.
    """

    def initialize(self):
        self.load_component('RequestHandler')

    def before_render(self, event):
        self.view_builder().with_template_path(ERROR_TEMPLATE_PATH)
