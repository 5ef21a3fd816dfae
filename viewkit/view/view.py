"""
View
Renders a template, wrapped in a layout, with helpers and view variables
"""
from typing import Any, Dict, List, Optional
from jinja2 import TemplateNotFound
from markupsafe import Markup
from viewkit.core import Plugin
from viewkit.defaults import (
    DEFAULT_LAYOUT,
    DEFAULT_LAYOUT_DIR,
    DEFAULT_TEMPLATE_EXTENSION,
    DEFAULT_VIEW_PATHS,
)
from viewkit.events import Event
from viewkit.logging import getLogger
from viewkit.support import ClassLoader, Config
from viewkit.view.engine import CORE_TEMPLATES, TemplateEngine
from viewkit.view.exceptions import (
    MissingHelperException,
    MissingLayoutException,
    MissingTemplateException,
)

logger = getLogger(__name__)


class View:
    """
    Template-rendering view

    Views are normally created by ViewBuilder.build(). The template file is
    '<template_path>/<template><ext>' and the layout file is
    'layout/<layout_path>/<layout><ext>'. Both are looked up in the theme's
    templates, the plugin's templates, the configured view paths and finally
    the framework's own templates.

    Example:
        view = View(request, response, view_options={
            'template_path': 'Pages',
            'view_vars': {'title': 'Home'},
        })
        html = view.render('home')
    """

    content_type = 'text/html; charset=utf-8'

    def __init__(
        self,
        request=None,
        response=None,
        event_manager=None,
        view_options: Optional[Dict[str, Any]] = None
    ):
        options = dict(view_options or {})

        self.request = request
        self.response = response
        self.event_manager = event_manager

        self.name = options.pop('name', None)
        self.template_path = options.pop('template_path', None)
        self.template = options.pop('template', None)
        self.plugin = options.pop('plugin', None)
        self.theme = options.pop('theme', None)
        self.layout_path = options.pop('layout_path', None)

        layout = options.pop('layout', None)
        self.layout = DEFAULT_LAYOUT if layout is None else layout

        auto_layout = options.pop('auto_layout', None)
        self.auto_layout = True if auto_layout is None else bool(auto_layout)

        self.helpers: List[str] = list(options.pop('helpers', None) or [])
        self.view_vars: Dict[str, Any] = dict(options.pop('view_vars', None) or {})
        self.extension = options.pop('extension', None) or Config.get(
            'view.TEMPLATE_EXTENSION', DEFAULT_TEMPLATE_EXTENSION
        )

        # Anything left over is kept for subclasses
        self.options = options

    def set(self, name, value=None) -> 'View':
        """Set one view variable, or several from a dict"""
        if isinstance(name, dict):
            self.view_vars.update(name)
        else:
            self.view_vars[name] = value
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self.view_vars.get(name, default)

    def paths(self) -> List[str]:
        """
        Template directories in lookup order

        Raises:
            MissingPluginException: If the theme or plugin is not loaded
        """
        paths = []
        for plugin in (self.theme, self.plugin):
            if plugin:
                paths.append(str(Plugin.templates_path(plugin)))

        for path in Config.get('view.VIEW_PATHS', DEFAULT_VIEW_PATHS) or []:
            paths.append(str(path))

        paths.append(str(CORE_TEMPLATES))

        return list(dict.fromkeys(paths))

    def template_file(self, name: Optional[str] = None) -> str:
        """Relative template file for a template name"""
        name = name or self.template or ''
        parts = [self.template_path or '', f'{name}{self.extension}']
        return '/'.join(part.strip('/') for part in parts if part and part.strip('/'))

    def layout_file(self, name: Optional[str] = None) -> str:
        """Relative layout file for a layout name"""
        name = name or self.layout
        parts = [DEFAULT_LAYOUT_DIR, self.layout_path or '', f'{name}{self.extension}']
        return '/'.join(part.strip('/') for part in parts if part and part.strip('/'))

    def load_helpers(self) -> Dict[str, Any]:
        """
        Instantiate the configured helpers

        Returns:
            Helpers keyed by short name (e.g., 'Html')

        Raises:
            MissingHelperException: If a helper does not resolve
        """
        loaded = {}
        for name in self.helpers:
            helper_class = ClassLoader.class_name(name, 'View/Helper', 'Helper')
            if helper_class is None:
                raise MissingHelperException(attributes={'class': name})
            loaded[name.split('.')[-1]] = helper_class(self)
        return loaded

    def render(self, template: Optional[str] = None, layout: Optional[str] = None) -> str:
        """
        Render a template, wrapped in the layout when auto_layout is on

        Args:
            template: Template name (defaults to the configured template)
            layout: Layout name (defaults to the configured layout)

        Returns:
            Rendered output

        Raises:
            MissingPluginException: Unknown theme or plugin
            MissingTemplateException: Template file not found
            MissingLayoutException: Layout file not found
            MissingHelperException: Unknown helper
        """
        engine = TemplateEngine.for_paths(self.paths())
        helpers = self.load_helpers()

        template_file = self.template_file(template)

        context = {}
        context.update(self.view_vars)
        context.update(helpers)

        self._dispatch('View.beforeRender', {'file': template_file})
        content = self._evaluate(engine, template_file, context, MissingTemplateException)

        if layout is None:
            layout = self.layout

        if self.auto_layout and layout:
            layout_file = self.layout_file(layout)
            self._dispatch('View.beforeLayout', {'file': layout_file})
            context['content'] = Markup(content)
            content = self._evaluate(engine, layout_file, context, MissingLayoutException)

        self._dispatch('View.afterRender', {'file': template_file})

        return content

    def _evaluate(self, engine: TemplateEngine, template_file: str, context: Dict[str, Any], missing) -> str:
        try:
            return engine.render(template_file, context)
        except TemplateNotFound as e:
            logger.debug(f"Template not found: {e.name}")
            raise missing(attributes={
                'file': e.name or template_file,
                'paths': engine.template_dirs,
            }) from e

    def _dispatch(self, name: str, data: Optional[Dict[str, Any]] = None):
        if self.event_manager is not None:
            self.event_manager.dispatch(Event(name, self, data))
