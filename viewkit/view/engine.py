"""
Template Engine
Jinja2 integration shared by all views
"""
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

# Templates shipped with the framework (error pages and layouts)
CORE_TEMPLATES = Path(__file__).resolve().parent.parent / 'templates'


class TemplateEngine:
    """
    Jinja2 template engine wrapper for the framework

    One engine exists per ordered tuple of template directories so that
    compiled templates are reused across requests.

    Example:
        engine = TemplateEngine.for_paths(['templates', CORE_TEMPLATES])
        html = engine.render('Error/error400.html', {'message': 'Not Found'})
    """

    _instances: Dict[Tuple[str, ...], 'TemplateEngine'] = {}
    _lock = threading.Lock()

    def __init__(self, template_dirs: Iterable, auto_reload: Optional[bool] = None):
        """
        Initialize template engine

        Args:
            template_dirs: Directories searched in order
            auto_reload: Reload templates when modified (defaults to config)
        """
        from viewkit.defaults import DEFAULT_TEMPLATE_AUTO_RELOAD
        from viewkit.support import Config

        if auto_reload is None:
            auto_reload = Config.get('view.AUTO_RELOAD', DEFAULT_TEMPLATE_AUTO_RELOAD)

        self.template_dirs = [str(directory) for directory in template_dirs]
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            autoescape=select_autoescape(['html', 'htm', 'xml']),
            auto_reload=auto_reload,
        )

        # Global context (available in all templates)
        self.globals: Dict[str, Any] = {}

    @classmethod
    def for_paths(cls, template_dirs: Iterable) -> 'TemplateEngine':
        """Get the shared engine for a list of template directories"""
        key = tuple(str(directory) for directory in template_dirs)
        with cls._lock:
            engine = cls._instances.get(key)
            if engine is None:
                engine = cls(key)
                cls._instances[key] = engine
            return engine

    @classmethod
    def clear_instances(cls):
        """Drop all cached engines"""
        with cls._lock:
            cls._instances.clear()

    def render(self, template_path: str, context: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a template

        Raises:
            jinja2.TemplateNotFound: If the template does not exist

        Returns:
            Rendered HTML string
        """
        template_context = {}
        template_context.update(self.globals)
        template_context.update(context or {})

        return self.env.get_template(template_path).render(template_context)

    def add_global(self, key: str, value: Any):
        """Add a global variable available in all templates"""
        self.globals[key] = value

    def add_globals(self, globals_dict: Dict[str, Any]):
        """Add multiple global variables"""
        self.globals.update(globals_dict)

    def view_exists(self, template_path: str) -> bool:
        """
        Check if a view/template exists

        Example:
            if engine.view_exists('Error/error400.html'):
                ...
        """
        try:
            self.env.get_template(template_path)
        except TemplateNotFound:
            return False
        return True
