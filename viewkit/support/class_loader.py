"""
Class Loader
Dynamic class loading and short-name class resolution
"""
import importlib
from typing import Type, Callable, Union, Optional, Dict


class ClassLoader:
    """
    Utility for loading classes from dotted paths and resolving short names

    Short names are resolved per namespace, the way views, helpers,
    controllers and components are referenced in configuration:

        ClassLoader.class_name('Json', 'View', 'View')          # JsonView
        ClassLoader.class_name('Html', 'View/Helper', 'Helper')  # HtmlHelper
        ClassLoader.class_name('Blog.Rss', 'View', 'View')      # RssView of plugin Blog

    Example:
        # Load a class
        cls = ClassLoader.load('viewkit.view.JsonView')

        # Register an explicit class for a short name
        ClassLoader.register('View', 'AjaxView', AjaxView)
    """

    # Namespace -> module suffix searched below the app and core packages
    NAMESPACE_MODULES: Dict[str, str] = {
        'View': 'view',
        'View/Helper': 'view.helpers',
        'Controller': 'controller',
        'Controller/Component': 'controller.components',
    }

    CORE_PACKAGE = 'viewkit'

    _registry: Dict[str, Dict[str, Type]] = {}

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Import a class by its dotted path (e.g., 'viewkit.view.JsonView')

        Raises:
            ImportError: The module does not exist
            AttributeError: The module has no such attribute
        """
        return ClassLoader.load_callable(class_path)

    @staticmethod
    def load_callable(callable_path: str) -> Union[Callable, Type]:
        """Import any module attribute (function or class) by its dotted path"""
        module_path, attribute = callable_path.rsplit('.', 1)
        return getattr(importlib.import_module(module_path), attribute)

    @classmethod
    def register(cls, namespace: str, name: str, klass: Type):
        """
        Register a class under a short (optionally plugin-qualified) name

        Args:
            namespace: Namespace such as 'View' or 'View/Helper'
            name: Class name including suffix (e.g., 'AjaxView' or 'Blog.RssView')
            klass: Class object
        """
        cls._registry.setdefault(namespace, {})[name] = klass

    @classmethod
    def clear(cls):
        """Remove all explicit registrations"""
        cls._registry.clear()

    @classmethod
    def class_name(cls, name, namespace: str = '', suffix: str = '') -> Optional[Type]:
        """
        Resolve a short, plugin-qualified or dotted class name to a class

        Lookup order:
        1. Explicit registrations for the namespace
        2. Plugin-qualified names ('Plugin.Name') via the plugin's module
        3. Dotted import paths ('package.module.ClassName')
        4. The application namespace (config 'app.NAMESPACE')
        5. The framework's own modules

        Args:
            name: Class object, short name or path
            namespace: Namespace such as 'View' or 'Controller'
            suffix: Suffix appended to short names (e.g., 'View')

        Returns:
            The class, or None if nothing resolves
        """
        if not name:
            return None

        if isinstance(name, type):
            return name

        full_name = f'{name}{suffix}'
        registered = cls._registry.get(namespace, {})
        if full_name in registered:
            return registered[full_name]

        sub_module = cls.NAMESPACE_MODULES.get(namespace, namespace.replace('/', '.').lower())

        if '.' in name:
            from viewkit.core.plugin import Plugin

            plugin, short_name = name.split('.', 1)
            if Plugin.loaded(plugin):
                plugin_module = Plugin.module(plugin)
                if not plugin_module:
                    return None
                return cls._find(f'{plugin_module}.{sub_module}', f'{short_name}{suffix}')

            try:
                loaded = cls.load(name)
            except (ImportError, AttributeError, ValueError):
                return None
            return loaded if isinstance(loaded, type) else None

        from viewkit.defaults import DEFAULT_APP_NAMESPACE
        from viewkit.support.config import Config

        app_namespace = Config.get('app.NAMESPACE', DEFAULT_APP_NAMESPACE)
        for base in (app_namespace, cls.CORE_PACKAGE):
            if not base:
                continue
            found = cls._find(f'{base}.{sub_module}', full_name)
            if found is not None:
                return found

        return None

    @staticmethod
    def _find(module_path: str, class_name: str) -> Optional[Type]:
        """Import module_path and return class_name from it, or None"""
        try:
            module = importlib.import_module(module_path)
        except ImportError:
            return None

        found = getattr(module, class_name, None)
        return found if isinstance(found, type) else None
