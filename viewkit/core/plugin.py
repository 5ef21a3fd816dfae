"""
Plugin Registry
Keeps track of loaded plugins, their paths and Python modules
"""
from pathlib import Path
from typing import Dict, List, Optional, Union
from viewkit.exceptions import MissingPluginException


class Plugin:
    """
    Plugin registry

    A plugin contributes templates (``<path>/templates``) and classes
    (``<module>.view``, ``<module>.controller``, ...) referenced with a
    plugin prefix such as 'Blog.Rss'.

    Example:
        Plugin.load('Blog', path='plugins/blog', module='blog')

        Plugin.loaded('Blog')          # True
        Plugin.templates_path('Blog')  # Path('plugins/blog/templates')
    """

    _plugins: Dict[str, Dict[str, Optional[Union[Path, str]]]] = {}

    @classmethod
    def load(cls, name: str, path=None, module: Optional[str] = None):
        """
        Load a plugin

        Args:
            name: Plugin name
            path: Plugin root directory (defaults to plugins/<name>)
            module: Importable Python package providing the plugin's classes
        """
        if path is None:
            path = Path.cwd() / 'plugins' / name
        cls._plugins[name] = {'path': Path(path), 'module': module}

    @classmethod
    def unload(cls, name: Optional[str] = None):
        """Unload one plugin, or all plugins when no name is given"""
        if name is None:
            cls._plugins.clear()
        else:
            cls._plugins.pop(name, None)

    @classmethod
    def loaded(cls, name: Optional[str] = None) -> Union[bool, List[str]]:
        """
        Check whether a plugin is loaded, or list loaded plugins

        Returns:
            bool when name is given, otherwise sorted plugin names
        """
        if name is not None:
            return name in cls._plugins
        return sorted(cls._plugins)

    @classmethod
    def path(cls, name: str) -> Path:
        """
        Get a plugin's root directory

        Raises:
            MissingPluginException: If the plugin is not loaded
        """
        if name not in cls._plugins:
            raise MissingPluginException(attributes={'plugin': name})
        return cls._plugins[name]['path']

    @classmethod
    def templates_path(cls, name: str) -> Path:
        """Get a plugin's template directory"""
        return cls.path(name) / 'templates'

    @classmethod
    def module(cls, name: str) -> Optional[str]:
        """Get a plugin's Python module, if it has one"""
        if name not in cls._plugins:
            raise MissingPluginException(attributes={'plugin': name})
        return cls._plugins[name]['module']
