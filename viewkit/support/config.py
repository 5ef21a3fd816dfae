"""
Config Manager
Dot-notation access to config/<file>.py modules with runtime overrides
"""

import importlib
import threading
from types import ModuleType
from typing import Any, Dict, Optional

_MISSING = object()


class Config:
    """
    Application configuration

    A key is '<file>.<name>[.<nested>...]'. The first segment names a module
    in the application's config package, the rest walk module attributes
    and dict keys. Segments match case-insensitively.

    Usage:
        paths = Config.get('view.VIEW_PATHS', ['templates'])

        # Tests and bootstrap code override values without touching files
        Config.set('app.APP_DEBUG', True)

    Layout:
        config/
        ├── app.py     # APP_DEBUG, NAMESPACE, EXCEPTION_RENDERER, ...
        └── view.py    # VIEW_PATHS, TEMPLATE_EXTENSION, AUTO_RELOAD
    """

    _lock = threading.Lock()
    _modules: Dict[str, Optional[ModuleType]] = {}
    _overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Read a value

        Args:
            key: Dotted key (e.g., 'view.TEMPLATE_EXTENSION')
            default: Returned when the file or the key does not exist

        Returns:
            The override if one is set, else the configured value, else default
        """
        normalized = key.lower()
        if normalized in cls._overrides:
            return cls._overrides[normalized]

        file_name, _, path = normalized.partition('.')
        value = cls.all(file_name)
        if value is None:
            return default

        for segment in filter(None, path.split('.')):
            value = cls._child(value, segment)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _child(container: Any, segment: str) -> Any:
        """Case-insensitive key or attribute of a dict, module or object"""
        if isinstance(container, dict):
            names = container.keys()
            getter = container.__getitem__
        elif hasattr(container, '__dict__'):
            names = dir(container)
            getter = lambda name: getattr(container, name)
        else:
            return _MISSING

        for name in names:
            if str(name).lower() == segment:
                return getter(name)
        return _MISSING

    @classmethod
    def all(cls, file_name: str) -> Optional[ModuleType]:
        """
        Get a whole config module

        Returns:
            The imported config.<file_name> module, or None if there is none
        """
        file_name = file_name.lower()
        if file_name not in cls._modules:
            with cls._lock:
                if file_name not in cls._modules:
                    cls._modules[file_name] = cls._import(file_name)
        return cls._modules[file_name]

    @staticmethod
    def _import(file_name: str) -> Optional[ModuleType]:
        try:
            return importlib.import_module(f'config.{file_name}')
        except ImportError:
            return None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Override a value for the running process

        Example:
            Config.set('view.VIEW_PATHS', ['resources/views'])
        """
        cls._overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check whether a key resolves to a non-None value"""
        return cls.get(key) is not None

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """Forget imported config modules so the next read imports them again"""
        with cls._lock:
            if file_name:
                cls._modules.pop(file_name.lower(), None)
            else:
                cls._modules.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Drop every value set with Config.set()"""
        cls._overrides.clear()

    @classmethod
    def debug(cls) -> bool:
        """
        Whether the application runs in debug mode

        'app.APP_DEBUG' decides, with strings such as 'false' parsed like
        environment values. Without it the APP_DEBUG environment variable
        (or .env entry) is read.
        """
        from viewkit.defaults import DEFAULT_APP_DEBUG
        from viewkit.support.env_helper import TRUTHY, EnvHelper

        value = cls.get('app.APP_DEBUG')
        if isinstance(value, str):
            return value.strip().lower() in TRUTHY
        if value is not None:
            return bool(value)

        return EnvHelper.get_bool('APP_DEBUG', DEFAULT_APP_DEBUG)
