"""
EnvHelper
Environment variables with lazy .env loading
"""

import os
import threading
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv

TRUTHY = frozenset({'true', '1', 'yes', 'on'})


class EnvHelper:
    """
    Reads process environment variables, loading the project's .env once

    The .env file is looked up in the working directory on first access
    unless load() was called with an explicit path. A missing file is not
    an error.

    Usage:
        EnvHelper.get_bool('APP_DEBUG')            # debug fallback for Config.debug()
        EnvHelper.load('deploy/.env.production')  # explicit file
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load a .env file into os.environ

        Args:
            env_path: File to read (defaults to ./.env)
            override: Replace variables that are already set

        Returns:
            True if the file existed and provided variables
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)
            path = cls._env_path or Path.cwd() / '.env'
            cls._loaded = True

            return path.is_file() and load_dotenv(path, override=override)

    @classmethod
    def _ensure_loaded(cls):
        if not cls._loaded:
            cls.load()

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        cls._ensure_loaded()
        return os.environ.get(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """'true', '1', 'yes' and 'on' (any case) are true; unset gives default"""
        value = cls.get(key)
        return default if value is None else value.strip().lower() in TRUTHY

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        """Integer value, or default when unset or not a number"""
        value = cls.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    @classmethod
    def has(cls, key: str) -> bool:
        cls._ensure_loaded()
        return key in os.environ
