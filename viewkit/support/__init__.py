"""
Framework Support Classes
"""

from viewkit.support.env_helper import EnvHelper
from viewkit.support.config import Config
from viewkit.support.class_loader import ClassLoader
from viewkit.support.str import Str

__all__ = [
    'EnvHelper',
    'Config',
    'ClassLoader',
    'Str',
]
