"""
Core Package
"""
from viewkit.core.plugin import Plugin

__all__ = [
    'Plugin',
]
