"""
Error Package
Exception rendering and Sanic error handling
"""
from viewkit.error.exception_renderer import ExceptionRenderer, ExceptionRendererInterface
from viewkit.error.error_handler import ErrorHandler

__all__ = [
    'ExceptionRenderer',
    'ExceptionRendererInterface',
    'ErrorHandler',
]
