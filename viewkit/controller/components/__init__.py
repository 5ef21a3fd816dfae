"""
Built-in Controller Components
"""
from viewkit.controller.components.request_handler_component import RequestHandlerComponent

__all__ = [
    'RequestHandlerComponent',
]
