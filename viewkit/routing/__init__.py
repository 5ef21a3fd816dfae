"""
Routing Package
Current-request context and dispatcher lifecycle
"""
from viewkit.routing.router import Router
from viewkit.routing.dispatcher import Dispatcher, DispatcherFactory, DispatcherFilter

__all__ = [
    'Router',
    'Dispatcher',
    'DispatcherFactory',
    'DispatcherFilter',
]
