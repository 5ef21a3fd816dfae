"""
Controller Package
"""
from viewkit.controller.component import Component, ComponentRegistry, MissingComponentException
from viewkit.controller.controller import Controller
from viewkit.controller.error_controller import ErrorController

__all__ = [
    'Component',
    'ComponentRegistry',
    'MissingComponentException',
    'Controller',
    'ErrorController',
]
