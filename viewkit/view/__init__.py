"""
View Package
Configuration-based template rendering
"""
from viewkit.view.engine import TemplateEngine
from viewkit.view.view import View
from viewkit.view.json_view import JsonView
from viewkit.view.view_builder import ViewBuilder, ViewConfig
from viewkit.view.helper import Helper
from viewkit.view.exceptions import (
    MissingViewException,
    MissingTemplateException,
    MissingLayoutException,
    MissingHelperException,
)

__all__ = [
    # Core
    'TemplateEngine',
    'View',
    'JsonView',
    'ViewBuilder',
    'ViewConfig',
    'Helper',

    # Exceptions
    'MissingViewException',
    'MissingTemplateException',
    'MissingLayoutException',
    'MissingHelperException',
]
