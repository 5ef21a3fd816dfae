"""
Built-in View Helpers
"""
from viewkit.view.helpers.html_helper import HtmlHelper
from viewkit.view.helpers.form_helper import FormHelper

__all__ = [
    'HtmlHelper',
    'FormHelper',
]
