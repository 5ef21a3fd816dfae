"""
View Exceptions
Raised when a view class, template, layout or helper cannot be resolved
"""
from viewkit.exceptions import FrameworkException


class MissingViewException(FrameworkException):
    """
    Raised by ViewBuilder.build() when the view class does not resolve

    Attributes:
        class: Configured view class name
    """
    message_template = 'View class "{class}" is missing.'


class MissingTemplateException(FrameworkException):
    """
    Raised when a template file cannot be found

    Attributes:
        file: Template file that was looked up
        paths: Directories that were searched
    """
    message_template = 'Template file "{file}" could not be found.'


class MissingLayoutException(MissingTemplateException):
    """Raised when a layout file cannot be found"""
    message_template = 'Layout file "{file}" could not be found.'


class MissingHelperException(FrameworkException):
    """
    Raised when a configured helper cannot be resolved

    Attributes:
        class: Helper name
    """
    message_template = 'Helper class "{class}" could not be found.'
