"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes, attributes and headers
"""
from typing import Optional, Dict, Any


class FrameworkException(Exception):
    """
    Base exception for all framework exceptions

    Exceptions can carry:
    - a status code used as the HTTP status when rendered
    - attributes, exposed to error templates in debug mode
    - response headers, copied onto the error response

    When no message is given, ``message_template`` is formatted with the
    attributes.

    Example:
        class MissingWidgetException(FrameworkException):
            message_template = 'Widget "{widget}" is missing.'

        raise MissingWidgetException(attributes={'widget': 'clock'})
    """
    status_code = 500
    message = "An error occurred"
    message_template: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        attributes: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.attributes = dict(attributes or {})
        if message is None and self.message_template:
            try:
                message = self.message_template.format(**self.attributes)
            except (KeyError, IndexError):
                message = self.message_template
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        self._response_headers = dict(headers or {})
        super().__init__(self.message)

    def get_attributes(self) -> Dict[str, Any]:
        """Get the attributes the exception was created with"""
        return self.attributes

    def response_headers(self) -> Dict[str, str]:
        """Get headers to set on the error response"""
        return dict(self._response_headers)

    def response_header(self, name: str, value: str) -> 'FrameworkException':
        """Add a header to set on the error response"""
        self._response_headers[name] = value
        return self


class HttpException(FrameworkException):
    """
    Base class for exceptions that map directly onto an HTTP status

    HTTP exceptions are rendered with their own message even outside
    debug mode.
    """
    status_code = 500
    message = "Internal Server Error"


class BadRequestException(HttpException):
    """
    Bad request exception

    Example:
        raise BadRequestException("Invalid JSON payload")
    """
    status_code = 400
    message = "Bad request"


class UnauthorizedException(HttpException):
    """Raised when authentication is required but not provided"""
    status_code = 401
    message = "Authentication required"


class ForbiddenException(HttpException):
    """Raised when user doesn't have permission to access resource"""
    status_code = 403
    message = "Access forbidden"


class NotFoundException(HttpException):
    """
    Resource not found exception

    Example:
        raise NotFoundException("User not found")
    """
    status_code = 404
    message = "Resource not found"


class MethodNotAllowedException(HttpException):
    """Raised when the route does not accept the request method"""
    status_code = 405
    message = "Method not allowed"


class ConflictException(HttpException):
    """Raised when request conflicts with current state"""
    status_code = 409
    message = "Resource conflict"


class TooManyRequestsException(HttpException):
    """
    Too many requests exception

    Example:
        raise TooManyRequestsException(headers={'Retry-After': '60'})
    """
    status_code = 429
    message = "Too many requests"


class InternalErrorException(HttpException):
    """Explicit 500 raised by application code"""
    status_code = 500
    message = "Internal Server Error"


class ServiceUnavailableException(HttpException):
    """Raised when service is temporarily unavailable"""
    status_code = 503
    message = "Service temporarily unavailable"


class MissingPluginException(FrameworkException):
    """
    Raised when a plugin is referenced but was never loaded

    Attributes:
        plugin: Plugin name
    """
    message_template = 'Plugin "{plugin}" could not be found.'


class MissingControllerException(FrameworkException):
    """
    Raised when a controller class cannot be resolved

    Attributes:
        class: Controller name
    """
    status_code = 404
    message_template = 'Controller class "{class}" could not be found.'
