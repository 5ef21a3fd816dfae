"""
Sanic Error Handler
Renders unhandled exceptions through the configured exception renderer
"""
from typing import Optional, Type
from sanic import Request
from sanic.handlers import ErrorHandler as SanicErrorHandler
from sanic.response import HTTPResponse
from viewkit.defaults import DEFAULT_EXCEPTION_RENDERER
from viewkit.http import request_target
from viewkit.logging import getLogger
from viewkit.support import ClassLoader, Config


class ErrorHandler(SanicErrorHandler):
    """
    Error handler for Sanic applications

    Example:
        from sanic import Sanic
        from viewkit.error import ErrorHandler

        app = Sanic('shop', error_handler=ErrorHandler())
    """

    def __init__(self, renderer_class: Optional[Type] = None):
        """
        Args:
            renderer_class: Renderer class (defaults to 'app.EXCEPTION_RENDERER')
        """
        super().__init__()
        self.renderer_class = renderer_class
        self.logger = getLogger('error')

    def renderer(self) -> Type:
        """Resolve the exception renderer class"""
        if self.renderer_class is not None:
            return self.renderer_class

        renderer = Config.get('app.EXCEPTION_RENDERER', DEFAULT_EXCEPTION_RENDERER)
        if isinstance(renderer, type):
            return renderer
        return ClassLoader.load(renderer)

    def default(self, request: Request, exception: Exception) -> HTTPResponse:
        """Render the exception, falling back to Sanic's own output"""
        try:
            response = self.renderer()(exception, request).render()
        except Exception:
            self.logger.error(
                f"Exception renderer failed for {exception.__class__.__name__}",
                exc_info=True
            )
            return super().default(request, exception)

        self._log_error(request, exception, response.status)
        return response

    def _log_error(self, request: Request, error: Exception, status_code: int):
        """Log error with request context"""
        log_data = {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'status_code': status_code,
            'method': getattr(request, 'method', None),
            'path': request_target(request),
        }

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=(type(error), error, error.__traceback__)
            )
        else:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
