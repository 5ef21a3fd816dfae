"""
Router Request Context
Context-local access to the request currently being handled
"""
from contextvars import ContextVar
from typing import Any, Optional

# Context-aware request storage (safe across concurrent async requests)
_current_request: ContextVar[Optional[Any]] = ContextVar('current_request', default=None)


class Router:
    """
    Holds the request being handled in the current context

    Example:
        Router.bind(sanic_app)  # track requests automatically

        request = Router.get_request()
    """

    @classmethod
    def set_request(cls, request: Any):
        """Set the current request"""
        _current_request.set(request)

    @classmethod
    def get_request(cls) -> Optional[Any]:
        """Get the current request, or None outside a request"""
        return _current_request.get()

    @classmethod
    def clear_request(cls):
        """Clear the current request"""
        _current_request.set(None)

    @classmethod
    def bind(cls, app):
        """
        Register Sanic middleware that tracks the current request

        Args:
            app: Sanic application
        """
        async def track_request(request):
            cls.set_request(request)

        async def release_request(request, response):
            cls.clear_request()

        app.register_middleware(track_request, 'request')
        app.register_middleware(release_request, 'response')
        return app
