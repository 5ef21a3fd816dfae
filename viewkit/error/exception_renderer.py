"""
Exception Renderer
Turns unhandled exceptions into templated error responses
"""
import traceback
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Type
from markupsafe import escape
from sanic.exceptions import SanicException
from sanic.response import HTTPResponse, html
from tortoise.exceptions import BaseORMException
from viewkit.controller import Controller
from viewkit.defaults import (
    DEFAULT_STATUS_CODE,
    ERROR_LAYOUT,
    ERROR_TEMPLATE_PATH,
    MAX_ERROR_STATUS_CODE,
    MIN_ERROR_STATUS_CODE,
    SAFE_HELPERS,
)
from viewkit.events import Event
from viewkit.exceptions import FrameworkException, HttpException, MissingPluginException
from viewkit.http import RequestFactory, request_target
from viewkit.logging import getLogger
from viewkit.routing import DispatcherFactory, Router
from viewkit.support import ClassLoader, Config, Str
from viewkit.view import MissingTemplateException

logger = getLogger(__name__)

Handler = Callable[['ExceptionRenderer', BaseException], Any]


class ExceptionRendererInterface(ABC):
    """Contract for classes configured as 'app.EXCEPTION_RENDERER'"""

    @abstractmethod
    def render(self) -> HTTPResponse:
        """Render the exception into a response"""
        raise NotImplementedError


class ExceptionRenderer(ExceptionRendererInterface):
    """
    Exception renderer

    Picks an error controller, derives the status code, handler name and
    template from the exception, then renders. When rendering fails it
    retries with 'error500' and finally with a minimal view that only uses
    the Form and Html helpers.

    Outside debug mode, non-HTTP exceptions get a generic message and the
    'error400' or 'error500' template. In debug mode the template is named
    after the exception ('MissingWidgetException' -> 'missingWidget').
    Database errors always use 'pdo_error'.

    Custom handlers replace templated rendering for an exception type when
    debug mode is on or the exception is HTTP-level:

        @ExceptionRenderer.handles(NotFoundException)
        def not_found(renderer, exception):
            return '<h1>Nothing here</h1>'

    Example:
        response = ExceptionRenderer(exception, request).render()
    """

    handlers: Dict[Type[BaseException], Handler] = {}

    http_exceptions = (HttpException, SanicException)
    database_exceptions = (BaseORMException,)

    def __init__(self, exception: BaseException, request=None):
        self.error = exception
        self.request = request
        self.method = ''
        self.template = ''
        self.controller = self._get_controller()

    # ------------------------------------------------------------------
    # Custom handler registry
    # ------------------------------------------------------------------

    @classmethod
    def register_handler(cls, exception_type: Type[BaseException], handler: Handler):
        """
        Register a handler for an exception type on this renderer class

        Subclasses get their own copy of the registry on first registration.
        """
        if 'handlers' not in cls.__dict__:
            cls.handlers = dict(cls.handlers)
        cls.handlers[exception_type] = handler

    @classmethod
    def handles(cls, exception_type: Type[BaseException]):
        """Decorator form of register_handler()"""
        def decorator(handler: Handler) -> Handler:
            cls.register_handler(exception_type, handler)
            return handler
        return decorator

    def _handler_for(self, exception: BaseException) -> Optional[Handler]:
        for klass in type(exception).__mro__:
            if klass in self.handlers:
                return self.handlers[klass]
        return None

    # ------------------------------------------------------------------
    # Controller acquisition
    # ------------------------------------------------------------------

    def _get_controller(self) -> Controller:
        """
        Build the controller used to render the error

        Falls back from the application's ErrorController to a bare
        Controller when the error controller cannot be created.
        """
        request = self.request
        if request is None:
            request = Router.get_request()
            if request is None:
                request = RequestFactory.from_globals()
            self.request = request

        response = HTTPResponse()
        controller = None

        try:
            controller_class = ClassLoader.class_name('Error', 'Controller', 'Controller')
            if controller_class is None:
                raise LookupError('No ErrorController could be resolved')
            controller = controller_class(request, response)
            controller.startup_process()
            startup = True
        except Exception:
            logger.warning("Error controller startup failed", exc_info=True)
            startup = False

        # Retry the request handler alone; another part of startup may
        # have failed. Its own failures are ignored.
        if not startup and controller is not None:
            request_handler = controller.components.get('RequestHandler')
            if request_handler is not None:
                try:
                    request_handler.startup(Event('Controller.startup', controller))
                except Exception:
                    logger.debug("RequestHandler startup retry failed", exc_info=True)

        if controller is None:
            controller = Controller(request, response)

        return controller

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> HTTPResponse:
        """
        Render the exception into a response

        Returns:
            The error response
        """
        exception = self.error
        code = self._code(exception)
        method = self._method(exception)
        template = self._template(exception, method, code)

        is_debug = Config.debug()
        handler = self._handler_for(exception)
        if handler is not None and (is_debug or self._is_http_exception(exception)):
            return self._custom_method(handler, exception)

        message = self._message(exception, code)
        url = request_target(self.controller.request)
        response = self.controller.response

        for key, value in self._response_headers(exception).items():
            response.headers[key] = value
        response.status = code

        view_vars = {
            'message': message,
            'url': escape(url),
            'error': exception,
            'code': code,
            '_serialize': ['message', 'url', 'code'],
        }
        if is_debug:
            view_vars['trace'] = self._format_trace(exception)
            file_name, line = self._location(exception)
            view_vars['file'] = file_name or 'null'
            view_vars['line'] = line or 'null'
            view_vars['_serialize'] += ['file', 'line']
        self.controller.set(view_vars)

        if is_debug and isinstance(exception, FrameworkException):
            self.controller.set(exception.get_attributes())

        self.controller.response = response

        return self._output_message(template)

    def _custom_method(self, handler: Handler, exception: BaseException) -> HTTPResponse:
        self.controller.response.status = self._code(exception)
        result = handler(self, exception)
        self._shutdown()
        if isinstance(result, str):
            response = self.controller.response
            result = HTTPResponse(
                result,
                status=response.status,
                headers=response.headers,
                content_type='text/html; charset=utf-8',
            )
            self.controller.response = result

        return result

    def _method(self, exception: BaseException) -> str:
        """Handler name: class name without 'Exception', lower camel cased"""
        base_class = type(exception).__name__

        if base_class.endswith('Exception'):
            base_class = base_class[:-len('Exception')]

        self.method = Str.camel(base_class) or 'error500'
        return self.method

    def _message(self, exception: BaseException, code: int) -> str:
        message = getattr(exception, 'message', None)
        if not isinstance(message, str) or not message:
            message = str(exception)

        if not Config.debug() and not self._is_http_exception(exception):
            if code < 500:
                message = 'Not Found'
            else:
                message = 'An Internal Error Has Occurred.'

        return message

    def _template(self, exception: BaseException, method: str, code: int) -> str:
        if isinstance(exception, self.database_exceptions):
            self.template = 'pdo_error'
            return self.template

        if not Config.debug() or self._is_http_exception(exception):
            self.template = 'error500' if code >= 500 else 'error400'
            return self.template

        self.template = method or 'error500'
        return self.template

    def _code(self, exception: BaseException) -> int:
        """Status code declared by the exception, when it is a 4xx/5xx code"""
        code = DEFAULT_STATUS_CODE
        error_code = self._error_code(exception)
        if error_code is not None and MIN_ERROR_STATUS_CODE <= error_code < MAX_ERROR_STATUS_CODE:
            code = error_code

        return code

    @staticmethod
    def _error_code(exception: BaseException) -> Optional[int]:
        for attr in ('status_code', 'code'):
            value = getattr(exception, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        return None

    def _is_http_exception(self, exception: BaseException) -> bool:
        return isinstance(exception, self.http_exceptions)

    @staticmethod
    def _response_headers(exception: BaseException) -> Dict[str, str]:
        if isinstance(exception, FrameworkException):
            return exception.response_headers()
        if isinstance(exception, SanicException):
            return dict(getattr(exception, 'headers', None) or {})
        return {}

    @staticmethod
    def _format_trace(exception: BaseException):
        return [
            {
                'file': frame.filename,
                'line': frame.lineno,
                'function': frame.name,
                'code': frame.line,
            }
            for frame in traceback.extract_tb(exception.__traceback__)
        ]

    @staticmethod
    def _location(exception: BaseException):
        frames = traceback.extract_tb(exception.__traceback__)
        if not frames:
            return None, None
        return frames[-1].filename, frames[-1].lineno

    def _output_message(self, template: str) -> HTTPResponse:
        """
        Render a template through the controller

        Falls back to 'error500' for a missing template, and to the safe
        renderer for a missing 500 template, a missing plugin or any other
        rendering failure.
        """
        try:
            self.controller.render(template)
            return self._shutdown()
        except MissingTemplateException as e:
            missing_file = e.get_attributes().get('file') or ''
            logger.warning(f"Error template missing: {missing_file}")
            if 'error500' in missing_file or template == 'error500':
                return self._output_message_safe('error500')

            return self._output_message('error500')
        except MissingPluginException as e:
            plugin = e.get_attributes().get('plugin')
            logger.warning(f"Plugin missing while rendering error: {plugin}")
            if plugin and plugin == self.controller.plugin:
                self.controller.plugin = None

            return self._output_message_safe('error500')
        except Exception:
            logger.error("Rendering the error page failed", exc_info=True)
            return self._output_message_safe('error500')

    def _output_message_safe(self, template: str) -> HTTPResponse:
        """
        Render with a bare view, bypassing components and custom helpers
        """
        helpers = list(SAFE_HELPERS)
        self.controller.helpers = helpers
        builder = self.controller.view_builder()
        builder.with_helpers(helpers, merge=False) \
            .with_theme(None) \
            .with_layout_path('') \
            .with_template_path(ERROR_TEMPLATE_PATH)
        view = self.controller.create_view('View')

        response = self.controller.response
        self.controller.response = html(
            view.render(template, ERROR_LAYOUT),
            status=response.status,
            headers=response.headers,
        )

        return self.controller.response

    def _shutdown(self) -> HTTPResponse:
        """Run the controller shutdown and dispatcher afterDispatch events"""
        self.controller.dispatch_event('Controller.shutdown')
        dispatcher = DispatcherFactory.create()
        event_manager = dispatcher.event_manager
        for dispatch_filter in dispatcher.filters():
            event_manager.on(dispatch_filter)
        args = {
            'request': self.controller.request,
            'response': self.controller.response,
        }
        result = dispatcher.dispatch_event('Dispatcher.afterDispatch', args)

        return result.data['response']
