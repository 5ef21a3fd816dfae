"""Tests for the Sanic error handler integration."""

import logging

from sanic.handlers import ErrorHandler as SanicErrorHandler
from sanic.response import HTTPResponse

from viewkit.error import ErrorHandler, ExceptionRenderer
from viewkit.exceptions import NotFoundException
from viewkit.support import Config


class BrokenRenderer(ExceptionRenderer):
    def render(self):
        raise RuntimeError("renderer broke")


class StaticRenderer:
    def __init__(self, exception, request=None):
        self.exception = exception
        self.request = request

    def render(self):
        return HTTPResponse("static", status=418)


class TestErrorHandler:
    """Tests for ErrorHandler.default()."""

    def test_renders_through_exception_renderer(self, make_request, caplog):
        """Test the default renderer produces the error page and a warning."""
        handler = ErrorHandler()

        with caplog.at_level(logging.WARNING, logger="error"):
            response = handler.default(make_request("/missing"), NotFoundException("No page"))

        assert response.status == 404
        assert b"<h2>No page</h2>" in response.body
        record = next(r for r in caplog.records if r.name == "error")
        assert record.levelno == logging.WARNING
        assert record.status_code == 404
        assert record.path == "/missing"

    def test_server_errors_are_logged_as_errors(self, make_request, caplog):
        """Test 5xx responses are logged with the exception."""
        handler = ErrorHandler()

        with caplog.at_level(logging.WARNING, logger="error"):
            response = handler.default(make_request("/"), RuntimeError("boom"))

        assert response.status == 500
        record = next(r for r in caplog.records if r.name == "error")
        assert record.levelno == logging.ERROR
        assert record.exc_info[1].args == ("boom",)

    def test_renderer_class_argument(self, make_request):
        """Test an explicit renderer class."""
        response = ErrorHandler(StaticRenderer).default(make_request("/"), RuntimeError("x"))

        assert response.status == 418

    def test_renderer_from_config(self, make_request):
        """Test 'app.EXCEPTION_RENDERER' as class or dotted path."""
        Config.set("app.EXCEPTION_RENDERER", StaticRenderer)
        assert ErrorHandler().renderer() is StaticRenderer

        Config.set("app.EXCEPTION_RENDERER", "viewkit.error.ExceptionRenderer")
        assert ErrorHandler().renderer() is ExceptionRenderer

    def test_falls_back_to_sanic_output(self, make_request, monkeypatch):
        """Test Sanic's own handler is used when rendering fails."""
        fallback = HTTPResponse("sanic", status=500)
        monkeypatch.setattr(SanicErrorHandler, "default", lambda self, request, exception: fallback)

        response = ErrorHandler(BrokenRenderer).default(make_request("/"), RuntimeError("x"))

        assert response is fallback
