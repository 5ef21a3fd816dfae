"""Tests for the framework exception hierarchy."""

import pytest

from viewkit.exceptions import (
    BadRequestException,
    FrameworkException,
    HttpException,
    MissingControllerException,
    NotFoundException,
    ServiceUnavailableException,
)
from viewkit.view import MissingTemplateException


class TestFrameworkException:
    """Tests for messages, attributes and headers."""

    def test_defaults(self):
        """Test the class defaults."""
        exception = FrameworkException()

        assert exception.message == "An error occurred"
        assert exception.status_code == 500
        assert exception.get_attributes() == {}
        assert exception.response_headers() == {}

    def test_message_template(self):
        """Test messages built from attributes."""
        exception = MissingTemplateException(attributes={"file": "Error/error400.html"})

        assert str(exception) == 'Template file "Error/error400.html" could not be found.'

    def test_message_template_with_missing_attribute(self):
        """Test an unformattable template is used as is."""
        exception = MissingControllerException()

        assert exception.message == 'Controller class "{class}" could not be found.'
        assert exception.status_code == 404

    def test_explicit_message_wins(self):
        """Test a given message replaces the template."""
        exception = MissingTemplateException("custom", attributes={"file": "x"})

        assert exception.message == "custom"
        assert exception.get_attributes() == {"file": "x"}

    def test_response_headers(self):
        """Test headers passed in and added later."""
        exception = ServiceUnavailableException(headers={"Retry-After": "120"})
        exception.response_header("X-Reason", "maintenance")

        assert exception.response_headers() == {"Retry-After": "120", "X-Reason": "maintenance"}

    @pytest.mark.parametrize(
        "exception_class, status_code",
        [
            (BadRequestException, 400),
            (NotFoundException, 404),
            (ServiceUnavailableException, 503),
        ],
    )
    def test_http_exceptions(self, exception_class, status_code):
        """Test HTTP exceptions carry their status."""
        exception = exception_class()

        assert isinstance(exception, HttpException)
        assert exception.status_code == status_code

    def test_status_code_override(self):
        """Test a status code passed to the constructor."""
        assert NotFoundException(status_code=410).status_code == 410
