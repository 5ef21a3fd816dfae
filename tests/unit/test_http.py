"""Tests for request helpers."""

from viewkit.http import RequestFactory, request_target


class TestRequestFactory:
    """Tests for building requests from CGI variables."""

    def test_from_request_uri(self):
        """Test the full target from REQUEST_URI."""
        request = RequestFactory.from_globals({
            "REQUEST_METHOD": "post",
            "REQUEST_URI": "/orders/7?expand=items",
            "SERVER_PROTOCOL": "HTTP/1.0",
        })

        assert request.method == "POST"
        assert request.path == "/orders/7"
        assert request.query_string == "expand=items"
        assert request.version == "1.0"

    def test_from_path_info(self):
        """Test PATH_INFO and QUERY_STRING when REQUEST_URI is absent."""
        request = RequestFactory.from_globals({"PATH_INFO": "/search", "QUERY_STRING": "q=shoes"})

        assert request.method == "GET"
        assert request_target(request) == "/search?q=shoes"

    def test_headers(self):
        """Test HTTP_* variables become headers."""
        request = RequestFactory.from_globals({
            "HTTP_ACCEPT": "application/json",
            "HTTP_X_REQUESTED_WITH": "XMLHttpRequest",
            "CONTENT_TYPE": "text/plain",
        })

        assert request.headers["accept"] == "application/json"
        assert request.headers["x-requested-with"] == "XMLHttpRequest"
        assert request.headers["content-type"] == "text/plain"

    def test_empty_environment(self):
        """Test defaults without any variables."""
        request = RequestFactory.from_globals({})

        assert request.path == "/"
        assert request.method == "GET"


class TestRequestTarget:
    """Tests for request_target()."""

    def test_path_only(self, make_request):
        """Test a request without query string."""
        assert request_target(make_request("/about")) == "/about"

    def test_with_query(self, make_request):
        """Test the query string is kept."""
        assert request_target(make_request("/list?page=2&sort=name")) == "/list?page=2&sort=name"

    def test_without_request(self):
        """Test the fallback outside a request."""
        assert request_target(None) == "/"
