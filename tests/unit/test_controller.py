"""Tests for controllers and components."""

import pytest
from sanic.response import HTTPResponse

from viewkit.controller import Component, Controller, ErrorController, MissingComponentException
from viewkit.controller.components import RequestHandlerComponent
from viewkit.support import ClassLoader


class PagesController(Controller):
    helpers = ["Html"]


class AuditComponent(Component):
    """Component recording the lifecycle hooks it receives."""

    def initialize(self, config):
        self.calls = []

    def startup(self, event):
        self.calls.append("startup")

    def before_render(self, event):
        self.calls.append("before_render")


class TestController:
    """Tests for the base controller."""

    def test_name_strips_suffix(self):
        """Test the controller name is derived from the class name."""
        assert PagesController().name == "Pages"
        assert Controller().name == "Controller"
        assert Controller(name="Custom").name == "Custom"

    def test_set_single_and_many(self):
        """Test setting view variables."""
        controller = Controller()

        controller.set("title", "Home").set({"items": [1], "count": 1})

        assert controller.view_vars == {"title": "Home", "items": [1], "count": 1}

    def test_helpers_are_copied_per_instance(self):
        """Test instance helpers do not leak to the class."""
        controller = PagesController()
        controller.helpers.append("Form")

        assert PagesController.helpers == ["Html"]

    def test_view_builder_is_reused(self):
        """Test the same builder is returned on every call."""
        controller = Controller()

        assert controller.view_builder() is controller.view_builder()

    def test_create_view_passes_controller_state(self, make_request):
        """Test create_view() hands name, plugin, helpers and variables to the view."""
        request = make_request("/pages")
        controller = PagesController(request)
        controller.plugin = "Blog"
        controller.set("title", "About")

        view = controller.create_view()

        assert view.name == "Pages"
        assert view.plugin == "Blog"
        assert view.helpers == ["Html"]
        assert view.view_vars == {"title": "About"}
        assert view.request is request
        assert view.event_manager is controller.event_manager

    def test_render_uses_name_as_template_path(self, template_dir, write_template):
        """Test the default template directory is the controller name."""
        write_template(template_dir, "Pages/about.html", "about {{ title }}")
        write_template(template_dir, "layout/default.html", "<{{ content }}>")
        controller = PagesController()
        controller.set("title", "us")
        controller.response.status = 201

        response = controller.render("about")

        assert response.body == b"<about us>"
        assert response.status == 201
        assert controller.response is response

    def test_before_render_result_short_circuits(self):
        """Test a beforeRender listener returning a response replaces rendering."""
        controller = Controller()
        replacement = HTTPResponse("cached")
        controller.event_manager.on("Controller.beforeRender", lambda event: replacement)

        assert controller.render("anything") is replacement

    def test_startup_process_returns_listener_response(self):
        """Test startup_process() surfaces a response from a listener."""
        controller = Controller()
        redirect = HTTPResponse(status=302)
        controller.event_manager.on("Controller.startup", lambda event: redirect)

        assert controller.startup_process() is redirect

    def test_startup_process_without_response(self):
        """Test startup_process() returns None normally."""
        assert Controller().startup_process() is None


class TestComponents:
    """Tests for component loading and hooks."""

    def test_load_attaches_hooks(self, template_dir, write_template):
        """Test component hooks run with the controller lifecycle."""
        ClassLoader.register("Controller/Component", "AuditComponent", AuditComponent)
        write_template(template_dir, "Controller/index.html", "ok")
        controller = Controller()

        audit = controller.load_component("Audit")
        controller.startup_process()
        controller.render("index")

        assert audit.calls == ["startup", "before_render"]
        assert controller.components.get("Audit") is audit
        assert controller.components.loaded() == ["Audit"]

    def test_load_is_idempotent(self):
        """Test loading a component twice returns the same instance."""
        controller = Controller()

        first = controller.load_component("RequestHandler")
        second = controller.load_component("RequestHandler")

        assert first is second
        assert isinstance(first, RequestHandlerComponent)

    def test_missing_component(self):
        """Test unknown components raise."""
        with pytest.raises(MissingComponentException) as exc_info:
            Controller().load_component("Nope")

        assert exc_info.value.get_attributes() == {"class": "Nope"}

    def test_component_config(self):
        """Test configuration reaches the component."""
        controller = Controller()

        handler = controller.load_component("RequestHandler", {"view_class_map": {"xml": "Xml"}})

        assert handler.view_class_map == {"json": "Json", "xml": "Xml"}


class TestRequestHandlerComponent:
    """Tests for content-type negotiation."""

    @pytest.mark.parametrize(
        "path, accept, expected",
        [
            ("/items.json", "", "json"),
            ("/items", "application/json", "json"),
            ("/items", "application/json, text/html", "json"),
            ("/items", "text/html, application/json", None),
            ("/items", "text/html", None),
            ("/items", "", None),
        ],
    )
    def test_negotiate(self, make_request, path, accept, expected):
        """Test extension detection from path and Accept header."""
        headers = {"accept": accept} if accept else {}

        assert RequestHandlerComponent.negotiate(make_request(path, headers)) == expected

    def test_negotiate_without_request(self):
        """Test negotiation outside a request."""
        assert RequestHandlerComponent.negotiate(None) is None

    def test_startup_switches_view_class(self, make_request):
        """Test JSON requests select the Json view."""
        controller = ErrorController(make_request("/items", {"accept": "application/json"}))

        controller.startup_process()

        assert controller.view_builder().class_name == "Json"

    def test_startup_keeps_html(self, make_request):
        """Test HTML requests keep the default view."""
        controller = ErrorController(make_request("/items", {"accept": "text/html"}))

        controller.startup_process()

        assert controller.view_builder().class_name is None


class TestErrorController:
    """Tests for the error controller."""

    def test_renders_from_error_directory(self, make_request):
        """Test error templates are taken from Error/."""
        controller = ErrorController(make_request("/"))
        controller.set({"message": "Gone", "url": "/"})

        response = controller.render("error400")

        assert controller.view_builder().template_path == "Error"
        assert b"<h2>Gone</h2>" in response.body
