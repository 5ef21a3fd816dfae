"""Tests for ViewBuilder."""

import pytest
from sanic.response import HTTPResponse

from viewkit.events import EventManager
from viewkit.support import ClassLoader
from viewkit.view import JsonView, MissingViewException, View, ViewBuilder


class RecordingView(View):
    """View that records how often it was constructed."""

    instances = 0

    def __init__(self, *args, **kwargs):
        RecordingView.instances += 1
        super().__init__(*args, **kwargs)


class TestViewBuilderConfiguration:
    """Tests for the fluent setters and getters."""

    def test_defaults(self):
        """Test a fresh builder's values."""
        builder = ViewBuilder()

        assert builder.template_path is None
        assert builder.template is None
        assert builder.layout is None
        assert builder.auto_layout is True
        assert builder.helpers == []
        assert builder.options == {}

    def test_setters_chain_and_getters_return_values(self):
        """Test that every setter returns the builder and stores its value."""
        builder = ViewBuilder()

        result = builder \
            .with_template_path("Pages") \
            .with_template("home") \
            .with_layout("admin") \
            .with_layout_path("backend") \
            .with_plugin("Blog") \
            .with_theme("Dark") \
            .with_name("Pages") \
            .with_class_name("Json")

        assert result is builder
        assert builder.template_path == "Pages"
        assert builder.template == "home"
        assert builder.layout == "admin"
        assert builder.layout_path == "backend"
        assert builder.plugin == "Blog"
        assert builder.theme == "Dark"
        assert builder.name == "Pages"
        assert builder.class_name == "Json"

    def test_auto_layout_is_coerced_to_bool(self):
        """Test auto layout flag coercion."""
        builder = ViewBuilder().with_auto_layout(0)

        assert builder.auto_layout is False

    def test_helpers_merge_keeps_existing(self):
        """Test merging helpers appends new names."""
        builder = ViewBuilder().with_helpers(["A"]).with_helpers(["B"], merge=True)

        assert builder.helpers == ["A", "B"]

    def test_helpers_merge_does_not_repeat_names(self):
        """Test merging a helper that is already present."""
        builder = ViewBuilder().with_helpers(["Html", "Form"]).with_helpers(["Html"])

        assert builder.helpers == ["Html", "Form"]

    def test_helpers_replace(self):
        """Test replacing helpers outright."""
        builder = ViewBuilder().with_helpers(["A"]).with_helpers(["B"], merge=False)

        assert builder.helpers == ["B"]

    def test_options_merge_new_values_win(self):
        """Test option merging on key collision."""
        builder = ViewBuilder() \
            .with_options({"extension": ".htm", "cache": True}) \
            .with_options({"extension": ".jinja"})

        assert builder.options == {"extension": ".jinja", "cache": True}

    def test_options_replace(self):
        """Test replacing options outright."""
        builder = ViewBuilder().with_options({"cache": True}).with_options({"debug": 1}, merge=False)

        assert builder.options == {"debug": 1}

    def test_config_is_a_copy(self):
        """Test mutating the returned config leaves the builder alone."""
        builder = ViewBuilder().with_helpers(["Html"])

        config = builder.config
        config.helpers.append("Form")
        config.template = "other"

        assert builder.helpers == ["Html"]
        assert builder.template is None


class TestViewBuilderBuild:
    """Tests for ViewBuilder.build()."""

    def test_build_default_view(self, make_request):
        """Test building the base View with all named parameters."""
        request = make_request("/pages")
        response = HTTPResponse()
        events = EventManager()
        builder = ViewBuilder() \
            .with_name("Pages") \
            .with_template_path("Pages") \
            .with_template("home") \
            .with_layout("admin") \
            .with_layout_path("backend") \
            .with_auto_layout(False) \
            .with_helpers(["Html"])

        view = builder.build({"title": "Home"}, request, response, events)

        assert type(view) is View
        assert view.request is request
        assert view.response is response
        assert view.event_manager is events
        assert view.name == "Pages"
        assert view.template_path == "Pages"
        assert view.template == "home"
        assert view.layout == "admin"
        assert view.layout_path == "backend"
        assert view.auto_layout is False
        assert view.helpers == ["Html"]
        assert view.view_vars == {"title": "Home"}

    def test_build_short_class_name(self):
        """Test that 'Json' resolves to JsonView."""
        view = ViewBuilder().with_class_name("Json").build()

        assert isinstance(view, JsonView)

    def test_build_with_class_object(self):
        """Test passing a class directly."""
        view = ViewBuilder().with_class_name(JsonView).build()

        assert isinstance(view, JsonView)

    def test_build_with_plugin_qualified_name(self):
        """Test that 'Plugin.Name' resolves through the registry."""
        ClassLoader.register("View", "Blog.RecordingView", RecordingView)

        view = ViewBuilder().with_class_name("Blog.Recording").build()

        assert isinstance(view, RecordingView)

    def test_build_unresolvable_class_raises_before_construction(self):
        """Test a missing view class fails before any view is created."""
        RecordingView.instances = 0
        ClassLoader.register("View", "RecordingView", RecordingView)
        builder = ViewBuilder().with_class_name("DoesNotExist")

        with pytest.raises(MissingViewException) as exc_info:
            builder.build({"a": 1})

        assert exc_info.value.get_attributes() == {"class": "DoesNotExist"}
        assert "DoesNotExist" in str(exc_info.value)
        assert RecordingView.instances == 0

    def test_options_do_not_override_named_fields(self):
        """Test extra options are added but never replace named parameters."""
        view = ViewBuilder() \
            .with_template("home") \
            .with_options({"template": "hijacked", "extension": ".htm", "flavour": "mint"}) \
            .build()

        assert view.template == "home"
        assert view.extension == ".htm"
        assert view.options == {"flavour": "mint"}

    def test_view_vars_are_copied(self):
        """Test the view gets its own copy of the variables."""
        variables = {"title": "Home"}

        view = ViewBuilder().build(variables)
        view.set("title", "Changed")

        assert variables == {"title": "Home"}
