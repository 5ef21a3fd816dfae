"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from sanic import Request
from sanic.compat import Header

from viewkit.core import Plugin
from viewkit.error import ExceptionRenderer
from viewkit.routing import DispatcherFactory, Router
from viewkit.support import ClassLoader, Config
from viewkit.view import TemplateEngine


@pytest.fixture(autouse=True)
def reset_framework_state(monkeypatch):
    """Reset process-wide registries so tests stay independent."""
    Config.clear_runtime_overrides()
    Config.set("app.APP_DEBUG", False)
    Config.set("app.NAMESPACE", None)
    Config.set("view.VIEW_PATHS", [])
    monkeypatch.setattr(ExceptionRenderer, "handlers", {})

    yield

    Config.clear_runtime_overrides()
    ClassLoader.clear()
    Plugin.unload()
    DispatcherFactory.clear()
    TemplateEngine.clear_instances()
    Router.clear_request()


@pytest.fixture
def debug_mode():
    """Enable debug mode for a single test."""
    Config.set("app.APP_DEBUG", True)
    return True


@pytest.fixture
def make_request():
    """Factory building Sanic requests without a running app."""

    def _make(path: str = "/", headers=None, method: str = "GET") -> Request:
        return Request(path.encode("utf-8"), Header(headers or {}), "1.1", method, None, None)

    return _make


@pytest.fixture
def template_dir(tmp_path):
    """Application template directory registered in view.VIEW_PATHS."""
    root = tmp_path / "templates"
    root.mkdir()
    Config.set("view.VIEW_PATHS", [str(root)])
    return root


@pytest.fixture
def write_template():
    """Write a template file below a template root."""

    def _write(root: Path, relative: str, content: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
