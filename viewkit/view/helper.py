"""
View Helper Base
"""
from typing import Any, Dict, Optional
from markupsafe import Markup, escape


def format_attributes(attrs: Dict[str, Any]) -> Markup:
    """
    Format keyword arguments as HTML attributes

    Underscores become hyphens (aria_label -> aria-label) and a trailing
    underscore is dropped (class_ -> class). None and False are skipped,
    True renders a bare attribute.
    """
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        html_key = key.rstrip('_').replace('_', '-')
        if value is True:
            parts.append(html_key)
        else:
            parts.append(f'{html_key}="{escape(value)}"')
    return Markup(' ' + ' '.join(parts)) if parts else Markup('')


class Helper:
    """
    Base class for template helpers

    Helpers are exposed to templates under their short name:
        {{ Html.link('Home', '/') }}
    """

    def __init__(self, view, config: Optional[Dict[str, Any]] = None):
        self.view = view
        self.config = dict(config or {})

    def __repr__(self):
        return f'{self.__class__.__name__}()'
