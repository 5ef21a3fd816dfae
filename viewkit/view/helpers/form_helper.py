"""
Form Helper
"""
from markupsafe import Markup
from viewkit.view.helper import Helper, format_attributes


class FormHelper(Helper):
    """
    Form generation helper

    Example:
        {{ Form.create('/search', method='get') }}
        {{ Form.input('q', placeholder='Search') }}
        {{ Form.submit('Go') }}
        {{ Form.end() }}
    """

    def create(self, action: str = '', method: str = 'post', **attrs) -> Markup:
        return Markup(f'<form{format_attributes(dict(action=action, method=method, **attrs))}>')

    def input(self, name: str, value=None, type: str = 'text', **attrs) -> Markup:
        return Markup(f'<input{format_attributes(dict(type=type, name=name, value=value, **attrs))}>')

    def submit(self, caption: str = 'Submit', **attrs) -> Markup:
        return Markup(f'<button{format_attributes(dict(type="submit", **attrs))}>') + caption + Markup('</button>')

    def end(self) -> Markup:
        return Markup('</form>')
