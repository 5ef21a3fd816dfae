"""
Html Helper
"""
from markupsafe import Markup, escape
from viewkit.view.helper import Helper, format_attributes


class HtmlHelper(Helper):
    """
    HTML generation helper

    Example:
        {{ Html.link('Back to home', '/', class_='button') }}
        {{ Html.tag('code', error_file) }}
    """

    def escape(self, value) -> Markup:
        return escape(value)

    def tag(self, name: str, content=None, **attrs) -> Markup:
        """Build an element; content is escaped unless it is already Markup"""
        attributes = format_attributes(attrs)
        if content is None:
            return Markup(f'<{name}{attributes}>')
        return Markup(f'<{name}{attributes}>{escape(content)}</{name}>')

    def link(self, title, url: str = None, **attrs) -> Markup:
        if url is None:
            url = title
        return self.tag('a', title, href=url, **attrs)

    def para(self, text, class_: str = None, **attrs) -> Markup:
        return self.tag('p', text, class_=class_, **attrs)
