"""
JSON View
Serialises selected view variables instead of rendering a template
"""
import json
from typing import Optional
from viewkit.view.view import View


class JsonView(View):
    """
    View that renders the variables named in '_serialize' as JSON

    '_serialize' may be a list of names, a single name (whose value is
    serialised on its own) or True for every variable not starting with '_'.
    Without '_serialize' the template is rendered as usual.

    Example:
        controller.set({'message': 'Not Found', 'code': 404, '_serialize': ['message', 'code']})
        controller.view_builder().with_class_name('Json')
    """

    content_type = 'application/json'

    def render(self, template: Optional[str] = None, layout: Optional[str] = None) -> str:
        serialize = self.view_vars.get('_serialize')
        if serialize is None or serialize is False:
            return super().render(template, layout)

        if isinstance(serialize, str):
            data = self.view_vars.get(serialize)
        else:
            if serialize is True:
                keys = [key for key in self.view_vars if not key.startswith('_')]
            else:
                keys = list(serialize)
            data = {key: self.view_vars[key] for key in keys if key in self.view_vars}

        return json.dumps(data, default=str)
