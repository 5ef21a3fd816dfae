"""
View Builder
Fluent configuration for creating view instances
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional
from viewkit.support import ClassLoader
from viewkit.view.exceptions import MissingViewException


@dataclass
class ViewConfig:
    """Accumulated view configuration"""
    template_path: Optional[str] = None
    template: Optional[str] = None
    plugin: Optional[str] = None
    theme: Optional[str] = None
    layout: Optional[str] = None
    layout_path: Optional[str] = None
    auto_layout: bool = True
    name: Optional[str] = None
    class_name: Any = None
    options: Dict[str, Any] = field(default_factory=dict)
    helpers: List[str] = field(default_factory=list)


class ViewBuilder:
    """
    Collects view configuration and builds the view

    Every with_* method updates the configuration and returns the builder,
    so calls can be chained. The current values are exposed as properties.

    Example:
        view = ViewBuilder() \\
            .with_template_path('Error') \\
            .with_layout('error') \\
            .with_helpers(['Html']) \\
            .build({'message': 'Not Found'}, request, response)

        builder.template_path  # 'Error'
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        self._config = config or ViewConfig()

    @property
    def config(self) -> ViewConfig:
        """A copy of the current configuration"""
        return replace(
            self._config,
            options=dict(self._config.options),
            helpers=list(self._config.helpers),
        )

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    @property
    def template_path(self) -> Optional[str]:
        return self._config.template_path

    @property
    def layout_path(self) -> Optional[str]:
        return self._config.layout_path

    @property
    def auto_layout(self) -> bool:
        return self._config.auto_layout

    @property
    def plugin(self) -> Optional[str]:
        return self._config.plugin

    @property
    def theme(self) -> Optional[str]:
        return self._config.theme

    @property
    def template(self) -> Optional[str]:
        return self._config.template

    @property
    def layout(self) -> Optional[str]:
        return self._config.layout

    @property
    def name(self) -> Optional[str]:
        return self._config.name

    @property
    def class_name(self) -> Any:
        return self._config.class_name

    @property
    def options(self) -> Dict[str, Any]:
        return self._config.options

    @property
    def helpers(self) -> List[str]:
        return self._config.helpers

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def with_template_path(self, path: Optional[str]) -> 'ViewBuilder':
        """Set the directory templates are looked up in (e.g., 'Error')"""
        self._config.template_path = path
        return self

    def with_layout_path(self, path: Optional[str]) -> 'ViewBuilder':
        """Set the sub directory of 'layout' layouts are looked up in"""
        self._config.layout_path = path
        return self

    def with_auto_layout(self, auto_layout) -> 'ViewBuilder':
        """Turn wrapping the template in its layout on or off"""
        self._config.auto_layout = bool(auto_layout)
        return self

    def with_plugin(self, name: Optional[str]) -> 'ViewBuilder':
        self._config.plugin = name
        return self

    def with_theme(self, theme: Optional[str]) -> 'ViewBuilder':
        self._config.theme = theme
        return self

    def with_template(self, name: Optional[str]) -> 'ViewBuilder':
        self._config.template = name
        return self

    def with_layout(self, name: Optional[str]) -> 'ViewBuilder':
        self._config.layout = name
        return self

    def with_name(self, name: Optional[str]) -> 'ViewBuilder':
        self._config.name = name
        return self

    def with_class_name(self, name) -> 'ViewBuilder':
        """Set the view class: a short name ('Json'), 'Plugin.Name', a dotted path or a class"""
        self._config.class_name = name
        return self

    def with_helpers(self, helpers: List[str], merge: bool = True) -> 'ViewBuilder':
        """
        Set the helpers to load

        Args:
            helpers: Helper names
            merge: Append to the current helpers (True) or replace them (False)
        """
        if merge:
            helpers = list(dict.fromkeys([*self._config.helpers, *helpers]))
        self._config.helpers = list(helpers)
        return self

    def with_options(self, options: Dict[str, Any], merge: bool = True) -> 'ViewBuilder':
        """
        Set extra options passed to the view constructor

        Args:
            options: Option values
            merge: Merge into the current options, new keys winning (True),
                   or replace them (False)
        """
        if merge:
            options = {**self._config.options, **options}
        self._config.options = dict(options)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def resolve_class(self):
        """
        Resolve the configured view class

        Raises:
            MissingViewException: If the class does not resolve
        """
        class_name = self._config.class_name
        if class_name is None or class_name == 'View':
            view_class = ClassLoader.class_name(class_name or 'View', 'View')
        else:
            view_class = ClassLoader.class_name(class_name, 'View', 'View')

        if view_class is None:
            raise MissingViewException(attributes={'class': class_name})

        return view_class

    def build(
        self,
        view_vars: Optional[Dict[str, Any]] = None,
        request=None,
        response=None,
        event_manager=None
    ):
        """
        Build a view from the current configuration

        Extra options are added to the view parameters but never override
        the named fields.

        Args:
            view_vars: Template variables
            request: Current request
            response: Current response
            event_manager: Event manager for view events

        Returns:
            View instance

        Raises:
            MissingViewException: If the view class does not resolve
        """
        view_class = self.resolve_class()

        config = self._config
        data = {
            'name': config.name,
            'template_path': config.template_path,
            'template': config.template,
            'plugin': config.plugin,
            'theme': config.theme,
            'layout': config.layout,
            'auto_layout': config.auto_layout,
            'layout_path': config.layout_path,
            'helpers': list(config.helpers),
            'view_vars': dict(view_vars or {}),
        }
        for key, value in config.options.items():
            data.setdefault(key, value)

        return view_class(request, response, event_manager, data)
