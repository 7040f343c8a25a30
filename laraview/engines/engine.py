"""
Template Engine Interface
What the view factory needs from a template engine
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union, TYPE_CHECKING

from laraview.support import Config, Storage
from laraview.view.resolver import normalize_extensions

if TYPE_CHECKING:
    from laraview.extensions.base import Extension


class Engine(ABC):
    """
    Base template engine

    Configuration lookup order for a key: values set on the engine,
    then `view.<key>` from Config, then get_default_config().

    Example:
        engine.config('locations', ['/app/views'])
        engine.config({'extensions': ['.html', '.jinja']})
        engine.config('locations')  # ['/app/views']
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self._config: Dict[str, Any] = {}
        self.filters: Dict[str, Callable] = {}
        self.globals: Dict[str, Any] = {}

        if config:
            self.config(config)

    def config(self, key: Union[str, Dict[str, Any]], value: Any = None) -> Any:
        """Get or set configuration values"""
        if isinstance(key, dict):
            for inner_key, inner_value in key.items():
                self.config(inner_key, inner_value)
            return None

        if value is not None:
            self._config[key] = value
            self.config_changed(key)
            return value

        if key in self._config:
            return self._config[key]

        configured = Config.get(f'view.{key}')
        if configured is not None:
            return configured

        return self.get_default_config().get(key)

    def get_default_config(self) -> Dict[str, Any]:
        from laraview.defaults import DEFAULT_VIEW_EXTENSIONS
        return {
            'locations': [str(Storage.views())],
            'extensions': list(DEFAULT_VIEW_EXTENSIONS),
        }

    def config_changed(self, key: str):
        """Hook for engines that cache state derived from configuration"""

    def extensions(self) -> List[str]:
        """Recognized template extensions, default first"""
        return normalize_extensions(self.config('extensions'))

    def locations(self) -> List[str]:
        """Directories searched for templates"""
        locations = self.config('locations') or []
        if isinstance(locations, str):
            locations = [locations]
        return [str(location) for location in locations]

    def register_extension(self, extension: 'Extension'):
        """Add an extension's filters and functions to the engine"""
        for name, callback in extension.get_filters().items():
            self.add_filter(name, callback)
        for name, value in extension.get_functions().items():
            self.add_global(name, value)

    def add_filter(self, name: str, callback: Callable):
        self.filters[name] = callback

    def add_global(self, name: str, value: Any):
        self.globals[name] = value

    @abstractmethod
    def render(self, template: str, data: Dict[str, Any]) -> str:
        """
        Render a resolved template path with data

        Raises:
            TemplateNotFoundException: If the template does not exist
        """

    @abstractmethod
    def view_exists(self, template: str) -> bool:
        """Check whether a resolved template path has a backing template"""
