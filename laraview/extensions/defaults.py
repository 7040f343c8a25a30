"""
Default View Extensions
Loaded by Factory.load_extensions() before any host extension
"""
from typing import Any, Callable, Dict, List

from markupsafe import Markup

from laraview.extensions.base import Extension, ComposerDefinition
from laraview.support import Config, EnvHelper, Str


class GlobalExtension(Extension):
    """
    Application globals for every view

    Shares app_name, app_env and app_debug, and adds `current_view`
    (the logical name of the view being rendered) through a wildcard
    composer.
    """

    def get_shared(self) -> Dict[str, Any]:
        from laraview.defaults import DEFAULT_APP_NAME, DEFAULT_APP_ENV
        return {
            'app_name': Config.get('app.app_name') or EnvHelper.get('APP_NAME', DEFAULT_APP_NAME),
            'app_env': Config.get('app.app_env') or EnvHelper.get('APP_ENV', DEFAULT_APP_ENV),
            'app_debug': EnvHelper.to_bool(
                Config.get('app.app_debug'),
                EnvHelper.get_bool('APP_DEBUG', False),
            ),
        }

    def get_composers(self) -> List[ComposerDefinition]:
        return [('*', lambda view: {'current_view': view.get_name()})]


class FunctionExtension(Extension):
    """
    Template functions

    - config(key, default=None): Config.get
    - env(key, default=None): EnvHelper.get
    - view(name, **data): render another view in place; the nested view
      starts from the data of the view being rendered
    - view_exists(name): Factory.exists
    """

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'config': Config.get,
            'env': EnvHelper.get,
            'view': self.include,
            'view_exists': self.view_exists,
        }

    def include(self, name: str, **data: Any) -> Markup:
        # Already escaped by the nested render
        return Markup(self.factory.fetch(name, data))

    def view_exists(self, name: str) -> bool:
        return self.factory.exists(name)


class FilterExtension(Extension):
    """String filters backed by Str: snake, slug, title, limit"""

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'snake': Str.snake,
            'slug': Str.slug,
            'title_case': Str.title,
            'limit': Str.limit,
        }


def default_extensions() -> List[Extension]:
    """Fresh instances of the default extensions, in registration order"""
    return [
        GlobalExtension(),
        FunctionExtension(),
        FilterExtension(),
    ]
