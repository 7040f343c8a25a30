"""
Module-level View API
Thin host-integration layer over the process-wide default factory

Example:
    from laraview import api

    api.composer('pages.home', lambda view: {'posts': latest_posts()})
    html = api.fetch('pages.home', {'title': 'Home'})
"""
from typing import Any, Callable, Dict, Iterable, Optional, TextIO, Union, TYPE_CHECKING

from laraview.application import Application
from laraview.providers import LoggingServiceProvider, ViewServiceProvider
from laraview.support.facades import Facade, TemplateView

if TYPE_CHECKING:
    from laraview.engines.engine import Engine
    from laraview.extensions.base import Extension
    from laraview.view.factory import Factory


def bootstrap(
    base_path: Optional[str] = None,
    engine: Optional['Engine'] = None,
    extensions: Optional[Iterable['Extension']] = None,
    extension_filter: Optional[Callable] = None,
) -> Application:
    """
    Build, boot and install the default application

    Replaces any previously installed application.

    Args:
        base_path: Application base path (default: current directory)
        engine: Template engine (default: JinjaEngine over resources/views)
        extensions: Extensions loaded after the default ones
        extension_filter: Receives the extension list, returns the list to load
    """
    app = Application(base_path)

    if engine is not None:
        app.singleton('view.engine', engine)
    if extensions is not None:
        app.singleton('view.extensions', list(extensions))
    if extension_filter is not None:
        app.singleton('view.extension_filter', lambda app: extension_filter)

    app.register_provider(LoggingServiceProvider)
    app.register_provider(ViewServiceProvider)
    app.boot()

    Facade.set_app(app)
    return app


def instance() -> Application:
    """The installed application, bootstrapped with defaults on first use"""
    app = Facade.get_app()
    if app is None:
        app = bootstrap()
    return app


def reset():
    """Detach the installed application"""
    Facade.set_app(None)


def factory() -> 'Factory':
    instance()
    return TemplateView.get_facade_root()


def composer(views: Union[str, Iterable[str]], callback: Any, persistent: bool = False) -> 'Factory':
    """Register a composer with one or more views"""
    return factory().composer(views, callback, persistent)


def share(key: Union[str, Dict[str, Any]], value: Any = None) -> 'Factory':
    """Share data with every view"""
    return factory().share(key, value)


def exists(view: str) -> bool:
    return factory().exists(view)


def fetch(view: str, data: Any = None) -> str:
    """Render a view and return the output"""
    return factory().fetch(view, data)


def render(view: str, data: Any = None, stream: Optional[TextIO] = None):
    """Render a view and write the output (default: sys.stdout)"""
    factory().render(view, data, stream)


def config(key: Union[str, Dict[str, Any]], value: Any = None) -> Any:
    """Get or set engine configuration"""
    return factory().config(key, value)


def register_extension(*extensions: 'Extension'):
    """Register extensions with the default factory"""
    view_factory = factory()
    for extension in extensions:
        extension.register(view_factory)
