"""
View Factory
Resolves view names, holds shared data and composers, and drives rendering
"""
import sys
from typing import Any, Callable, Dict, Iterable, List, Optional, TextIO, Union, TYPE_CHECKING

from laraview.defaults import WILDCARD_COMPOSER_KEY
from laraview.exceptions import TemplateNotFoundException
from laraview.logging import getLogger
from laraview.view.aggregator import DataAggregator
from laraview.view.composers import ComposerRegistry
from laraview.view.data import coerce_data
from laraview.view.resolver import NameResolver
from laraview.view.view import View

if TYPE_CHECKING:
    from laraview.engines.engine import Engine
    from laraview.extensions.base import Extension

logger = getLogger(__name__)

ExtensionFilter = Callable[[List['Extension']], Iterable['Extension']]


class Factory:
    """
    View factory

    Not safe for interleaved renders: composers and the render stack are
    mutated while rendering, so concurrent hosts need one factory per
    request.

    Example:
        factory = Factory(JinjaEngine())
        factory.share('site_name', 'Docs')
        factory.composer('pages.home', lambda view: {'posts': latest_posts()})

        html = factory.fetch('pages.home', {'title': 'Home'})
        factory.render('pages.home')  # writes to stdout
    """

    def __init__(
        self,
        engine: 'Engine',
        extensions: Optional[Iterable['Extension']] = None,
        extension_filter: Optional[ExtensionFilter] = None,
    ):
        """
        Args:
            engine: Template engine the views render through
            extensions: Extensions loaded after the default ones
            extension_filter: Receives the full extension list before
                registration and returns the list to register
        """
        self._engine = engine
        self._extensions = list(extensions or [])
        self._extension_filter = extension_filter
        self._extensions_loaded = False

        self._composers = ComposerRegistry()
        self._aggregator = DataAggregator()
        self._shared: Dict[str, Any] = {}
        self._resolver: Optional[NameResolver] = None

    @property
    def engine(self) -> 'Engine':
        return self._engine

    @property
    def composers(self) -> ComposerRegistry:
        return self._composers

    @property
    def aggregator(self) -> DataAggregator:
        return self._aggregator

    # ===================================================================
    # Shared data & composers
    # ===================================================================

    def share(self, key: Union[str, Dict[str, Any]], value: Any = None) -> 'Factory':
        """
        Share data with every view

        Example:
            factory.share('site_name', 'Docs')
            factory.share({'year': 2026, 'locale': 'en'})
        """
        if isinstance(key, dict):
            for inner_key, inner_value in key.items():
                self.share(inner_key, inner_value)
            return self

        self._shared[key] = value
        return self

    def get_shared(self) -> Dict[str, Any]:
        return dict(self._shared)

    def composer(
        self,
        views: Union[str, Iterable[str]],
        callback: Any,
        persistent: bool = False,
    ) -> 'Factory':
        """
        Register a composer with one or more views ('*' for every view)

        A composer is a callable receiving the view (or nothing) and
        returning a dict, or a plain dict merged as-is. It fires on the
        next render of each view only, unless `persistent` is set.

        Example:
            factory.composer(['pages.home', 'pages.about'], lambda view: {'menu': menu()})
            factory.composer('*', {'year': 2026}, persistent=True)
        """
        if isinstance(views, str):
            views = [views]

        keys = [
            view if view == WILDCARD_COMPOSER_KEY else self.resolve(view)
            for view in views
        ]
        self._composers.register(keys, callback, persistent)

        logger.debug(
            "Registered composer",
            extra={'views': keys, 'persistent': persistent},
        )
        return self

    # ===================================================================
    # Views
    # ===================================================================

    def resolve(self, view: str) -> str:
        """Resolve a view name against the engine's current extensions"""
        extensions = self._engine.extensions()
        if self._resolver is None or self._resolver.extensions != extensions:
            self._resolver = NameResolver.from_engine(self._engine)

        return self._resolver.resolve(view)

    def exists(self, view: str) -> bool:
        """Determine if a view has a backing template (never raises)"""
        try:
            return bool(self._engine.view_exists(self.resolve(view)))
        except Exception:
            logger.warning("View existence check failed for %s", view, exc_info=True)
            return False

    def create_data(self, data: Any = None) -> Dict[str, Any]:
        """
        Normalize view data

        Objects with a to_map() method are converted through it, mappings
        are copied, and anything else becomes an empty dict.
        """
        normalized = coerce_data(data)
        if normalized is None:
            logger.debug(
                "Ignoring view data of type %s; expected a mapping or to_map()",
                type(data).__name__,
            )
            return {}

        return normalized

    def make(self, view: str, data: Any = None) -> View:
        """
        Create a view instance (existence is checked at render time)

        Example:
            view = factory.make('posts.show', post)
        """
        return View(self, view, self.resolve(view), self.create_data(data))

    def first(self, views: Iterable[str], data: Any = None) -> View:
        """
        Make the first view that exists

        Raises:
            TemplateNotFoundException: If none of the views exist
        """
        views = list(views)
        for view in views:
            if self.exists(view):
                return self.make(view, data)

        raise TemplateNotFoundException(
            ', '.join(views),
            message=f"None of the views exist: {', '.join(views)}"
        )

    # ===================================================================
    # Rendering
    # ===================================================================

    def gather_data(self, view: View) -> Dict[str, Any]:
        """
        Gather the data a view renders with and consume its one-shot composers

        One-shot composers are detached before they run, so views rendered
        while gathering never fire them. Composer exceptions propagate and
        the detached composers are put back.
        """
        path = view.get_path()
        entries = self._composers.detach(path)
        wildcard = self._composers.detach(WILDCARD_COMPOSER_KEY)

        try:
            return self._aggregator.gather(
                view,
                self._shared,
                [entry.source for entry in entries],
                [entry.source for entry in wildcard],
            )
        except Exception:
            self._composers.restore(path, entries)
            self._composers.restore(WILDCARD_COMPOSER_KEY, wildcard)
            raise

    def render_view(self, view: View) -> str:
        """Render a view through the engine"""
        data = self.gather_data(view)

        self._aggregator.push(data)
        try:
            return self._engine.render(view.get_path(), data)
        finally:
            self._aggregator.pop()

    def fetch(self, view: str, data: Any = None) -> str:
        """Render a view and return the output"""
        return self.make(view, data).render()

    def render(self, view: str, data: Any = None, stream: Optional[TextIO] = None):
        """
        Render a view and write the output (default: sys.stdout)

        Example:
            factory.render('pages.home', {'title': 'Home'})
        """
        output = self.fetch(view, data)
        (stream or sys.stdout).write(output)

    # ===================================================================
    # Engine configuration & extensions
    # ===================================================================

    def config(self, key: Union[str, Dict[str, Any]], value: Any = None) -> Any:
        """Get or set engine configuration"""
        return self._engine.config(key, value)

    def load_extensions(self) -> 'Factory':
        """
        Register the default extensions plus the ones given at construction

        The extension filter (if any) sees the whole list first and may
        add, drop or replace extensions. Runs once per factory.
        """
        if self._extensions_loaded:
            return self

        from laraview.extensions import default_extensions

        extensions = default_extensions() + self._extensions
        if self._extension_filter is not None:
            extensions = list(self._extension_filter(extensions))

        for extension in extensions:
            extension.register(self)
            logger.debug("Loaded view extension %s", type(extension).__name__)

        self._extensions_loaded = True
        return self
