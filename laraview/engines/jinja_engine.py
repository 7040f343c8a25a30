"""
Jinja2 Template Engine Integration
"""
import os
from typing import Any, Callable, Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from laraview.engines.engine import Engine
from laraview.exceptions import TemplateNotFoundException


class JinjaEngine(Engine):
    """
    Jinja2 engine wrapper for the view factory

    Templates are loaded from the configured locations; locations that do
    not exist are skipped. The environment is built lazily and rebuilt
    whenever the configuration changes.

    Example:
        engine = JinjaEngine(locations=['/app/resources/views'], autoescape=False)
        engine.render('pages/home.html', {'title': 'Home'})
    """

    def __init__(
        self,
        locations: Optional[Sequence[str]] = None,
        extensions: Optional[Sequence[str]] = None,
        **options: Any
    ):
        """
        Args:
            locations: Template directories (default: resources/views)
            extensions: Recognized template extensions, default first
            **options: jinja2.Environment options, on top of the
                defaults and the `view.jinja` config
        """
        super().__init__()
        self.options = options
        self._environment: Optional[Environment] = None

        if locations is not None:
            self.config('locations', list(locations))
        if extensions is not None:
            self.config('extensions', list(extensions))

    @property
    def environment(self) -> Environment:
        if self._environment is None:
            self._environment = self._build_environment()
        return self._environment

    def _build_environment(self) -> Environment:
        from laraview.defaults import DEFAULT_JINJA_OPTIONS

        options = dict(DEFAULT_JINJA_OPTIONS)
        options.update(self.config('jinja') or {})
        options.update(self.options)

        search_path = [location for location in self.locations() if os.path.isdir(location)]

        environment = Environment(loader=FileSystemLoader(search_path), **options)
        environment.filters.update(self.filters)
        environment.globals.update(self.globals)

        return environment

    def config_changed(self, key: str):
        self._environment = None

    def add_filter(self, name: str, callback: Callable):
        super().add_filter(name, callback)
        if self._environment is not None:
            self._environment.filters[name] = callback

    def add_global(self, name: str, value: Any):
        super().add_global(name, value)
        if self._environment is not None:
            self._environment.globals[name] = value

    def render(self, template: str, data: Dict[str, Any]) -> str:
        try:
            return self.environment.get_template(template).render(data)
        except TemplateNotFound as e:
            # Also covers {% include %} / {% extends %} of a missing template
            raise TemplateNotFoundException(e.name or template, self.locations()) from e

    def view_exists(self, template: str) -> bool:
        """Check the loader without compiling the template"""
        environment = self.environment
        try:
            environment.loader.get_source(environment, template)
        except TemplateNotFound:
            return False
        return True
