"""
Array Template Engine
Templates held in memory; no template files needed
"""
from typing import Any, Callable, Dict, Optional, Sequence, Union

from laraview.engines.engine import Engine
from laraview.exceptions import TemplateNotFoundException

Template = Union[str, Callable[[Dict[str, Any]], str]]


class _FormatData(dict):
    """format_map() data that renders unknown placeholders as ''"""

    def __missing__(self, key):
        return ''


class ArrayEngine(Engine):
    """
    In-memory engine keyed by resolved template path

    String templates are rendered with str.format_map ('Hello {name}');
    callable templates are called with the data and return the output.
    Engine functions (from extensions) are available as data with the
    lowest precedence; filters are not supported.

    Example:
        engine = ArrayEngine({'pages/home.html': '<h1>{title}</h1>'})
        Factory(engine).fetch('pages.home', {'title': 'Home'})  # '<h1>Home</h1>'
    """

    def __init__(
        self,
        templates: Optional[Dict[str, Template]] = None,
        extensions: Optional[Sequence[str]] = None,
    ):
        super().__init__()
        self.templates: Dict[str, Template] = dict(templates or {})

        if extensions is not None:
            self.config('extensions', list(extensions))

    def add_template(self, path: str, template: Template) -> 'ArrayEngine':
        self.templates[path] = template
        return self

    def render(self, template: str, data: Dict[str, Any]) -> str:
        if template not in self.templates:
            raise TemplateNotFoundException(template)

        source = self.templates[template]
        if callable(source):
            return source(data)

        values = _FormatData(self.globals)
        values.update(data)
        return source.format_map(values)

    def view_exists(self, template: str) -> bool:
        return template in self.templates
