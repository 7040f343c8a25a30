from typing import Any, Dict, List, Tuple

import pytest

from laraview import ArrayEngine, Engine, Factory
from laraview.exceptions import TemplateNotFoundException
from laraview.support import Config
from laraview.support.facades import Facade


class RecordingEngine(Engine):
    """Engine stub: records every render call and returns a marker string"""

    def __init__(self, known=(), extensions=None):
        super().__init__()
        self.known = set(known)
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        if extensions is not None:
            self.config('extensions', extensions)

    def render(self, template, data):
        if template not in self.known:
            raise TemplateNotFoundException(template)
        self.calls.append((template, dict(data)))
        return f'rendered:{template}'

    def view_exists(self, template):
        return template in self.known


@pytest.fixture(autouse=True)
def _clean_state():
    Config.clear_runtime_overrides()
    yield
    Config.clear_runtime_overrides()
    Config.reload()
    Facade.set_app(None)


@pytest.fixture
def engine():
    return ArrayEngine({
        'home.html': '<h1>{title}</h1>',
        'pages/about.html': 'About {name}',
    })


@pytest.fixture
def factory(engine):
    return Factory(engine)


@pytest.fixture
def recording_engine():
    return RecordingEngine(known={'home.html', 'pages/about.html', 'partials/nav.html'})


@pytest.fixture
def recording_factory(recording_engine):
    return Factory(recording_engine)


@pytest.fixture
def write_view(tmp_path):
    """Write a template under tmp_path/views and return the views dir"""
    views = tmp_path / 'views'
    views.mkdir()

    def write(path: str, source: str):
        target = views / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source, encoding='utf-8')
        return views

    write.root = views
    return write
