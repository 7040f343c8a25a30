import io
import json
import logging

from laraview import ArrayEngine
from laraview.logging import JSONFormatter, LoggerConfig, getLogger
from laraview.support import Config, EnvHelper, Str


def test_config_runtime_overrides_are_case_insensitive():
    Config.set('View.Extensions', ['.twig'])

    assert Config.get('view.extensions') == ['.twig']
    assert Config.has('VIEW.EXTENSIONS')


def test_config_default_when_missing():
    assert Config.get('view.nothing_here', 'fallback') == 'fallback'
    assert not Config.has('view.nothing_here')


def test_engine_config_lookup_order():
    engine = ArrayEngine()
    assert engine.config('extensions') == ['.html']

    Config.set('view.extensions', ['.jinja'])
    assert engine.extensions() == ['.jinja']

    engine.config('extensions', ['twig'])
    assert engine.extensions() == ['.twig']


def test_engine_config_accepts_a_dict():
    engine = ArrayEngine()
    engine.config({'extensions': ['.txt'], 'locations': '/srv/views'})

    assert engine.extensions() == ['.txt']
    assert engine.locations() == ['/srv/views']


def test_default_location_is_resources_views():
    location = ArrayEngine().locations()[0]

    assert location.replace('\\', '/').endswith('resources/views')


def test_str_helpers():
    assert Str.snake('BlogPost') == 'blog_post'
    assert Str.slug('Hello, World!') == 'hello-world'
    assert Str.title('blog_post') == 'Blog Post'
    assert Str.limit('Hello World', 5) == 'Hello...'
    assert Str.limit('Hi', 5) == 'Hi'


def test_get_logger_namespacing():
    assert getLogger().name == 'laraview'
    assert getLogger('composer').name == 'laraview'
    assert getLogger('laraview.view.factory').name == 'laraview.view.factory'


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord('laraview', logging.DEBUG, __file__, 1, 'Registered %s', ('composer',), None)
    record.views = ['home.html']

    payload = json.loads(JSONFormatter().format(record))

    assert payload['message'] == 'Registered composer'
    assert payload['level'] == 'DEBUG'
    assert payload['views'] == ['home.html']


def test_setup_logger_writes_json_to_stream():
    Config.set('app.app_env', 'development')
    stream = io.StringIO()

    logger = LoggerConfig.setup_logger('laraview.tests', format_type='json', stream=stream)
    logger.debug('hello', extra={'view': 'home'})

    payload = json.loads(stream.getvalue())
    assert payload['message'] == 'hello'
    assert payload['view'] == 'home'
    assert logger.propagate is False


def test_level_by_environment():
    assert LoggerConfig.get_level_by_environment('production') == logging.WARNING
    assert LoggerConfig.get_level_by_environment('testing') == logging.ERROR
    assert LoggerConfig.get_level_by_environment('production', debug=True) == logging.DEBUG
    assert LoggerConfig.get_level_by_environment('unknown') == logging.INFO


def test_env_helper_loads_a_string_path(tmp_path, monkeypatch):
    monkeypatch.delenv('LARAVIEW_TEST_NAME', raising=False)
    monkeypatch.setattr(EnvHelper, '_env_path', None)
    monkeypatch.setattr(EnvHelper, '_loaded', False)
    env_file = tmp_path / '.env'
    env_file.write_text('LARAVIEW_TEST_NAME=Docs\n')

    assert EnvHelper.load(str(env_file)) is True
    assert EnvHelper.get('LARAVIEW_TEST_NAME') == 'Docs'

    monkeypatch.delenv('LARAVIEW_TEST_NAME')
    assert EnvHelper.load(str(tmp_path / 'missing.env')) is False


def test_to_bool_parses_configured_flags():
    assert EnvHelper.to_bool('false') is False
    assert EnvHelper.to_bool('On') is True
    assert EnvHelper.to_bool(True) is True
    assert EnvHelper.to_bool(None, default=True) is True
    assert EnvHelper.to_bool(0) is False


def test_setup_logger_parses_debug_flag_from_config():
    Config.set('app.app_env', 'production')
    Config.set('app.app_debug', 'false')

    logger = LoggerConfig.setup_logger('laraview.tests.flags', stream=io.StringIO())

    assert logger.level == logging.WARNING
