import io

import pytest
from sanic.response import HTTPResponse

from laraview import ArrayEngine, Extension, Factory, JinjaEngine, api
from laraview.application import Application
from laraview.http import view as view_response
from laraview.support.facades import Facade, TemplateView


@pytest.fixture
def app():
    engine = ArrayEngine({
        'home.html': '<h1>{title}</h1>',
        'errors/404.html': 'Not found: {path}',
    })
    return api.bootstrap(engine=engine)


def test_bootstrap_installs_application(app):
    assert Facade.get_app() is app
    assert isinstance(app.make('view'), Factory)
    assert app.make('view') is app.make('view')
    assert api.factory() is app.make('view')


def test_facade_without_application():
    with pytest.raises(RuntimeError, match='cannot access application'):
        TemplateView.fetch('home')


def test_facade_proxies_to_factory(app):
    assert TemplateView.fetch('home', {'title': 'Hi'}) == '<h1>Hi</h1>'
    assert TemplateView.exists('errors.404') is True


def test_api_functions(app, capsys):
    api.share('title', 'Shared')
    api.composer('errors.404', {'path': '/nowhere'})

    assert api.exists('home') is True
    assert api.exists('missing') is False
    assert api.fetch('home') == '<h1>Shared</h1>'
    assert api.fetch('errors.404') == 'Not found: /nowhere'

    api.render('home', {'title': 'Echo'})
    assert capsys.readouterr().out == '<h1>Echo</h1>'


def test_api_render_to_stream(app):
    stream = io.StringIO()
    api.render('home', {'title': 'Hi'}, stream=stream)
    assert stream.getvalue() == '<h1>Hi</h1>'


def test_api_config(app):
    api.config('extensions', ['.htm', '.html'])

    assert api.config('extensions') == ['.htm', '.html']
    assert api.factory().make('home').get_path() == 'home.htm'


def test_bootstrap_loads_default_extensions(app):
    assert 'app_name' in api.factory().get_shared()


def test_bootstrap_with_extensions_and_filter():
    class Brand(Extension):
        def get_shared(self):
            return {'brand': 'Docs'}

    app = api.bootstrap(
        engine=ArrayEngine(),
        extensions=[Brand()],
        extension_filter=lambda extensions: extensions[-1:],
    )

    assert app.make('view').get_shared() == {'brand': 'Docs'}


def test_register_extension(app):
    class Brand(Extension):
        def get_shared(self):
            return {'title': 'Branded'}

    api.register_extension(Brand())

    assert api.fetch('home') == '<h1>Branded</h1>'


def test_instance_bootstraps_defaults(tmp_path):
    api.reset()

    app = api.instance()

    assert Facade.get_app() is app
    assert isinstance(app.make('view.engine'), JinjaEngine)
    assert api.exists('anything') is False


def test_reset():
    api.bootstrap(engine=ArrayEngine())
    api.reset()
    assert Facade.get_app() is None


# ===========================================================================
# HTTP responses
# ===========================================================================

def test_view_response(app):
    response = view_response('home', {'title': 'Hi'})

    assert isinstance(response, HTTPResponse)
    assert response.status == 200
    assert response.body == b'<h1>Hi</h1>'
    assert response.content_type.startswith('text/html')


def test_view_response_with_status_and_factory():
    factory = Factory(ArrayEngine({'errors/404.html': 'Not found: {path}'}))

    response = view_response(
        'errors.404',
        {'path': '/x'},
        status=404,
        headers={'X-View': 'errors.404'},
        factory=factory,
    )

    assert response.status == 404
    assert response.body == b'Not found: /x'
    assert response.headers['X-View'] == 'errors.404'


# ===========================================================================
# Container
# ===========================================================================

def test_container_bindings(tmp_path):
    container = Application(str(tmp_path))
    created = []

    container.singleton('lazy', lambda app: created.append(1) or 'value')
    container.bind('fresh', lambda app: object())
    container.singleton('instance', ['ready'])

    assert created == []
    assert container.make('lazy') == 'value'
    assert container.make('lazy') == 'value'
    assert created == [1]
    assert container.make('fresh') is not container.make('fresh')
    assert container.make('instance') == ['ready']
    assert container.has('lazy') and not container.has('missing')

    with pytest.raises(KeyError):
        container.make('missing')
