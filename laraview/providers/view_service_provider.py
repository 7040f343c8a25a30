"""
View Service Provider
"""
from laraview.service_provider import ServiceProvider
from laraview.engines import JinjaEngine
from laraview.view import Factory


class ViewServiceProvider(ServiceProvider):
    """
    Registers the template engine ('view.engine') and the view factory
    ('view'), then loads the view extensions on boot.

    Bindings the host may set before registering this provider:
        view.engine            engine instance to use instead of JinjaEngine
        view.extensions        extensions loaded after the defaults
        view.extension_filter  callable receiving the extension list and
                               returning the list to load
    """

    def register(self):
        if not self.app.has('view.engine'):
            self.app.singleton('view.engine', lambda app: JinjaEngine())

        self.app.singleton('view', self.make_factory)

    def boot(self):
        self.app.make('view').load_extensions()

    def make_factory(self, app) -> Factory:
        extensions = app.make('view.extensions') if app.has('view.extensions') else []
        extension_filter = app.make('view.extension_filter') if app.has('view.extension_filter') else None

        return Factory(
            app.make('view.engine'),
            extensions=extensions,
            extension_filter=extension_filter,
        )
