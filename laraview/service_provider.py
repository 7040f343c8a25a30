"""
Service Provider Base Class
Laravel-style service providers for registering and bootstrapping services
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from laraview.application import Application


class ServiceProvider(ABC):
    """
    Base Service Provider class

    register() binds services into the container; boot() runs after every
    provider has been registered, so it may resolve other services.
    Returning False from register() leaves the provider out of boot.
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Register services in the container

        Example:
            self.app.singleton('view.engine', JinjaEngine())
            self.app.singleton('view', lambda app: Factory(app.make('view.engine')))
        """
        pass

    def boot(self):
        """Bootstrap services (after all providers are registered)"""
        pass
