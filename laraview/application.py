"""
Framework Application Class
Service container and provider lifecycle for the view layer
"""
from typing import Dict, List, Any, Optional
import inspect


class Application:
    """
    Laravel-style service container

    Example:
        app = Application(base_path='/srv/site')
        app.register_provider(ViewServiceProvider)
        app.boot()
        factory = app.make('view')
    """

    def __init__(self, base_path: Optional[str] = None):
        from laraview.support import Storage

        Storage.initialize(base_path)
        self.base_path = str(Storage.base())

        self.providers: List[Any] = []
        self.booted = False
        self.bindings: Dict[str, Dict[str, Any]] = {}

    def singleton(self, key: str, factory_or_instance):
        """
        Register a singleton binding
        If factory: Will be called once (with the application) and cached
        If instance: Will be stored directly
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

    def bind(self, key: str, factory: callable):
        """Register a factory binding (called every time)"""
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """Resolve a binding from the container"""
        if key not in self.bindings:
            raise KeyError(f"Binding '{key}' not found in container")

        binding = self.bindings[key]

        if binding['type'] == 'singleton':
            if binding['instance'] is None:
                binding['instance'] = binding['factory'](self)
            return binding['instance']

        return binding['factory'](self)

    def has(self, key: str) -> bool:
        """Check if a binding exists in the container"""
        return key in self.bindings

    def register_provider(self, provider_class):
        """Register a service provider"""
        provider = provider_class(self)
        if provider.register() is not False:
            self.providers.append(provider)
        return provider

    def boot(self):
        """Boot all service providers"""
        if self.booted:
            return

        for provider in self.providers:
            provider.boot()

        self.booted = True
