"""
Facade System
Laravel-style facade pattern for static-like access to services
"""
from typing import Any, Optional

# Process-wide application instance (set once by the host bootstrap)
_app_instance: Optional[Any] = None


class FacadeMeta(type):
    """Metaclass for Facade that proxies class attribute access to the facade root"""

    def __getattr__(cls, name: str) -> Any:
        """
        Proxy attribute/method access to the facade root

        Args:
            name: Attribute/method name

        Returns:
            Attribute or method from underlying instance
        """
        instance = cls.get_facade_root()
        return getattr(instance, name)


class Facade(metaclass=FacadeMeta):
    """
    Base Facade class

    Provides Laravel-style static access to underlying service instances.
    Subclasses must implement get_facade_accessor() to specify which
    service to resolve from the application container.

    Example:
        class TemplateView(Facade):
            @classmethod
            def get_facade_accessor(cls):
                return 'view'

        # Usage:
        TemplateView.share('site', 'Docs')
        html = TemplateView.fetch('pages.home')
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        """
        Get the accessor name for the facade

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError(
            f"Facade {cls.__name__} does not implement get_facade_accessor()"
        )

    @classmethod
    def get_facade_root(cls) -> Any:
        """
        Get the root object behind the facade

        Raises:
            RuntimeError: If application is not set
        """
        accessor = cls.get_facade_accessor()

        app = cls.get_app()

        if not app:
            raise RuntimeError(
                f"Facade {cls.__name__} cannot access application. "
                "Make sure to call Facade.set_app(app) during bootstrap."
            )

        return app.make(accessor)

    @classmethod
    def get_app(cls):
        """Get the application instance (or None before bootstrap)"""
        return _app_instance

    @classmethod
    def set_app(cls, app):
        """
        Set the application instance (called during bootstrap)

        Args:
            app: Application instance, or None to detach
        """
        global _app_instance
        _app_instance = app
