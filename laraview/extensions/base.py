"""
View Extension Base Class
Extensions bundle shared data, composers, filters and functions
"""
from typing import Any, Callable, Dict, List, Tuple, Union, Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from laraview.view.factory import Factory

ComposerDefinition = Tuple[Union[str, Iterable[str]], Any]


class Extension:
    """
    Base view extension

    Subclasses override any of the get_* hooks. Composers contributed by
    an extension are registered as persistent composers, so they apply to
    every render rather than just the next one.

    Example:
        class MenuExtension(Extension):
            def get_composers(self):
                return [('layouts.app', lambda view: {'menu': build_menu()})]

        Factory(engine, extensions=[MenuExtension()]).load_extensions()
    """

    def __init__(self):
        self.factory: 'Factory' = None

    def get_shared(self) -> Dict[str, Any]:
        """Data shared with every view"""
        return {}

    def get_composers(self) -> List[ComposerDefinition]:
        """(views, callback) pairs"""
        return []

    def get_filters(self) -> Dict[str, Callable]:
        """Template filters registered with the engine"""
        return {}

    def get_functions(self) -> Dict[str, Any]:
        """Template functions/globals registered with the engine"""
        return {}

    def register(self, factory: 'Factory'):
        """Register this extension with a factory and its engine"""
        self.factory = factory

        shared = self.get_shared()
        if shared:
            factory.share(shared)

        for views, callback in self.get_composers():
            factory.composer(views, callback, persistent=True)

        factory.engine.register_extension(self)
