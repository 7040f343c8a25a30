"""
View Name Resolver
Turns logical view names ('pages.home') into template paths ('pages/home.html')
"""
from typing import Iterable, List, Optional


def normalize_extensions(extensions: Optional[Iterable[str]]) -> List[str]:
    """
    Normalize an extension set: leading dot, no blanks, no duplicates, never empty

    Example:
        normalize_extensions(['html', '.twig', 'html'])  # ['.html', '.twig']
        normalize_extensions([])                          # ['.html']
    """
    from laraview.defaults import DEFAULT_VIEW_EXTENSIONS

    if isinstance(extensions, str):
        extensions = [extensions]

    normalized = []
    for extension in extensions or []:
        extension = str(extension).strip()
        if not extension or extension == '.':
            continue
        if not extension.startswith('.'):
            extension = '.' + extension
        if extension not in normalized:
            normalized.append(extension)

    return normalized or list(DEFAULT_VIEW_EXTENSIONS)


class NameResolver:
    """
    Resolve view names against an ordered extension set

    The first extension is the default one, appended to names without a
    recognized extension. Resolution never raises and is idempotent:
    resolve(resolve(name)) == resolve(name).

    Example:
        resolver = NameResolver(['.html', '.twig'])
        resolver.resolve('pages.home')       # 'pages/home.html'
        resolver.resolve('pages.home.twig')  # 'pages/home.twig'
        resolver.resolve('pages/home')       # 'pages/home.html'
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        self._extensions = normalize_extensions(extensions)
        # Longest first so '.blade.html' wins over '.html'
        self._by_length = sorted(self._extensions, key=len, reverse=True)

    @classmethod
    def from_engine(cls, engine) -> 'NameResolver':
        """Build a resolver over the engine's current extensions"""
        return cls(engine.extensions())

    @property
    def extensions(self) -> List[str]:
        return list(self._extensions)

    @property
    def default_extension(self) -> str:
        return self._extensions[0]

    def resolve(self, name: str) -> str:
        """Resolve a view name to a template path"""
        name = str(name)

        # Explicit recognized extension: dots before it are path separators
        extension = self._trailing_extension(name)
        if extension is not None:
            stem = name[:-len(extension)]
            return stem.replace('.', '/') + extension

        return self._with_extension(name.replace('.', '/'))

    def _trailing_extension(self, name: str) -> Optional[str]:
        for extension in self._by_length:
            if name.endswith(extension):
                return extension
        return None

    def _with_extension(self, path: str) -> str:
        # 'a/b/html' is what 'a.b.html' looks like after dot replacement
        for extension in self._extensions:
            segment = '/' + extension[1:]
            if path.endswith(segment) and '.' not in extension[1:]:
                return path[:-len(segment)] + extension

        return path + self.default_extension
