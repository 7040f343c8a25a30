"""
View Composers
Composer sources and the registry that holds them until a view renders
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Union

from laraview.defaults import WILDCARD_COMPOSER_KEY
from laraview.logging import getLogger
from laraview.view.data import coerce_data, invoke

logger = getLogger(__name__)


class ComposerSource(ABC):
    """
    Something that contributes data to a view right before it renders

    Sources are built once at registration time, so the aggregator never
    needs to check whether a composer is a callback or a constant.
    """

    @abstractmethod
    def produce(self, view) -> Dict[str, Any]:
        """Return the data this source contributes to `view`"""

    @staticmethod
    def wrap(callback: Any) -> 'ComposerSource':
        """Build the right source for a registered callback or constant"""
        if isinstance(callback, ComposerSource):
            return callback
        if callable(callback):
            return CallbackSource(callback)
        return ConstantSource(callback)

    def _as_data(self, value: Any) -> Dict[str, Any]:
        data = coerce_data(value)
        if data is None:
            logger.debug(
                "Composer produced %s instead of a mapping; ignoring it",
                type(value).__name__,
            )
            return {}
        return data


class ConstantSource(ComposerSource):
    """Composer registered with a plain value"""

    def __init__(self, value: Any):
        self.value = value

    def produce(self, view) -> Dict[str, Any]:
        return self._as_data(self.value)

    def __repr__(self):
        return f'ConstantSource({self.value!r})'


class CallbackSource(ComposerSource):
    """Composer registered with a callable; called with the view (or nothing)"""

    def __init__(self, callback: Callable):
        self.callback = callback

    def produce(self, view) -> Dict[str, Any]:
        return self._as_data(invoke(self.callback, view))

    def __repr__(self):
        return f'CallbackSource({self.callback!r})'


class ComposerEntry:
    """A registered composer source and its scope"""

    __slots__ = ('source', 'persistent')

    def __init__(self, source: ComposerSource, persistent: bool = False):
        self.source = source
        self.persistent = persistent


class ComposerRegistry:
    """
    Composer storage keyed by resolved view path or the wildcard key

    One-shot entries (the default) fire for the next render of their key
    and are then consumed. Persistent entries fire on every render.
    Registration order is invocation order.

    Example:
        registry = ComposerRegistry()
        registry.register('pages/home.html', lambda view: {'title': 'Home'})
        registry.register(['*'], {'year': 2026}, persistent=True)
        registry.get('pages/home.html')   # [CallbackSource(...)]
        registry.consume('pages/home.html')
    """

    def __init__(self):
        self._composers: Dict[str, List[ComposerEntry]] = {WILDCARD_COMPOSER_KEY: []}

    def register(
        self,
        targets: Union[str, Iterable[str]],
        callback: Any,
        persistent: bool = False,
    ) -> List[str]:
        """
        Append a composer for every target key

        Returns:
            The keys the composer was registered under
        """
        if isinstance(targets, str):
            targets = [targets]

        keys = []
        for key in targets:
            entry = ComposerEntry(ComposerSource.wrap(callback), persistent)
            self._composers.setdefault(key, []).append(entry)
            keys.append(key)

        return keys

    def get(self, key: str) -> List[ComposerSource]:
        """Sources registered for exactly `key` (empty list if none)"""
        if key == WILDCARD_COMPOSER_KEY:
            return []
        return [entry.source for entry in self._composers.get(key, [])]

    def get_wildcard(self) -> List[ComposerSource]:
        """Sources registered under the wildcard key"""
        return [entry.source for entry in self._composers[WILDCARD_COMPOSER_KEY]]

    def consume(self, key: str):
        """Drop the one-shot entries of `key`; persistent entries stay"""
        if key == WILDCARD_COMPOSER_KEY:
            self.consume_wildcard()
            return

        entries = self._composers.get(key)
        if entries is None:
            return

        remaining = [entry for entry in entries if entry.persistent]
        if remaining:
            self._composers[key] = remaining
        else:
            del self._composers[key]

    def consume_wildcard(self):
        """Drop the one-shot wildcard entries"""
        self._composers[WILDCARD_COMPOSER_KEY] = [
            entry for entry in self._composers[WILDCARD_COMPOSER_KEY] if entry.persistent
        ]

    def detach(self, key: str) -> List[ComposerEntry]:
        """
        Take the entries of `key` for a render

        One-shot entries leave the registry right away, so a render
        started while they produce their data does not fire them again.

        Returns:
            Every entry of `key`, persistent ones included, in order
        """
        entries = list(self._composers.get(key, []))
        self.consume(key)
        return entries

    def restore(self, key: str, entries: List[ComposerEntry]):
        """Put back entries detached for a render that failed"""
        detached = {id(entry) for entry in entries}
        added = [entry for entry in self._composers.get(key, []) if id(entry) not in detached]

        if entries or added or key == WILDCARD_COMPOSER_KEY:
            self._composers[key] = entries + added

    def has(self, key: str) -> bool:
        return bool(self._composers.get(key))

    def keys(self) -> List[str]:
        """Keys that currently hold at least one composer"""
        return [key for key, entries in self._composers.items() if entries]

    def flush(self):
        """Forget every composer, persistent ones included"""
        self._composers = {WILDCARD_COMPOSER_KEY: []}
