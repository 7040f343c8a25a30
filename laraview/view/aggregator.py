"""
View Data Aggregator
Merges every data source of a render into the map handed to the engine
"""
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from laraview.view.composers import ComposerSource
from laraview.view.data import invoke


class DataAggregator:
    """
    Merge view data following a fixed precedence, lowest to highest:

    1. shared data (Factory.share)
    2. merged data of the enclosing render, when rendering a nested view
    3. the view's own data
    4. per-view composer output, in registration order
    5. wildcard composer output, in registration order

    Callable values in the merged map are then replaced by their result
    (called with the view, or with no arguments).

    The aggregator also keeps the render stack. While a view gathers its
    data, a frame holding the plain values merged so far sits on top of
    the stack; the factory then pushes the final data for the duration of
    the engine render. A view rendered from inside either phase (a lazy
    value or composer calling fetch, or a template including a partial)
    starts from the outer data.
    """

    def __init__(self):
        self._stack: List[Dict[str, Any]] = []

    def gather(
        self,
        view,
        shared: Optional[Mapping[str, Any]] = None,
        composers: Iterable[ComposerSource] = (),
        wildcard: Iterable[ComposerSource] = (),
    ) -> Dict[str, Any]:
        parent = self.current()
        merged: Dict[str, Any] = {}
        frame: Dict[str, Any] = {}

        self.push(frame)
        try:
            for layer in self._layers(view, shared, parent, composers, wildcard):
                merged.update(layer)
                # Unresolved callables stay out of the frame; a nested
                # render would call them again
                frame.clear()
                frame.update(
                    (key, value) for key, value in merged.items() if not callable(value)
                )

            for key, value in merged.items():
                if callable(value):
                    frame[key] = invoke(value, view)

            return {key: frame[key] for key in merged}
        finally:
            self.pop()

    @staticmethod
    def _layers(
        view,
        shared: Optional[Mapping[str, Any]],
        parent: Optional[Dict[str, Any]],
        composers: Iterable[ComposerSource],
        wildcard: Iterable[ComposerSource],
    ) -> Iterator[Mapping[str, Any]]:
        """Data layers, lowest precedence first; composers run lazily"""
        yield shared or {}

        if parent is not None:
            yield parent

        yield view.get_data()

        for source in composers:
            yield source.produce(view)

        for source in wildcard:
            yield source.produce(view)

    def push(self, data: Dict[str, Any]):
        self._stack.append(data)

    def pop(self) -> Optional[Dict[str, Any]]:
        return self._stack.pop() if self._stack else None

    def current(self) -> Optional[Dict[str, Any]]:
        """Data of the innermost render in progress"""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)
