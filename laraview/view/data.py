"""
View Data Coercion
Turns whatever a caller hands over as view data into a plain dict
"""
import inspect
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class ToMap(Protocol):
    """
    Capability interface for objects that can present themselves as view data

    Example:
        class Post:
            def to_map(self):
                return {'title': self.title, 'body': self.body}

        factory.make('posts.show', post)
    """

    def to_map(self) -> Mapping:
        ...


def coerce_data(data: Any) -> Optional[Dict[str, Any]]:
    """
    Coerce view data into a dict

    Returns:
        A new dict, or None when `data` has no usable shape
    """
    if data is None:
        return {}

    if isinstance(data, ToMap):
        data = data.to_map()

    if isinstance(data, Mapping):
        return dict(data)

    return None


def invoke(value: Callable, view: Any) -> Any:
    """
    Call a composer or a lazy data value

    The view is passed when the callable accepts one positional argument,
    otherwise the callable is called with no arguments. Builtins without
    an introspectable signature (time.time, ...) are tried without
    arguments first.
    """
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        try:
            return value()
        except TypeError:
            return value(view)

    try:
        signature.bind(view)
    except TypeError:
        return value()

    return value(view)
