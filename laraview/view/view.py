"""
View
A named template plus its data, rendered through the factory that made it
"""
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from laraview.view.factory import Factory


class View:
    """
    View value object

    Created by Factory.make(); name, path and data are fixed at
    construction. One-shot composers are consumed by the first render,
    so rendering the same view twice can give different output.

    Example:
        view = factory.make('pages.home', {'title': 'Home'})
        view.get_path()   # 'pages/home.html'
        html = view.render()
    """

    def __init__(
        self,
        factory: 'Factory',
        name: str,
        path: str,
        data: Optional[Dict[str, Any]] = None
    ):
        self._factory = factory
        self._name = name
        self._path = path
        self._data = dict(data or {})

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    def get_name(self) -> str:
        """Logical name the view was made with (e.g. 'pages.home')"""
        return self._name

    def get_path(self) -> str:
        """Resolved template path (e.g. 'pages/home.html')"""
        return self._path

    def get_data(self) -> Dict[str, Any]:
        return dict(self._data)

    def with_data(self, key: Union[str, Dict[str, Any]], value: Any = None) -> 'View':
        """
        Return a copy of this view with extra data

        Example:
            view = factory.make('profile').with_data('user', user)
        """
        data = self.get_data()
        if isinstance(key, dict):
            data.update(key)
        else:
            data[key] = value

        return View(self._factory, self._name, self._path, data)

    def render(self) -> str:
        """Gather data and render through the engine"""
        return self._factory.render_view(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'View(name={self._name!r}, path={self._path!r})'
