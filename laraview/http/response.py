"""
View Responses
Render a view straight into a Sanic HTTP response
"""
from typing import Any, Dict, Optional, TYPE_CHECKING

from sanic.response import HTTPResponse, html

if TYPE_CHECKING:
    from laraview.view.factory import Factory


def view(
    template: str,
    context: Any = None,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None,
    factory: Optional['Factory'] = None,
) -> HTTPResponse:
    """
    Render a view into an HTML response

    Args:
        template: View name (e.g. 'pages.home')
        context: View data
        status: HTTP status code
        headers: Extra response headers
        factory: View factory (default: the installed application's)

    Example:
        @app.get('/')
        async def home(request):
            return view('pages.home', {'title': 'Home'})
    """
    if factory is None:
        from laraview import api
        factory = api.factory()

    return html(factory.fetch(template, context), status=status, headers=headers)
