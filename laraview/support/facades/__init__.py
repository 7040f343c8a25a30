"""
Facades Package
Laravel-style facades for static access to services
"""
from laraview.support.facades.facade import Facade
from laraview.support.facades.template_view import TemplateView

__all__ = [
    'Facade',
    'TemplateView',
]
