"""
HTTP Integration
"""
from laraview.http.response import view

__all__ = [
    'view',
]
