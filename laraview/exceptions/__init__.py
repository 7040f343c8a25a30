"""
Exceptions Package
"""
from laraview.exceptions.custom import (
    FrameworkException,
    ViewException,
    TemplateNotFoundException,
)

__all__ = [
    'FrameworkException',
    'ViewException',
    'TemplateNotFoundException',
]
