"""
View Extensions
"""
from laraview.extensions.base import Extension
from laraview.extensions.defaults import (
    GlobalExtension,
    FunctionExtension,
    FilterExtension,
    default_extensions,
)

__all__ = [
    'Extension',
    'GlobalExtension',
    'FunctionExtension',
    'FilterExtension',
    'default_extensions',
]
