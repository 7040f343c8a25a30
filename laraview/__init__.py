"""
Laraview
Laravel-style view composition in front of a template engine
"""
from laraview.view import (
    Factory,
    View,
    NameResolver,
    ComposerRegistry,
    DataAggregator,
    ToMap,
)
from laraview.engines import Engine, JinjaEngine, ArrayEngine
from laraview.extensions import Extension
from laraview.exceptions import ViewException, TemplateNotFoundException

__version__ = '1.0.0'

__all__ = [
    'Factory',
    'View',
    'NameResolver',
    'ComposerRegistry',
    'DataAggregator',
    'ToMap',
    'Engine',
    'JinjaEngine',
    'ArrayEngine',
    'Extension',
    'ViewException',
    'TemplateNotFoundException',
]
