"""
Template Engines
"""
from laraview.engines.engine import Engine
from laraview.engines.jinja_engine import JinjaEngine
from laraview.engines.array_engine import ArrayEngine

__all__ = [
    'Engine',
    'JinjaEngine',
    'ArrayEngine',
]
