"""
View Package
Name resolution, composers and data aggregation in front of a template engine
"""
from laraview.view.resolver import NameResolver, normalize_extensions
from laraview.view.data import ToMap
from laraview.view.composers import (
    ComposerRegistry,
    ComposerSource,
    ConstantSource,
    CallbackSource,
)
from laraview.view.aggregator import DataAggregator
from laraview.view.view import View
from laraview.view.factory import Factory

__all__ = [

    # Core
    'Factory',
    'View',

    # Building blocks
    'NameResolver',
    'normalize_extensions',
    'ComposerRegistry',
    'ComposerSource',
    'ConstantSource',
    'CallbackSource',
    'DataAggregator',
    'ToMap',
]
