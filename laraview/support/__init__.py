"""
Framework Support Classes
"""

from laraview.support.storage import Storage
from laraview.support.env_helper import EnvHelper
from laraview.support.config import Config
from laraview.support.str import Str

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'Str',
]
