"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Dict, Optional


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        extensions = Config.get('view.extensions')
        locations = Config.get('view.locations', [])

        # Set runtime value
        Config.set('view.extensions', ['.html', '.jinja'])

        # Check existence
        if Config.has('app.app_name'):
            ...

    Config files live in the host application's config/ package:
        config/
        ├── app.py      # APP_NAME, APP_ENV, APP_DEBUG, LOG_FORMAT
        └── view.py     # EXTENSIONS, LOCATIONS, JINJA
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.extensions')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        # Runtime overrides win over config files
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)

        if value is None:
            return default

        for part in path:
            value = cls._lookup(value, part)
            if value is _MISSING:
                return default

        return value

    @classmethod
    def _lookup(cls, value: Any, part: str) -> Any:
        """Case-insensitive attribute or dict lookup of one key segment"""
        if isinstance(value, dict):
            for dict_key in value.keys():
                if str(dict_key).lower() == part:
                    return value[dict_key]
            return _MISSING

        if hasattr(value, '__dict__'):
            # Module or object with attributes
            for attr_name in dir(value):
                if attr_name.lower() == part:
                    return getattr(value, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from the config/ package

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('view.extensions', ['.html'])
            Config.set('VIEW.EXTENSIONS', ['.html'])  # Same result
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()


_MISSING = object()
