"""
EnvHelper - Read .env files
Laravel-style environment variable access
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        app_name = EnvHelper.get('APP_NAME', 'Laraview')
        debug = EnvHelper.get_bool('APP_DEBUG', False)
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path=None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in the base path)
        """
        if env_path is None:
            from laraview.support.storage import Storage
            env_path = Storage.base('.env')

        cls._env_path = Path(env_path)

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into the environment

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True

            if not cls._env_path.exists():
                return False

            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            app_name = EnvHelper.get('APP_NAME', 'Laraview')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            debug = EnvHelper.get_bool('APP_DEBUG', False)
        """
        return cls.to_bool(cls.get(key), default)

    @staticmethod
    def to_bool(value: Any, default: bool = False) -> bool:
        """
        Parse a flag read from .env or config ('true', '1', 'yes', 'on')

        Example:
            EnvHelper.to_bool('false')  # False
            EnvHelper.to_bool(True)     # True
        """
        if value is None:
            return default
        if isinstance(value, bool):
            return value

        return str(value).strip().lower() in ('true', '1', 'yes', 'on')
