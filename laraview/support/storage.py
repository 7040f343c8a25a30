"""
Storage - Centralized path management (Laravel-style)
Provides consistent path resolution across the application
"""

import os
from pathlib import Path
from typing import Union


class Storage:
    """
    Centralized path management helper (Laravel-style)

    Directory structure:
    /
    ├── config/             # Configuration modules (app.py, view.py)
    ├── resources/
    │   └── views/          # Templates (default view location)
    └── storage/
        └── logs/           # Log files
    """

    _base_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """
        Initialize paths (should be called during app startup)

        Args:
            base_path: Application base directory (defaults to current working directory)
        """
        if base_path is None:
            base_path = os.getcwd()

        cls._base_path = Path(base_path).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Get application base path

        Example:
            Storage.base('config', 'view.py')  # /project/config/view.py
        """
        if cls._base_path is None:
            cls.initialize()

        if paths:
            clean_paths = [p.lstrip('/') for p in paths]
            return cls._base_path.joinpath(*clean_paths)
        return cls._base_path

    @classmethod
    def views(cls, *paths: str) -> Path:
        """Get views path (resources/views/)"""
        from laraview.defaults import DEFAULT_VIEWS_DIRECTORY
        return cls.base(*DEFAULT_VIEWS_DIRECTORY, *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        """Get logs path (storage/logs/)"""
        return cls.base('storage', 'logs', *paths)

    @staticmethod
    def ensure_directory(path: Path) -> Path:
        """Create directory (and parents) if missing"""
        path.mkdir(parents=True, exist_ok=True)
        return path
