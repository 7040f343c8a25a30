"""
Logging Configuration
Provides structured logging for the view layer
"""
import logging
import logging.handlers
import json
from typing import Optional, TextIO
from datetime import datetime


# Attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRIBUTES = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'message', 'taskName',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs one JSON object per record. Values passed through `extra=`
    (e.g. view, path, composers) are added as top-level fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = None,
        file_name: Optional[str] = None,
        stream: Optional[TextIO] = None,
        max_bytes: int = None,
        backup_count: int = None,
    ) -> logging.Logger:
        """
        Setup a logger with a console handler and an optional rotating file

        Args:
            name: Logger name
            format_type: 'json' or 'text' (default: app.log_format config)
            file_name: Log file name under storage/logs/ (no file when omitted)
            stream: Console stream (default: sys.stderr)
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('laraview', format_type='json')
        """
        from laraview.defaults import (
            DEFAULT_LOG_FORMAT, DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT
        )
        from laraview.support import Config, EnvHelper, Storage

        if format_type is None:
            format_type = Config.get('app.log_format', DEFAULT_LOG_FORMAT)
        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        app_env = Config.get('app.app_env', 'local')
        app_debug = EnvHelper.to_bool(Config.get('app.app_debug'))

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(app_env, app_debug))
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        if file_name:
            log_file = Storage.logs(f"{file_name}.log")
            Storage.ensure_directory(log_file.parent)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if app_debug or not file_name:
            console_handler = logging.StreamHandler(stream)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str, debug: bool = False) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')
            debug: Force DEBUG level

        Returns:
            Logging level
        """
        if debug:
            return logging.DEBUG

        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(str(environment).lower(), logging.INFO)
