"""
Logging Service Provider
Initializes the framework logger
"""
from laraview.service_provider import ServiceProvider
from laraview.logging.logger_config import LoggerConfig
from laraview.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Sets up the 'laraview' logger from config/app.py"""

    def register(self):
        from laraview.defaults import DEFAULT_LOGGER_NAME

        LoggerConfig.setup_logger(
            name=DEFAULT_LOGGER_NAME,
            file_name=Config.get('app.log_file'),
        )
