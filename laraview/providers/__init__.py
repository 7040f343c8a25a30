"""
Service Providers
"""
from laraview.providers.logging_service_provider import LoggingServiceProvider
from laraview.providers.view_service_provider import ViewServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'ViewServiceProvider',
]
