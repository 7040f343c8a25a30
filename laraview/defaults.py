"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in .env or in the host's config/ modules
"""

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_NAME = 'Laraview'
DEFAULT_APP_ENV = 'production'

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

# First entry is appended to view names that carry no extension
DEFAULT_VIEW_EXTENSIONS = ['.html']

# Relative to the application base path (see Storage.views())
DEFAULT_VIEWS_DIRECTORY = ('resources', 'views')

# Composers registered under this key apply to every view
WILDCARD_COMPOSER_KEY = '*'

# Options passed to jinja2.Environment unless overridden by config/view.py
DEFAULT_JINJA_OPTIONS = {
    'autoescape': True,
    'trim_blocks': True,
    'lstrip_blocks': True,
}

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOGGER_NAME = 'laraview'
DEFAULT_LOG_FORMAT = 'text'  # 'json' or 'text'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
