"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These are sensible defaults that can be overridden in config/ modules or .env
"""

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_DEBUG = False
DEFAULT_APP_NAMESPACE = 'app'
DEFAULT_EXCEPTION_RENDERER = 'viewkit.error.ExceptionRenderer'
DEFAULT_LOGGING_CHANNELS = ['application', 'error']

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_VIEW_CLASS = 'View'
DEFAULT_LAYOUT = 'default'
DEFAULT_LAYOUT_DIR = 'layout'
DEFAULT_TEMPLATE_EXTENSION = '.html'
DEFAULT_TEMPLATE_AUTO_RELOAD = True
DEFAULT_VIEW_PATHS = ['templates']

# ============================================================================
# ERROR RENDERING DEFAULTS
# ============================================================================

DEFAULT_STATUS_CODE = 500
MIN_ERROR_STATUS_CODE = 400
MAX_ERROR_STATUS_CODE = 506  # exclusive
ERROR_TEMPLATE_PATH = 'Error'
ERROR_LAYOUT = 'error'
SAFE_HELPERS = ['Form', 'Html']

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
