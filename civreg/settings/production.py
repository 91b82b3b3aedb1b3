"""
Civil Registry Reports - Production Django Settings
Extends base.py with production-specific configuration
"""

import os

from .base import *  # noqa: F401,F403
from .base import LOG_DIR, LOGGING

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

SECRET_KEY = os.environ['SECRET_KEY']
ALLOWED_HOSTS = [h.strip() for h in os.environ.get('ALLOWED_HOSTS', '').split(',') if h.strip()]

# DATABASES comes from base.py; point DATABASE_PATH at the production database file

# Security settings
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Rotating application log alongside the console
LOGGING['handlers']['file'] = {
    'class': 'logging.handlers.RotatingFileHandler',
    'filename': LOG_DIR / 'civreg.log',
    'maxBytes': 10 * 1024 * 1024,  # 10 MB
    'backupCount': 5,
    'formatter': 'verbose',
}
LOGGING['loggers']['civreg']['handlers'] = ['console', 'file']
LOGGING['loggers']['civreg']['level'] = 'INFO'
os.makedirs(LOG_DIR, exist_ok=True)
