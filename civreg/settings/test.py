"""
Civil Registry Reports - Test Settings
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Fast hashing keeps user fixtures cheap
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

# Lockout tracking needs a real request on every authenticate() call
AXES_ENABLED = False

SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
