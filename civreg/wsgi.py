"""
WSGI config for Civil Registry Reports.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application
from django.core.exceptions import ImproperlyConfigured

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'civreg.settings.production')


def validate_production_keys():
    """Refuse to serve with the development SECRET_KEY when DEBUG is off."""
    from django.conf import settings

    if settings.DEBUG:
        return

    if 'insecure' in settings.SECRET_KEY.lower():
        raise ImproperlyConfigured(
            "Using development SECRET_KEY in production. Generate one with:\n"
            "  python -c \"import secrets; print(secrets.token_urlsafe(50))\"\n"
            "and export it as SECRET_KEY."
        )


application = get_wsgi_application()

# Validate keys after Django is loaded
validate_production_keys()
