"""
Context processors for the civil registry reports site
"""

from django.conf import settings

from civreg import __version__


def app_context(request):
    """Add common context variables to all templates."""
    return {
        'app_name': 'Civil Registry Reports',
        'app_version': __version__,
        'debug_mode': settings.DEBUG,
    }
