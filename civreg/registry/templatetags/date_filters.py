"""
Centralized date formatting template filters.

Usage in templates (loaded as a builtin, no {% load %} needed):
    {{ object.created_at|registry_datetime }}    -> "16 Feb 2026, 02:30 PM"
    {{ object.created_at|registry_date }}        -> "16 Feb 2026"
    {{ object.created_at|registry_time }}        -> "14:30:45"
    {{ object.created_at|registry_month_year }}  -> "February 2026"
    {{ object.created_at|time_ago }}             -> "2 hours ago"
"""

from datetime import timedelta

from django import template
from django.utils import timezone
from django.utils.dateformat import format as django_format
from django.utils.timesince import timesince

register = template.Library()

REGISTRY_DATE_FORMATS = {
    'datetime': 'd M Y, h:i A',     # 16 Feb 2026, 02:30 PM
    'date_only': 'd M Y',           # 16 Feb 2026
    'time_only': 'H:i:s',           # 14:30:45
    'month_year': 'F Y',            # February 2026
    'iso_date': 'Y-m-d',            # 2026-02-16
}


def _format_date(value, format_key):
    """Helper to safely format a date value."""
    if value is None:
        return ''

    try:
        if hasattr(value, 'tzinfo') and timezone.is_aware(value):
            value = timezone.localtime(value)
        return django_format(value, REGISTRY_DATE_FORMATS.get(format_key, REGISTRY_DATE_FORMATS['datetime']))
    except (ValueError, TypeError, AttributeError):
        return str(value) if value else ''


@register.filter(name='registry_datetime')
def registry_datetime(value):
    """Report headers and insight timestamps: 16 Feb 2026, 02:30 PM"""
    return _format_date(value, 'datetime')


@register.filter(name='registry_date')
def registry_date(value):
    return _format_date(value, 'date_only')


@register.filter(name='registry_time')
def registry_time(value):
    return _format_date(value, 'time_only')


@register.filter(name='registry_month_year')
def registry_month_year(value):
    """Period headers: February 2026"""
    return _format_date(value, 'month_year')


@register.filter(name='time_ago')
def time_ago(value, now=None):
    """
    Relative age of a timestamp for activity feeds.

    Returns "just now" below one minute, otherwise the largest unit only
    (e.g. "3 days ago" rather than "3 days, 2 hours ago").
    """
    if value is None:
        return ''

    try:
        now = now or timezone.now()
        if timezone.is_naive(value):
            value = timezone.make_aware(value)

        if now - value < timedelta(minutes=1):
            return 'just now'
        return timesince(value, now).split(',')[0] + ' ago'
    except (ValueError, TypeError, AttributeError):
        return str(value) if value else ''
