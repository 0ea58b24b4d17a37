"""
Home Lab Inventory - Centralized Date Formatting Template Filters

All date displays use the format: "d-M-Y" (e.g., "16-Feb-2026")

Usage in templates (loaded as a builtin, no {% load %} needed):
    {{ device.created_at|homelab_datetime }}       -> "16-Feb-2026 14:30:45"
    {{ device.created_at|homelab_datetime_short }} -> "16-Feb-2026 14:30"
    {{ device.created_at|homelab_date }}           -> "16-Feb-2026"
    {{ device.updated_at|homelab_relative }}       -> "2 hours ago" or "16-Feb-2026 14:30"
"""

from datetime import timedelta

from django import template
from django.utils import timezone
from django.utils.dateformat import format as django_format
from django.utils.timesince import timesince

register = template.Library()

HOMELAB_DATE_FORMATS = {
    'datetime_full': 'd-M-Y H:i:s',      # 16-Feb-2026 14:30:45
    'datetime_short': 'd-M-Y H:i',        # 16-Feb-2026 14:30
    'date_only': 'd-M-Y',                 # 16-Feb-2026
}


def _format_date(value, format_key):
    """Helper to safely format a date value."""
    if value is None:
        return ''

    try:
        format_string = HOMELAB_DATE_FORMATS.get(format_key, HOMELAB_DATE_FORMATS['datetime_short'])
        return django_format(value, format_string)
    except (ValueError, TypeError, AttributeError):
        return str(value) if value else ''


@register.filter(name='homelab_datetime')
def homelab_datetime(value):
    """Format datetime with full precision: 16-Feb-2026 14:30:45"""
    return _format_date(value, 'datetime_full')


@register.filter(name='homelab_datetime_short')
def homelab_datetime_short(value):
    """Format datetime without seconds: 16-Feb-2026 14:30"""
    return _format_date(value, 'datetime_short')


@register.filter(name='homelab_date')
def homelab_date(value):
    return _format_date(value, 'date_only')


@register.filter(name='homelab_relative')
def homelab_relative(value, fallback_days=7):
    """
    Relative time (e.g., "2 hours ago") for recent items,
    falls back to the short datetime format for older items.

    Args:
        value: datetime to format
        fallback_days: number of days before switching to absolute format (default 7)
    """
    if value is None:
        return ''

    try:
        now = timezone.now()
        if timezone.is_naive(value):
            value = timezone.make_aware(value)

        if now - value < timedelta(days=int(fallback_days)):
            relative = timesince(value, now)
            # Only the first part: "2 hours" instead of "2 hours, 5 minutes"
            return relative.split(',')[0] + ' ago'
        return _format_date(value, 'datetime_short')
    except (ValueError, TypeError, AttributeError):
        return str(value) if value else ''
