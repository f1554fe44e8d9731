# complaint_tags.py
# Date and status display helpers for the complaint screens
from datetime import datetime

from django import template
from django.utils import dateformat, timezone

register = template.Library()

STATUS_COLORS = {
    'Opened': 'green',
    'Closed': 'red',
    'Processing': 'yellow',
}


def _format(value, format_string):
    if not value:
        return 'N/A'
    if isinstance(value, datetime) and timezone.is_aware(value):
        value = timezone.localtime(value)
    return dateformat.format(value, format_string)


@register.filter
def complaint_datetime(value):
    """Format as "July 22, 2024 7:19 AM"."""
    return _format(value, 'F j, Y g:i A')


@register.filter
def complaint_date(value):
    """Format as "Jul 22, 2024"."""
    return _format(value, 'M j, Y')


@register.filter
def status_color(status):
    return STATUS_COLORS.get(status, 'gray')
