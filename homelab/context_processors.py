"""
Context processors for Home Lab Inventory
"""

from django.conf import settings

from homelab import __version__


def app_context(request):
    """Add common context variables to all templates."""
    return {
        'app_name': 'Home Lab Inventory',
        'app_version': __version__,
        'debug_mode': settings.DEBUG,
    }
