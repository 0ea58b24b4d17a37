"""
WSGI entry point for Home Lab Inventory.

Defaults to the production settings. Startup fails when DEBUG is off and
SECRET_KEY is missing or still the development key.
"""

import os

from django.core.exceptions import ImproperlyConfigured
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'homelab.settings.production')

INSECURE_KEY_MARKER = 'insecure'


def validate_production_keys():
    from django.conf import settings

    if settings.DEBUG:
        return

    secret_key = settings.SECRET_KEY or ''
    if not secret_key or INSECURE_KEY_MARKER in secret_key.lower():
        raise ImproperlyConfigured(
            "Refusing to serve Home Lab Inventory with the development SECRET_KEY "
            "while DEBUG is off. Export a real key first, for example:\n"
            "  SECRET_KEY=$(python -c \"import secrets; print(secrets.token_urlsafe(50))\")"
        )


application = get_wsgi_application()

validate_production_keys()
