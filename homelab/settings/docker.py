"""
Container settings for Home Lab Inventory.

Everything comes from the environment (see the table below); the database is
PostgreSQL, reached through the ``DB_*`` variables.

    SECRET_KEY          required
    DEBUG               "true" to enable (default off)
    ALLOWED_HOSTS       comma separated (default "localhost")
    DB_NAME/DB_USER/DB_PASSWORD/DB_HOST/DB_PORT
    SERVER_PORT         port for `manage.py runrpc` (default 2022)
    CORS_ALLOWED_ORIGINS  origins allowed to call /rpc/ (default: any)
    LOG_LEVEL           level of the homelab loggers (default INFO)
    TZ                  time zone (default UTC)
"""

import os
from .base import *

DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
SECRET_KEY = os.environ.get('SECRET_KEY')

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('ALLOWED_HOSTS', 'localhost').split(',')
    if host.strip()
]

# The browser UI posts forms; the RPC endpoint is CSRF exempt
CSRF_TRUSTED_ORIGINS = [
    f"{scheme}://{host}"
    for host in ALLOWED_HOSTS
    for scheme in ('https', 'http')
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.environ.get('DB_NAME', 'homelab'),
        'USER': os.environ.get('DB_USER', 'homelab'),
        'PASSWORD': os.environ.get('DB_PASSWORD'),
        'HOST': os.environ.get('DB_HOST', 'db'),
        'PORT': os.environ.get('DB_PORT', '5432'),
        'CONN_MAX_AGE': 60,
        'OPTIONS': {
            'connect_timeout': 10,
        },
    }
}

STATIC_ROOT = '/app/staticfiles'

TIME_ZONE = os.environ.get('TZ', 'UTC')

# Containers log to stdout only
HOMELAB_LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

LOGGING['root'] = {'handlers': ['console'], 'level': 'WARNING'}
LOGGING['loggers']['homelab']['level'] = HOMELAB_LOG_LEVEL
LOGGING['loggers']['django.request'] = {
    'handlers': ['console'],
    'level': 'WARNING',
    'propagate': False,
}
