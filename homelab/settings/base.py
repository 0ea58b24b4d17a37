"""
Home Lab Inventory - Base Django Settings

Development defaults: SQLite next to manage.py, DEBUG on, console logging.
docker.py, production.py and test.py start from this module.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Overridden from the environment outside development; wsgi.py refuses to
# serve with this value when DEBUG is off
SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-homelab-dev-key')

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]']

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.humanize',

    'crispy_forms',
    'crispy_bootstrap5',
    'django_filters',
    'corsheaders',

    'homelab.inventory',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',  # above CommonMiddleware, answers preflight requests
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'homelab.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'homelab' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'homelab.context_processors.app_context',
            ],
            # homelab_datetime & co. without {% load %}
            'builtins': [
                'homelab.inventory.templatetags.date_filters',
            ],
        },
    },
]

WSGI_APPLICATION = 'homelab.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Dates render as 16-Feb-2026, datetimes as 16-Feb-2026 14:30
DATE_FORMAT = 'd-M-Y'
DATETIME_FORMAT = 'd-M-Y H:i'
SHORT_DATE_FORMAT = 'd-M-Y'
SHORT_DATETIME_FORMAT = 'd-M-Y H:i'
TIME_FORMAT = 'H:i:s'

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STATICFILES_DIRS = [
    BASE_DIR / 'homelab' / 'static',
]

CRISPY_ALLOWED_TEMPLATE_PACKS = 'bootstrap5'
CRISPY_TEMPLATE_PACK = 'bootstrap5'

# =============================================================================
# RPC endpoint
# =============================================================================

# Port used by `manage.py runrpc`
SERVER_PORT = int(os.environ.get('SERVER_PORT', 2022))

# django-cors-headers, applied to /rpc/ only. Any origin unless
# CORS_ALLOWED_ORIGINS (comma separated) narrows it; there is no authentication
CORS_URLS_REGEX = r'^/rpc/.*$'
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('CORS_ALLOWED_ORIGINS', '').split(',')
    if origin.strip()
]
CORS_ALLOW_ALL_ORIGINS = not CORS_ALLOWED_ORIGINS
CORS_ALLOW_METHODS = ['GET', 'POST', 'OPTIONS']
CORS_PREFLIGHT_MAX_AGE = 86400  # 1 day

# UI list pages only; RPC lists are never paginated
DEFAULT_PAGE_SIZE = 25

SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Lax'
CSRF_COOKIE_SAMESITE = 'Lax'

# =============================================================================
# Logging
# =============================================================================
# homelab.inventory: handler writes and storage failures
# homelab.rpc:       rejected calls (WARNING) and failed calls (ERROR + traceback)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {  # file handlers in production.py
            'format': '{levelname} {asctime} {name} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'homelab': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}
