"""
Home Lab Inventory - Production Django Settings

Runs behind a TLS-terminating proxy. Logs go to the console and to rotating
files under LOG_DIR: ``homelab.log`` for everything, ``rpc.log`` for the RPC
endpoint (rejected and failed calls), ``error.log`` for errors only.
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('ALLOWED_HOSTS', 'localhost').split(',')
    if host.strip()
]

LOG_DIR = Path(os.environ.get('LOG_DIR', '/var/log/homelab'))
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 10

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')


def _rotating_file(filename, level=None):
    handler = {
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': LOG_DIR / filename,
        'maxBytes': LOG_MAX_BYTES,
        'backupCount': LOG_BACKUP_COUNT,
        'formatter': 'verbose',
    }
    if level:
        handler['level'] = level
    return handler


LOGGING['handlers'].update({
    'file': _rotating_file('homelab.log'),
    'rpc_file': _rotating_file('rpc.log'),
    'error_file': _rotating_file('error.log', level='ERROR'),
})
LOGGING['root'] = {'handlers': ['console', 'file'], 'level': 'INFO'}
LOGGING['loggers'].update({
    'django': {
        'handlers': ['console', 'file', 'error_file'],
        'level': 'INFO',
        'propagate': False,
    },
    'homelab': {
        'handlers': ['console', 'file', 'error_file'],
        'level': 'INFO',
        'propagate': False,
    },
    'homelab.rpc': {
        'handlers': ['rpc_file'],
        'level': 'INFO',
        'propagate': True,
    },
})
