"""
Test settings for OmniCalculator project.
"""

from copy import deepcopy

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'omnicalc-test-cache',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

REST_FRAMEWORK = {**REST_FRAMEWORK, 'DEFAULT_THROTTLE_CLASSES': []}

# Root console only, no log files from test runs; propagate so caplog sees records
LOGGING = deepcopy(LOGGING)
for _logger in ('application', 'infrastructure', 'presentation'):
    LOGGING['loggers'][_logger]['handlers'] = []
    LOGGING['loggers'][_logger]['propagate'] = True
LOGGING['handlers'].pop('file')
