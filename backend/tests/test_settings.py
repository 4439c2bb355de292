import importlib

from django.conf import settings


def test_test_settings_carry_no_dev_apps():
    assert 'debug_toolbar' not in settings.INSTALLED_APPS
    assert 'django_extensions' not in settings.INSTALLED_APPS
    assert not any('debug_toolbar' in m for m in settings.MIDDLEWARE)
    assert settings.REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] == []


def test_environment_modules_leave_base_untouched():
    base = importlib.import_module('config.settings.base')
    dev = importlib.import_module('config.settings.dev')

    assert 'debug_toolbar' in dev.INSTALLED_APPS
    assert 'debug_toolbar' not in base.INSTALLED_APPS
    assert dev.LOGGING['root']['level'] == 'DEBUG'
    assert base.LOGGING['root']['level'] == 'INFO'
    assert base.REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES']
