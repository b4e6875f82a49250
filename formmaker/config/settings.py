"""
Configuration for formmaker.

Settings are read from the host project's Django ``FORM_MAKER`` setting when
present, falling back to environment variables, then to defaults.

    FORM_MAKER = {
        'TEMPLATE_DIRS': ['/srv/app/form_templates'],
        'DEFAULT_THEME': 'bulma',
        'CSRF': True,
        'DEFAULT_ACTION': '',
        'AUTO_RELOAD': False,
    }
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import django
from django.conf import settings as django_settings


def _django_available() -> bool:
    """Settings are either configured or will load from DJANGO_SETTINGS_MODULE."""
    return django_settings.configured or bool(os.environ.get('DJANGO_SETTINGS_MODULE'))


def configure_django() -> None:
    """
    Configure Django with minimal settings when the host has not.

    Validation messages and CSRF helpers need a configured Django; inside a
    Django project this is a no-op.
    """
    if not _django_available():
        django_settings.configure(
            DEBUG=False,
            SECRET_KEY='formmaker-standalone-secret-key',
            INSTALLED_APPS=[],
            USE_I18N=True,
        )
        django.setup()


def get_env_list(key: str, default: str = '') -> List[str]:
    """
    Get environment variable as a comma-separated list.

    Args:
        key: Environment variable key
        default: Default value if key is not set

    Returns:
        List of strings
    """
    value = os.environ.get(key, default)
    return [item.strip() for item in value.split(',') if item.strip()]


def get_env_bool(key: str, default: bool = False) -> bool:
    """
    Get environment variable as boolean.

    Args:
        key: Environment variable key
        default: Default value if key is not set

    Returns:
        Boolean value
    """
    value = os.environ.get(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on')


def get_env_str(key: str, default: str = '') -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class FormMakerSettings:
    template_dirs: List[str] = field(default_factory=list)
    default_theme: str = 'default'
    csrf: bool = True
    default_action: str = ''
    auto_reload: bool = False


def _from_environment() -> FormMakerSettings:
    return FormMakerSettings(
        template_dirs=get_env_list('FORM_MAKER_TEMPLATE_DIRS'),
        default_theme=get_env_str('FORM_MAKER_DEFAULT_THEME', 'default'),
        csrf=get_env_bool('FORM_MAKER_CSRF', True),
        default_action=get_env_str('FORM_MAKER_DEFAULT_ACTION', ''),
        auto_reload=get_env_bool('FORM_MAKER_AUTO_RELOAD', False),
    )


def load_settings() -> FormMakerSettings:
    """Build settings, letting Django's FORM_MAKER dict override the environment."""
    base = _from_environment()
    overrides = {}
    if _django_available():
        overrides = getattr(django_settings, 'FORM_MAKER', None) or {}

    return FormMakerSettings(
        template_dirs=list(overrides.get('TEMPLATE_DIRS', base.template_dirs)),
        default_theme=overrides.get('DEFAULT_THEME', base.default_theme),
        csrf=bool(overrides.get('CSRF', base.csrf)),
        default_action=overrides.get('DEFAULT_ACTION', base.default_action),
        auto_reload=bool(overrides.get('AUTO_RELOAD', base.auto_reload)),
    )


_settings: Optional[FormMakerSettings] = None


def get_settings() -> FormMakerSettings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings() -> FormMakerSettings:
    global _settings
    _settings = None
    return get_settings()
