"""
Project-level settings for authenticable models.

Values are read from Django settings on every call so that
``override_settings`` is honoured.
"""

from datetime import timedelta
from typing import Any, Union

from django.conf import settings
from django.utils.module_loading import import_string

from .constants import DEFAULT_CRYPTO_PROVIDER, DEFAULT_LOGGED_IN_TIMEOUT


class AuthenticSettings:
    """Centralized access to ``AUTHENTIC_*`` settings."""

    @staticmethod
    def load_crypto_provider(provider: Any) -> Any:
        """Import ``provider`` when given as a dotted path."""
        if isinstance(provider, str):
            return import_string(provider)
        return provider

    @classmethod
    def crypto_provider(cls) -> Any:
        """Return the default crypto provider class."""
        path = getattr(settings, 'AUTHENTIC_CRYPTO_PROVIDER', DEFAULT_CRYPTO_PROVIDER)
        return cls.load_crypto_provider(path)

    @staticmethod
    def logged_in_timeout() -> Union[int, timedelta]:
        """Return the default inactivity timeout, in seconds or as a timedelta."""
        return getattr(settings, 'AUTHENTIC_LOGGED_IN_TIMEOUT', DEFAULT_LOGGED_IN_TIMEOUT)
