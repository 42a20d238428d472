"""
Constants for authenticable model configuration.

Defines candidate column names, validation patterns and messages used when
resolving the configuration of a model registered with ``acts_as_authentic``.
"""

import re

from django.db import models
from django.utils.translation import gettext_lazy as _


class LoginFieldType(models.TextChoices):
    """How the login field is validated."""

    EMAIL = 'email', _('Email')
    LOGIN = 'login', _('Login')


# Candidate columns, checked in order. The first one present on the table wins.
LOGIN_FIELD_CANDIDATES = ('login', 'username', 'email')

CRYPTED_PASSWORD_FIELD_CANDIDATES = (
    'crypted_password',
    'encrypted_password',
    'password_hash',
    'pw_hash',
)

PASSWORD_SALT_FIELD_CANDIDATES = ('password_salt', 'pw_salt', 'salt')

REMEMBER_TOKEN_FIELD_CANDIDATES = (
    'remember_token',
    'remember_key',
    'cookie_token',
    'cookie_key',
)

# Leading None: no single access support unless one of the columns exists.
SINGLE_ACCESS_TOKEN_FIELD_CANDIDATES = (
    None,
    'single_access_token',
    'feed_token',
    'feeds_token',
)

# Login field patterns
EMAIL_NAME_REGEX = r'[\w\.%\+\-]+'
DOMAIN_HEAD_REGEX = r'(?:[A-Z0-9\-]+\.)+'
DOMAIN_TLD_REGEX = r'(?:[A-Z]{2}|com|org|net|edu|gov|mil|biz|info|mobi|name|aero|jobs|museum)'

EMAIL_REGEX = re.compile(
    rf'\A{EMAIL_NAME_REGEX}@{DOMAIN_HEAD_REGEX}{DOMAIN_TLD_REGEX}\Z',
    re.IGNORECASE | re.ASCII,
)
LOGIN_REGEX = re.compile(r'\A\w[\w\.\-_@ ]+\Z', re.ASCII)

# Validation messages
EMAIL_REGEX_FAILED_MESSAGE = _('should look like an email address.')
LOGIN_REGEX_FAILED_MESSAGE = _('use only letters, numbers, spaces, and .-_@ please.')
PASSWORD_BLANK_MESSAGE = _('can not be blank')
CONFIRM_PASSWORD_DID_NOT_MATCH_MESSAGE = _('did not match')

# Defaults
DEFAULT_PASSWORD_FIELD = 'password'
DEFAULT_LOGGED_IN_TIMEOUT = 600  # 10 minutes
DEFAULT_SESSION_ID = None
DEFAULT_CRYPTO_PROVIDER = 'django.contrib.auth.hashers.PBKDF2PasswordHasher'
SESSION_CLASS_SUFFIX = 'Session'
