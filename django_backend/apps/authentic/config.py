"""
Configuration resolution for authenticable models.

``configure`` takes the options a model was registered with, fills every
option the caller left unset with a default derived from the model name and
the columns present on its table, and returns an immutable
``AuthenticConfig``.

Options
-------
session_class
    Related session class name. Default: ``"<ModelName>Session"``.
crypto_provider
    Class hashing and verifying passwords, or its dotted path. Default: the
    ``AUTHENTIC_CRYPTO_PROVIDER`` setting, else Django's PBKDF2 hasher.
login_field
    ``login``, ``username`` or ``email``, whichever column exists first.
    Defaults to ``login`` if none are present.
login_field_type
    ``email`` if the login field is ``email``, otherwise ``login``.
login_field_regex / login_field_regex_failed_message
    Pattern and message used to validate the login field, depending on
    its type.
password_field
    Attribute used to set the password. Not the column storing the hash.
crypted_password_field
    Column storing the hashed password.
password_salt_field
    Column storing the password salt.
remember_token_field
    Column storing the "remember me" token.
single_access_token_field
    Column storing the token used for private feed access. ``None`` when
    the table has no such column.
change_single_access_token_with_password
    Reset the single access token when the password changes. Default: False.
scope
    Field(s) the uniqueness validations are scoped to. Default: None.
logged_in_timeout
    Seconds of inactivity after which a record is considered logged out.
    Default: ``AUTHENTIC_LOGGED_IN_TIMEOUT`` or 600.
session_ids
    Sessions reset when a record is created or updated. The first id is the
    main session. Stored as a tuple in the given order; a single id given
    as a string counts as a one-element list. Default: ``[None]``.

The first-candidate fallback of ``crypted_password_field``,
``password_salt_field`` and ``remember_token_field`` names a column even
when the table lacks it. Downstream consumers fail on first use in that case.
"""

import logging
import re
from dataclasses import dataclass, field, fields
from datetime import timedelta
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .columns import first_column_to_exist
from .conf import AuthenticSettings
from .constants import (
    CONFIRM_PASSWORD_DID_NOT_MATCH_MESSAGE,
    CRYPTED_PASSWORD_FIELD_CANDIDATES,
    DEFAULT_PASSWORD_FIELD,
    DEFAULT_SESSION_ID,
    EMAIL_REGEX,
    EMAIL_REGEX_FAILED_MESSAGE,
    LOGIN_FIELD_CANDIDATES,
    LOGIN_REGEX,
    LOGIN_REGEX_FAILED_MESSAGE,
    PASSWORD_BLANK_MESSAGE,
    PASSWORD_SALT_FIELD_CANDIDATES,
    REMEMBER_TOKEN_FIELD_CANDIDATES,
    SESSION_CLASS_SUFFIX,
    SINGLE_ACCESS_TOKEN_FIELD_CANDIDATES,
    LoginFieldType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticConfig:
    """Fully resolved authentication configuration of a single model."""

    session_class: str
    crypto_provider: Any
    login_field: str
    login_field_type: str
    login_field_regex: Union[re.Pattern, str]
    login_field_regex_failed_message: str
    password_field: str
    password_blank_message: str
    confirm_password_did_not_match_message: str
    crypted_password_field: Optional[str]
    password_salt_field: Optional[str]
    remember_token_field: Optional[str]
    single_access_token_field: Optional[str]
    change_single_access_token_with_password: bool
    scope: Any
    logged_in_timeout: int
    session_ids: Tuple[Any, ...]
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @property
    def primary_session_id(self) -> Any:
        """The id of the session a record logs into first."""
        return self.session_ids[0] if self.session_ids else None

    @property
    def single_access_enabled(self) -> bool:
        return self.single_access_token_field is not None

    def as_dict(self) -> Dict[str, Any]:
        """Return every option, unrecognised caller options included."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != 'extra'}
        data.update(self.extra)
        return data


OPTION_NAMES = tuple(f.name for f in fields(AuthenticConfig) if f.name != 'extra')


def coerce_timeout(value: Union[int, float, str, timedelta]) -> int:
    """Convert a timeout given as seconds or as a timedelta into whole seconds."""
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds())
    else:
        seconds = int(value)
    return max(seconds, 0)


def configure(
    model_name: str,
    options: Optional[Mapping[str, Any]] = None,
    column_names: Iterable[str] = ()
) -> AuthenticConfig:
    """
    Resolve the authentication configuration of a model.

    Args:
        model_name: Name of the model class, used to derive the session class
        options: Options given by the caller; ``None`` values count as unset
        column_names: Columns present on the model's table

    Returns:
        The resolved configuration. Options the caller gave always win.
    """
    columns = frozenset(column_names)
    resolved: Dict[str, Any] = {
        key: value for key, value in (options or {}).items() if value is not None
    }

    resolved.setdefault('session_class', f'{model_name}{SESSION_CLASS_SUFFIX}')
    if 'crypto_provider' in resolved:
        resolved['crypto_provider'] = AuthenticSettings.load_crypto_provider(
            resolved['crypto_provider']
        )
    else:
        resolved['crypto_provider'] = AuthenticSettings.crypto_provider()

    resolved.setdefault(
        'login_field', first_column_to_exist(columns, *LOGIN_FIELD_CANDIDATES)
    )
    resolved.setdefault(
        'login_field_type',
        LoginFieldType.EMAIL if resolved['login_field'] == LoginFieldType.EMAIL
        else LoginFieldType.LOGIN
    )

    if resolved['login_field_type'] == LoginFieldType.EMAIL:
        resolved.setdefault('login_field_regex', EMAIL_REGEX)
        resolved.setdefault('login_field_regex_failed_message', EMAIL_REGEX_FAILED_MESSAGE)
    else:
        resolved.setdefault('login_field_regex', LOGIN_REGEX)
        resolved.setdefault('login_field_regex_failed_message', LOGIN_REGEX_FAILED_MESSAGE)

    resolved.setdefault('password_field', DEFAULT_PASSWORD_FIELD)
    resolved.setdefault('password_blank_message', PASSWORD_BLANK_MESSAGE)
    resolved.setdefault(
        'confirm_password_did_not_match_message', CONFIRM_PASSWORD_DID_NOT_MATCH_MESSAGE
    )

    resolved.setdefault(
        'crypted_password_field',
        first_column_to_exist(columns, *CRYPTED_PASSWORD_FIELD_CANDIDATES)
    )
    resolved.setdefault(
        'password_salt_field',
        first_column_to_exist(columns, *PASSWORD_SALT_FIELD_CANDIDATES)
    )
    resolved.setdefault(
        'remember_token_field',
        first_column_to_exist(columns, *REMEMBER_TOKEN_FIELD_CANDIDATES)
    )
    resolved.setdefault(
        'single_access_token_field',
        first_column_to_exist(columns, *SINGLE_ACCESS_TOKEN_FIELD_CANDIDATES)
    )
    resolved.setdefault('change_single_access_token_with_password', False)
    resolved.setdefault('scope', None)

    if 'logged_in_timeout' not in resolved:
        resolved['logged_in_timeout'] = AuthenticSettings.logged_in_timeout()
    resolved['logged_in_timeout'] = coerce_timeout(resolved['logged_in_timeout'])

    session_ids = resolved.get('session_ids', (DEFAULT_SESSION_ID,))
    if isinstance(session_ids, str):
        session_ids = (session_ids,)
    resolved['session_ids'] = tuple(session_ids)

    extra = {key: value for key, value in resolved.items() if key not in OPTION_NAMES}
    known = {key: value for key, value in resolved.items() if key in OPTION_NAMES}

    config = AuthenticConfig(**known, extra=MappingProxyType(extra))
    logger.debug(
        "Resolved authentication config for %s: login_field=%s, "
        "crypted_password_field=%s, single_access_token_field=%s",
        model_name,
        config.login_field,
        config.crypted_password_field,
        config.single_access_token_field,
    )
    return config
