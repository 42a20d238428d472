"""
Validators built from a resolved authentication config.
"""

from typing import Optional

from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator

from .config import AuthenticConfig


def login_field_validator(config: AuthenticConfig) -> RegexValidator:
    """Return a validator enforcing the login field format."""
    return RegexValidator(
        regex=config.login_field_regex,
        message=config.login_field_regex_failed_message,
        code='invalid_login',
    )


def validate_password_confirmation(
    config: AuthenticConfig,
    password: Optional[str],
    confirmation: Optional[str]
) -> None:
    """Validate that a password was given and matches its confirmation."""
    if not password:
        raise ValidationError(
            {config.password_field: ValidationError(
                config.password_blank_message, code='blank'
            )}
        )

    if password != confirmation:
        raise ValidationError(
            {config.password_field: ValidationError(
                config.confirm_password_did_not_match_message, code='password_mismatch'
            )}
        )
