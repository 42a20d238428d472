"""
Serializers for authenticable model configuration.

Renders a resolved ``AuthenticConfig`` into JSON-compatible data for
inspection.
"""

from typing import Any, Optional

from rest_framework import serializers

from .config import AuthenticConfig


class AuthenticConfigSerializer(serializers.Serializer):
    """Read-only representation of an ``AuthenticConfig``."""

    session_class = serializers.CharField(read_only=True)
    crypto_provider = serializers.SerializerMethodField()
    login_field = serializers.CharField(read_only=True)
    login_field_type = serializers.CharField(read_only=True)
    login_field_regex = serializers.SerializerMethodField()
    login_field_regex_failed_message = serializers.CharField(read_only=True)
    password_field = serializers.CharField(read_only=True)
    password_blank_message = serializers.CharField(read_only=True)
    confirm_password_did_not_match_message = serializers.CharField(read_only=True)
    crypted_password_field = serializers.CharField(read_only=True, allow_null=True)
    password_salt_field = serializers.CharField(read_only=True, allow_null=True)
    remember_token_field = serializers.CharField(read_only=True, allow_null=True)
    single_access_token_field = serializers.CharField(read_only=True, allow_null=True)
    change_single_access_token_with_password = serializers.BooleanField(read_only=True)
    scope = serializers.SerializerMethodField()
    logged_in_timeout = serializers.IntegerField(read_only=True)
    session_ids = serializers.ListField(
        child=serializers.CharField(allow_null=True), read_only=True
    )

    def get_crypto_provider(self, obj: AuthenticConfig) -> str:
        provider = obj.crypto_provider
        if isinstance(provider, str):
            return provider
        if isinstance(provider, type):
            return f'{provider.__module__}.{provider.__qualname__}'
        return repr(provider)

    def get_login_field_regex(self, obj: AuthenticConfig) -> str:
        return getattr(obj.login_field_regex, 'pattern', obj.login_field_regex)

    def get_scope(self, obj: AuthenticConfig) -> Optional[Any]:
        scope = obj.scope
        if scope is None or isinstance(scope, (str, int, bool)):
            return scope
        if isinstance(scope, (list, tuple)):
            return [str(item) for item in scope]
        return str(scope)
