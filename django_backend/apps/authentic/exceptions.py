"""
Exceptions for authenticable model registration.

Provides custom exception classes for consistent error handling.
"""

from typing import Any, Dict


class AuthenticException(Exception):
    """Base exception for authenticable model configuration."""

    default_message = "An error occurred while configuring authentication"
    default_code = "authentic_error"

    def __init__(
        self,
        message: str = None,
        code: str = None,
        details: Dict[str, Any] = None
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class NotRegistered(AuthenticException):
    """Exception raised when a model was never registered as authenticable."""

    default_message = "Model is not registered as authenticable"
    default_code = "not_registered"
