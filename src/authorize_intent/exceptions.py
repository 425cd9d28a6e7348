"""Custom exceptions for authorize-intent."""


class AuthorizeIntentError(Exception):
    """Base exception for all authorize-intent errors."""


class InvalidParameterError(AuthorizeIntentError):
    """Invalid parameter provided to a function."""


class SecurityError(AuthorizeIntentError):
    """Security-related error."""
