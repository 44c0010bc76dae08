"""
Authentication error taxonomy.

Every subclass surfaces to HTTP clients as a 401 that does not name the subclass.
"""


class AuthenticationError(Exception):
    """Raised when a credential or token check fails."""

    reason = "authentication_failed"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class NotFound(AuthenticationError):
    """No user is registered under the given email."""

    reason = "not_found"


class InvalidSecret(AuthenticationError):
    """The secret does not match the stored hash."""

    reason = "invalid_secret"


class MissingCredentials(AuthenticationError):
    """Required credential fields or token headers are absent."""

    reason = "missing_credentials"


class Unauthorized(AuthenticationError):
    """The presented token is unknown, mismatched or expired."""

    reason = "unauthorized"
