"""Authentication exceptions.

These exceptions are raised by the taskboard_auth package and should be
caught and handled by the application layer (AuthenticationService) or
the API exception handlers.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed.

    The three cases are deliberately reported through this single type;
    ``reason`` is kept for server-side logging only.
    """

    def __init__(
        self,
        message: str = "Invalid or expired token",
        reason: str | None = None,
    ):
        self.reason = reason or message
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
