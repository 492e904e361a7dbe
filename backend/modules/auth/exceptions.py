"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ConflictError


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Not authorized, no token provided"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(AuthenticationError):
    """Raised when a token cannot be decoded or carries unusable claims."""

    def __init__(self, message: str = "Not authorized, invalid token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class TokenSignatureError(AuthenticationError):
    """Raised when a token's signature does not match the server secret."""

    def __init__(self, message: str = "Not authorized, invalid token"):
        super().__init__(message, code="INVALID_SIGNATURE")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Not authorized, token expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class InvalidCredentialsError(AuthenticationError):
    """Raised on a failed login, whether the email or the password was wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class IncorrectPasswordError(AuthenticationError):
    """Raised when the current password given for a password change is wrong."""

    def __init__(self):
        super().__init__("Current password is incorrect", code="INCORRECT_PASSWORD")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email address already belongs to an account."""

    def __init__(self, email: str, message: str = "Email already registered"):
        super().__init__(
            message,
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_roles: list[str], user_role: str):
        super().__init__(
            f"Role '{user_role}' is not authorized to access this route",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_roles": required_roles, "user_role": user_role},
        )
