"""
Authentication module.

Handles session tokens, passwords, role gating and the account
endpoints a signed-in user operates on.

Public API:
- IAuthService: Interface for auth operations
- SessionTokenManager: Issues and verifies session tokens
- require_role: Role gate predicate
- Auth exceptions: MissingTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenPayload, IssuedSession
from .roles import require_role
from .tokens import SessionTokenManager
from .exceptions import (
    MissingTokenError,
    MalformedTokenError,
    TokenSignatureError,
    ExpiredTokenError,
    InvalidCredentialsError,
    IncorrectPasswordError,
    EmailAlreadyRegisteredError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenPayload",
    "IssuedSession",
    # Tokens and roles
    "SessionTokenManager",
    "require_role",
    # Exceptions
    "MissingTokenError",
    "MalformedTokenError",
    "TokenSignatureError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "IncorrectPasswordError",
    "EmailAlreadyRegisteredError",
    "InsufficientPermissionsError",
]
