"""
Authentication module interface.

Routes and other modules should depend on IAuthService, not the concrete
implementation. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from modules.users.models import User

from .models import (
    IssuedSession,
    LoginRequest,
    PasswordUpdateRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account and session operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> IssuedSession:
        """
        Create an account with the ``user`` role and sign it in.

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        ...

    async def login(self, request: LoginRequest) -> IssuedSession:
        """
        Check credentials and sign the user in.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def get_me(self, user: AuthenticatedUser) -> User:
        """
        Load the current user's record.

        Raises:
            UserNotFoundError: If the account was deleted after sign-in
        """
        ...

    async def update_profile(self, user: AuthenticatedUser, request: ProfileUpdateRequest) -> User:
        """
        Update the current user's name and/or email.

        Raises:
            EmailAlreadyRegisteredError: If another account uses the new email
            UserNotFoundError: If the account no longer exists
        """
        ...

    async def update_password(self, user: AuthenticatedUser, request: PasswordUpdateRequest) -> IssuedSession:
        """
        Rotate the current user's password and issue a new token.

        Raises:
            IncorrectPasswordError: If the current password does not match
            UserNotFoundError: If the account no longer exists
        """
        ...
