"""
Authentication service implementation.

Registers users, checks credentials and issues session tokens.
"""

import asyncio
import logging
from typing import Optional

from postgrest.exceptions import APIError

from shared.config import get_settings
from shared.models import AuthenticatedUser, Role
from modules.users.exceptions import UserNotFoundError
from modules.users.models import User
from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .models import (
    IssuedSession,
    LoginRequest,
    PasswordUpdateRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)
from .exceptions import (
    EmailAlreadyRegisteredError,
    IncorrectPasswordError,
    InvalidCredentialsError,
)
from .passwords import dummy_hash, hash_password, verify_password
from .tokens import SessionTokenManager

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are stored as bcrypt hashes in the users table; sessions
    are stateless signed tokens.
    """

    def __init__(
        self,
        users: UserRepository,
        tokens: SessionTokenManager,
        bcrypt_rounds: Optional[int] = None,
    ):
        self._users = users
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds or get_settings().bcrypt_rounds

    async def register(self, request: RegisterRequest) -> IssuedSession:
        if self._users.get_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError(request.email)

        password_hash = await asyncio.to_thread(hash_password, request.password, self._bcrypt_rounds)
        try:
            record = self._users.create(
                name=request.name,
                email=request.email,
                password_hash=password_hash,
                role=Role.USER,
            )
        except APIError as e:
            # Lost a race with a concurrent registration
            if e.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(request.email)
            raise

        logger.info("Registered user %s", record.id)
        return self._issue(record.to_public())

    async def login(self, request: LoginRequest) -> IssuedSession:
        record = self._users.get_by_email(request.email)
        if record is not None:
            password_hash = record.password_hash
        else:
            # Unknown emails still pay for one bcrypt check
            password_hash = await asyncio.to_thread(dummy_hash, self._bcrypt_rounds)
        matches = await asyncio.to_thread(verify_password, request.password, password_hash)
        if record is None or not matches:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info("User %s logged in", record.id)
        return self._issue(record.to_public())

    async def get_me(self, user: AuthenticatedUser) -> User:
        record = self._users.get_by_id(user.id)
        if record is None:
            raise UserNotFoundError(user.id)
        return record.to_public()

    async def update_profile(self, user: AuthenticatedUser, request: ProfileUpdateRequest) -> User:
        changes = request.model_dump(exclude_none=True)

        if "email" in changes and self._users.email_taken(changes["email"], exclude_id=user.id):
            raise EmailAlreadyRegisteredError(changes["email"], message="Email already in use")

        if not changes:
            return await self.get_me(user)

        try:
            record = self._users.update(user.id, changes)
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(changes.get("email", ""), message="Email already in use")
            raise

        if record is None:
            raise UserNotFoundError(user.id)
        return record.to_public()

    async def update_password(self, user: AuthenticatedUser, request: PasswordUpdateRequest) -> IssuedSession:
        record = self._users.get_by_id(user.id)
        if record is None:
            raise UserNotFoundError(user.id)

        if not await asyncio.to_thread(verify_password, request.current_password, record.password_hash):
            raise IncorrectPasswordError()

        new_hash = await asyncio.to_thread(hash_password, request.new_password, self._bcrypt_rounds)
        updated = self._users.update(user.id, {"password_hash": new_hash})
        if updated is None:
            raise UserNotFoundError(user.id)

        logger.info("User %s changed password", user.id)
        return self._issue(updated.to_public())

    def _issue(self, user: User) -> IssuedSession:
        return IssuedSession(user=user, token=self._tokens.issue(user.id, user.role))
