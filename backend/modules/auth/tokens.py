"""
Session token issuance and verification.

Tokens are HS256 JWTs carrying the subject id and role. The identity is
rebuilt from the claims alone, so a role change only reaches a session
once its holder signs in again or the token expires.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser, Role

from .exceptions import (
    ExpiredTokenError,
    MalformedTokenError,
    MissingTokenError,
    TokenSignatureError,
)
from .models import TokenPayload

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionTokenManager:
    """
    Issues and verifies signed session tokens.

    Args:
        secret: Signing key
        lifetime: How long an issued token stays valid
        algorithm: JWT signing algorithm
        clock: Source of the current time, used for both issuance and expiry checks
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ):
        if not secret:
            raise RuntimeError(
                "Session signing secret missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._lifetime = lifetime
        self._algorithm = algorithm
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SessionTokenManager":
        settings = settings or get_settings()
        return cls(
            secret=settings.jwt_secret,
            lifetime=timedelta(seconds=settings.jwt_expires_in),
            algorithm=settings.jwt_algorithm,
        )

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, subject_id: str, role: Role) -> str:
        """
        Create a signed token for a user.

        Args:
            subject_id: The user's ID
            role: The user's current role, embedded as a claim

        Returns:
            Encoded JWT string
        """
        issued_at = self._clock()
        payload = {
            "sub": subject_id,
            "role": Role(role).value,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Verify a token and rebuild the identity it carries.

        Raises:
            MissingTokenError: If the token is empty
            MalformedTokenError: If the token cannot be decoded or its claims are unusable
            TokenSignatureError: If the signature does not match
            ExpiredTokenError: If the clock is past the token's expiry
        """
        if not token:
            raise MissingTokenError()

        try:
            # Only expiry is enforced, against the injected clock below
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": ["sub", "role", "iat", "exp"],
                },
            )
            payload = TokenPayload(**claims)
        except jwt.InvalidSignatureError:
            raise TokenSignatureError()
        except (jwt.InvalidTokenError, PydanticValidationError) as e:
            logger.debug("Rejected malformed token: %s", e)
            raise MalformedTokenError()

        if self._clock().timestamp() > payload.exp:
            raise ExpiredTokenError()

        return AuthenticatedUser(id=payload.sub, role=payload.role)
