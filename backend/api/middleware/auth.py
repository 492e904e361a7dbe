"""
Session authentication and role gates.

The token travels in an HTTP-only cookie; a bearer Authorization header
is accepted as an equivalent channel. Gates never touch the database:
the identity comes from the token claims alone.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.config import get_settings
from shared.models import AuthenticatedUser, Role
from modules.auth.exceptions import MissingTokenError
from modules.auth.roles import require_role
from modules.auth.tokens import SessionTokenManager

from ..dependencies import get_token_manager

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Read the session token from the cookie, falling back to the bearer header."""
    token = request.cookies.get(get_settings().cookie_name)
    if not token and credentials is not None:
        token = credentials.credentials
    return token or None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: SessionTokenManager = Depends(get_token_manager),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    A missing token is rejected before any verification is attempted.
    The resolved identity is also stored on ``request.state.user``.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_token(request, credentials)
    if token is None:
        raise MissingTokenError()

    user = tokens.verify(token)
    request.state.user = user
    return user


class RoleGate:
    """
    Dependency that requires authentication and one of the given roles.

    Usage:
        @router.delete("/{bag_id}")
        async def delete_bag(user: AuthenticatedUser = Depends(RoleGate(Role.ADMIN))):
            ...
    """

    def __init__(self, *roles: Role):
        self.roles = roles

    async def __call__(
        self,
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        return require_role(user, self.roles)


require_admin = RoleGate(Role.ADMIN)

# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireAdmin = Depends(require_admin)
