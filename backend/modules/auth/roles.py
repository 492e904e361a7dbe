"""
Role gate predicate.
"""

from collections.abc import Iterable

from shared.models import AuthenticatedUser, Role

from .exceptions import InsufficientPermissionsError


def require_role(user: AuthenticatedUser, allowed_roles: Iterable[Role]) -> AuthenticatedUser:
    """
    Check that the user holds one of the allowed roles.

    Returns the user unchanged so the check can be chained.

    Raises:
        InsufficientPermissionsError: If the user's role is not allowed
    """
    allowed = [Role(role) for role in allowed_roles]
    if user.role not in allowed:
        raise InsufficientPermissionsError(
            required_roles=[role.value for role in allowed],
            user_role=user.role.value,
        )
    return user
