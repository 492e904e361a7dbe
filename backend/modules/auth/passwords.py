"""
Password hashing with bcrypt.
"""

import secrets
from functools import lru_cache

import bcrypt

# bcrypt only looks at the first 72 bytes of a password
_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


@lru_cache
def dummy_hash(rounds: int = 12) -> str:
    """
    Hash of a random password no one knows.

    Checking against it costs as much as checking a real account's hash
    with the same rounds, and never succeeds.
    """
    return hash_password(secrets.token_urlsafe(32), rounds=rounds)
