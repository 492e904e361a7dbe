"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache
from modules.auth.passwords import hash_password
from tests.fakes import FakeSupabase


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_PASSWORD = "secret123"


def create_test_token(
    user_id: str = "test-user-123",
    role: str = "user",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test session token.

    Args:
        user_id: User ID to include in the token
        role: Role claim
        expired: If True, creates an expired token
        secret: Signing key

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "role": role,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def insert_user(
    db: FakeSupabase,
    email: str,
    role: str = "user",
    name: str = "Test User",
    password: str = TEST_PASSWORD,
) -> dict:
    """Insert a user row directly into the fake database."""
    row = db.new_row("users", {
        "name": name,
        "email": email,
        "password_hash": hash_password(password, rounds=4),
        "role": role,
    })
    db.tables.setdefault("users", []).append(row)
    return row


def insert_bag(db: FakeSupabase, **overrides) -> dict:
    """Insert a bag row directly into the fake database."""
    data = {
        "name": "Classic Leather Tote",
        "description": "A timeless leather tote for everyday use.",
        "price": 299.99,
        "category": "tote",
        "image": "https://images.example.com/tote.jpg",
        "stock": 15,
    }
    data.update(overrides)
    row = db.new_row("bags", data)
    db.tables.setdefault("bags", []).append(row)
    return row


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Point settings at test values and reset cached singletons around each test."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield get_settings()
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def fake_db(monkeypatch) -> FakeSupabase:
    """Install an in-memory database as the process-wide Supabase client."""
    db = FakeSupabase()
    monkeypatch.setattr("shared.database._service_client", db)
    return db


@pytest.fixture
def app(fake_db):
    """Create a fresh app backed by the fake database."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin_user(fake_db) -> dict:
    return insert_user(fake_db, "admin@example.com", role="admin", name="Admin")


@pytest.fixture
def regular_user(fake_db) -> dict:
    return insert_user(fake_db, "shopper@example.com", role="user", name="Shopper")


@pytest.fixture
def admin_headers(admin_user) -> dict[str, str]:
    """Authorization headers for an admin session."""
    return {"Authorization": f"Bearer {create_test_token(admin_user['id'], role='admin')}"}


@pytest.fixture
def user_headers(regular_user) -> dict[str, str]:
    """Authorization headers for a regular user session."""
    return {"Authorization": f"Bearer {create_test_token(regular_user['id'], role='user')}"}
