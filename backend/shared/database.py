"""
Supabase client for the users and bags tables.

Only the backend ever reads or writes these tables, so every query runs
with the service role. The client is built once per process.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

_service_client: Optional[Client] = None


def create_service_client(settings: Settings) -> Client:
    """
    Build a service-role client from settings.

    Raises:
        RuntimeError: If the project URL or service key is not configured
    """
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(f"Supabase configuration missing. Set {' and '.join(missing)}.")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def get_supabase_client() -> Client:
    """Return the process-wide client, creating it on first use."""
    global _service_client

    if _service_client is None:
        _service_client = create_service_client(get_settings())
    return _service_client


def reset_client_cache() -> None:
    """Forget the cached client so the next call builds a new one."""
    global _service_client
    _service_client = None
