"""Supabase client for the estimate backend."""

import logging
from functools import lru_cache

from supabase import Client, create_client

from ..config import settings
from ..exceptions import DatabaseNotConfiguredError


@lru_cache()
def get_supabase_client() -> Client | None:
    """Get cached Supabase client instance.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logging.warning("Supabase credentials not configured (missing URL or key)")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logging.error(f"Failed to create Supabase client: {e}")
        return None


def require_supabase_client() -> Client:
    """Return the configured client or raise when the database is unavailable."""
    client = get_supabase_client()
    if client is None:
        raise DatabaseNotConfiguredError(
            "Supabase not configured. Set MOVE_SUPABASE_URL and MOVE_SUPABASE_KEY environment variables."
        )
    return client
