"""
Storage backends for trips, schedule items and expenses.

The backend is chosen once, at startup, from explicit settings:
- Supabase when SUPABASE_URL and SUPABASE_KEY are set
- the in-memory mock store when ALLOW_MOCK_STORE is true outside production
- otherwise a store that answers every call with 503

Usage:
    from app.storage import build_store
    store = build_store(settings)
    expenses = await store.list_expenses("mock-trip-1")
"""
import logging
from .base import TripStore
from .memory import MemoryStore
from .supabase_store import SupabaseClient, SupabaseStore
from .unavailable import UnavailableStore
from ..config import Settings

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> TripStore:
    """
    Select the store for this process

    Args:
        settings: Application settings

    Returns:
        The store every request will use
    """
    if settings.supabase_configured:
        logger.info("Using Supabase store")
        return SupabaseStore(SupabaseClient.get_client(settings))

    logger.warning("Supabase URL or key not set")
    if settings.allow_mock_store and not settings.is_production:
        logger.info("Using in-memory mock store")
        return MemoryStore()

    logger.warning("No store available; data endpoints will return 503")
    return UnavailableStore()


__all__ = [
    "TripStore",
    "MemoryStore",
    "SupabaseStore",
    "UnavailableStore",
    "build_store",
]
