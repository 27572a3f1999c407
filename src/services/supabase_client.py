"""Supabase client wrapper with async context manager support."""

import os
from typing import Optional
from supabase import create_client, Client
from supabase.client import ClientOptions
from src.utils.errors import SupabaseError, ListingNotFoundError
import logging

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = "id, property_url, status, quality, created_at"

# Global client instance (singleton pattern)
_client: Optional[Client] = None


def listings_table() -> str:
    return os.environ.get("LISTINGS_TABLE", "listings")


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton."""
    global _client
    
    if _client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
        
        if not url or not key:
            raise SupabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        
        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )
        
        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", extra={"url": url})
    
    return _client


class SupabaseClient:
    """Async context manager for Supabase client."""
    
    def __init__(self):
        self.client: Optional[Client] = None
    
    async def __aenter__(self) -> Client:
        self.client = get_supabase_client()
        return self.client
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(
                "Supabase operation error",
                extra={"error": str(exc_val), "type": exc_type.__name__}
            )
        return False


# Listings table operations
async def insert_listings(rows: list[dict]) -> list[dict]:
    """Batch insert listing rows."""
    if not rows:
        return []
    async with SupabaseClient() as client:
        try:
            result = client.table(listings_table()).insert(rows).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to insert listings: {e}")


async def list_listings(columns: str = SUMMARY_COLUMNS) -> list[dict]:
    """Get all listings, newest first."""
    async with SupabaseClient() as client:
        try:
            result = client.table(listings_table()).select(columns).order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to list listings: {e}")


async def get_listing_by_id(listing_id: str) -> dict:
    """Get listing by ID."""
    async with SupabaseClient() as client:
        try:
            result = client.table(listings_table()).select("*").eq("id", listing_id).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to get listing: {e}")
    if result.data and len(result.data) > 0:
        return result.data[0]
    raise ListingNotFoundError(f"Listing not found: {listing_id}")


async def update_listing(listing_id: str, updates: dict) -> dict:
    """Update a listing."""
    async with SupabaseClient() as client:
        try:
            result = client.table(listings_table()).update(updates).eq("id", listing_id).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to update listing: {e}")
    if result.data and len(result.data) > 0:
        return result.data[0]
    raise ListingNotFoundError(f"Listing not found: {listing_id}")
