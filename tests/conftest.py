"""Shared pytest fixtures and configuration."""

import os
import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("LOG_FORMAT", "text")

from src.utils.logging_config import LoggingConfig  # noqa: E402

# pytest owns the root logging handlers
LoggingConfig._configured = True


@pytest.fixture
def mock_supabase_client():
    """
    Mock Supabase client whose query builder chains back to itself.
    
    Set ``query.execute.return_value`` to control what a call returns.
    """
    client = MagicMock()
    table = MagicMock()
    query = MagicMock()
    
    for method in ("select", "insert", "update", "eq", "order"):
        getattr(table, method).return_value = query
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=[])
    client.table.return_value = table
    
    return SimpleNamespace(client=client, table=table, query=query)


@pytest.fixture
def patched_supabase(mock_supabase_client):
    """Route the listings table helpers to ``mock_supabase_client``."""
    with patch('src.services.supabase_client.SupabaseClient') as mock_client_class:
        mock_client_class.return_value.__aenter__.return_value = mock_supabase_client.client
        mock_client_class.return_value.__aexit__.return_value = None
        yield mock_supabase_client


@pytest.fixture
def reviewer():
    """Signed-in reviewer."""
    from src.models.reviewer import Reviewer
    
    return Reviewer(
        user_id="8f14e45f-ceea-467f-a0e6-5d3d4a1b2c3d",
        email="reviewer@example.com",
        access_token="test-access-token"
    )


@pytest.fixture
def sample_score_json():
    """Score object as written by the external scorer."""
    return {
        "photos_divisions": True,
        "duplicates": False,
        "photo_quality": True,
        "location_ok": True,
        "description_ok": True,
        "base_info_ok": True,
    }


@pytest.fixture
def sample_listing_row(sample_score_json):
    """Listing row as returned by ``select('*')``."""
    return {
        "id": "3b2f6c1e-7a43-4d5e-9c1a-0f8e2d6b4a11",
        "property_url": "https://example.com/listing/1",
        "description": '{"text": "Bright flat near the park"}',
        "address": "Rua das Flores 12, Lisboa",
        "price": 245000.0,
        "year_built": "1998",
        "area_m2": 88.0,
        "rooms": 3,
        "garage": "1 space",
        "type": "apartment",
        "offer_type": "sale",
        "photo_urls": ["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg"],
        "status": " Pending ",
        "quality": "REVIEW",
        "notes": None,
        "score_json": sample_score_json,
        "created_at": "2025-03-01T10:00:00+00:00",
        "updated_at": "2025-03-01T10:00:00+00:00",
    }
