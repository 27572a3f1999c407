"""Reviewer actions on a single listing."""

from typing import Any, Optional

from src.models.listing import Listing
from src.models.reviewer import Reviewer
from src.services.supabase_client import update_listing
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

# Passed as notes when the request did not include them
KEEP_NOTES = object()


async def save_notes(listing_id: str, notes: Optional[str], reviewer: Reviewer) -> Listing:
    """Replace the listing's notes; nothing else changes."""
    row = await update_listing(listing_id, {"notes": notes})
    logger.info("Saved listing notes", listing_id=listing_id, reviewer_id=reviewer.user_id)
    return Listing(**row)


async def mark_as_reviewed(listing_id: str, notes: Any, reviewer: Reviewer) -> Listing:
    """Mark the listing done with quality ok, saving the notes alongside unless KEEP_NOTES."""
    updates = {"status": "done", "quality": "ok"}
    if notes is not KEEP_NOTES:
        updates["notes"] = notes
    row = await update_listing(listing_id, updates)
    logger.info("Marked listing as OK", listing_id=listing_id, reviewer_id=reviewer.user_id)
    return Listing(**row)


async def requeue(listing_id: str, reviewer: Reviewer) -> Listing:
    """Send the listing back to pending so the scorer picks it up again."""
    row = await update_listing(listing_id, {"status": "pending"})
    logger.info("Queued listing for re-analysis", listing_id=listing_id, reviewer_id=reviewer.user_id)
    return Listing(**row)
