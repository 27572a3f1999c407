"""Dashboard and listing detail views."""

from src.models.listing import Listing, ListingSummary, StatusCounts
from src.services.quality import (
    clean_description,
    display_status,
    normalize_quality,
    quality_display_text,
    quality_variant,
    reconcile_score,
    status_variant,
)
from src.services.supabase_client import get_listing_by_id, list_listings
from src.utils.logging import get_structured_logger, timed

logger = get_structured_logger(__name__)

# Informational only; re-analysis runs outside this service.
REANALYSIS_INTERVAL_MINUTES = 10


def count_statuses(rows: list[dict]) -> StatusCounts:
    """Count approved, pending and in-review listings on normalized tokens."""
    counts = StatusCounts()
    for row in rows:
        status = normalize_quality(row.get("status"))
        quality = normalize_quality(row.get("quality"))
        if status == "pending":
            counts.pending += 1
        if quality == "ok":
            counts.ok += 1
        if quality == "review":
            counts.review += 1
    return counts


def summarize(row: dict) -> ListingSummary:
    status = display_status(row.get("status"))
    quality = normalize_quality(row.get("quality"))
    return ListingSummary(
        id=str(row["id"]),
        property_url=row.get("property_url") or "",
        status=status,
        quality=quality,
        status_variant=status_variant(status),
        quality_variant=quality_variant(quality),
        created_at=row.get("created_at"),
    )


@timed("dashboard")
async def get_dashboard() -> dict:
    """Listings newest first with the status counters."""
    rows = await list_listings()
    counts = count_statuses(rows)
    logger.debug("Loaded dashboard", listings=len(rows))
    return {
        "counts": counts.model_dump(),
        "listings": [summarize(row).model_dump() for row in rows],
        "reanalysis_interval_minutes": REANALYSIS_INTERVAL_MINUTES,
    }


async def get_listing_detail(listing_id: str) -> dict:
    """Full listing with display fields and the reconciled quality checklist."""
    listing = Listing(**await get_listing_by_id(listing_id))
    status = normalize_quality(listing.status)
    quality = normalize_quality(listing.quality)
    checklist = reconcile_score(listing.score_json)
    return {
        "listing": listing.model_dump(),
        "display": {
            "description": clean_description(listing.description),
            "status": status,
            "status_variant": status_variant(status),
            "quality": quality_display_text(quality),
            "quality_variant": quality_variant(quality),
        },
        "checklist": {
            **checklist.model_dump(),
            "items": checklist.items(),
            "summary": checklist.summary(),
        },
    }
