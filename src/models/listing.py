"""Listing models."""

from typing import Optional, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Listing(BaseModel):
    """Imported real estate listing tracked through the review workflow."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = Field(None, description="Listing ID (assigned by Supabase)")
    property_url: str = Field(..., min_length=1, description="Source URL of the listing")
    description: Optional[str] = Field(None, description="Raw description, possibly serialized JSON")
    address: Optional[str] = Field(None, description="Property address")
    price: Optional[float] = Field(None, description="Price with currency symbols stripped")
    year_built: Optional[str] = Field(None, description="Year built (free text)")
    area_m2: Optional[float] = Field(None, description="Floor area in m²")
    rooms: Optional[int] = Field(None, description="Room count")
    garage: Optional[str] = Field(None, description="Garage description")
    type: Optional[str] = Field(None, description="Property type")
    offer_type: Optional[str] = Field(None, description="Offer type (sale, rent, ...)")
    photo_urls: Optional[list[str]] = Field(None, description="Ordered photo URLs, null when there are none")
    status: Optional[str] = Field(default="pending", description="Workflow status: pending, done, review")
    quality: Optional[str] = Field(None, description="Quality label: ok, review, unknown")
    notes: Optional[str] = Field(None, description="Reviewer notes")
    score_json: Optional[Any] = Field(None, description="Raw score object from the external scorer")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("photo_urls")
    @classmethod
    def _no_empty_photo_list(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        """Store "no photos" as null, never as an empty list."""
        if value is None:
            return None
        cleaned = [url.strip() for url in value if url and url.strip()]
        return cleaned or None

    def to_insert_payload(self) -> dict:
        """Row for a batch insert; server-assigned columns are left to their defaults."""
        return self.model_dump(
            exclude={"id", "quality", "notes", "score_json", "created_at", "updated_at"}
        )


class ListingSummary(BaseModel):
    """Dashboard row."""
    id: str
    property_url: str
    status: str = Field(..., description="Normalized status token")
    quality: str = Field(..., description="Normalized quality token")
    status_variant: str
    quality_variant: str
    created_at: Optional[str] = None


class StatusCounts(BaseModel):
    """Dashboard counters."""
    ok: int = 0
    pending: int = 0
    review: int = 0


class ImportResult(BaseModel):
    """Outcome of a CSV import."""
    imported: int = Field(0, description="Listings inserted")
    dropped: int = Field(0, description="Rows left out for lacking a property URL")
