"""Reviewer model - the authenticated user acting on listings."""

from typing import Optional
from pydantic import BaseModel, Field


class Reviewer(BaseModel):
    """Authenticated reviewer resolved from a Supabase session."""
    user_id: str = Field(..., description="Supabase auth user ID")
    email: Optional[str] = Field(None, description="Email address")
    access_token: str = Field(..., repr=False, description="Bearer token used for the session")
