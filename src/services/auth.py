"""Reviewer authentication against Supabase Auth."""

import logging
from typing import Optional

from src.models.reviewer import Reviewer
from src.services.supabase_client import SupabaseClient
from src.utils.errors import AuthError
from src.utils.logging import mask_email

logger = logging.getLogger(__name__)


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer ...`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def resolve_reviewer(authorization: Optional[str]) -> Reviewer:
    """
    Resolve the signed-in reviewer for a request.
    
    Raises AuthError when the header is missing or the session is not valid.
    """
    token = bearer_token(authorization)
    if not token:
        raise AuthError("Missing bearer token")
    
    async with SupabaseClient() as client:
        try:
            response = client.auth.get_user(token)
        except Exception as e:
            logger.warning("Session lookup failed", extra={"error": str(e)})
            raise AuthError("Invalid or expired session")
    
    user = getattr(response, "user", None)
    if user is None:
        raise AuthError("Invalid or expired session")
    
    reviewer = Reviewer(user_id=str(user.id), email=user.email, access_token=token)
    logger.debug(
        "Resolved reviewer",
        extra={"reviewer_id": reviewer.user_id, "email": mask_email(reviewer.email)}
    )
    return reviewer


async def sign_out(reviewer: Reviewer) -> None:
    """Revoke the reviewer's session."""
    async with SupabaseClient() as client:
        try:
            client.auth.admin.sign_out(reviewer.access_token)
        except Exception as e:
            raise AuthError(f"Failed to sign out: {e}")
    logger.info("Reviewer signed out", extra={"reviewer_id": reviewer.user_id})
