"""Listing detail endpoint and reviewer actions."""

from http.server import BaseHTTPRequestHandler

from src.services import review
from src.services.auth import resolve_reviewer
from src.services.dashboard import get_listing_detail
from src.utils.http import BadRequestError, query_param, read_json, run_async, send_error, send_json
from src.utils.logging import correlation_context
from src.utils.logging_config import LoggingConfig

ACTIONS = ("save_notes", "mark_ok", "reanalyse")


def apply_action(listing_id: str, body: dict, reviewer):
    """Coroutine for the action named in the request body."""
    action = body.get("action")
    notes = body.get("notes", review.KEEP_NOTES)
    if notes is not None and notes is not review.KEEP_NOTES and not isinstance(notes, str):
        raise BadRequestError("notes must be a string")
    
    if action == "save_notes":
        if notes is review.KEEP_NOTES:
            raise BadRequestError("save_notes requires notes")
        return review.save_notes(listing_id, notes, reviewer)
    if action == "mark_ok":
        return review.mark_as_reviewed(listing_id, notes, reviewer)
    if action == "reanalyse":
        return review.requeue(listing_id, reviewer)
    raise BadRequestError(f"Unknown action: {action!r}, expected one of {', '.join(ACTIONS)}")


class handler(BaseHTTPRequestHandler):
    """Vercel serverless function handler for a single listing."""

    def do_GET(self):
        """Listing with its quality checklist (?id=...)."""
        LoggingConfig.ensure_configured()
        with correlation_context():
            try:
                run_async(resolve_reviewer(self.headers.get("Authorization")))
                listing_id = query_param(self, "id")
                send_json(self, 200, run_async(get_listing_detail(listing_id)))
            except Exception as e:
                send_error(self, e)

    def do_POST(self):
        """Apply a reviewer action: {"action": "save_notes"|"mark_ok"|"reanalyse", "notes": ...}."""
        LoggingConfig.ensure_configured()
        with correlation_context():
            try:
                reviewer = run_async(resolve_reviewer(self.headers.get("Authorization")))
                listing_id = query_param(self, "id")
                listing = run_async(apply_action(listing_id, read_json(self), reviewer))
                send_json(self, 200, {"ok": True, "listing": listing.model_dump()})
            except Exception as e:
                send_error(self, e)
