"""Sign-out endpoint."""

from http.server import BaseHTTPRequestHandler

from src.services.auth import resolve_reviewer, sign_out
from src.utils.http import run_async, send_error, send_json
from src.utils.logging import correlation_context
from src.utils.logging_config import LoggingConfig


class handler(BaseHTTPRequestHandler):
    """Vercel serverless function handler for ending a reviewer session."""

    def do_POST(self):
        LoggingConfig.ensure_configured()
        with correlation_context():
            try:
                reviewer = run_async(resolve_reviewer(self.headers.get("Authorization")))
                run_async(sign_out(reviewer))
                send_json(self, 200, {"ok": True})
            except Exception as e:
                send_error(self, e)
