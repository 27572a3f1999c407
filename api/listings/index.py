"""Dashboard endpoint: all listings with status counters."""

from http.server import BaseHTTPRequestHandler

from src.services.auth import resolve_reviewer
from src.services.dashboard import get_dashboard
from src.utils.http import run_async, send_error, send_json
from src.utils.logging import correlation_context
from src.utils.logging_config import LoggingConfig


class handler(BaseHTTPRequestHandler):
    """Vercel serverless function handler for the dashboard."""

    def do_GET(self):
        LoggingConfig.ensure_configured()
        with correlation_context():
            try:
                run_async(resolve_reviewer(self.headers.get("Authorization")))
                send_json(self, 200, run_async(get_dashboard()))
            except Exception as e:
                send_error(self, e)
