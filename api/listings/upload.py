"""CSV import endpoint. The request body is the raw CSV file."""

from http.server import BaseHTTPRequestHandler

from src.services.auth import resolve_reviewer
from src.services.csv_import import import_listings, max_import_bytes
from src.utils.http import BadRequestError, read_body, run_async, send_error, send_json
from src.utils.logging import correlation_context
from src.utils.logging_config import LoggingConfig


class handler(BaseHTTPRequestHandler):
    """Vercel serverless function handler for CSV uploads."""

    def do_POST(self):
        LoggingConfig.ensure_configured()
        with correlation_context():
            try:
                reviewer = run_async(resolve_reviewer(self.headers.get("Authorization")))
                data = read_body(self, max_bytes=max_import_bytes())
                if not data:
                    raise BadRequestError("No CSV file uploaded")
                result = run_async(import_listings(data, reviewer))
                send_json(self, 200, {"ok": True, **result.model_dump()})
            except Exception as e:
                send_error(self, e)
