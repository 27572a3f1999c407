"""Shared helpers for the Vercel request handlers."""

import asyncio
import json
from http.server import BaseHTTPRequestHandler
from typing import Any, Optional
from urllib.parse import parse_qs, urlparse

from src.utils.errors import (
    AuthError,
    CsvImportError,
    ListingNotFoundError,
    PropertyPalError,
)
from src.utils.logging import get_structured_logger, mask_sensitive_data

logger = get_structured_logger(__name__)


class BadRequestError(PropertyPalError):
    """Malformed request body or parameters."""
    pass


class PayloadTooLargeError(BadRequestError):
    """Request body larger than the endpoint accepts."""
    pass


def run_async(coro) -> Any:
    """Run a coroutine to completion from a synchronous handler."""
    return asyncio.run(coro)


def send_json(request: BaseHTTPRequestHandler, status: int, payload: Any) -> None:
    request.send_response(status)
    request.send_header('Content-Type', 'application/json')
    request.end_headers()
    request.wfile.write(json.dumps(payload, default=str).encode('utf-8'))


def read_body(request: BaseHTTPRequestHandler, max_bytes: Optional[int] = None) -> bytes:
    """Read the request body, rejecting it from Content-Length alone when over max_bytes."""
    try:
        content_length = int(request.headers.get('Content-Length', 0) or 0)
    except ValueError:
        raise BadRequestError("Invalid Content-Length header")
    if content_length < 0:
        raise BadRequestError("Invalid Content-Length header")
    if max_bytes is not None and content_length > max_bytes:
        raise PayloadTooLargeError(f"Request body exceeds {max_bytes} bytes")
    return request.rfile.read(content_length) if content_length > 0 else b""


def read_json(request: BaseHTTPRequestHandler) -> dict:
    raw = read_body(request)
    if not raw:
        return {}
    try:
        body = json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise BadRequestError("Request body must be JSON")
    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")
    return body


def query_param(request: BaseHTTPRequestHandler, name: str) -> str:
    values = parse_qs(urlparse(request.path).query).get(name)
    if not values or not values[0].strip():
        raise BadRequestError(f"Missing query parameter: {name}")
    return values[0].strip()


def status_for_error(error: Exception) -> int:
    """HTTP status for an exception raised while handling a request."""
    if isinstance(error, AuthError):
        return 401
    if isinstance(error, PayloadTooLargeError):
        return 413
    if isinstance(error, ListingNotFoundError):
        return 404
    if isinstance(error, (CsvImportError, BadRequestError)):
        return 400
    return 500


def send_error(request: BaseHTTPRequestHandler, error: Exception) -> None:
    status = status_for_error(error)
    if status >= 500:
        logger.error(f"Request failed: {error}", exc_info=True, path=request.path)
        message = "internal server error"
    else:
        logger.warning(f"Request rejected: {mask_sensitive_data(str(error))}", status=status, path=request.path)
        message = str(error)
    send_json(request, status, {"error": message})
