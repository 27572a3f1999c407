"""Test helper functions."""

import json
from io import BytesIO
from typing import Any, Dict, Optional
from unittest.mock import Mock


def make_request_handler(
    handler_cls,
    path: str = "/",
    body: bytes = b"",
    headers: Optional[Dict[str, str]] = None
):
    """Build a handler instance without a socket, ready for do_GET/do_POST."""
    h = handler_cls.__new__(handler_cls)
    h.path = path
    h.headers = {"Content-Length": str(len(body)), **(headers or {})}
    h.rfile = BytesIO(body)
    h.wfile = BytesIO()
    h.send_response = Mock()
    h.send_header = Mock()
    h.end_headers = Mock()
    return h


def auth_headers(token: str = "test-access-token") -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def read_json_response(h) -> tuple[int, Any]:
    """Status code and decoded JSON body written by a handler."""
    status = h.send_response.call_args[0][0]
    h.wfile.seek(0)
    return status, json.loads(h.wfile.read().decode('utf-8'))
