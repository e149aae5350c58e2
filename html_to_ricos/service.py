"""Request handling shared by the dev server and the serverless handler."""

import json
import os
from typing import Any, Dict, Optional, Tuple
from urllib.parse import parse_qs

from html_to_ricos.converter import HTMLToRicos
from html_to_ricos.logs import log_event

DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024

API_INFO = {
    "message": "HTML to Ricos API",
    "endpoints": [
        {
            "path": "/convert",
            "method": "POST",
            "description": "Convert HTML to Ricos format",
            "body": {
                "html": "Your HTML content here"
            }
        }
    ]
}


class RequestError(ValueError):
    """Client-side problem with a conversion request."""

    def __init__(self, message: str, status: int = 400, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.detail = detail

    def payload(self) -> Dict[str, Any]:
        body = {"error": self.message}
        if self.detail:
            body["message"] = self.detail
        return body


def max_body_bytes() -> int:
    raw = os.environ.get("MAX_BODY_BYTES", "").strip()
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_MAX_BODY_BYTES
    return value if value > 0 else DEFAULT_MAX_BODY_BYTES


def cors_origin() -> str:
    return os.environ.get("CORS_ALLOW_ORIGIN", "").strip() or "*"


def check_length(content_length: Optional[str]) -> int:
    try:
        length = int(content_length or "0")
    except ValueError:
        raise RequestError("Invalid Content-Length header.")
    limit = max_body_bytes()
    if length > limit:
        raise RequestError("Request body too large.", status=413,
                           detail=f"Maximum body size is {limit} bytes.")
    return length


def _charset(content_type: str) -> str:
    if "charset=" in content_type:
        return content_type.split("charset=")[-1].split(";")[0].strip() or "utf-8"
    return "utf-8"


def extract_html(raw_body: bytes, content_type: str) -> str:
    """Pull the ``html`` field out of a JSON or form-encoded body."""
    try:
        text = raw_body.decode(_charset(content_type), errors="replace")
    except LookupError:
        raise RequestError("Failed to decode request body.")

    if "application/x-www-form-urlencoded" in content_type:
        html_content = (parse_qs(text).get("html") or [None])[0]
    else:
        try:
            payload = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError:
            raise RequestError("Invalid JSON payload.")
        html_content = payload.get("html") if isinstance(payload, dict) else None

    if not isinstance(html_content, str) or not html_content:
        raise RequestError(
            "HTML content is required",
            detail='Please provide HTML content in the request body as { "html": "your html here" }'
        )
    return html_content


def handle_convert(raw_body: bytes, content_type: str,
                   config: Optional[Dict[str, Any]] = None,
                   route: str = "/convert") -> Tuple[int, Dict[str, Any]]:
    """Run one conversion request; returns (status, JSON payload)."""
    try:
        html_content = extract_html(raw_body, content_type)
    except RequestError as exc:
        log_event("WARN", "convert_bad_request", route=route, status=exc.status, error=exc.message)
        return exc.status, exc.payload()

    log_event("INFO", "convert_start", route=route, html_bytes=len(html_content))
    try:
        document = HTMLToRicos(html_content, config=config).convert()
    except Exception as exc:
        log_event("ERROR", "convert_failed", route=route, error=str(exc))
        return 500, {"error": "Error converting HTML to Ricos", "message": str(exc)}

    log_event("INFO", "convert_ok", route=route, node_count=len(document["nodes"]))
    return 200, document
