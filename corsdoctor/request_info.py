"""Snapshot of the CORS-relevant parts of an inbound request."""

from typing import Any, Optional

from .headers import header_value, header_values, parse_list
from .models import RequestInfo


def detect_preflight(method: Optional[str], headers: Any) -> bool:
    """OPTIONS with a non-empty Access-Control-Request-Method header."""
    if (method or "").upper() != "OPTIONS":
        return False
    return bool(header_value(headers, "access-control-request-method"))


def extract_request_info(method: Optional[str], url: Optional[str], headers: Any) -> RequestInfo:
    """Build a RequestInfo from a method, the request URL and its headers."""
    requested_method = header_value(headers, "access-control-request-method") or None
    has_credentials = bool(
        header_values(headers, "cookie") or header_values(headers, "authorization")
    )
    return RequestInfo(
        origin=header_value(headers, "origin") or None,
        method=(method or "GET").upper(),
        url=url or "/",
        is_preflight=detect_preflight(method, headers),
        requested_method=requested_method,
        requested_headers=parse_list(header_value(headers, "access-control-request-headers")),
        has_credentials=has_credentials,
    )
