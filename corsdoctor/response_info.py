"""Snapshot of the CORS headers on an outbound response, taken just before they are sent."""

import re
from typing import Any, Optional

from .headers import header_value, header_values, parse_list
from .models import ResponseInfo

_INTEGER = re.compile(r"-?\d+")


def parse_max_age(value: Optional[str]) -> Optional[int]:
    """Base-10 integer or None. Zero is kept: it means "do not cache"."""
    if value is None:
        return None
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def extract_response_info(headers: Any, status: int) -> ResponseInfo:
    """Build a ResponseInfo from the final response headers and status code.

    ``allow_origin_count`` is the number of separately set
    Access-Control-Allow-Origin values. Hosts that fold repeats into one
    comma-joined value report 1.
    """
    allow_origin_values = header_values(headers, "access-control-allow-origin")
    max_age_values = header_values(headers, "access-control-max-age")
    return ResponseInfo(
        allow_origin=", ".join(allow_origin_values) if allow_origin_values else None,
        allow_origin_count=len(allow_origin_values),
        allow_methods=parse_list(header_value(headers, "access-control-allow-methods")),
        allow_headers=parse_list(header_value(headers, "access-control-allow-headers")),
        allow_credentials=header_value(headers, "access-control-allow-credentials") == "true",
        max_age=parse_max_age(max_age_values[0]) if max_age_values else None,
        vary=parse_list(header_value(headers, "vary")),
        status=int(status),
    )
