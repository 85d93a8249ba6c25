"""CORS compliance rules.

Each rule is a pure function ``(RequestInfo, ResponseInfo) -> Diagnostic | None``.
``ALL_RULES`` is the canonical evaluation order.
"""

from .wildcard_credentials import check_wildcard_with_credentials
from .allowed_headers import check_missing_allowed_headers
from .preflight import check_missing_preflight_handling
from .origin_mismatch import check_origin_mismatch
from .postman_browser import check_postman_vs_browser
from .vary_origin import check_missing_vary_origin
from .max_age import check_missing_max_age
from .duplicate_origin import check_duplicate_origin_header

from . import (
    allowed_headers,
    duplicate_origin,
    max_age,
    origin_mismatch,
    postman_browser,
    preflight,
    vary_origin,
    wildcard_credentials,
)

ALL_RULES = (
    check_wildcard_with_credentials,
    check_missing_allowed_headers,
    check_missing_preflight_handling,
    check_origin_mismatch,
    check_postman_vs_browser,
    check_missing_vary_origin,
    check_missing_max_age,
    check_duplicate_origin_header,
)

RULES_BY_ID = {
    wildcard_credentials.RULE_ID: check_wildcard_with_credentials,
    allowed_headers.RULE_ID: check_missing_allowed_headers,
    preflight.RULE_ID: check_missing_preflight_handling,
    origin_mismatch.RULE_ID: check_origin_mismatch,
    postman_browser.RULE_ID: check_postman_vs_browser,
    vary_origin.RULE_ID: check_missing_vary_origin,
    max_age.RULE_ID: check_missing_max_age,
    duplicate_origin.RULE_ID: check_duplicate_origin_header,
}

__all__ = [
    "ALL_RULES",
    "RULES_BY_ID",
    "check_wildcard_with_credentials",
    "check_missing_allowed_headers",
    "check_missing_preflight_handling",
    "check_origin_mismatch",
    "check_postman_vs_browser",
    "check_missing_vary_origin",
    "check_missing_max_age",
    "check_duplicate_origin_header",
]
