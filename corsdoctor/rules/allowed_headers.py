"""Requested headers that the preflight response does not allow."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "missing-allowed-headers"


def check_missing_allowed_headers(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    """Every header in Access-Control-Request-Headers must be in Access-Control-Allow-Headers."""
    if not req.requested_headers:
        return None

    allowed = {h.lower() for h in res.allow_headers}
    if "*" in allowed:
        return None

    missing = [h for h in req.requested_headers if h.lower() not in allowed]
    if not missing:
        return None

    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.ERROR,
        issue=(
            f"Browser requested headers [{', '.join(req.requested_headers)}] but server "
            f"only allows [{', '.join(res.allow_headers) or 'none'}]."
        ),
        explanation=(
            "These headers are missing from Access-Control-Allow-Headers: "
            f"{', '.join(missing)}. The browser will block the request."
        ),
        fix=(
            "Add the missing headers to Access-Control-Allow-Headers: "
            f'"{", ".join(list(res.allow_headers) + missing)}".'
        ),
    )
