"""Preflight requests that are not answered properly."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "missing-preflight-handling"


def check_missing_preflight_handling(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    """A preflight needs a 2xx status and an Access-Control-Allow-Origin header."""
    if not req.is_preflight:
        return None

    reasons = []
    if not 200 <= res.status < 300:
        reasons.append(f"Preflight returned status {res.status} (expected 2xx).")
    if not res.allow_origin:
        reasons.append("No Access-Control-Allow-Origin header in preflight response.")
    if not reasons:
        return None

    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.ERROR,
        issue=" ".join(reasons),
        explanation=(
            "The server does not handle the OPTIONS preflight correctly. Browsers send "
            "it before the actual request and block the request if it fails."
        ),
        fix=(
            "Answer OPTIONS requests with status 204 and the CORS headers "
            "(Access-Control-Allow-Origin, Access-Control-Allow-Methods, "
            "Access-Control-Allow-Headers)."
        ),
    )
