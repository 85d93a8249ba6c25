"""Allow-Origin that names a different origin than the one that asked."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "origin-mismatch"


def check_origin_mismatch(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    if not req.origin or not res.allow_origin or res.allow_origin == "*":
        return None
    if req.origin == res.allow_origin:
        return None

    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.ERROR,
        issue=(
            f'Request origin "{req.origin}" does not match '
            f'Access-Control-Allow-Origin "{res.allow_origin}".'
        ),
        explanation=(
            "The browser compares the request's Origin header with the "
            "Access-Control-Allow-Origin value exactly. If they differ, the response is blocked."
        ),
        fix=(
            "Set Access-Control-Allow-Origin to the requesting origin after checking it "
            "against an allowlist, and send Vary: Origin with it."
        ),
    )
