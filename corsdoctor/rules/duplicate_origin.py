"""Access-Control-Allow-Origin set more than once."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "duplicate-origin-header"


def check_duplicate_origin_header(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    if res.allow_origin_count <= 1:
        return None

    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.ERROR,
        issue=f"Access-Control-Allow-Origin was set {res.allow_origin_count} times.",
        explanation=(
            "Browsers accept exactly one Access-Control-Allow-Origin value and block the "
            "response otherwise. This usually means two layers add CORS headers, for example "
            "a reverse proxy and the application."
        ),
        fix="Set CORS headers in one place only: either the proxy or the application.",
    )
