"""Echoed origins that caches cannot tell apart."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "missing-vary-origin"


def check_missing_vary_origin(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    """A specific Allow-Origin needs Vary: Origin, or a shared cache may serve it to other origins."""
    if not res.allow_origin or res.allow_origin == "*":
        return None
    if "origin" in res.vary:
        return None

    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.WARN,
        issue=(
            f'Access-Control-Allow-Origin is "{res.allow_origin}" but the response has no '
            "Vary: Origin header."
        ),
        explanation=(
            "Without Vary: Origin, a CDN or proxy can cache this response and replay it to "
            "requests from other origins, which then see the wrong Allow-Origin value."
        ),
        fix="Add Origin to the Vary header whenever Access-Control-Allow-Origin is set dynamically.",
    )
