"""Preflights that cannot be cached."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "missing-max-age"


def check_missing_max_age(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    if not req.is_preflight:
        return None
    if res.max_age is not None and res.max_age > 0:
        return None

    if res.max_age is None:
        issue = "Preflight response has no Access-Control-Max-Age header."
    else:
        issue = f"Access-Control-Max-Age is set to {res.max_age}, so the preflight is never cached."
    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.WARN,
        issue=issue,
        explanation=(
            "Without a positive max-age the browser repeats the OPTIONS preflight before "
            "every cross-origin request, doubling round trips."
        ),
        fix="Set Access-Control-Max-Age to a positive number of seconds, e.g. 600 or 86400.",
    )
