"""Wildcard Allow-Origin combined with Allow-Credentials."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "wildcard-with-credentials"


def check_wildcard_with_credentials(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    """Access-Control-Allow-Origin: * is never valid together with Allow-Credentials: true."""
    if res.allow_origin != "*" or not res.allow_credentials:
        return None

    if req.origin:
        fix = f'Replace "*" with the exact origin: "{req.origin}".'
    else:
        fix = 'Replace "*" with the requesting origin, echoed dynamically.'
    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.ERROR,
        issue='Server allows credentials but responded with the wildcard origin "*".',
        explanation=(
            "Browsers refuse credentialed responses (cookies, Authorization header) "
            'when Access-Control-Allow-Origin is "*". The response will be blocked.'
        ),
        fix=fix,
    )
