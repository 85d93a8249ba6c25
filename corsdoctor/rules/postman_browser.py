"""Cross-origin responses that only work outside a browser."""

from typing import Optional

from ..models import Diagnostic, RequestInfo, ResponseInfo, Severity

RULE_ID = "postman-vs-browser"


def check_postman_vs_browser(req: RequestInfo, res: ResponseInfo) -> Optional[Diagnostic]:
    if not req.origin or req.is_preflight or res.allow_origin:
        return None

    return Diagnostic(
        rule=RULE_ID,
        severity=Severity.INFO,
        issue="Cross-origin request got a response without Access-Control-Allow-Origin.",
        explanation=(
            "Postman and curl ignore CORS, so the call looks fine there. Browsers enforce "
            "CORS and will block this response because the header is missing."
        ),
        fix=(
            "Add CORS headers to the response, for example with a CORS middleware that sets "
            "Access-Control-Allow-Origin and the related headers."
        ),
    )
