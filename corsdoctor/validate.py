"""Run the CORS rules against one request/response snapshot pair."""

from typing import Iterable

from .models import Diagnostic, RequestInfo, ResponseInfo, Rule
from .rules import ALL_RULES


def validate_cors(
    req: RequestInfo,
    res: ResponseInfo,
    rules: Iterable[Rule] = ALL_RULES,
) -> list[Diagnostic]:
    """Every diagnostic the rules produce, in rule order. No dedup, no short-circuit."""
    diagnostics = []
    for rule in rules:
        diagnostic = rule(req, res)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics
