"""Development-time CORS auditor for HTTP exchanges."""

from .doctor import CorsDoctor, console_sink
from .models import Diagnostic, LogLevel, RequestInfo, ResponseInfo, Severity
from .report import Reporter, render_diagnostics, render_summary
from .request_info import detect_preflight, extract_request_info
from .response_info import extract_response_info
from .rules import ALL_RULES, RULES_BY_ID
from .validate import validate_cors

__all__ = [
    "ALL_RULES",
    "RULES_BY_ID",
    "CorsDoctor",
    "Diagnostic",
    "LogLevel",
    "Reporter",
    "RequestInfo",
    "ResponseInfo",
    "Severity",
    "console_sink",
    "detect_preflight",
    "extract_request_info",
    "extract_response_info",
    "render_diagnostics",
    "render_summary",
    "validate_cors",
]
