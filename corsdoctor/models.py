"""Data models for CORS snapshots and diagnostics."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class Severity(Enum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.ERROR: 0, Severity.WARN: 1, Severity.INFO: 2}


class LogLevel(Enum):
    """Output threshold. A diagnostic is emitted when its rank <= the level's threshold."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    SILENT = "silent"

    @property
    def threshold(self) -> int:
        if self is LogLevel.SILENT:
            return -1
        return Severity(self.value).rank

    def allows(self, severity: Severity) -> bool:
        return severity.rank <= self.threshold


def log_level_from_string(s: Optional[str]) -> LogLevel:
    return getattr(LogLevel, (s or "").upper(), LogLevel.WARN)


@dataclass(frozen=True)
class RequestInfo:
    """What the browser asked for."""
    origin: Optional[str] = None
    method: str = "GET"
    url: str = "/"
    is_preflight: bool = False
    requested_method: Optional[str] = None
    requested_headers: tuple[str, ...] = ()
    has_credentials: bool = False

    @property
    def label(self) -> str:
        return f"{self.method} {self.url}"


@dataclass(frozen=True)
class ResponseInfo:
    """CORS headers the server is about to send."""
    allow_origin: Optional[str] = None
    allow_origin_count: int = 0
    allow_methods: tuple[str, ...] = ()
    allow_headers: tuple[str, ...] = ()
    allow_credentials: bool = False
    max_age: Optional[int] = None
    vary: tuple[str, ...] = ()
    status: int = 200


@dataclass(frozen=True)
class Diagnostic:
    """A single CORS compliance finding."""
    rule: str
    severity: Severity
    issue: str
    explanation: str
    fix: str

    def to_dict(self) -> dict:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "issue": self.issue,
            "explanation": self.explanation,
            "fix": self.fix,
        }


Rule = Callable[[RequestInfo, ResponseInfo], Optional[Diagnostic]]
