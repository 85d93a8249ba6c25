"""The analysis pipeline: extract, validate, filter, emit, count."""

import atexit
from typing import Any, Callable, Iterable, Optional

from rich.console import Console

from .config import enabled_rules, load_config
from .models import Diagnostic, LogLevel, RequestInfo, ResponseInfo, Rule, log_level_from_string
from .report import Reporter, render_diagnostics
from .request_info import extract_request_info
from .response_info import extract_response_info
from .rules import ALL_RULES
from .validate import validate_cors

Sink = Callable[[str], None]


def console_sink(console: Optional[Console] = None) -> Sink:
    """Sink that writes rendered text to a rich Console (stderr by default)."""
    console = console or Console(stderr=True)

    def emit(text: str) -> None:
        console.out(text, end="", highlight=False)

    return emit


class CorsDoctor:
    """One pipeline instance.

    Hosts call :meth:`inspect_request` when a request arrives and, if that
    returned a RequestInfo, :meth:`inspect_response` exactly once when the
    response headers are final.
    """

    def __init__(
        self,
        log_level: LogLevel | str = LogLevel.WARN,
        sink: Optional[Sink] = None,
        reporter: Optional[Reporter] = None,
        rules: Iterable[Rule] = ALL_RULES,
        width: int = 100,
    ):
        if not isinstance(log_level, LogLevel):
            log_level = log_level_from_string(log_level)
        self.log_level = log_level
        self.sink = sink or console_sink()
        self.reporter = reporter if reporter is not None else Reporter()
        self.rules = tuple(rules)
        self.width = width
        self._exit_hook_installed = False

    @classmethod
    def from_config(cls, path: str = "corsdoctor.yaml", sink: Optional[Sink] = None) -> "CorsDoctor":
        config = load_config(path)
        doctor = cls(
            log_level=config.get("log_level", "warn"),
            sink=sink,
            rules=enabled_rules(config),
            width=config.get("width", 100),
        )
        if config.get("summary_on_exit", True):
            doctor.install_exit_summary()
        return doctor

    @property
    def enabled(self) -> bool:
        return self.log_level is not LogLevel.SILENT

    def inspect_request(self, method: Optional[str], url: Optional[str], headers: Any) -> Optional[RequestInfo]:
        """RequestInfo for a cross-origin request, or None when there is nothing to analyze."""
        if not self.enabled:
            return None
        req_info = extract_request_info(method, url, headers)
        if not req_info.origin:
            return None
        return req_info

    def inspect_response(self, req_info: RequestInfo, headers: Any, status: int) -> list[Diagnostic]:
        """Snapshot the final response headers and run the full analysis."""
        return self.analyze(req_info, extract_response_info(headers, status))

    def audit_response(self, req_info: RequestInfo, headers: Any, status: int) -> list[Diagnostic]:
        """:meth:`inspect_response` for host hooks.

        A failing rule or sink is recorded on the reporter and the exchange
        continues unanalyzed.
        """
        try:
            return self.inspect_response(req_info, headers, status)
        except Exception as e:
            self.reporter.add_error(f"{req_info.label}: {e}")
            return []

    def analyze(self, req_info: RequestInfo, res_info: ResponseInfo) -> list[Diagnostic]:
        """Validate, count, and emit the diagnostics at or above the log level.

        Returns every diagnostic found, including those below the threshold.
        """
        diagnostics = validate_cors(req_info, res_info, self.rules)
        self.reporter.record(diagnostics)
        shown = [d for d in diagnostics if self.log_level.allows(d.severity)]
        if shown:
            self.sink(render_diagnostics(shown, label=req_info.label, width=self.width))
        return diagnostics

    def emit_summary(self) -> None:
        """Send the aggregate summary to the sink if any exchange was analyzed."""
        if self.reporter.requests_analyzed == 0:
            return
        self.sink(self.reporter.render_summary(width=self.width))

    def install_exit_summary(self) -> None:
        """Print the summary once at interpreter exit."""
        if self._exit_hook_installed:
            return
        atexit.register(self.emit_summary)
        self._exit_hook_installed = True
