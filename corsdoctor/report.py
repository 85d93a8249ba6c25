"""Report rendering (text blocks and summary) and aggregate counters."""

import io
import json
import threading
from pathlib import Path
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .models import Diagnostic, Severity

SEVERITY_ICON = {
    Severity.ERROR: "❌",
    Severity.WARN: "⚠️",
    Severity.INFO: "ℹ️",
}

# Narrower panels truncate the title, which carries the rule id.
MIN_WIDTH = 60

SEVERITY_STYLE = {
    Severity.ERROR: "red bold",
    Severity.WARN: "yellow",
    Severity.INFO: "blue",
}


def _capture_console(width: int) -> Console:
    # Plain text only; the sink decides where it goes.
    return Console(
        file=io.StringIO(),
        width=max(width, MIN_WIDTH),
        color_system=None,
        force_terminal=False,
        highlight=False,
        emoji=False,
    )


def _diagnostic_panel(diagnostic: Diagnostic, label: Optional[str]) -> Panel:
    title = f"{SEVERITY_ICON[diagnostic.severity]}  CORS Doctor [{diagnostic.rule}]"
    if label:
        title += f" on {label}"
    body = Text()
    body.append("Issue:\n", style="bold")
    body.append(f"  {diagnostic.issue}\n\n")
    body.append("Why this fails:\n", style="bold")
    body.append(f"  {diagnostic.explanation}\n\n")
    body.append("Fix:\n", style="bold")
    body.append(f"  {diagnostic.fix}")
    return Panel(
        body,
        title=Text(title, style=SEVERITY_STYLE[diagnostic.severity]),
        title_align="left",
        box=box.ROUNDED,
        border_style="bright_black",
    )


def render_diagnostics(
    diagnostics: Iterable[Diagnostic],
    label: Optional[str] = None,
    width: int = 100,
) -> str:
    """One block per diagnostic, separated by a horizontal line. Empty input gives ""."""
    diagnostics = list(diagnostics)
    if not diagnostics:
        return ""
    console = _capture_console(width)
    for i, diagnostic in enumerate(diagnostics):
        if i:
            console.rule(characters="-", style="dim")
        console.print(_diagnostic_panel(diagnostic, label))
    return console.file.getvalue()


def render_summary(
    requests_analyzed: int,
    requests_with_issues: int,
    rule_hits: dict[str, int],
    width: int = 100,
    errors: int = 0,
) -> str:
    """Summary block. Rules are listed by hit count, highest first; ties keep insertion order."""
    body = Text()
    body.append(f"Requests analyzed: {requests_analyzed}\n")
    body.append(f"Requests with issues: {requests_with_issues}")
    if errors:
        body.append(f"\nAnalysis errors: {errors}", style="red")
    if not rule_hits:
        body.append("\n\nNo CORS issues detected.", style="green")
    else:
        body.append("\n\nIssues by rule:", style="bold")
        for rule, count in sorted(rule_hits.items(), key=lambda item: -item[1]):
            body.append(f"\n  {rule}: {count}")
    console = _capture_console(width)
    console.print(Panel(body, title="CORS Doctor Summary", title_align="left", border_style="blue"))
    return console.file.getvalue()


class Reporter:
    """Running counters for one pipeline instance.

    Counters only go up. A lock guards them because WSGI servers and
    ``requests`` sessions may analyze exchanges from several threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.requests_analyzed = 0
        self.requests_with_issues = 0
        self.rule_hits: dict[str, int] = {}
        self.errors: list[str] = []

    def record(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Count one analyzed exchange and the diagnostics it produced."""
        diagnostics = list(diagnostics)
        with self._lock:
            self.requests_analyzed += 1
            if diagnostics:
                self.requests_with_issues += 1
            for d in diagnostics:
                self.rule_hits[d.rule] = self.rule_hits.get(d.rule, 0) + 1

    def add_error(self, error: str) -> None:
        with self._lock:
            self.errors.append(error)

    def render_summary(self, width: int = 100) -> str:
        with self._lock:
            return render_summary(
                self.requests_analyzed,
                self.requests_with_issues,
                dict(self.rule_hits),
                width=width,
                errors=len(self.errors),
            )

    def to_dict(self) -> dict:
        with self._lock:
            return {
                "requests_analyzed": self.requests_analyzed,
                "requests_with_issues": self.requests_with_issues,
                "rule_hits": dict(self.rule_hits),
                "errors": list(self.errors),
            }


def write_json(reporter: Reporter, path: str | Path) -> None:
    """Write the reporter's counters to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(reporter.to_dict(), f, indent=2)
