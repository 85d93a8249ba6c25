import json
import threading

from corsdoctor.models import Diagnostic, Severity
from corsdoctor.report import Reporter, render_diagnostics, render_summary, write_json


def _diagnostic(rule="test-rule", severity=Severity.ERROR):
    return Diagnostic(
        rule=rule,
        severity=severity,
        issue="Something is wrong.",
        explanation="Because reasons.",
        fix="Do the thing.",
    )


def test_render_empty_is_empty_string():
    assert render_diagnostics([]) == ""


def test_render_includes_every_section():
    output = render_diagnostics([_diagnostic()])
    assert "test-rule" in output
    assert "Issue:" in output
    assert "Something is wrong." in output
    assert "Why this fails:" in output
    assert "Because reasons." in output
    assert "Fix:" in output
    assert "Do the thing." in output


def test_render_includes_label():
    output = render_diagnostics([_diagnostic()], label="GET /api/users")
    assert "GET /api/users" in output


def test_render_without_label():
    assert " on " not in render_diagnostics([_diagnostic()])


def test_render_separates_blocks():
    output = render_diagnostics([_diagnostic("first-rule"), _diagnostic("second-rule", Severity.INFO)])
    assert "first-rule" in output
    assert "second-rule" in output
    assert "-" * 20 in output
    assert output.index("first-rule") < output.index("second-rule")


def test_render_does_not_interpret_markup():
    diagnostic = Diagnostic("bracket-rule", Severity.WARN, "Headers [bold] and [x-custom].", "e", "f")
    output = render_diagnostics([diagnostic])
    assert "[bold]" in output
    assert "[x-custom]" in output


def test_render_is_plain_text():
    assert "\x1b[" not in render_diagnostics([_diagnostic()])


def test_summary_with_issues():
    output = render_summary(10, 3, {"wildcard-with-credentials": 2, "origin-mismatch": 1})
    assert "Requests analyzed: 10" in output
    assert "Requests with issues: 3" in output
    assert "wildcard-with-credentials: 2" in output
    assert "origin-mismatch: 1" in output


def test_summary_without_issues():
    output = render_summary(5, 0, {})
    assert "Requests analyzed: 5" in output
    assert "No CORS issues detected" in output


def test_summary_sorted_by_count_descending():
    output = render_summary(6, 6, {"a-rule": 1, "b-rule": 3, "c-rule": 2})
    assert output.index("b-rule") < output.index("c-rule") < output.index("a-rule")


def test_summary_ties_keep_insertion_order():
    output = render_summary(4, 4, {"z-rule": 2, "a-rule": 2})
    assert output.index("z-rule") < output.index("a-rule")


def test_reporter_counts():
    reporter = Reporter()
    reporter.record([_diagnostic("origin-mismatch"), _diagnostic("missing-vary-origin", Severity.WARN)])
    reporter.record([])
    reporter.record([_diagnostic("origin-mismatch")])
    assert reporter.requests_analyzed == 3
    assert reporter.requests_with_issues == 2
    assert reporter.rule_hits == {"origin-mismatch": 2, "missing-vary-origin": 1}
    assert "origin-mismatch: 2" in reporter.render_summary()


def test_reporter_without_diagnostics():
    reporter = Reporter()
    reporter.record([])
    assert "No CORS issues detected" in reporter.render_summary()


def test_write_json(tmp_path):
    reporter = Reporter()
    reporter.record([_diagnostic("origin-mismatch")])
    path = tmp_path / "out" / "summary.json"
    write_json(reporter, path)
    data = json.loads(path.read_text())
    assert data == {
        "requests_analyzed": 1,
        "requests_with_issues": 1,
        "rule_hits": {"origin-mismatch": 1},
        "errors": [],
    }


def test_diagnostic_to_dict():
    assert _diagnostic().to_dict() == {
        "rule": "test-rule",
        "severity": "error",
        "issue": "Something is wrong.",
        "explanation": "Because reasons.",
        "fix": "Do the thing.",
    }


def test_rule_id_survives_narrow_width():
    diagnostic = _diagnostic("missing-preflight-handling")
    output = render_diagnostics([diagnostic], label="OPTIONS /api/v1/some/very/long/path", width=30)
    assert "missing-preflight-handling" in output


def test_reporter_counts_from_many_threads():
    reporter = Reporter()

    def work():
        for _ in range(200):
            reporter.record([_diagnostic("origin-mismatch")])
            reporter.record([])

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert reporter.requests_analyzed == 3200
    assert reporter.requests_with_issues == 1600
    assert reporter.rule_hits == {"origin-mismatch": 1600}


def test_summary_lists_analysis_errors():
    reporter = Reporter()
    reporter.record([])
    reporter.add_error("GET /: boom")
    assert "Analysis errors: 1" in reporter.render_summary()
    assert reporter.to_dict()["errors"] == ["GET /: boom"]


def test_summary_omits_errors_line_when_clean():
    assert "Analysis errors" not in render_summary(1, 0, {})
