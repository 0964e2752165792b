"""Unit tests for the terminal and JSON reporters."""

import io
import json

from rich.console import Console

from expect_assertions_linter.domain.entities import FileReport, FixOutcome, LintReport
from expect_assertions_linter.infrastructure.reporters import JsonAuditReporter, TerminalAuditReporter
from tests.rule_test_utils import run_rule


def _report() -> LintReport:
    return LintReport(
        files=[
            FileReport("tests/[id].test.js", run_rule('it("x", () => {});')),
            FileReport("tests/ok.test.js"),
            FileReport("tests/broken.test.js", error="tests/broken.test.js:1:5: syntax error"),
        ]
    )


def _terminal() -> tuple[TerminalAuditReporter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=300, color_system=None, highlight=False)
    return TerminalAuditReporter(console), buffer


class TestTerminalAuditReporter:

    def test_lint_table_and_summary(self) -> None:
        reporter, buffer = _terminal()
        reporter.report_lint(_report())
        output = buffer.getvalue()
        assert "tests/[id].test.js" in output
        assert "1:1" in output
        assert "haveExpectAssertions" in output
        assert "2 suggestion(s)" in output
        assert "1 problem(s) in 3 file(s)." in output
        assert "1 file(s) could not be checked." in output
        assert "tests/broken.test.js:1:5: syntax error" in output

    def test_clean_summary(self) -> None:
        reporter, buffer = _terminal()
        reporter.report_lint(LintReport(files=[FileReport("a.test.js")]))
        assert "No missing assertion declarations in 1 file(s)." in buffer.getvalue()

    def test_manual_fix_marker(self) -> None:
        reporter, buffer = _terminal()
        diagnostics = run_rule('it("x", () => { expect.assertions("2"); });')
        reporter.report_lint(LintReport(files=[FileReport("a.test.js", diagnostics)]))
        assert "Manual" in buffer.getvalue()

    def test_fixes_table(self) -> None:
        reporter, buffer = _terminal()
        reporter.report_fixes([FixOutcome("a.test.js", applied=2, skipped=1)], dry_run=True)
        output = buffer.getvalue()
        assert "Suggested fixes (dry run)" in output
        assert "a.test.js" in output

    def test_nothing_to_fix(self) -> None:
        reporter, buffer = _terminal()
        reporter.report_fixes([])
        assert "Nothing to fix." in buffer.getvalue()


class TestJsonAuditReporter:

    def test_lint_document(self) -> None:
        stream = io.StringIO()
        JsonAuditReporter(stream).report_lint(_report())
        data = json.loads(stream.getvalue())
        assert data["summary"] == {"files": 3, "diagnostics": 1, "errors": 1}
        diagnostic = data["files"][0]["diagnostics"][0]
        assert diagnostic["kind"] == "haveExpectAssertions"
        assert (diagnostic["line"], diagnostic["column"]) == (1, 1)
        assert [s["resulting_text"] for s in diagnostic["suggestions"]] == [
            "expect.hasAssertions();",
            "expect.assertions();",
        ]

    def test_fixes_document(self) -> None:
        stream = io.StringIO()
        JsonAuditReporter(stream).report_fixes([FixOutcome("a.test.js", 1, 0)])
        assert json.loads(stream.getvalue()) == {
            "dry_run": False,
            "files": [{"path": "a.test.js", "applied": 1, "skipped": 0}],
        }
