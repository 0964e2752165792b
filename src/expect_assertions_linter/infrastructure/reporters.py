"""Reporters: rich tables for terminals, JSON for tools."""

import json
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from expect_assertions_linter.domain.entities import FixOutcome, LintReport
from expect_assertions_linter.interface.reporters import AuditReporter


class TerminalAuditReporter(AuditReporter):
    """Terminal reporter using rich tables, one table per file with findings."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def report_lint(self, report: LintReport) -> None:
        for file_report in report.files:
            if file_report.error is not None:
                self.console.print(f"[bold red]✗[/] {escape(file_report.path)}: {escape(file_report.error)}")
                continue
            if not file_report.diagnostics:
                continue
            table = Table(title=escape(file_report.path), title_justify="left", header_style="bold #F9A602")
            table.add_column("Location", style="#00EEFF", no_wrap=True)
            table.add_column("Rule", style="#C41E3A")
            table.add_column("Fix?")
            table.add_column("Message")
            for diagnostic in file_report.diagnostics:
                fix = f"{len(diagnostic.suggestions)} suggestion(s)" if diagnostic.suggestions else "⚠️ Manual"
                table.add_row(
                    f"{diagnostic.line}:{diagnostic.column}",
                    diagnostic.kind,
                    fix,
                    escape(diagnostic.message),
                )
            self.console.print(table)
        self._summary(report)

    def _summary(self, report: LintReport) -> None:
        if report.has_findings():
            self.console.print(
                f"\n[bold red]{report.diagnostic_count} problem(s)[/] in {len(report.files)} file(s)."
            )
        else:
            self.console.print(f"\n✅ No missing assertion declarations in {len(report.files)} file(s).")
        if report.error_count:
            self.console.print(f"[yellow]{report.error_count} file(s) could not be checked.[/]")

    def report_fixes(self, outcomes: list[FixOutcome], dry_run: bool = False) -> None:
        if not outcomes:
            self.console.print("Nothing to fix.")
            return
        table = Table(
            title="Suggested fixes (dry run)" if dry_run else "Applied fixes",
            title_justify="left",
            header_style="bold #007BFF",
        )
        table.add_column("File")
        table.add_column("Applied", justify="right")
        table.add_column("Skipped", justify="right")
        for outcome in outcomes:
            table.add_row(escape(outcome.path), str(outcome.applied), str(outcome.skipped))
        self.console.print(table)


class JsonAuditReporter(AuditReporter):
    """Writes one JSON document per run."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def report_lint(self, report: LintReport) -> None:
        json.dump(report.to_dict(), self.stream, indent=2)
        self.stream.write("\n")

    def report_fixes(self, outcomes: list[FixOutcome], dry_run: bool = False) -> None:
        payload = {
            "dry_run": dry_run,
            "files": [
                {"path": o.path, "applied": o.applied, "skipped": o.skipped}
                for o in outcomes
            ],
        }
        json.dump(payload, self.stream, indent=2)
        self.stream.write("\n")
