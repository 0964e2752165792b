"""Protocol for lint reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from expect_assertions_linter.domain.entities import FixOutcome, LintReport


class AuditReporter(Protocol):
    """Protocol for reporting lint results and fix outcomes."""

    def report_lint(self, report: "LintReport") -> None:
        """Report diagnostics for every checked file."""
        ...

    def report_fixes(self, outcomes: "list[FixOutcome]", dry_run: bool = False) -> None:
        """Report what the fix command changed (or would change)."""
        ...
