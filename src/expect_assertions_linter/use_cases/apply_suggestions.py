"""Use Case: Apply Suggestions - write the rule's suggested edits back to files."""

import logging

from expect_assertions_linter.domain import constants
from expect_assertions_linter.domain.entities import Diagnostic, FixOutcome, Suggestion, TextEdit
from expect_assertions_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from expect_assertions_linter.use_cases.check_files import CheckFilesUseCase

logger = logging.getLogger(__name__)

PREFERENCES: dict[str, str] = {
    "hasAssertions": constants.SUGGEST_ADDING_HAS_ASSERTIONS,
    "assertions": constants.SUGGEST_ADDING_ASSERTIONS,
}


class ApplySuggestionsUseCase:
    """Apply one suggestion per diagnostic, preferring the configured insertion kind."""

    def __init__(
        self,
        check_use_case: CheckFilesUseCase,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self.check_use_case = check_use_case
        self.filesystem = filesystem
        self.telemetry = telemetry

    def execute(
        self,
        paths: list[str],
        prefer: str = "hasAssertions",
        backup: bool = True,
        dry_run: bool = False,
    ) -> list[FixOutcome]:
        """Fix every file under ``paths``. Files with errors are left untouched."""
        if prefer not in PREFERENCES:
            raise ValueError(f"Unknown preference {prefer!r}; expected one of {sorted(PREFERENCES)}")
        report = self.check_use_case.execute(paths)
        outcomes: list[FixOutcome] = []
        for file_report in report.files:
            if file_report.error is not None or not file_report.diagnostics:
                continue
            text = self.filesystem.read_text(file_report.path)
            fixed, applied, skipped = self.fix_source(text, file_report.diagnostics, prefer)
            if applied and not dry_run:
                if backup:
                    self.filesystem.backup(file_report.path)
                self.filesystem.write_text(file_report.path, fixed)
                self.telemetry.step(f"Fixed {applied} issue(s) in {file_report.path}")
            outcomes.append(
                FixOutcome(
                    path=file_report.path,
                    applied=applied,
                    skipped=skipped,
                    fixed_source=fixed if applied else None,
                )
            )
        return outcomes

    @staticmethod
    def choose(diagnostic: Diagnostic, prefer: str = "hasAssertions") -> Suggestion | None:
        """The suggestion to apply for a diagnostic, if any."""
        preferred = diagnostic.suggestion(PREFERENCES[prefer])
        if preferred is not None:
            return preferred
        return diagnostic.suggestion(constants.SUGGEST_REMOVING_EXTRA_ARGUMENTS)

    @staticmethod
    def fix_source(
        text: str,
        diagnostics: list[Diagnostic],
        prefer: str = "hasAssertions",
    ) -> tuple[str, int, int]:
        """
        Apply chosen edits from the end of the file backward.

        Returns (fixed text, applied count, skipped count). Edits overlapping an
        accepted edit are skipped; re-running the fix picks them up.
        """
        edits: list[TextEdit] = []
        for diagnostic in diagnostics:
            suggestion = ApplySuggestionsUseCase.choose(diagnostic, prefer)
            if suggestion is not None:
                edits.append(suggestion.edit)
        edits.sort(key=lambda e: (e.start, e.end), reverse=True)
        source = text.encode("utf-8")
        applied = skipped = 0
        boundary = len(source)
        for edit in edits:
            if edit.end > boundary:
                logger.debug("Skipping overlapping edit at %d-%d", edit.start, edit.end)
                skipped += 1
                continue
            source = edit.apply(source)
            boundary = edit.start
            applied += 1
        return source.decode("utf-8"), applied, skipped
