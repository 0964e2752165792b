"""Use Case: Check Files - lint every discovered test file and collect a report."""

import logging

from expect_assertions_linter.domain.config import ConfigurationLoader
from expect_assertions_linter.domain.entities import FileReport, LintReport
from expect_assertions_linter.domain.errors import SourceParseError
from expect_assertions_linter.domain.protocols import (
    FileSystemProtocol,
    SourceParserProtocol,
    TelemetryPort,
)
from expect_assertions_linter.domain.rules.prefer_expect_assertions import PreferExpectAssertionsRule

logger = logging.getLogger(__name__)


class CheckFilesUseCase:
    """Orchestrate discovery, parsing and the rule; return one FileReport per file."""

    def __init__(
        self,
        parser: SourceParserProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
    ) -> None:
        self.parser = parser
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.rule = PreferExpectAssertionsRule(config_loader.rule_options)

    def execute(self, paths: list[str]) -> LintReport:
        """
        Lint all files under ``paths``.

        Files that cannot be read or parsed are reported with an error and
        skipped; the remaining files are still checked.
        """
        files = self.filesystem.discover(
            paths, self.config_loader.include, self.config_loader.exclude
        )
        self.telemetry.step(f"Checking {len(files)} file(s) for expect.assertions()...")
        reports = [self.check_file(path) for path in files]
        return LintReport(files=reports)

    def check_file(self, path: str) -> FileReport:
        try:
            text = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s", path, exc_info=True)
            self.telemetry.error(f"Cannot read {path}: {exc}")
            return FileReport(path=path, error=f"unreadable: {exc}")
        try:
            return self.check_source(text, path)
        except SourceParseError as exc:
            self.telemetry.warning(f"Skipping {exc}")
            return FileReport(path=path, error=str(exc))

    def check_source(self, text: str, path: str = "<source>") -> FileReport:
        """Lint source text directly. Raises SourceParseError on syntax errors."""
        parsed = self.parser.parse(text, path)
        diagnostics = self.rule.check(parsed)
        logger.debug("%s: %d diagnostic(s)", path, len(diagnostics))
        return FileReport(path=path, diagnostics=diagnostics)
