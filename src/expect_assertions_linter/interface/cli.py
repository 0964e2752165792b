"""CLI entry points - Thin Controller using Typer."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import typer

from expect_assertions_linter.domain.config import ConfigurationLoader
from expect_assertions_linter.domain.errors import ConfigurationError
from expect_assertions_linter.domain.protocols import (
    FileSystemProtocol,
    SourceParserProtocol,
    TelemetryPort,
)
from expect_assertions_linter.domain.rule_msgs import RuleMessages
from expect_assertions_linter.infrastructure.config_file_loader import ConfigFileLoader
from expect_assertions_linter.interface.reporters import AuditReporter
from expect_assertions_linter.use_cases.apply_suggestions import ApplySuggestionsUseCase
from expect_assertions_linter.use_cases.check_files import CheckFilesUseCase

EXIT_FINDINGS = 1
EXIT_USAGE = 2


class OutputFormat(str, Enum):
    """Report format for the check command."""
    TERMINAL = "terminal"
    JSON = "json"


class Preference(str, Enum):
    """Which declaration the fix command inserts into tests that lack one."""
    HAS_ASSERTIONS = "hasAssertions"
    ASSERTIONS = "assertions"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    parser: SourceParserProtocol
    filesystem: FileSystemProtocol
    terminal_reporter: AuditReporter
    json_reporter: AuditReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_paths(paths: list[Path] | None) -> list[str]:
        """Explicit paths as given, else the current directory."""
        if paths:
            return [str(p) for p in paths]
        return ["."]

    @staticmethod
    def resolve_config(
        deps: CLIDependencies,
        config: Path | None,
        only_async: bool | None = None,
    ) -> ConfigurationLoader:
        """Explicit --config replaces the discovered pyproject section; flags override both."""
        loader = deps.config_loader
        if config is not None:
            loader = ConfigurationLoader(ConfigFileLoader.load_config_file(str(config)))
        return loader.with_overrides(only_functions_with_async_keyword=only_async)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="expect-assertions",
            help="Flag JavaScript tests that do not call expect.assertions() or expect.hasAssertions().",
            add_completion=False,
        )

        def _load_config(config: Path | None, only_async: bool | None) -> ConfigurationLoader:
            try:
                return CLIAppFactory.resolve_config(deps, config, only_async)
            except ConfigurationError as exc:
                deps.telemetry.error(str(exc))
                raise typer.Exit(code=EXIT_USAGE) from exc

        def _check_use_case(config_loader: ConfigurationLoader) -> CheckFilesUseCase:
            return CheckFilesUseCase(
                parser=deps.parser,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                config_loader=config_loader,
            )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to lint (default: .)"),  # noqa: B008, RUF100
            only_async: bool | None = typer.Option(
                None,
                "--only-async/--all-tests",
                help="Require declarations only in tests with an async callback.",
            ),
            output_format: OutputFormat = typer.Option(
                OutputFormat.TERMINAL, "--format", "-f", help="Report format"),
            config: Path | None = typer.Option(
                None, "--config", "-c", help="TOML config file (pyproject.toml or a bare options table)"),
        ) -> None:
            """Lint test files and report missing or malformed assertion declarations."""
            config_loader = _load_config(config, only_async)
            if output_format is OutputFormat.TERMINAL:
                deps.telemetry.handshake()
            report = _check_use_case(config_loader).execute(CLIAppFactory.resolve_paths(paths))
            reporter = deps.json_reporter if output_format is OutputFormat.JSON else deps.terminal_reporter
            reporter.report_lint(report)
            if report.has_findings():
                raise typer.Exit(code=EXIT_FINDINGS)
            if report.error_count:
                raise typer.Exit(code=EXIT_USAGE)

        @app.command()
        def fix(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to fix (default: .)"),  # noqa: B008, RUF100
            prefer: Preference = typer.Option(
                Preference.HAS_ASSERTIONS,
                "--prefer",
                help="Declaration to insert into tests that have none.",
            ),
            no_backup: bool = typer.Option(
                False, "--no-backup", help="Skip creating .bak backup files"),
            dry_run: bool = typer.Option(
                False, "--dry-run", help="Report what would change without writing files"),
            config: Path | None = typer.Option(
                None, "--config", "-c", help="TOML config file (pyproject.toml or a bare options table)"),
        ) -> None:
            """Apply the rule's suggestions: insert declarations and strip extra arguments."""
            config_loader = _load_config(config, None)
            deps.telemetry.handshake()
            use_case = ApplySuggestionsUseCase(
                check_use_case=_check_use_case(config_loader),
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
            )
            outcomes = use_case.execute(
                CLIAppFactory.resolve_paths(paths),
                prefer=prefer.value,
                backup=not no_backup,
                dry_run=dry_run,
            )
            deps.terminal_reporter.report_fixes(outcomes, dry_run=dry_run)
            if config_loader.only_functions_with_async_keyword:
                deps.telemetry.warning(
                    "Async-only mode offers no insertions; add expect.assertions(<n>) by hand."
                )

        @app.command()
        def rules() -> None:
            """List diagnostic and suggestion messages."""
            for message_id, text in RuleMessages.catalog().items():
                typer.echo(f"{message_id}: {text}")

        return app
