"""Console telemetry on a rich Console. Implements TelemetryPort."""

import logging

from rich.console import Console
from rich.markup import escape

from expect_assertions_linter.domain.constants import BANNER
from expect_assertions_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Progress and problems go to stderr so reports on stdout stay machine-readable."""

    def __init__(self, project: str, color: str = "green", console: Console | None = None) -> None:
        self.project = project
        self.color = color
        self.console = console or Console(stderr=True, highlight=False)
        self.logger = logging.getLogger(project)
        # Console output already shows these; logging only echoes them when configured.
        self.logger.addHandler(logging.NullHandler())

    @property
    def _label(self) -> str:
        return escape(f"[{self.project}]")

    def handshake(self) -> None:
        self.console.print(BANNER, style=f"bold {self.color}", markup=False)
        self.logger.info(BANNER)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]{self._label}[/] {escape(message)}", soft_wrap=True)
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{self._label} WARNING[/] {escape(message)}", soft_wrap=True)
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]{self._label} ERROR[/] {escape(message)}", soft_wrap=True)
        self.logger.error(message)
