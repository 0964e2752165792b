from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from expect_assertions_linter.domain.entities import ParsedSource


class SourceParserProtocol(Protocol):
    """Protocol for turning JavaScript source text into a syntax tree."""

    def parse(self, text: str, path: str = "<source>") -> "ParsedSource":
        """Parse source text. Raises SourceParseError when the tree has syntax errors."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def discover(
        self,
        paths: list[str],
        include: tuple[str, ...],
        exclude: tuple[str, ...],
    ) -> list[str]:
        """Expand files and directories into a sorted list of source files."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def backup(self, path: str) -> str:
        """Copy a file to ``<path>.bak``; return the backup path."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...
