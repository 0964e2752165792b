from typing import Any, cast

from expect_assertions_linter.domain.config import ConfigurationLoader
from expect_assertions_linter.infrastructure.config_file_loader import ConfigFileLoader
from expect_assertions_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from expect_assertions_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from expect_assertions_linter.infrastructure.reporters import JsonAuditReporter, TerminalAuditReporter
from expect_assertions_linter.interface.telemetry import ProjectTelemetry
from expect_assertions_linter.domain.protocols import (
    FileSystemProtocol,
    SourceParserProtocol,
    TelemetryPort,
)
from expect_assertions_linter.interface.reporters import AuditReporter


class ExpectAssertionsContainer:
    """Dependency Injection Container for the linter."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("TelemetryPort", ProjectTelemetry("expect-assertions", "green"))
        self.register_singleton("SourceParser", TreeSitterGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("TerminalReporter", TerminalAuditReporter())
        self.register_singleton("JsonReporter", JsonAuditReporter())

    def register_singleton(self, key: str, instance: object) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise KeyError(f"No registration for {key!r}")
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> TelemetryPort:
        return cast(TelemetryPort, self.get("TelemetryPort"))

    def get_source_parser(self) -> SourceParserProtocol:
        return cast(SourceParserProtocol, self.get("SourceParser"))

    def get_filesystem_gateway(self) -> FileSystemProtocol:
        return cast(FileSystemProtocol, self.get("FileSystemGateway"))

    def get_terminal_reporter(self) -> AuditReporter:
        return cast(AuditReporter, self.get("TerminalReporter"))

    def get_json_reporter(self) -> AuditReporter:
        return cast(AuditReporter, self.get("JsonReporter"))
