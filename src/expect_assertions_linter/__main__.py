"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os

from expect_assertions_linter.infrastructure.di.container import ExpectAssertionsContainer
from expect_assertions_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    log_level = os.environ.get("EXPECT_ASSERTIONS_LOG_LEVEL")
    if log_level:
        logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    container = ExpectAssertionsContainer()
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        parser=container.get_source_parser(),
        filesystem=container.get_filesystem_gateway(),
        terminal_reporter=container.get_terminal_reporter(),
        json_reporter=container.get_json_reporter(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
