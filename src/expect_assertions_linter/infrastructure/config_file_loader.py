"""Load [tool.expect-assertions] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

from expect_assertions_linter.domain.constants import CONFIG_SECTION
from expect_assertions_linter.domain.errors import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """
    Loads config from pyproject.toml or an explicit TOML file.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from ``start`` (default cwd) to the first pyproject.toml; return its section."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError):
                # An unreadable pyproject.toml is not ours to report; keep looking upward.
                continue
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(CONFIG_SECTION, {}) or {}
            return dict(section) if isinstance(section, dict) else {}
        return {}

    @staticmethod
    def load_config_file(path: str) -> dict[str, object]:
        """
        Load an explicitly requested TOML file.

        A pyproject.toml contributes its ``[tool.expect-assertions]`` table;
        any other file is read as the table itself.
        """
        config_file = Path(path)
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
        except toml_lib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
        if config_file.name == "pyproject.toml":
            section = (data.get("tool", {}) or {}).get(CONFIG_SECTION, {}) or {}
            return dict(section) if isinstance(section, dict) else {}
        return dict(data)
