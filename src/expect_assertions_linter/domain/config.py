"""Configuration for the linter. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from expect_assertions_linter.domain.constants import (
    DEFAULT_EXCLUDE,
    DEFAULT_GROUP_FUNCTION_NAMES,
    DEFAULT_INCLUDE,
    DEFAULT_TEST_FUNCTION_NAMES,
)

logger = logging.getLogger(__name__)

# Canonical key -> accepted spellings. camelCase mirrors the rule option names.
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "only_functions_with_async_keyword": (
        "only_functions_with_async_keyword",
        "onlyFunctionsWithAsyncKeyword",
    ),
    "test_function_names": ("test_function_names", "testFunctionNames"),
    "group_function_names": ("group_function_names", "groupFunctionNames"),
    "include": ("include",),
    "exclude": ("exclude",),
}


@dataclass(frozen=True)
class RuleOptions:
    """Options the rule itself reads."""
    only_functions_with_async_keyword: bool = False
    test_function_names: tuple[str, ...] = DEFAULT_TEST_FUNCTION_NAMES
    group_function_names: tuple[str, ...] = DEFAULT_GROUP_FUNCTION_NAMES


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the ``[tool.expect-assertions]`` table.
    Domain does not read the filesystem; Infrastructure calls
    ConfigFileLoader.load_config_from_fs() and constructs
    ConfigurationLoader(config_dict) at the composition root.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config = self.normalize_keys(config_dict or {})
        if self._config:
            self.validate_config(self._config)

    @staticmethod
    def normalize_keys(raw: dict[str, object]) -> dict[str, object]:
        """Map camelCase and snake_case spellings to canonical keys; warn on unknown keys."""
        normalized: dict[str, object] = {}
        for key, value in raw.items():
            for canonical, spellings in _KEY_ALIASES.items():
                if key in spellings:
                    normalized[canonical] = value
                    break
            else:
                logger.warning("Configuration Warning: unknown option '%s' ignored.", key)
        return normalized

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values. Bad values are reported and replaced by defaults."""
        flag = config.get("only_functions_with_async_keyword")
        if flag is not None and not isinstance(flag, bool):
            logger.warning(
                "Configuration Warning: 'onlyFunctionsWithAsyncKeyword' must be a boolean, got %r.",
                flag,
            )
        for key in ("test_function_names", "group_function_names", "include", "exclude"):
            value = config.get(key)
            if value is not None and not self._is_string_list(value):
                logger.warning(
                    "Configuration Warning: '%s' must be a list of strings, got %r.", key, value
                )

    @staticmethod
    def _is_string_list(value: object) -> bool:
        return isinstance(value, list) and all(isinstance(x, str) for x in value)

    def _string_list(self, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        value = self._config.get(key)
        if value is not None and self._is_string_list(value):
            return tuple(value)  # type: ignore[arg-type]
        return default

    def with_overrides(self, **overrides: object) -> "ConfigurationLoader":
        """Return a new loader with CLI overrides applied. ``None`` values are ignored."""
        merged = dict(self._config)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return ConfigurationLoader(merged)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def only_functions_with_async_keyword(self) -> bool:
        """Require declarations only in tests whose callback is ``async``."""
        value = self._config.get("only_functions_with_async_keyword", False)
        return value if isinstance(value, bool) else False

    @property
    def test_function_names(self) -> tuple[str, ...]:
        """Base identifiers that define a test; ``it`` also covers ``it.only``, ``fit`` and ``xit``."""
        return self._string_list("test_function_names", DEFAULT_TEST_FUNCTION_NAMES)

    @property
    def group_function_names(self) -> tuple[str, ...]:
        """Base identifiers that define a group of tests, with the same modifiers and aliases."""
        return self._string_list("group_function_names", DEFAULT_GROUP_FUNCTION_NAMES)

    @property
    def include(self) -> tuple[str, ...]:
        """Glob patterns selecting test files inside a directory."""
        return self._string_list("include", DEFAULT_INCLUDE)

    @property
    def exclude(self) -> tuple[str, ...]:
        """Path fragments to skip, e.g. node_modules."""
        return self._string_list("exclude", DEFAULT_EXCLUDE)

    @property
    def rule_options(self) -> RuleOptions:
        return RuleOptions(
            only_functions_with_async_keyword=self.only_functions_with_async_keyword,
            test_function_names=self.test_function_names,
            group_function_names=self.group_function_names,
        )
