"""Unit tests for ConfigurationLoader."""

import logging

import pytest

from expect_assertions_linter.domain.config import ConfigurationLoader, RuleOptions
from expect_assertions_linter.domain.constants import DEFAULT_EXCLUDE, DEFAULT_INCLUDE


class TestDefaults:

    def test_empty_config(self) -> None:
        loader = ConfigurationLoader()
        assert loader.config == {}
        assert loader.only_functions_with_async_keyword is False
        assert loader.test_function_names == ("it", "test")
        assert loader.group_function_names == ("describe",)
        assert loader.include == DEFAULT_INCLUDE
        assert loader.exclude == DEFAULT_EXCLUDE
        assert loader.rule_options == RuleOptions()


class TestKeys:

    def test_camel_case_keys(self) -> None:
        loader = ConfigurationLoader({"onlyFunctionsWithAsyncKeyword": True, "testFunctionNames": ["specify"]})
        assert loader.only_functions_with_async_keyword is True
        assert loader.test_function_names == ("specify",)

    def test_snake_case_keys(self) -> None:
        loader = ConfigurationLoader({"group_function_names": ["context", "describe"]})
        assert loader.rule_options.group_function_names == ("context", "describe")

    def test_unknown_key_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            loader = ConfigurationLoader({"onlyAsync": True})
        assert "unknown option 'onlyAsync'" in caplog.text
        assert loader.config == {}


class TestValidation:

    def test_non_bool_flag_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            loader = ConfigurationLoader({"onlyFunctionsWithAsyncKeyword": "yes"})
        assert loader.only_functions_with_async_keyword is False
        assert "must be a boolean" in caplog.text

    @pytest.mark.parametrize("value", ["it", ["it", 3], 5])
    def test_bad_name_list_falls_back(self, value: object, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            loader = ConfigurationLoader({"test_function_names": value})
        assert loader.test_function_names == ("it", "test")
        assert "must be a list of strings" in caplog.text


class TestOverrides:

    def test_with_overrides_returns_new_loader(self) -> None:
        base = ConfigurationLoader({"include": ["**/*.js"]})
        merged = base.with_overrides(only_functions_with_async_keyword=True)
        assert merged is not base
        assert merged.only_functions_with_async_keyword is True
        assert merged.include == ("**/*.js",)
        assert base.only_functions_with_async_keyword is False

    def test_none_override_keeps_file_value(self) -> None:
        base = ConfigurationLoader({"onlyFunctionsWithAsyncKeyword": True})
        assert base.with_overrides(only_functions_with_async_keyword=None).only_functions_with_async_keyword

    def test_false_override_wins(self) -> None:
        base = ConfigurationLoader({"onlyFunctionsWithAsyncKeyword": True})
        merged = base.with_overrides(only_functions_with_async_keyword=False)
        assert merged.only_functions_with_async_keyword is False
