"""Unit tests for ApplySuggestionsUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from expect_assertions_linter.domain.config import ConfigurationLoader
from expect_assertions_linter.domain.entities import Diagnostic, Span, Suggestion, TextEdit
from expect_assertions_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from expect_assertions_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from expect_assertions_linter.use_cases.apply_suggestions import ApplySuggestionsUseCase
from expect_assertions_linter.use_cases.check_files import CheckFilesUseCase
from tests.rule_test_utils import run_rule, write_js

SOURCE = """\
describe("math", () => {
  it("adds", () => {
    expect(1 + 1).toBe(2);
  });
  it("counts", () => {
    expect.assertions(1, 2);
    expect(2).toBe(2);
  });
  test("waits", async () => {
    expect.hasAssertions(done);
    await run();
  });
});
"""

FIXED_HAS = """\
describe("math", () => {
  it("adds", () => {
    expect.hasAssertions();expect(1 + 1).toBe(2);
  });
  it("counts", () => {
    expect.assertions(1);
    expect(2).toBe(2);
  });
  test("waits", async () => {
    expect.hasAssertions();
    await run();
  });
});
"""


def _use_case(telemetry: MagicMock, filesystem=None) -> ApplySuggestionsUseCase:
    filesystem = filesystem or FileSystemGateway()
    check = CheckFilesUseCase(
        parser=TreeSitterGateway(),
        filesystem=filesystem,
        telemetry=telemetry,
        config_loader=ConfigurationLoader(),
    )
    return ApplySuggestionsUseCase(check_use_case=check, filesystem=filesystem, telemetry=telemetry)


class TestFixSource:

    def test_applies_one_suggestion_per_diagnostic(self) -> None:
        fixed, applied, skipped = ApplySuggestionsUseCase.fix_source(SOURCE, run_rule(SOURCE))
        assert fixed == FIXED_HAS
        assert (applied, skipped) == (3, 0)

    def test_prefer_count_form(self) -> None:
        code = 'it("x", () => {});'
        fixed, applied, _ = ApplySuggestionsUseCase.fix_source(code, run_rule(code), prefer="assertions")
        assert fixed == 'it("x", () => {expect.assertions();});'
        assert applied == 1

    def test_diagnostics_without_suggestions_are_left(self) -> None:
        code = 'it("x", () => { expect.assertions("1"); });'
        fixed, applied, skipped = ApplySuggestionsUseCase.fix_source(code, run_rule(code))
        assert (fixed, applied, skipped) == (code, 0, 0)

    def test_overlapping_edits_are_skipped(self) -> None:
        span = Span(0, 1, 1, 1, 1, 2)

        def diagnostic(start: int, end: int, text: str) -> Diagnostic:
            edit = TextEdit(start, end, text)
            return Diagnostic("k", "m", span, (Suggestion("suggestRemovingExtraArguments", "m", edit),))

        fixed, applied, skipped = ApplySuggestionsUseCase.fix_source(
            "abcdef", [diagnostic(1, 4, "X"), diagnostic(3, 5, "Y"), diagnostic(0, 0, "<")]
        )
        assert fixed == "<abcYf"
        assert (applied, skipped) == (2, 1)

    def test_fixing_is_stable(self) -> None:
        fixed, _, _ = ApplySuggestionsUseCase.fix_source(SOURCE, run_rule(SOURCE))
        assert run_rule(fixed) == []


class TestExecute:

    def test_writes_fixes_with_backup(self, tmp_path: Path, telemetry: MagicMock) -> None:
        target = write_js(tmp_path, "math.test.js", SOURCE)
        write_js(tmp_path, "clean.test.js", 'it("ok", () => { expect.hasAssertions(); });\n')
        outcomes = _use_case(telemetry).execute([str(tmp_path)])
        assert [(Path(o.path).name, o.applied) for o in outcomes] == [("math.test.js", 3)]
        assert target.read_text() == FIXED_HAS
        assert Path(f"{target}.bak").read_text() == SOURCE
        telemetry.step.assert_any_call(f"Fixed 3 issue(s) in {target}")

    def test_no_backup(self, tmp_path: Path, telemetry: MagicMock) -> None:
        target = write_js(tmp_path, "a.test.js", 'it("x", () => {});')
        _use_case(telemetry).execute([str(target)], backup=False)
        assert not Path(f"{target}.bak").exists()
        assert target.read_text() == 'it("x", () => {expect.hasAssertions();});'

    def test_dry_run_leaves_files(self, tmp_path: Path, telemetry: MagicMock) -> None:
        target = write_js(tmp_path, "a.test.js", 'it("x", () => {});')
        [outcome] = _use_case(telemetry).execute([str(target)], dry_run=True)
        assert outcome.fixed_source == 'it("x", () => {expect.hasAssertions();});'
        assert target.read_text() == 'it("x", () => {});'
        assert not Path(f"{target}.bak").exists()

    def test_files_with_errors_are_untouched(self, tmp_path: Path, telemetry: MagicMock) -> None:
        target = write_js(tmp_path, "bad.test.js", "a();\n)\n")
        assert _use_case(telemetry).execute([str(target)]) == []
        assert target.read_text() == "a();\n)\n"

    def test_unknown_preference(self, telemetry: MagicMock) -> None:
        with pytest.raises(ValueError, match="Unknown preference"):
            _use_case(telemetry).execute(["."], prefer="expectAssertions")
