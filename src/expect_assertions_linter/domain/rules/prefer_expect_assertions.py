"""prefer-expect-assertions: every test body declares how many assertions it runs."""

from tree_sitter import Node

from expect_assertions_linter.domain import constants
from expect_assertions_linter.domain.config import RuleOptions
from expect_assertions_linter.domain.entities import (
    Diagnostic,
    ParsedSource,
    Suggestion,
    TestDefinition,
)
from expect_assertions_linter.domain.rule_msgs import RuleMessages
from expect_assertions_linter.domain.rules import Checkable
from expect_assertions_linter.domain.rules.assertion_arguments import (
    AssertionArgumentValidator,
    AssertionDeclarationReader,
)
from expect_assertions_linter.domain.rules.suggestions import SuggestionFactory
from expect_assertions_linter.domain.rules.syntax import span_of
from expect_assertions_linter.domain.rules.test_call_matcher import TestCallMatcher


class PreferExpectAssertionsRule(Checkable):
    """
    Body Analyzer & Fixer.

    For each test found by the matcher:

    * no ``expect.assertions``/``expect.hasAssertions`` statement in the
      top-level body -> ``haveExpectAssertions`` on the test call, with two
      insertion suggestions (none when only async tests are checked);
    * a declaration is present -> its arguments are validated, whatever the
      async setting says.

    Declaration statements outside recognized tests are validated too.
    Diagnostics are returned ordered by anchor position.
    """

    name: str = constants.RULE_NAME
    description: str = "Suggest using expect.assertions() or expect.hasAssertions()"

    def __init__(self, options: RuleOptions | None = None) -> None:
        self.options = options or RuleOptions()
        self.matcher = TestCallMatcher(self.options)
        self.validator = AssertionArgumentValidator()

    def check(self, parsed: ParsedSource) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        validated: set[tuple[int, int]] = set()
        for test in self.matcher.iter_test_definitions(parsed.root):
            diagnostics.extend(self._analyze(test, parsed.source, validated))
        diagnostics.extend(self._validate_remaining_declarations(parsed, validated))
        diagnostics.sort(key=lambda d: (d.span.start, d.span.end))
        return diagnostics

    def analyze(self, test: TestDefinition, source: bytes) -> list[Diagnostic]:
        """Diagnostics for a single test body."""
        return self._analyze(test, source, set())

    def _analyze(
        self,
        test: TestDefinition,
        source: bytes,
        validated: set[tuple[int, int]],
    ) -> list[Diagnostic]:
        declaration = AssertionDeclarationReader.first_in_body(test.body)
        if declaration is None:
            if self._exempt(test):
                return []
            return [self._missing_declaration(test, source)]
        validated.add((declaration.call.start_byte, declaration.call.end_byte))
        diagnostic = self.validator.validate(declaration, source)
        return [diagnostic] if diagnostic is not None else []

    def _exempt(self, test: TestDefinition) -> bool:
        return self.options.only_functions_with_async_keyword and not test.is_async

    def _missing_declaration(self, test: TestDefinition, source: bytes) -> Diagnostic:
        kind = constants.HAVE_EXPECT_ASSERTIONS
        if self.options.only_functions_with_async_keyword:
            # Async-only mode reports without offering a fix.
            suggestions: tuple[Suggestion, ...] = ()
        else:
            suggestions = SuggestionFactory.adding_declarations(test.body)
        return Diagnostic(
            kind=kind,
            message=RuleMessages.get(kind),
            span=span_of(test.call, source),
            suggestions=suggestions,
        )

    def _validate_remaining_declarations(
        self,
        parsed: ParsedSource,
        validated: set[tuple[int, int]],
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        stack: list[Node] = [parsed.root]
        while stack:
            node = stack.pop()
            if node.type == "expression_statement":
                declaration = AssertionDeclarationReader.from_statement(node)
                if declaration is not None:
                    key = (declaration.call.start_byte, declaration.call.end_byte)
                    if key not in validated:
                        validated.add(key)
                        diagnostic = self.validator.validate(declaration, parsed.source)
                        if diagnostic is not None:
                            diagnostics.append(diagnostic)
            stack.extend(reversed(node.named_children))
        return diagnostics
