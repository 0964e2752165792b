"""Unit tests for TestCallMatcher."""

import unittest

from expect_assertions_linter.domain.config import RuleOptions
from expect_assertions_linter.domain.entities import GroupDefinition, TestDefinition
from expect_assertions_linter.domain.rules.syntax import node_text
from expect_assertions_linter.domain.rules.test_call_matcher import TestCallMatcher
from tests.rule_test_utils import parse


def _call(code: str):
    return parse(code).root.named_children[0].named_children[0]


class TestMatch(unittest.TestCase):
    """Tests for TestCallMatcher.match."""

    def setUp(self) -> None:
        self.matcher = TestCallMatcher(RuleOptions())

    def test_plain_test_is_confirmed(self) -> None:
        definition = self.matcher.match(_call('it("x", () => { run(); })'))
        self.assertIsInstance(definition, TestDefinition)
        self.assertFalse(definition.is_async)
        self.assertEqual(definition.body.type, "statement_block")

    def test_async_marker_is_recorded(self) -> None:
        for code in ('it("x", async () => {})', 'it("x", async function () {})'):
            with self.subTest(code=code):
                definition = self.matcher.match(_call(code))
                self.assertTrue(definition.is_async)

    def test_group_is_confirmed(self) -> None:
        definition = self.matcher.match(_call('describe("g", () => { it("x", () => {}); })'))
        self.assertIsInstance(definition, GroupDefinition)

    def test_callback_is_second_argument(self) -> None:
        definition = self.matcher.match(_call('test("x", () => { go(); }, 5000)'))
        self.assertEqual(node_text(definition.body), "{ go(); }")
        self.assertIsNone(self.matcher.match(_call('test("x", { retry: 2 }, () => { go(); })')))

    def test_modifiers_and_prefixed_aliases(self) -> None:
        for code in ('it.only("x", () => {})', 'test.skip("x", () => {})', 'fit("x", () => {})',
                     'xit("x", () => {})', 'xtest("x", () => {})', 'it.concurrent.each([])("x", () => {})'):
            with self.subTest(code=code):
                self.assertIsInstance(self.matcher.match(_call(code)), TestDefinition)
        for code in ('describe.only("g", () => {})', 'fdescribe("g", () => {})', 'xdescribe("g", () => {})'):
            with self.subTest(code=code):
                self.assertIsInstance(self.matcher.match(_call(code)), GroupDefinition)

    def test_aliases_follow_configured_names(self) -> None:
        matcher = TestCallMatcher(RuleOptions(test_function_names=("specify",)))
        self.assertIsInstance(matcher.match(_call('xspecify.only("x", () => {})')), TestDefinition)
        self.assertIsNone(matcher.match(_call('xit("x", () => {})')))
        self.assertIsNone(matcher.match(_call('yspecify("x", () => {})')))

    def test_stubs_are_not_relevant(self) -> None:
        for code in ('test("todo")', 'it(() => {})', 'it("x", [])', "it()"):
            with self.subTest(code=code):
                self.assertIsNone(self.matcher.match(_call(code)))

    def test_unconfigured_names_are_not_relevant(self) -> None:
        self.assertIsNone(self.matcher.match(_call('itSomething("x", () => {})')))
        self.assertIsNone(self.matcher.match(_call('suite("x", () => {})')))

    def test_tagged_template_call_is_not_relevant(self) -> None:
        self.assertIsNone(self.matcher.match(_call("it`x`")))


class TestIterTestDefinitions(unittest.TestCase):
    """Tests for the worklist traversal."""

    def test_document_order_across_groups(self) -> None:
        code = (
            'it("one", () => {});\n'
            'describe("g", () => {\n'
            '  it("two", () => {});\n'
            '  describe("h", () => { it("three", () => {}); });\n'
            '});\n'
            'it("four", () => {});\n'
        )
        matcher = TestCallMatcher(RuleOptions())
        titles = [
            node_text(t.call.child_by_field_name("arguments").named_children[0])
            for t in matcher.iter_test_definitions(parse(code).root)
        ]
        self.assertEqual(titles, ['"one"', '"two"', '"three"', '"four"'])

    def test_tests_inside_tests_are_not_walked(self) -> None:
        code = 'it("outer", () => { it("inner", () => {}); });'
        definitions = list(TestCallMatcher(RuleOptions()).iter_test_definitions(parse(code).root))
        self.assertEqual(len(definitions), 1)

    def test_many_levels_of_nesting(self) -> None:
        depth = 200
        code = 'describe("g", () => {' * depth + 'it("x", () => {});' + "});" * depth
        definitions = list(TestCallMatcher(RuleOptions()).iter_test_definitions(parse(code).root))
        self.assertEqual(len(definitions), 1)
