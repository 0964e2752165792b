"""Assertion-count declarations: recognition and argument validation."""

from tree_sitter import Node

from expect_assertions_linter.domain import constants
from expect_assertions_linter.domain.entities import (
    AssertionDeclaration,
    DeclarationForm,
    Diagnostic,
)
from expect_assertions_linter.domain.rule_msgs import RuleMessages
from expect_assertions_linter.domain.rules.suggestions import SuggestionFactory
from expect_assertions_linter.domain.rules.syntax import (
    node_text,
    required_child,
    significant_children,
    span_of,
    statement_expression,
    string_value,
    unwrap_parentheses,
)

_FORMS: dict[str, DeclarationForm] = {
    constants.ASSERTIONS_PROPERTY: DeclarationForm.COUNT,
    constants.HAS_ASSERTIONS_PROPERTY: DeclarationForm.PRESENCE,
}


class AssertionDeclarationReader:
    """Recognizes ``expect.assertions(...)`` and ``expect.hasAssertions(...)`` statements."""

    @staticmethod
    def from_statement(statement: Node) -> AssertionDeclaration | None:
        """Return the declaration when the statement is exactly such a call."""
        expression = statement_expression(statement)
        if expression is None or expression.type != "call_expression":
            return None
        return AssertionDeclarationReader.from_call(expression)

    @staticmethod
    def from_call(call: Node) -> AssertionDeclaration | None:
        arguments = required_child(call, "arguments")
        if arguments.type != "arguments":
            return None
        callee = required_child(call, "function")
        accessor = AssertionDeclarationReader._expect_accessor(callee)
        if accessor is None:
            return None
        prop, name = accessor
        form = _FORMS.get(name)
        if form is None:
            return None
        return AssertionDeclaration(
            form=form,
            call=call,
            property=prop,
            arguments=tuple(significant_children(arguments)),
        )

    @staticmethod
    def first_in_body(body: Node) -> AssertionDeclaration | None:
        """First declaration among the top-level statements of a block."""
        for statement in significant_children(body):
            declaration = AssertionDeclarationReader.from_statement(statement)
            if declaration is not None:
                return declaration
        return None

    @staticmethod
    def _expect_accessor(callee: Node) -> tuple[Node, str] | None:
        """(property node, accessed name) for ``expect.x``, ``expect["x"]`` or ``expect[`x`]``."""
        if callee.type == "member_expression":
            obj = required_child(callee, "object")
            prop = required_child(callee, "property")
            if prop.type != "property_identifier":
                return None
            name: str | None = node_text(prop)
        elif callee.type == "subscript_expression":
            obj = required_child(callee, "object")
            prop = required_child(callee, "index")
            name = string_value(prop)
        else:
            return None
        if obj.type != "identifier" or node_text(obj) != constants.EXPECT_OBJECT or name is None:
            return None
        return prop, name


class AssertionArgumentValidator:
    """
    Checks a declaration's arguments.

    Count form needs exactly one numeric literal; presence form needs none.
    Each declaration yields at most one diagnostic.
    """

    def validate(self, declaration: AssertionDeclaration, source: bytes) -> Diagnostic | None:
        if declaration.form is DeclarationForm.PRESENCE:
            return self._validate_presence(declaration, source)
        return self._validate_count(declaration, source)

    def _validate_presence(self, declaration: AssertionDeclaration, source: bytes) -> Diagnostic | None:
        if not declaration.arguments:
            return None
        kind = constants.HAS_ASSERTIONS_TAKES_NO_ARGUMENTS
        return Diagnostic(
            kind=kind,
            message=RuleMessages.get(kind),
            span=span_of(declaration.property, source),
            suggestions=(SuggestionFactory.removing_extra_arguments(declaration.call, keep=0),),
        )

    def _validate_count(self, declaration: AssertionDeclaration, source: bytes) -> Diagnostic | None:
        arguments = declaration.arguments
        if not arguments:
            # Nothing to strip and no count to infer: no suggestion.
            kind = constants.ASSERTIONS_REQUIRES_ONE_ARGUMENT
            return Diagnostic(
                kind=kind,
                message=RuleMessages.get(kind),
                span=span_of(declaration.property, source),
            )
        if len(arguments) > 1:
            kind = constants.ASSERTIONS_REQUIRES_ONE_ARGUMENT
            return Diagnostic(
                kind=kind,
                message=RuleMessages.get(kind),
                span=span_of(arguments[1], source),
                suggestions=(SuggestionFactory.removing_extra_arguments(declaration.call, keep=1),),
            )
        if self.is_numeric_literal(arguments[0]):
            return None
        kind = constants.ASSERTIONS_REQUIRES_NUMBER_ARGUMENT
        return Diagnostic(
            kind=kind,
            message=RuleMessages.get(kind),
            span=span_of(arguments[0], source),
        )

    @staticmethod
    def is_numeric_literal(node: Node) -> bool:
        """Number literals, possibly parenthesized, excluding BigInt (``1n``)."""
        node = unwrap_parentheses(node)
        return node.type == "number" and not node_text(node).endswith("n")
