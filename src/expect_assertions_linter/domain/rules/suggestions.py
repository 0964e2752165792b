"""Text-edit synthesis for suggestions. Edits are computed eagerly from node offsets."""

from tree_sitter import Node

from expect_assertions_linter.domain import constants
from expect_assertions_linter.domain.entities import Suggestion, TextEdit
from expect_assertions_linter.domain.rule_msgs import RuleMessages
from expect_assertions_linter.domain.rules.syntax import (
    node_text,
    required_child,
    significant_children,
)


class SuggestionFactory:
    """Builds the Suggestions attached to diagnostics."""

    @staticmethod
    def adding_declarations(body: Node) -> tuple[Suggestion, ...]:
        """Insert ``expect.hasAssertions();`` / ``expect.assertions();`` as the first statement."""
        offset = SuggestionFactory.insertion_offset(body)
        return tuple(
            Suggestion(
                kind=kind,
                message=RuleMessages.get(kind),
                edit=TextEdit(start=offset, end=offset, text=text),
            )
            for kind, text in (
                (constants.SUGGEST_ADDING_HAS_ASSERTIONS, constants.HAS_ASSERTIONS_STATEMENT),
                (constants.SUGGEST_ADDING_ASSERTIONS, constants.ASSERTIONS_STATEMENT),
            )
        )

    @staticmethod
    def insertion_offset(body: Node) -> int:
        """
        Start of the first statement, or just past ``{`` for an empty body.

        Whitespace between the brace and the first statement stays where it is,
        so ``{ foo()}`` becomes ``{ expect.hasAssertions();foo()}``.
        """
        statements = significant_children(body)
        if statements:
            return statements[0].start_byte
        return body.start_byte + 1

    @staticmethod
    def removing_extra_arguments(call: Node, keep: int) -> Suggestion:
        """Rewrite the argument list to its first ``keep`` arguments (0 or 1)."""
        arguments = required_child(call, "arguments")
        kept = significant_children(arguments)[:keep]
        text = "(" + ", ".join(node_text(arg) for arg in kept) + ")"
        kind = constants.SUGGEST_REMOVING_EXTRA_ARGUMENTS
        return Suggestion(
            kind=kind,
            message=RuleMessages.get(kind),
            edit=TextEdit(start=arguments.start_byte, end=arguments.end_byte, text=text),
        )
