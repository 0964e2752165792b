"""Normalize call-expression callees into CalleeShape before any matching runs."""

from tree_sitter import Node

from expect_assertions_linter.domain.constants import CALLEE_MODIFIERS, EACH_PROPERTY
from expect_assertions_linter.domain.entities import CalleeShape
from expect_assertions_linter.domain.rules.syntax import dotted_name, node_text, required_child


class CalleeShapeNormalizer:
    """
    Classifies the callee of a call expression.

    ``it(...)``                    -> Plain("it")
    ``it.only(...)``               -> Plain("it", ("only",))
    ``it.each(t)(...)``            -> EachCall("it")
    ``it.concurrent.each`t`(...)`` -> EachTemplate("it", ("concurrent",))

    Member steps other than ``only``, ``skip`` and ``concurrent`` (and a
    final ``each`` used as a callee) make the callee irrelevant, as do
    computed callees and calls on call results. Those yield None.
    """

    @staticmethod
    def normalize(call: Node) -> CalleeShape | None:
        callee = required_child(call, "function")
        if callee.type == "call_expression":
            return CalleeShapeNormalizer._repetition_shape(callee)
        parts = CalleeShapeNormalizer.split(callee)
        if parts is None:
            return None
        return CalleeShape.plain(*parts)

    @staticmethod
    def split(node: Node) -> tuple[str, tuple[str, ...]] | None:
        """``it.only.concurrent`` -> ("it", ("only", "concurrent")); None for other chains."""
        name = dotted_name(node)
        if name is None:
            return None
        base, *modifiers = name.split(".")
        if not CALLEE_MODIFIERS.issuperset(modifiers):
            return None
        return base, tuple(modifiers)

    @staticmethod
    def _repetition_shape(inner_call: Node) -> CalleeShape | None:
        """Shape of ``<name>.each(...)`` or ``<name>.each`...` `` used as a callee."""
        inner_callee = required_child(inner_call, "function")
        if inner_callee.type != "member_expression":
            return None
        prop = required_child(inner_callee, "property")
        if node_text(prop) != EACH_PROPERTY:
            return None
        parts = CalleeShapeNormalizer.split(required_child(inner_callee, "object"))
        if parts is None:
            return None
        if required_child(inner_call, "arguments").type == "template_string":
            return CalleeShape.each_template(*parts)
        return CalleeShape.each_call(*parts)
