"""Small readers over tree-sitter JavaScript nodes shared by the rule modules."""

from tree_sitter import Node

from expect_assertions_linter.domain.entities import Span
from expect_assertions_linter.domain.errors import MalformedTreeError

FUNCTION_TYPES: frozenset[str] = frozenset({"arrow_function", "function_expression", "function"})
_TRIVIA_TYPES: frozenset[str] = frozenset({"comment", "html_comment"})


def required_child(node: Node, field_name: str) -> Node:
    """Return a field child the grammar guarantees; raise if the tree lacks it."""
    child = node.child_by_field_name(field_name)
    if child is None:
        raise MalformedTreeError(node.type, field_name)
    return child


def node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def significant_children(node: Node) -> list[Node]:
    """Named children without comments: statements of a block, arguments of a call."""
    return [child for child in node.named_children if child.type not in _TRIVIA_TYPES]


def call_arguments(call: Node) -> list[Node]:
    """Arguments of a parenthesized call; empty for tagged templates."""
    arguments = required_child(call, "arguments")
    if arguments.type != "arguments":
        return []
    return significant_children(arguments)


def is_function(node: Node) -> bool:
    return node.type in FUNCTION_TYPES


def is_async_function(node: Node) -> bool:
    """True when the function carries the ``async`` marker."""
    return any(child.type == "async" for child in node.children)


def block_body(function: Node) -> Node | None:
    """The ``{ ... }`` body of a function, or None for expression-bodied arrows."""
    body = required_child(function, "body")
    return body if body.type == "statement_block" else None


def statement_expression(statement: Node) -> Node | None:
    """The expression of an expression statement, else None."""
    if statement.type != "expression_statement":
        return None
    children = significant_children(statement)
    if not children:
        raise MalformedTreeError(statement.type, "expression")
    return children[0]


def dotted_name(node: Node) -> str | None:
    """``it`` -> "it", ``it.only`` -> "it.only"; None for anything not a plain member chain."""
    parts: list[str] = []
    current = node
    while current.type == "member_expression":
        prop = required_child(current, "property")
        if prop.type != "property_identifier":
            return None
        parts.append(node_text(prop))
        current = required_child(current, "object")
    if current.type != "identifier":
        return None
    parts.append(node_text(current))
    return ".".join(reversed(parts))


def string_value(node: Node) -> str | None:
    """Value of a plain string literal or substitution-free template (no escapes interpreted)."""
    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.named_children):
            return None
    elif node.type != "string":
        return None
    return node_text(node)[1:-1]


def unwrap_parentheses(node: Node) -> Node:
    """``((1))`` -> ``1``."""
    while node.type == "parenthesized_expression":
        inner = significant_children(node)
        if not inner:
            raise MalformedTreeError(node.type, "expression")
        node = inner[0]
    return node


def span_of(node: Node, source: bytes) -> Span:
    """Span of a node with 1-based, character-counted columns."""
    start_row, start_col = node.start_point[0], node.start_point[1]
    end_row, end_col = node.end_point[0], node.end_point[1]
    return Span(
        start=node.start_byte,
        end=node.end_byte,
        line=start_row + 1,
        column=_char_column(source, node.start_byte, start_col),
        end_line=end_row + 1,
        end_column=_char_column(source, node.end_byte, end_col),
    )


def _char_column(source: bytes, offset: int, byte_column: int) -> int:
    line_prefix = source[offset - byte_column:offset]
    return len(line_prefix.decode("utf-8", errors="replace")) + 1
