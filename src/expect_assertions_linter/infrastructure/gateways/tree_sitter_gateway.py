"""Tree-sitter gateway: parse JavaScript test sources."""

import logging

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from expect_assertions_linter.domain.entities import ParsedSource
from expect_assertions_linter.domain.errors import SourceParseError
from expect_assertions_linter.domain.protocols import SourceParserProtocol

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())


class TreeSitterGateway(SourceParserProtocol):
    """Parses JavaScript with the tree-sitter-javascript grammar (JSX included)."""

    def __init__(self) -> None:
        self._parser = Parser(JS_LANGUAGE)

    def parse(self, text: str, path: str = "<source>") -> ParsedSource:
        source = text.encode("utf-8")
        tree = self._parser.parse(source)
        if tree.root_node.has_error:
            node = self.first_error(tree.root_node)
            line = node.start_point[0] + 1 if node is not None else 1
            column = node.start_point[1] + 1 if node is not None else 1
            logger.debug("Syntax error in %s at %d:%d", path, line, column)
            raise SourceParseError(line, column, path)
        return ParsedSource(path=path, source=source, tree=tree)

    @staticmethod
    def first_error(root: Node) -> Node | None:
        """First ERROR or MISSING node in document order."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node
            stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
        return None
