"""Domain exceptions. Findings are Diagnostics; these are for broken contracts only."""


class ExpectAssertionsError(Exception):
    """Base class for linter errors."""


class MalformedTreeError(ExpectAssertionsError):
    """The syntax tree is missing a child the grammar guarantees."""

    def __init__(self, node_type: str, expected: str) -> None:
        super().__init__(f"{node_type} node has no '{expected}' child")
        self.node_type = node_type
        self.expected = expected


class SourceParseError(ExpectAssertionsError):
    """The parser reported syntax errors for a source file."""

    def __init__(self, line: int, column: int, path: str | None = None) -> None:
        where = f"{path}:" if path else ""
        super().__init__(f"{where}{line}:{column}: syntax error")
        self.line = line
        self.column = column
        self.path = path


class ConfigurationError(ExpectAssertionsError):
    """An explicitly requested configuration file could not be loaded."""
