from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict

from tree_sitter import Node, Tree


class CalleeKind(Enum):
    """How a test or group function is invoked."""
    PLAIN = "plain"                  # it('title', fn)
    EACH_CALL = "each_call"          # it.each(table)('title', fn)
    EACH_TEMPLATE = "each_template"  # it.each`table`('title', fn)


@dataclass(frozen=True)
class CalleeShape:
    """
    Normalized callee of a call expression.

    ``name`` is the base identifier (``it`` for ``it.only.each``);
    ``modifiers`` are the ``only``/``skip``/``concurrent`` steps between the
    base and the call or ``.each``. The raw tree shape is read once, when the
    shape is built.
    """
    kind: CalleeKind
    name: str
    modifiers: tuple[str, ...] = ()

    @classmethod
    def plain(cls, name: str, modifiers: tuple[str, ...] = ()) -> "CalleeShape":
        return cls(kind=CalleeKind.PLAIN, name=name, modifiers=modifiers)

    @classmethod
    def each_call(cls, name: str, modifiers: tuple[str, ...] = ()) -> "CalleeShape":
        return cls(kind=CalleeKind.EACH_CALL, name=name, modifiers=modifiers)

    @classmethod
    def each_template(cls, name: str, modifiers: tuple[str, ...] = ()) -> "CalleeShape":
        return cls(kind=CalleeKind.EACH_TEMPLATE, name=name, modifiers=modifiers)


class DeclarationForm(Enum):
    """The two accepted shapes of an assertion-count declaration."""
    COUNT = "assertions"
    PRESENCE = "hasAssertions"


@dataclass(frozen=True)
class Span:
    """Source range: byte offsets for edits, 1-based character line/column for humans."""
    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int


@dataclass(frozen=True)
class TestDefinition:
    """A confirmed test call with a block-bodied callback."""
    __test__ = False

    call: Node
    shape: CalleeShape
    callback: Node
    body: Node
    is_async: bool


@dataclass(frozen=True)
class GroupDefinition:
    """A confirmed group call whose callback body may hold more definitions."""
    call: Node
    shape: CalleeShape
    callback: Node
    body: Node


@dataclass(frozen=True)
class AssertionDeclaration:
    """A statement-level ``expect.assertions(...)`` or ``expect.hasAssertions(...)`` call."""
    form: DeclarationForm
    call: Node
    property: Node
    arguments: tuple[Node, ...]


@dataclass(frozen=True)
class TextEdit:
    """Replace ``source[start:end]`` (byte offsets) with ``text``."""
    start: int
    end: int
    text: str

    def apply(self, source: bytes) -> bytes:
        """Return source with this edit applied."""
        return source[:self.start] + self.text.encode("utf-8") + source[self.end:]


class SuggestionDict(TypedDict):
    """Serialization shape for Suggestion."""
    kind: str
    message: str
    start: int
    end: int
    resulting_text: str


@dataclass(frozen=True)
class Suggestion:
    """An optional fix attached to a diagnostic. Never applied automatically by the rule."""
    kind: str
    message: str
    edit: TextEdit

    @property
    def resulting_text(self) -> str:
        """Replacement text for the edited range."""
        return self.edit.text

    def apply(self, source: str) -> str:
        """Return the whole source with the suggestion applied."""
        return self.edit.apply(source.encode("utf-8")).decode("utf-8")

    def to_dict(self) -> SuggestionDict:
        return {
            "kind": self.kind,
            "message": self.message,
            "start": self.edit.start,
            "end": self.edit.end,
            "resulting_text": self.edit.text,
        }


@dataclass(frozen=True)
class Diagnostic:
    """A single finding of the rule."""
    kind: str
    message: str
    span: Span
    suggestions: tuple[Suggestion, ...] = ()

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    def suggestion(self, kind: str) -> Suggestion | None:
        """Return the suggestion of the given kind, if offered."""
        for suggestion in self.suggestions:
            if suggestion.kind == kind:
                return suggestion
        return None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "message": self.message,
            "line": self.span.line,
            "column": self.span.column,
            "end_line": self.span.end_line,
            "end_column": self.span.end_column,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass(frozen=True)
class FileReport:
    """Diagnostics for one file, or the reason it could not be analyzed."""
    path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "path": self.path,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
        if self.error is not None:
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class LintReport:
    """Result of a complete run across all files."""
    files: list[FileReport] = field(default_factory=list)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.files if f.error is not None)

    def has_findings(self) -> bool:
        """Check if any diagnostics were found."""
        return self.diagnostic_count > 0

    def to_dict(self) -> dict[str, object]:
        return {
            "version": "1.0.0",
            "summary": {
                "files": len(self.files),
                "diagnostics": self.diagnostic_count,
                "errors": self.error_count,
            },
            "files": [f.to_dict() for f in self.files],
        }


@dataclass(frozen=True)
class FixOutcome:
    """Edits applied to one file by the fix command."""
    path: str
    applied: int
    skipped: int
    fixed_source: str | None = None


@dataclass(frozen=True)
class ParsedSource:
    """A parsed JavaScript source: the exact bytes and the tree built from them."""
    path: str
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node
