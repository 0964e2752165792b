"""Domain protocols for rules."""

from typing import Protocol

from expect_assertions_linter.domain.entities import Diagnostic, ParsedSource

__all__ = [
    "Checkable",
]


class Checkable(Protocol):
    """One pass over a parsed file: given the tree, return diagnostics in order."""

    name: str
    description: str

    def check(self, parsed: ParsedSource) -> list[Diagnostic]:
        """Interrogate a parsed source for rule breaches."""
        ...
