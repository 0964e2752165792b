"""Pure message catalog for diagnostics and suggestions. No I/O."""

from collections.abc import Mapping
from types import MappingProxyType

from expect_assertions_linter.domain import constants

_MESSAGES: Mapping[str, str] = MappingProxyType({
    constants.HAVE_EXPECT_ASSERTIONS: (
        "Every test should have either `expect.assertions(<number of assertions>)` "
        "or `expect.hasAssertions()` as a top-level statement of its body"
    ),
    constants.ASSERTIONS_REQUIRES_ONE_ARGUMENT: (
        "`expect.assertions` expects a single argument of type number"
    ),
    constants.ASSERTIONS_REQUIRES_NUMBER_ARGUMENT: "This argument should be a number",
    constants.HAS_ASSERTIONS_TAKES_NO_ARGUMENTS: "`expect.hasAssertions` expects no arguments",
    constants.SUGGEST_ADDING_HAS_ASSERTIONS: "Add `expect.hasAssertions()`",
    constants.SUGGEST_ADDING_ASSERTIONS: "Add `expect.assertions(<number of assertions>)`",
    constants.SUGGEST_REMOVING_EXTRA_ARGUMENTS: "Remove extra arguments",
})

DIAGNOSTIC_KINDS: tuple[str, ...] = (
    constants.HAVE_EXPECT_ASSERTIONS,
    constants.ASSERTIONS_REQUIRES_ONE_ARGUMENT,
    constants.ASSERTIONS_REQUIRES_NUMBER_ARGUMENT,
    constants.HAS_ASSERTIONS_TAKES_NO_ARGUMENTS,
)

SUGGESTION_KINDS: tuple[str, ...] = (
    constants.SUGGEST_ADDING_HAS_ASSERTIONS,
    constants.SUGGEST_ADDING_ASSERTIONS,
    constants.SUGGEST_REMOVING_EXTRA_ARGUMENTS,
)


class RuleMessages:
    """Looks up message text by message id."""

    @staticmethod
    def get(message_id: str) -> str:
        """Return the message for an id. Unknown ids are a programming error."""
        try:
            return _MESSAGES[message_id]
        except KeyError:
            raise KeyError(f"Unknown message id: {message_id}") from None

    @staticmethod
    def catalog() -> dict[str, str]:
        """All message ids and texts, diagnostics first."""
        return {mid: _MESSAGES[mid] for mid in DIAGNOSTIC_KINDS + SUGGESTION_KINDS}
