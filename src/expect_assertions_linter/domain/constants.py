"""
Rule identifiers and defaults.
"""

RULE_NAME: str = "prefer-expect-assertions"

# Diagnostic message ids
HAVE_EXPECT_ASSERTIONS: str = "haveExpectAssertions"
ASSERTIONS_REQUIRES_ONE_ARGUMENT: str = "assertionsRequiresOneArgument"
ASSERTIONS_REQUIRES_NUMBER_ARGUMENT: str = "assertionsRequiresNumberArgument"
HAS_ASSERTIONS_TAKES_NO_ARGUMENTS: str = "hasAssertionsTakesNoArguments"

# Suggestion message ids
SUGGEST_ADDING_HAS_ASSERTIONS: str = "suggestAddingHasAssertions"
SUGGEST_ADDING_ASSERTIONS: str = "suggestAddingAssertions"
SUGGEST_REMOVING_EXTRA_ARGUMENTS: str = "suggestRemovingExtraArguments"

EXPECT_OBJECT: str = "expect"
ASSERTIONS_PROPERTY: str = "assertions"
HAS_ASSERTIONS_PROPERTY: str = "hasAssertions"
EACH_PROPERTY: str = "each"
CALLEE_MODIFIERS: frozenset[str] = frozenset({"only", "skip", "concurrent"})
FOCUS_SKIP_PREFIXES: tuple[str, ...] = ("f", "x")

HAS_ASSERTIONS_STATEMENT: str = "expect.hasAssertions();"
ASSERTIONS_STATEMENT: str = "expect.assertions();"

DEFAULT_TEST_FUNCTION_NAMES: tuple[str, ...] = ("it", "test")
DEFAULT_GROUP_FUNCTION_NAMES: tuple[str, ...] = ("describe",)

DEFAULT_INCLUDE: tuple[str, ...] = (
    "**/*.test.js",
    "**/*.spec.js",
    "**/*.test.jsx",
    "**/*.spec.jsx",
    "**/*.test.mjs",
    "**/*.test.cjs",
)
DEFAULT_EXCLUDE: tuple[str, ...] = ("node_modules",)

CONFIG_SECTION: str = "expect-assertions"

BANNER: str = "expect-assertions :: every test declares its assertions"
