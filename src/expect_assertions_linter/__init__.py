"""Lint JavaScript test files for missing or malformed expect.assertions() declarations."""

__version__ = "1.0.0"
