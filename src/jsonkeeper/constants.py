"""Shared constants for jsonkeeper.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Diagnostics: Error code and context window for parse errors
- Formatting: Defaults applied when a document carries no style of its own
- Depth limits: Recursion protection for transform/replacer walks

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Diagnostics
    "ERROR_CODE",
    "DEFAULT_CONTEXT",
    # Formatting
    "DEFAULT_INDENT",
    "DEFAULT_NEWLINE",
    "MAX_INDENT",
    "BYTE_ORDER_MARK",
    # Depth limits
    "MAX_DEPTH",
]

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Code carried by every error raised from parse(), for both malformed text
# and unparseable input types.
ERROR_CODE: str = "EJSONPARSE"

# Characters shown on each side of the error offset in parse error messages.
# When the offset is unknown, twice this many leading characters are quoted.
DEFAULT_CONTEXT: int = 20

# ============================================================================
# FORMATTING
# ============================================================================

# Indent unit recorded for "{}" and "[]", which have no content line to
# inspect.
DEFAULT_INDENT: str = "  "

# Newline emitted by json.dumps and used when a value has no recorded style.
DEFAULT_NEWLINE: str = "\n"

# Longest indent stringify() emits: integer indents are capped at this many
# spaces and string indents truncated to this many characters.
MAX_INDENT: int = 10

# UTF-8 BOM after decoding (EF BB BF decodes to U+FEFF).
BYTE_ORDER_MARK: str = "\ufeff"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting visited by transform and replacer walks.
# Each level costs one Python frame; 500 stays well inside the default
# recursion limit of 1000. DepthGuard clamps it on interpreters with a lower
# limit.
MAX_DEPTH: int = 500
