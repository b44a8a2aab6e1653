"""Shared constants for checkreport.

Centralizes the literal texts and layout widths used by the planner,
renderer and formatter. Placing them here keeps the three rendering
modules free of magic strings and gives tests a single import point.

Constants are grouped by domain:
- Planner texts: synthetic units inserted while planning an error
- Layout: indentation and label widths used by the renderer
- Report texts: strings produced at report level

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Planner texts
    "NO_FILE",
    "INTERNAL_ERROR_PREFIX",
    "LIBRARY_PARSE_ERROR",
    "LIBRARY_TYPE_ERROR",
    "ERROR_SEPARATOR",
    "TRACE_HEADER",
    "MERGE_JOINER",
    # Layout
    "EXTRA_INDENT_STEP",
    "LINE_LABEL_WIDTH",
    "LINE_LABEL_SUFFIX",
    "UNDERLINE_CHAR",
    "CROSS_FILE_PREFIX",
    # Report texts
    "NO_ERRORS_TEXT",
    "NO_VERSION",
    "DEFAULT_LOCALE",
]

# ============================================================================
# PLANNER TEXTS
# ============================================================================

# Placeholder file name when an error has no usable location.
NO_FILE: str = "[No file]"

# Kind classification prefixes. The internal prefix keeps its trailing space
# because the merge pass appends following comments with ". ".
INTERNAL_ERROR_PREFIX: str = "Internal error (see logs): "
LIBRARY_PARSE_ERROR: str = "Library parse error:"
LIBRARY_TYPE_ERROR: str = "Library type error:"

# Comment emitted after an operation unit. Dropped by the merge pass when it
# would be folded into the operation's text.
ERROR_SEPARATOR: str = "Error:"

TRACE_HEADER: str = "Trace:"

# Joiner used when folding a comment into the preceding unit's text.
MERGE_JOINER: str = ". "

# ============================================================================
# LAYOUT
# ============================================================================

# Indent added to every unit contributed by each nesting level of extras.
EXTRA_INDENT_STEP: int = 2

# Line numbers in context blocks are right-justified to this width.
LINE_LABEL_WIDTH: int = 3
LINE_LABEL_SUFFIX: str = ": "

UNDERLINE_CHAR: str = "^"

CROSS_FILE_PREFIX: str = ". See: "

# ============================================================================
# REPORT TEXTS
# ============================================================================

NO_ERRORS_TEXT: str = "No errors"

# Tool version carried by the ready-made empty report.
NO_VERSION: str = "No version"

# Locale used for plural selection in the count header.
DEFAULT_LOCALE: str = "en"
