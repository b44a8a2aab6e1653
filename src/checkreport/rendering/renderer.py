"""Rendering of a single message unit.

Units are rendered independently: everything order-dependent was settled
by the planner. A unit with a location and a context line renders as

      3: foo();
         ^^^^ Cannot call function

with the line label right-justified to three columns and the underline
aligned under the span (tabs in the context are preserved so alignment
survives tab-indented sources).

Python 3.11+. Zero external dependencies.
"""

import re

from checkreport.constants import (
    CROSS_FILE_PREFIX,
    LINE_LABEL_SUFFIX,
    LINE_LABEL_WIDTH,
    NO_FILE,
    UNDERLINE_CHAR,
)
from checkreport.diagnostics.model import MessageUnit, SourceLocation

__all__ = [
    "cross_file_suffix",
    "line_label",
    "render_unit",
    "underline_length",
]

# Everything except tabs and spaces is blanked out of the context prefix.
_NON_BLANK = re.compile(r"[^\t ]")


def line_label(line: int) -> str:
    """Line number right-justified to three columns, plus ``": "``."""
    return f"{line:>{LINE_LABEL_WIDTH}}{LINE_LABEL_SUFFIX}"


def underline_length(location: SourceLocation) -> int:
    """Number of carets under a location.

    Single-line spans are underlined up to their end column (at least one
    caret, also for inverted spans); multi-line spans get a single caret.
    """
    if not location.is_single_line:
        return 1
    return max(1, location.end.column - (location.start.column - 1))


def cross_file_suffix(main_file: str, location: SourceLocation) -> str:
    """``". See: <file>:<line>"`` when the location lies outside main_file."""
    source = NO_FILE if location.source is None else location.source
    if source == main_file:
        return ""
    return f"{CROSS_FILE_PREFIX}{source}:{location.start.line}"


def _context_block(indentation: str, context: str, location: SourceLocation) -> str:
    start_col = location.start.column - 1
    label = line_label(location.start.line)
    padding = " " * len(label)
    if len(context) >= start_col:
        padding += _NON_BLANK.sub(" ", context[:start_col])
    underline = UNDERLINE_CHAR * underline_length(location)
    return f"{indentation}{label}{context}\n{indentation}{padding}{underline} "


def render_unit(main_file: str, unit: MessageUnit) -> str:
    """Render one unit as a line, or a context block ending in the unit's text.

    Args:
        main_file: File of the error being rendered; locations elsewhere get
            a cross-file reference
        unit: Unit to render

    Returns:
        Rendered text, without a trailing newline
    """
    indentation = " " * (unit.indent or 0)
    location = unit.location
    if location is None:
        return f"{indentation}{unit.text}"

    if unit.context is None:
        block = indentation
    else:
        block = _context_block(indentation, unit.context, location)
    return f"{block}{unit.text}{cross_file_suffix(main_file, location)}"
