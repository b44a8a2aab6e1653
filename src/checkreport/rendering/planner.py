"""Message planning: one diagnostic error to an ordered list of units.

An error is a small tree (operation, primary message, nested extras,
trace). Planning linearizes it into the exact sequence of units the
renderer prints, in this order:

    1. header      "<file>:<line>" comment for the main location
    2. kind        optional classification ("Library type error:", ...)
    3. operation   operation unit followed by an "Error:" comment
    4. message     the primary explanation, verbatim
    5. extra       pre-order flattening of the extra forest, +2 indent per level
    6. trace       "Trace:" comment followed by the trace units

and then folds location-less comments into the unit before them.

The "Trace:" header is planned as a comment, so the merge pass folds it
into the preceding unit ("... . Trace:"). The checker's own printer keeps
it as an anchored unit on its own line; which of the two is wanted still
needs to be re-confirmed.

Python 3.11+. Zero external dependencies.
"""

import logging
from dataclasses import replace

from checkreport.constants import (
    ERROR_SEPARATOR,
    EXTRA_INDENT_STEP,
    INTERNAL_ERROR_PREFIX,
    LIBRARY_PARSE_ERROR,
    LIBRARY_TYPE_ERROR,
    MERGE_JOINER,
    NO_FILE,
    TRACE_HEADER,
)
from checkreport.diagnostics.model import (
    DiagnosticError,
    ExtraGroup,
    MessageUnit,
    SourceLocation,
)
from checkreport.enums import LocationKind, UnitType

__all__ = [
    "extra_units",
    "header_units",
    "kind_units",
    "main_file",
    "main_location",
    "merge_comments",
    "operation_units",
    "plan",
    "trace_units",
]

logger = logging.getLogger(__name__)


def main_location(error: DiagnosticError) -> SourceLocation | None:
    """Most authoritative location of an error.

    The operation's location wins over the primary message's.
    """
    if error.operation is not None and error.operation.location is not None:
        return error.operation.location
    return error.primary.location


def main_file(error: DiagnosticError) -> str:
    """File of the error's main location, or ``NO_FILE``."""
    location = main_location(error)
    if location is None or location.source is None:
        return NO_FILE
    return location.source


def header_units(error: DiagnosticError) -> tuple[MessageUnit, ...]:
    """Header comment naming the main file and line (-1 without a location)."""
    location = main_location(error)
    line = -1 if location is None else location.start.line
    return (MessageUnit.comment(f"{main_file(error)}:{line}"),)


def kind_units(error: DiagnosticError) -> tuple[MessageUnit, ...]:
    """Classification unit for internal errors and errors inside libraries.

    The unit borrows the primary message's context and location so it is
    rendered against the same source line.
    """
    primary = error.primary
    location = primary.location
    text: str | None = None
    if error.kind == "internal" and error.level == "error":
        text = INTERNAL_ERROR_PREFIX
    elif location is not None and location.kind == LocationKind.LIB_FILE:
        if error.kind == "parse" and error.level == "error":
            text = LIBRARY_PARSE_ERROR
        elif error.kind == "infer":
            text = LIBRARY_TYPE_ERROR

    if text is None:
        return ()
    return (
        MessageUnit(
            text=text,
            unit_type=UnitType.ANCHORED,
            context=primary.context,
            location=location,
        ),
    )


def operation_units(operation: MessageUnit | None) -> tuple[MessageUnit, ...]:
    """Operation unit followed by the ``Error:`` separator comment."""
    if operation is None:
        return ()
    return (operation, MessageUnit.comment(ERROR_SEPARATOR))


def _indented(unit: MessageUnit, step: int) -> MessageUnit:
    return replace(unit, indent=(unit.indent or 0) + step)


def extra_units(extra: tuple[ExtraGroup, ...] | None) -> tuple[MessageUnit, ...]:
    """Flatten an extra forest in pre-order.

    Each group contributes its own units followed by its children's
    flattened units. Every unit produced at this level, including the ones
    coming back from the recursive call, gains ``EXTRA_INDENT_STEP`` of
    indent, so a unit nested N levels deep ends up N steps further in.
    """
    if not extra:
        return ()
    units: list[MessageUnit] = []
    for group in extra:
        units.extend(group.message)
        units.extend(extra_units(group.children))
    return tuple(_indented(unit, EXTRA_INDENT_STEP) for unit in units)


def trace_units(trace: tuple[MessageUnit, ...] | None) -> tuple[MessageUnit, ...]:
    """``Trace:`` comment followed by the trace, or nothing for an empty trace."""
    if not trace:
        return ()
    return (MessageUnit.comment(TRACE_HEADER), *trace)


def merge_comments(units: tuple[MessageUnit, ...]) -> tuple[MessageUnit, ...]:
    """Fold location-less comments into the unit before them.

    A unit is kept as-is when it has a location, is anchored, or nothing
    precedes it. Any other comment is appended to the previous unit's text
    with ". " (or replaces it if that text is empty). ``Error:`` separators
    are dropped instead of merged.
    """
    merged: list[MessageUnit] = []
    for unit in units:
        if unit.location is not None or not merged or unit.unit_type == UnitType.ANCHORED:
            merged.append(unit)
        elif unit.text == ERROR_SEPARATOR:
            logger.debug("Dropped separator comment after %r", merged[-1].text)
        else:
            previous = merged[-1]
            text = (
                unit.text
                if previous.text == ""
                else f"{previous.text}{MERGE_JOINER}{unit.text}"
            )
            merged[-1] = replace(previous, text=text)
    return tuple(merged)


def plan(error: DiagnosticError) -> tuple[MessageUnit, ...]:
    """Expand an error into the merged sequence of units to render.

    Args:
        error: Diagnostic error to plan

    Returns:
        Units in display order, comments already merged

    Example:
        >>> [u.text for u in plan(error)]
        ['a.js:3', 'Cannot call function']
    """
    units = (
        *header_units(error),
        *kind_units(error),
        *operation_units(error.operation),
        *error.message,
        *extra_units(error.extra),
        *trace_units(error.trace),
    )
    merged = merge_comments(units)
    logger.debug("Planned %d unit(s), %d after merging", len(units), len(merged))
    return merged
