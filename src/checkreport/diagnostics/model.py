"""Diagnostic report data model.

Typed, immutable records for one run of an external static type-checker:
a report holds errors, an error holds message units, and message units may
point at a source location. Every record is a frozen, slotted dataclass and
every sequence is a tuple, so derived values never alias mutable state of
their inputs.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass

from checkreport.constants import NO_VERSION
from checkreport.enums import LocationKind, UnitType

from .errors import MalformedReportError

__all__ = [
    "NO_ERRORS",
    "DiagnosticError",
    "DiagnosticReport",
    "ExtraGroup",
    "MessageUnit",
    "Position",
    "SourceLocation",
]


@dataclass(frozen=True, slots=True)
class Position:
    """Point in a source file.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset from the start of the file (0-indexed)
    """

    line: int
    column: int
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate Position invariants.

        Raises:
            MalformedReportError: If line or column is below 1, or offset
                is negative.
        """
        if self.line < 1:
            msg = f"Position.line must be >= 1 (1-indexed), got {self.line}"
            raise MalformedReportError(msg)
        if self.column < 1:
            msg = f"Position.column must be >= 1 (1-indexed), got {self.column}"
            raise MalformedReportError(msg)
        if self.offset < 0:
            msg = f"Position.offset must be >= 0, got {self.offset}"
            raise MalformedReportError(msg)


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of source text a message unit points at.

    Start and end are not checked against each other: the checker
    occasionally emits inverted spans and the renderer degrades to a
    single caret for them.

    Attributes:
        start: First position of the span
        end: Last position of the span
        source: File path, or None for synthetic locations
        kind: Kind of file, if the checker reported one
    """

    start: Position
    end: Position
    source: str | None = None
    kind: LocationKind | None = None

    @property
    def is_single_line(self) -> bool:
        """True when the span starts and ends on the same line."""
        return self.start.line == self.end.line


@dataclass(frozen=True, slots=True)
class MessageUnit:
    """One atomic piece of explanatory text.

    Attributes:
        text: Message text (may be empty)
        unit_type: Anchored units keep their own line; comments merge
        context: Raw text of the source line the location starts on
        location: Source span, if any
        indent: Number of leading spaces when rendered (None means 0)
    """

    text: str
    unit_type: UnitType = UnitType.ANCHORED
    context: str | None = None
    location: SourceLocation | None = None
    indent: int | None = None

    def __post_init__(self) -> None:
        """Validate MessageUnit invariants.

        Raises:
            MalformedReportError: If indent is negative.
        """
        if self.indent is not None and self.indent < 0:
            msg = f"MessageUnit.indent must be >= 0, got {self.indent}"
            raise MalformedReportError(msg)

    @classmethod
    def comment(cls, text: str) -> "MessageUnit":
        """Create a location-less comment unit."""
        return cls(text=text, unit_type=UnitType.COMMENT)


@dataclass(frozen=True, slots=True)
class ExtraGroup:
    """Group of supplementary explanation, possibly with nested groups.

    Attributes:
        message: Units contributed by this group
        children: Nested groups, rendered one indent level deeper
    """

    message: tuple[MessageUnit, ...] = ()
    children: tuple["ExtraGroup", ...] | None = None


@dataclass(frozen=True, slots=True)
class DiagnosticError:
    """One problem reported by the type-checker.

    ``message[0]`` is the primary explanation.

    Attributes:
        kind: Error kind ("infer", "parse", "internal", ...)
        level: Severity ("error", "warning")
        message: Primary explanation units (never empty)
        trace: Optional trace units
        operation: Optional unit describing the operation that failed
        extra: Optional forest of nested explanation groups
    """

    kind: str
    level: str
    message: tuple[MessageUnit, ...]
    trace: tuple[MessageUnit, ...] | None = None
    operation: MessageUnit | None = None
    extra: tuple[ExtraGroup, ...] | None = None

    def __post_init__(self) -> None:
        """Validate DiagnosticError invariants.

        Raises:
            MalformedReportError: If message is empty.
        """
        if not self.message:
            msg = "DiagnosticError.message must contain at least one unit"
            raise MalformedReportError(msg)

    @property
    def primary(self) -> MessageUnit:
        """The primary explanation unit."""
        return self.message[0]


@dataclass(frozen=True, slots=True)
class DiagnosticReport:
    """Result of one type-checker run.

    Attributes:
        passed: True iff errors is empty
        errors: Reported errors, in checker order
        tool_version: Version string reported by the checker
    """

    passed: bool
    errors: tuple[DiagnosticError, ...] = ()
    tool_version: str = NO_VERSION

    def __post_init__(self) -> None:
        """Validate DiagnosticReport invariants.

        Raises:
            MalformedReportError: If passed disagrees with errors.
        """
        if self.passed != (not self.errors):
            msg = (
                f"DiagnosticReport.passed={self.passed} disagrees with "
                f"{len(self.errors)} error(s)"
            )
            raise MalformedReportError(msg)

    @classmethod
    def from_errors(
        cls, errors: tuple[DiagnosticError, ...], tool_version: str = NO_VERSION
    ) -> "DiagnosticReport":
        """Create a report whose passed flag is derived from errors."""
        return cls(passed=not errors, errors=errors, tool_version=tool_version)

    @property
    def error_count(self) -> int:
        """Number of reported errors."""
        return len(self.errors)


# Passing report with no errors, usable as an empty baseline.
NO_ERRORS: DiagnosticReport = DiagnosticReport(passed=True)
