"""checkreport - diffing and pretty-printing of type-checker reports.

Takes the structured report of an external static type-checker, subtracts
a baseline report so only newly introduced errors remain, and renders
reports as deterministic terminal text with source context and
column-accurate underlines.

Public API:
    DiagnosticReport - One checker run (passed flag, errors, tool version)
    DiagnosticError - One reported problem
    MessageUnit - One piece of explanatory text, optionally located
    difference - Errors of one report missing from another
    format_report - Render all errors of a report
    format_report_with_header - Render a report preceded by its error count
    report_from_dict - Decode a parsed checker report

Exceptions:
    ReportError - Base exception class
    MalformedReportError - Input violates the report's invariants
    DiagnosticRenderError - One diagnostic of a report failed to render

Submodules:
    checkreport.diagnostics - Data model, codec and exceptions
    checkreport.rendering - Message planner, unit renderer, report formatter
"""

from .diagnostics import (
    NO_ERRORS,
    DiagnosticError,
    DiagnosticRenderError,
    DiagnosticReport,
    ExtraGroup,
    MalformedReportError,
    MessageUnit,
    Position,
    ReportError,
    SourceLocation,
    report_from_dict,
    report_to_dict,
)
from .difference import difference
from .enums import LocationKind, UnitType
from .rendering import (
    ReportFormatter,
    format_report,
    format_report_with_header,
    render_error,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("checkreport")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NO_ERRORS",
    "DiagnosticError",
    "DiagnosticRenderError",
    "DiagnosticReport",
    "ExtraGroup",
    "LocationKind",
    "MalformedReportError",
    "MessageUnit",
    "Position",
    "ReportError",
    "ReportFormatter",
    "SourceLocation",
    "UnitType",
    "__version__",
    "difference",
    "format_report",
    "format_report_with_header",
    "render_error",
    "report_from_dict",
    "report_to_dict",
]
