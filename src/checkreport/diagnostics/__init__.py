"""Diagnostic report model, codec and exceptions.

Provides the typed records a type-checker report is decoded into, the
structural codec that maps them to and from the checker's JSON shape, and
the exception hierarchy raised on malformed input.

Python 3.11+. Zero external dependencies.
"""

from .codec import (
    clone_error,
    clone_report,
    error_from_dict,
    error_to_dict,
    message_key,
    report_from_dict,
    report_to_dict,
    unit_from_dict,
    unit_to_dict,
)
from .errors import DiagnosticRenderError, MalformedReportError, ReportError
from .model import (
    NO_ERRORS,
    DiagnosticError,
    DiagnosticReport,
    ExtraGroup,
    MessageUnit,
    Position,
    SourceLocation,
)

__all__ = [
    "NO_ERRORS",
    "DiagnosticError",
    "DiagnosticRenderError",
    "DiagnosticReport",
    "ExtraGroup",
    "MalformedReportError",
    "MessageUnit",
    "Position",
    "ReportError",
    "SourceLocation",
    "clone_error",
    "clone_report",
    "error_from_dict",
    "error_to_dict",
    "message_key",
    "report_from_dict",
    "report_to_dict",
    "unit_from_dict",
    "unit_to_dict",
]
