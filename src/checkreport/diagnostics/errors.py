"""checkreport exception hierarchy.

Nothing in the pipeline performs I/O, so every exception here signals a
precondition violation in the data handed to it.

Python 3.11+. Zero external dependencies.
"""

__all__ = [
    "DiagnosticRenderError",
    "MalformedReportError",
    "ReportError",
]


class ReportError(Exception):
    """Base exception for all checkreport errors."""


class MalformedReportError(ReportError):
    """Diagnostic data violates the report's structural invariants.

    Raised by model validators and by the codec when a mapping lacks a
    required key or carries an unknown enum spelling.

    Attributes:
        path: Dotted location of the offending value inside the input,
            e.g. ``errors[2].message[0].loc.start`` (empty if unknown)
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        """Initialize MalformedReportError.

        Args:
            message: Human-readable description of the violation
            path: Dotted location of the offending value
        """
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class DiagnosticRenderError(ReportError):
    """One diagnostic of a report could not be rendered.

    The failure is scoped to a single diagnostic: ``index`` is its position
    in ``report.errors``. The original exception is chained as __cause__.

    Attributes:
        index: Position of the failing diagnostic in the report
    """

    def __init__(self, message: str, *, index: int) -> None:
        """Initialize DiagnosticRenderError.

        Args:
            message: Human-readable description of the failure
            index: Position of the failing diagnostic in the report
        """
        super().__init__(f"error #{index}: {message}")
        self.index = index
