"""Report formatting service.

Runs the planner and renderer over every error of a report and joins the
results into the final terminal text.

Python 3.11+.
"""

import logging
from dataclasses import dataclass

from checkreport.constants import DEFAULT_LOCALE, NO_ERRORS_TEXT
from checkreport.diagnostics.errors import DiagnosticRenderError, ReportError
from checkreport.diagnostics.model import DiagnosticError, DiagnosticReport
from checkreport.locale_utils import select_plural_category

from .planner import main_file, plan
from .renderer import render_unit

__all__ = [
    "ReportFormatter",
    "format_report",
    "format_report_with_header",
    "render_error",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportFormatter:
    """Report formatting service.

    Stateless: every call plans and renders from its arguments alone. Report
    texts are English, so the count header always follows English plural
    rules.

    Example:
        >>> formatter = ReportFormatter()
        >>> print(formatter.format_report_with_header(report))
        1 error
        a.js:3
          3: foo();
             ^^^^ Cannot call function
    """

    def render_error(self, error: DiagnosticError) -> str:
        """Render one error as a newline-joined block of units."""
        file = main_file(error)
        return "\n".join(render_unit(file, unit) for unit in plan(error))

    def format_report(self, report: DiagnosticReport) -> str:
        """Render every error of a report, separated by blank lines.

        Raises:
            DiagnosticRenderError: If one error cannot be rendered; its
                index in ``report.errors`` is attached
        """
        blocks: list[str] = []
        for index, error in enumerate(report.errors):
            try:
                blocks.append(self.render_error(error))
            except (ReportError, AttributeError, TypeError) as e:
                # Caught wide so a broken record fails only its own diagnostic.
                logger.error("Failed to render error #%d: %s", index, e)
                raise DiagnosticRenderError(str(e), index=index) from e
        return "\n\n".join(blocks)

    def count_header(self, count: int) -> str:
        """``"<N> error"`` or ``"<N> errors"`` by English CLDR plural rules."""
        category = select_plural_category(count, DEFAULT_LOCALE)
        noun = "error" if category == "one" else "errors"
        return f"{count} {noun}"

    def format_report_with_header(self, report: DiagnosticReport) -> str:
        """Render a report preceded by its error count.

        Returns:
            ``"No errors"`` for a passing report, otherwise the count line,
            a newline and ``format_report(report)``
        """
        if report.passed:
            return NO_ERRORS_TEXT
        return f"{self.count_header(report.error_count)}\n{self.format_report(report)}"


_DEFAULT_FORMATTER = ReportFormatter()


def render_error(error: DiagnosticError) -> str:
    """Render one error with the default formatter."""
    return _DEFAULT_FORMATTER.render_error(error)


def format_report(report: DiagnosticReport) -> str:
    """Render a report's errors with the default formatter."""
    return _DEFAULT_FORMATTER.format_report(report)


def format_report_with_header(report: DiagnosticReport) -> str:
    """Render a report with its count header using the default formatter."""
    return _DEFAULT_FORMATTER.format_report_with_header(report)
