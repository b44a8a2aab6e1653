"""Planning and rendering of diagnostic reports as terminal text.

Python 3.11+.
"""

from .formatter import (
    ReportFormatter,
    format_report,
    format_report_with_header,
    render_error,
)
from .planner import main_file, main_location, merge_comments, plan
from .renderer import render_unit, underline_length

__all__ = [
    "ReportFormatter",
    "format_report",
    "format_report_with_header",
    "main_file",
    "main_location",
    "merge_comments",
    "plan",
    "render_error",
    "render_unit",
    "underline_length",
]
