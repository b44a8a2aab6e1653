"""Hypothesis strategies for checkreport property-based testing.

Usage:
    from tests.strategies import diagnostic_errors, diagnostic_reports
    from tests.strategies.diagnostics import source_locations
"""

from .diagnostics import (
    diagnostic_errors,
    diagnostic_reports,
    extra_forests,
    message_units,
    positions,
    source_locations,
)

__all__ = [
    "diagnostic_errors",
    "diagnostic_reports",
    "extra_forests",
    "message_units",
    "positions",
    "source_locations",
]
