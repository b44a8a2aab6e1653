"""Report difference: errors introduced since a baseline run.

Python 3.11+. Zero external dependencies.
"""

import logging

from checkreport.diagnostics.codec import clone_error, message_key
from checkreport.diagnostics.model import DiagnosticReport

__all__ = ["difference"]

logger = logging.getLogger(__name__)


def difference(current: DiagnosticReport, baseline: DiagnosticReport) -> DiagnosticReport:
    """Return the errors of ``current`` that ``baseline`` does not contain.

    Two errors are the same when their ``message`` sequences serialize
    identically (see ``message_key``). Kind, level, operation, trace and
    extra do not distinguish errors.

    Args:
        current: Report from the newer run
        baseline: Report to subtract

    Returns:
        New report holding independent copies of the surviving errors in
        ``current`` order, with ``current``'s tool version

    Example:
        >>> difference(report, report).passed
        True
    """
    known = {message_key(error) for error in baseline.errors}
    survivors = tuple(
        clone_error(error) for error in current.errors if message_key(error) not in known
    )
    logger.debug(
        "Report difference kept %d of %d error(s) against %d baseline error(s)",
        len(survivors),
        len(current.errors),
        len(baseline.errors),
    )
    return DiagnosticReport.from_errors(survivors, tool_version=current.tool_version)
