"""Structural codec between model records and checker-shaped mappings.

The type-checker emits JSON; an outer loader turns that into plain
mappings and this module maps them onto the typed model (and back) using
the checker's own field names:

    report:   passed, errors, flowVersion
    error:    kind, level, message, trace, operation, extra
    unit:     descr, type, context, loc, indent
    location: source, type, start, end
    position: line, column, offset
    extra:    message, children

Encoding omits optional unit and error keys whose value is None, the way
the checker emits them, so decode(encode(x)) == x for every record. That
round trip doubles as the structural clone used wherever an independent
copy is required.

Python 3.11+. Zero external dependencies.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any

from checkreport.enums import LocationKind, UnitType

from .errors import MalformedReportError
from .model import (
    DiagnosticError,
    DiagnosticReport,
    ExtraGroup,
    MessageUnit,
    Position,
    SourceLocation,
)

__all__ = [
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

JsonDict = dict[str, Any]


# ============================================================================
# DECODING
# ============================================================================


def _require(data: Mapping[str, Any], key: str, path: str) -> Any:
    """Fetch a required key, raising MalformedReportError when absent."""
    if not isinstance(data, Mapping):
        msg = f"expected an object, got {type(data).__name__}"
        raise MalformedReportError(msg, path=path)
    if key not in data or data[key] is None:
        msg = f"missing required key '{key}'"
        raise MalformedReportError(msg, path=path)
    return data[key]


def _sequence(value: Any, path: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        msg = f"expected an array, got {type(value).__name__}"
        raise MalformedReportError(msg, path=path)
    return value


def _position_from_dict(data: Mapping[str, Any], path: str) -> Position:
    try:
        return Position(
            line=_require(data, "line", path),
            column=_require(data, "column", path),
            offset=data.get("offset") or 0,
        )
    except MalformedReportError as e:
        if e.path:
            raise
        raise MalformedReportError(str(e), path=path) from e


def _location_from_dict(data: Mapping[str, Any], path: str) -> SourceLocation:
    start = _require(data, "start", path)
    kind = data.get("type")
    if kind is not None:
        try:
            kind = LocationKind(kind)
        except ValueError as e:
            msg = f"unknown location type {kind!r}"
            raise MalformedReportError(msg, path=path) from e
    return SourceLocation(
        start=_position_from_dict(start, f"{path}.start"),
        end=_position_from_dict(_require(data, "end", path), f"{path}.end"),
        source=data.get("source"),
        kind=kind,
    )


def unit_from_dict(data: Mapping[str, Any], path: str = "unit") -> MessageUnit:
    """Decode one message unit.

    Args:
        data: Mapping with the checker's unit keys
        path: Location of ``data`` inside the enclosing input, for errors

    Returns:
        Decoded MessageUnit

    Raises:
        MalformedReportError: If a required key is missing or malformed
    """
    text = _require(data, "descr", path)
    if not isinstance(text, str):
        msg = f"descr must be a string, got {type(text).__name__}"
        raise MalformedReportError(msg, path=path)
    raw_type = _require(data, "type", path)
    try:
        unit_type = UnitType(raw_type)
    except ValueError as e:
        msg = f"unknown message type {raw_type!r}"
        raise MalformedReportError(msg, path=path) from e

    loc = data.get("loc")
    try:
        return MessageUnit(
            text=text,
            unit_type=unit_type,
            context=data.get("context"),
            location=None if loc is None else _location_from_dict(loc, f"{path}.loc"),
            indent=data.get("indent"),
        )
    except MalformedReportError as e:
        if e.path:
            raise
        raise MalformedReportError(str(e), path=path) from e


def _units_from_list(value: Any, path: str) -> tuple[MessageUnit, ...]:
    return tuple(
        unit_from_dict(item, f"{path}[{i}]")
        for i, item in enumerate(_sequence(value, path))
    )


def _extra_from_list(value: Any, path: str) -> tuple[ExtraGroup, ...]:
    groups: list[ExtraGroup] = []
    for i, item in enumerate(_sequence(value, path)):
        item_path = f"{path}[{i}]"
        message = _units_from_list(
            _require(item, "message", item_path), f"{item_path}.message"
        )
        children = item.get("children")
        groups.append(
            ExtraGroup(
                message=message,
                children=(
                    None
                    if children is None
                    else _extra_from_list(children, f"{item_path}.children")
                ),
            )
        )
    return tuple(groups)


def error_from_dict(data: Mapping[str, Any], path: str = "error") -> DiagnosticError:
    """Decode one diagnostic error.

    Args:
        data: Mapping with the checker's error keys
        path: Location of ``data`` inside the enclosing input, for errors

    Returns:
        Decoded DiagnosticError

    Raises:
        MalformedReportError: If a required key is missing, ``message`` is
            empty, or a nested value is malformed
    """
    message = _units_from_list(_require(data, "message", path), f"{path}.message")
    trace = data.get("trace")
    operation = data.get("operation")
    extra = data.get("extra")
    try:
        return DiagnosticError(
            kind=_require(data, "kind", path),
            level=_require(data, "level", path),
            message=message,
            trace=None if trace is None else _units_from_list(trace, f"{path}.trace"),
            operation=(
                None if operation is None else unit_from_dict(operation, f"{path}.operation")
            ),
            extra=None if extra is None else _extra_from_list(extra, f"{path}.extra"),
        )
    except MalformedReportError as e:
        if e.path:
            raise
        raise MalformedReportError(str(e), path=path) from e


def report_from_dict(data: Mapping[str, Any]) -> DiagnosticReport:
    """Decode a full report.

    Args:
        data: Parsed checker output (``passed``, ``errors``, ``flowVersion``)

    Returns:
        Decoded DiagnosticReport

    Raises:
        MalformedReportError: If the report or any error in it is malformed

    Example:
        >>> report = report_from_dict({"passed": True, "errors": [], "flowVersion": "0.30.0"})
        >>> report.tool_version
        '0.30.0'
    """
    errors = tuple(
        error_from_dict(item, f"errors[{i}]")
        for i, item in enumerate(_sequence(_require(data, "errors", "report"), "errors"))
    )
    passed = _require(data, "passed", "report")
    tool_version = _require(data, "flowVersion", "report")
    try:
        return DiagnosticReport(passed=bool(passed), errors=errors, tool_version=tool_version)
    except MalformedReportError as e:
        raise MalformedReportError(str(e), path="report") from e


# ============================================================================
# ENCODING
# ============================================================================


def _position_to_dict(position: Position) -> JsonDict:
    return {"line": position.line, "column": position.column, "offset": position.offset}


def _location_to_dict(location: SourceLocation) -> JsonDict:
    return {
        "source": location.source,
        "type": None if location.kind is None else str(location.kind),
        "start": _position_to_dict(location.start),
        "end": _position_to_dict(location.end),
    }


def unit_to_dict(unit: MessageUnit) -> JsonDict:
    """Encode one message unit with the checker's key names."""
    data: JsonDict = {"descr": unit.text, "type": str(unit.unit_type)}
    if unit.context is not None:
        data["context"] = unit.context
    if unit.location is not None:
        data["loc"] = _location_to_dict(unit.location)
    if unit.indent is not None:
        data["indent"] = unit.indent
    return data


def _extra_to_list(extra: tuple[ExtraGroup, ...]) -> list[JsonDict]:
    groups: list[JsonDict] = []
    for group in extra:
        data: JsonDict = {"message": [unit_to_dict(u) for u in group.message]}
        if group.children is not None:
            data["children"] = _extra_to_list(group.children)
        groups.append(data)
    return groups


def error_to_dict(error: DiagnosticError) -> JsonDict:
    """Encode one diagnostic error with the checker's key names."""
    data: JsonDict = {
        "kind": error.kind,
        "level": error.level,
        "message": [unit_to_dict(u) for u in error.message],
    }
    if error.trace is not None:
        data["trace"] = [unit_to_dict(u) for u in error.trace]
    if error.operation is not None:
        data["operation"] = unit_to_dict(error.operation)
    if error.extra is not None:
        data["extra"] = _extra_to_list(error.extra)
    return data


def report_to_dict(report: DiagnosticReport) -> JsonDict:
    """Encode a full report with the checker's key names."""
    return {
        "passed": report.passed,
        "errors": [error_to_dict(e) for e in report.errors],
        "flowVersion": report.tool_version,
    }


# ============================================================================
# CANONICAL KEYS AND CLONES
# ============================================================================


def message_key(error: DiagnosticError) -> str:
    """Canonical serialization of an error's ``message`` sequence.

    Only ``message`` takes part: kind, level, operation, trace and extra
    are ignored, so two errors explaining the same thing at different
    severities share a key.
    """
    return json.dumps(
        [unit_to_dict(u) for u in error.message],
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def clone_error(error: DiagnosticError) -> DiagnosticError:
    """Structurally clone an error into a fully independent copy."""
    return error_from_dict(error_to_dict(error))


def clone_report(report: DiagnosticReport) -> DiagnosticReport:
    """Structurally clone a report into a fully independent copy."""
    return report_from_dict(report_to_dict(report))
