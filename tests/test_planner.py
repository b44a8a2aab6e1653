"""Tests for rendering/planner.py.

Python 3.11+.
"""

import pytest
from hypothesis import given

from checkreport.constants import INTERNAL_ERROR_PREFIX, NO_FILE
from checkreport.diagnostics.model import DiagnosticError, ExtraGroup, MessageUnit
from checkreport.enums import LocationKind, UnitType
from checkreport.rendering.planner import (
    extra_units,
    header_units,
    kind_units,
    main_file,
    main_location,
    merge_comments,
    operation_units,
    plan,
    trace_units,
)
from tests.helpers.builders import blame, comment, make_location
from tests.strategies import diagnostic_errors, extra_forests


def _error(*message, kind="infer", level="error", **parts):
    return DiagnosticError(kind=kind, level=level, message=message, **parts)


class TestMainLocation:
    """Test main location and main file resolution."""

    def test_primary_location(self):
        """Without an operation the primary message's location is used."""
        location = make_location(3, 1, 4)
        error = _error(blame("x", location))

        assert main_location(error) is location
        assert main_file(error) == "a.js"

    def test_operation_location_wins(self):
        """The operation's location takes precedence."""
        op_location = make_location(7, 1, 4, source="b.js")
        error = _error(blame("x", make_location(3, 1, 4)), operation=blame("op", op_location))

        assert main_location(error) is op_location
        assert main_file(error) == "b.js"

    def test_operation_without_location(self):
        """An operation with no location falls back to the primary message."""
        location = make_location(3, 1, 4)
        error = _error(blame("x", location), operation=comment("op"))

        assert main_location(error) is location

    def test_no_location(self):
        """Without any location the main file is the placeholder."""
        error = _error(comment("x"))

        assert main_location(error) is None
        assert main_file(error) == NO_FILE

    def test_null_source(self):
        """A location without a source also yields the placeholder."""
        error = _error(blame("x", make_location(3, 1, 4, source=None)))

        assert main_file(error) == NO_FILE


class TestHeader:
    """Test header_units."""

    def test_header_text(self):
        """Header is a comment with file and line."""
        (header,) = header_units(_error(blame("x", make_location(3, 1, 4))))

        assert header.text == "a.js:3"
        assert header.unit_type is UnitType.COMMENT
        assert header.location is None

    def test_header_without_location(self):
        """Missing location gives line -1."""
        (header,) = header_units(_error(comment("x")))

        assert header.text == "[No file]:-1"

    def test_header_null_source_keeps_line(self):
        """A source-less location still reports its line."""
        (header,) = header_units(_error(blame("x", make_location(12, 1, 4, source=None))))

        assert header.text == "[No file]:12"


class TestKindUnits:
    """Test kind classification."""

    LIB = make_location(5, 3, 8, source="lib/core.js", kind=LocationKind.LIB_FILE)
    SRC = make_location(5, 3, 8)

    @pytest.mark.parametrize(
        ("kind", "level", "location", "expected"),
        [
            ("internal", "error", SRC, INTERNAL_ERROR_PREFIX),
            ("internal", "error", LIB, INTERNAL_ERROR_PREFIX),
            ("internal", "error", None, INTERNAL_ERROR_PREFIX),
            ("parse", "error", LIB, "Library parse error:"),
            ("infer", "error", LIB, "Library type error:"),
            ("infer", "warning", LIB, "Library type error:"),
        ],
    )
    def test_classified(self, kind, level, location, expected):
        """Internal errors and library errors get a classification unit."""
        primary = blame("x", location, context="ctx")

        (unit,) = kind_units(_error(primary, kind=kind, level=level))

        assert unit.text == expected
        assert unit.unit_type is UnitType.ANCHORED
        assert unit.location is location
        assert unit.context == "ctx"

    @pytest.mark.parametrize(
        ("kind", "level", "location"),
        [
            ("internal", "warning", SRC),
            ("parse", "warning", LIB),
            ("parse", "error", SRC),
            ("infer", "error", SRC),
            ("infer", "error", None),
            ("lint", "error", LIB),
        ],
    )
    def test_unclassified(self, kind, level, location):
        """Everything else gets no classification unit."""
        assert kind_units(_error(blame("x", location), kind=kind, level=level)) == ()


class TestOperationAndTrace:
    """Test operation_units and trace_units."""

    def test_operation_followed_by_separator(self):
        """An operation is followed by an Error: comment."""
        operation = blame("op", make_location(1, 1, 2))

        units = operation_units(operation)

        assert units[0] is operation
        assert units[1].text == "Error:"
        assert units[1].unit_type is UnitType.COMMENT

    def test_no_operation(self):
        """No operation, no units."""
        assert operation_units(None) == ()

    def test_trace(self):
        """A trace is announced by a Trace: comment."""
        step = blame("step", make_location(2, 1, 2))

        units = trace_units((step,))

        assert [u.text for u in units] == ["Trace:", "step"]
        assert units[0].unit_type is UnitType.COMMENT
        assert units[1] is step

    @pytest.mark.parametrize("trace", [None, ()])
    def test_empty_trace(self, trace):
        """Empty or missing traces contribute nothing."""
        assert trace_units(trace) == ()


class TestExtraUnits:
    """Test extra forest flattening."""

    def test_nested_indent_accumulates(self):
        """Each nesting level adds two spaces of indent."""
        extra = (
            ExtraGroup(
                message=(comment("a"),),
                children=(
                    ExtraGroup(
                        message=(comment("b"),),
                        children=(ExtraGroup(message=(comment("c", indent=1),)),),
                    ),
                ),
            ),
        )

        units = extra_units(extra)

        assert [(u.text, u.indent) for u in units] == [("a", 2), ("b", 4), ("c", 7)]

    def test_pre_order(self):
        """Groups precede their children, which precede later siblings."""
        extra = (
            ExtraGroup(
                message=(comment("a1"), comment("a2")),
                children=(ExtraGroup(message=(comment("child"),)),),
            ),
            ExtraGroup(message=(comment("b"),)),
        )

        assert [u.text for u in extra_units(extra)] == ["a1", "a2", "child", "b"]

    def test_input_units_untouched(self):
        """Indenting produces new units; the inputs keep their indent."""
        unit = comment("a")

        (indented,) = extra_units((ExtraGroup(message=(unit,)),))

        assert unit.indent is None
        assert indented.indent == 2

    @pytest.mark.parametrize("extra", [None, ()])
    def test_empty(self, extra):
        """No extra, no units."""
        assert extra_units(extra) == ()

    @given(extra_forests())
    def test_indent_at_least_one_step(self, extra):
        """Every flattened unit is indented at least one step past its own indent."""
        originals = []

        def collect(groups):
            for group in groups:
                originals.extend(group.message)
                collect(group.children or ())

        collect(extra)
        flattened = extra_units(extra)

        assert len(flattened) == len(originals)
        for before, after in zip(originals, flattened, strict=True):
            assert after.indent >= (before.indent or 0) + 2
            assert (after.indent - (before.indent or 0)) % 2 == 0
            assert after.text == before.text


class TestMergeComments:
    """Test the comment merge fold."""

    def test_comment_appended_to_previous(self):
        """A comment joins the previous unit with '. '."""
        units = (blame("number", make_location(1, 1, 2)), comment("This type is incompatible"))

        (merged,) = merge_comments(units)

        assert merged.text == "number. This type is incompatible"
        assert merged.location is not None

    def test_comment_replaces_empty_text(self):
        """A comment after an empty-text unit replaces the text."""
        units = (blame("", make_location(1, 1, 2)), comment("hello"))

        (merged,) = merge_comments(units)

        assert merged.text == "hello"

    def test_error_separator_dropped(self):
        """Error: comments are dropped instead of merged."""
        units = (blame("op", make_location(1, 1, 2)), comment("Error:"))

        (merged,) = merge_comments(units)

        assert merged.text == "op"

    def test_leading_comment_kept(self):
        """A comment with nothing before it is kept."""
        units = (comment("first"), comment("second"))

        (merged,) = merge_comments(units)

        assert merged.text == "first. second"
        assert merged.unit_type is UnitType.COMMENT

    def test_leading_error_separator_kept(self):
        """Error: is only dropped when it would merge."""
        (merged,) = merge_comments((comment("Error:"),))

        assert merged.text == "Error:"

    def test_anchored_without_location_kept(self):
        """Anchored units stay separate even without a location."""
        units = (comment("head"), blame("anchored"))

        assert [u.text for u in merge_comments(units)] == ["head", "anchored"]

    def test_comment_with_location_kept(self):
        """Located comments are not merged."""
        located = MessageUnit(
            text="c", unit_type=UnitType.COMMENT, location=make_location(1, 1, 2)
        )

        assert len(merge_comments((comment("head"), located))) == 2

    def test_inputs_untouched(self):
        """Merging builds new units instead of editing the old ones."""
        first = blame("a", make_location(1, 1, 2))

        merge_comments((first, comment("b")))

        assert first.text == "a"


class TestPlan:
    """Test the full planning sequence."""

    def test_simple_error(self, call_error):
        """Header then message."""
        assert [u.text for u in plan(call_error)] == ["a.js:3", "Cannot call function"]

    def test_full_order(self):
        """Header, kind, operation, message, extra, trace, in that order."""
        lib = make_location(2, 1, 3, source="lib/core.js", kind=LocationKind.LIB_FILE)
        error = _error(
            blame("primary", lib, context="xyz"),
            comment("explained"),
            operation=blame("operation", make_location(9, 1, 3)),
            extra=(ExtraGroup(message=(blame("extra", make_location(4, 1, 2)),)),),
            trace=(blame("step", make_location(5, 1, 2)),),
        )

        units = plan(error)

        assert [u.text for u in units] == [
            "a.js:9",
            "Library type error:",
            "operation",
            "primary. explained",
            "extra. Trace:",
            "step",
        ]
        assert units[4].indent == 2

    def test_location_less_primary_merges_into_header(self):
        """A comment-only message folds into the header line."""
        error = _error(comment("Something broke"), kind="internal", level="warning")

        assert [u.text for u in plan(error)] == ["[No file]:-1. Something broke"]

    def test_internal_prefix_absorbs_comment(self):
        """Internal errors keep the prefix unit; following comments merge into it."""
        error = _error(comment("out of memory"), kind="internal", level="error")

        texts = [u.text for u in plan(error)]

        assert texts == ["[No file]:-1", "Internal error (see logs): . out of memory"]

    def test_trace_header_folds_into_message(self):
        """Trace: is a comment and joins the last message line, not a line of its own."""
        error = _error(
            blame("message", make_location(3, 1, 2)),
            trace=(blame("step", make_location(5, 1, 2)),),
        )

        units = plan(error)

        assert [u.text for u in units] == ["a.js:3", "message. Trace:", "step"]
        assert all(u.unit_type is UnitType.ANCHORED for u in units[1:])

    def test_separator_dropped_after_operation(self):
        """The separator after a located operation never reaches the output."""
        error = _error(
            blame("message", make_location(3, 1, 2)),
            operation=blame("op", make_location(3, 5, 6)),
        )

        assert [u.text for u in plan(error)] == ["a.js:3", "op", "message"]

    @given(diagnostic_errors())
    def test_only_anchored_units_lack_location_after_first(self, error):
        """After the first unit every location-less unit is anchored."""
        units = plan(error)

        assert all(
            u.location is not None or u.unit_type is UnitType.ANCHORED for u in units[1:]
        )

    @given(diagnostic_errors(anchored_located=True))
    def test_no_consecutive_location_less_units(self, error):
        """Comments always end up attached to a predecessor."""
        units = plan(error)

        for previous, current in zip(units[1:], units[2:], strict=False):
            assert previous.location is not None or current.location is not None

    @given(diagnostic_errors())
    def test_header_first(self, error):
        """The first planned unit always starts with the header text."""
        (header,) = header_units(error)

        assert plan(error)[0].text.startswith(header.text)
