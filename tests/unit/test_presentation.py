"""
Unit tests for the scrollback row projection.

Tests window selection, line type presentation and the empty-log placeholder.
"""

import pytest

from scrollback_view.models import LineType, LogLine, Row
from scrollback_view.presentation import (
    DEFAULT_MAX_LINES,
    FALLBACK_STYLE,
    LINE_STYLES,
    PLACEHOLDER_TEXT,
    render_rows,
    select_window,
    style_for,
)


class TestWindowSelection:
    """Test trailing window selection."""

    @pytest.mark.parametrize("length,window", [(1, 1), (5, 20), (20, 20), (25, 20), (3, 1), (10, 7)])
    def test_row_count_is_min_of_length_and_window(self, length, window):
        log = [LogLine.plain(str(i)) for i in range(length)]
        assert len(render_rows(log, window)) == min(length, window)

    def test_rows_are_trailing_lines_in_order(self, numbered_log):
        rows = render_rows(numbered_log, 20)

        assert len(rows) == 20
        assert rows[0].text == "6"
        assert rows[-1].text == "25"
        assert [row.text for row in rows] == [str(i) for i in range(6, 26)]

    def test_short_log_is_shown_in_full(self):
        log = [LogLine.plain("a"), LogLine.info("b"), LogLine.error("c")]
        assert [row.text for row in render_rows(log, 20)] == ["a", "b", "c"]

    def test_default_window_is_twenty(self, numbered_log):
        assert DEFAULT_MAX_LINES == 20
        assert len(render_rows(numbered_log)) == 20

    def test_select_window_does_not_filter_by_type(self):
        log = [LogLine.dim("x"), LogLine.error("y"), LogLine(text="z", type="weird")]
        assert select_window(log, 3) == log

    def test_input_is_not_mutated(self, numbered_log):
        snapshot = list(numbered_log)
        render_rows(numbered_log, 5)
        assert numbered_log == snapshot

    def test_idempotent(self, numbered_log):
        assert render_rows(numbered_log, 7) == render_rows(numbered_log, 7)

    def test_accepts_tuple_log(self, numbered_log):
        assert render_rows(tuple(numbered_log), 3) == render_rows(numbered_log, 3)


class TestNonPositiveWindow:
    """A window of zero or less shows nothing instead of failing."""

    @pytest.mark.parametrize("window", [0, -1, -25])
    def test_no_rows(self, numbered_log, window):
        assert render_rows(numbered_log, window) == []

    @pytest.mark.parametrize("window", [0, -3])
    def test_empty_log_no_placeholder(self, window):
        assert render_rows([], window) == []

    def test_select_window_zero_is_empty(self, numbered_log):
        # A naive log[-0:] would return everything
        assert select_window(numbered_log, 0) == []


class TestPlaceholder:
    """Test the empty-log placeholder row."""

    @pytest.mark.parametrize("window", [1, 5, 20, 1000])
    def test_single_dim_placeholder(self, window):
        rows = render_rows([], window)

        assert rows == [Row(glyph="", color=None, dim=True, text=PLACEHOLDER_TEXT)]

    def test_placeholder_text(self):
        assert render_rows([], 20)[0].text == "Type / for commands, or enter a task"


class TestTypePresentation:
    """Test line type to glyph/color/emphasis mapping."""

    @pytest.mark.parametrize(
        "line_type,glyph,color,dim",
        [
            (LineType.SUCCESS, "✓ ", "green", False),
            (LineType.ERROR, "✗ ", "red", False),
            (LineType.INFO, "→ ", "cyan", False),
            (LineType.DIM, "", None, True),
            (LineType.PLAIN, "", None, False),
        ],
    )
    def test_mapping(self, line_type, glyph, color, dim):
        rows = render_rows([LogLine(text="sample", type=line_type)], 20)
        assert rows == [Row(glyph=glyph, color=color, dim=dim, text="sample")]

    def test_mapping_is_exhaustive(self):
        assert set(LINE_STYLES) == set(LineType)

    def test_unknown_type_falls_back(self):
        rows = render_rows([LogLine(text="odd", type="warning")], 20)
        assert rows == [Row(glyph="", color=None, dim=False, text="odd")]

    def test_style_for_unknown_string(self):
        assert style_for("nonsense") == FALLBACK_STYLE

    def test_style_for_plain_string_value(self):
        assert style_for("success") == LINE_STYLES[LineType.SUCCESS]

    def test_unvalidated_string_type_still_styled(self):
        line = LogLine.model_construct(text="build ok", type="success")
        assert render_rows([line], 20) == [Row(glyph="✓ ", color="green", dim=False, text="build ok")]

    @pytest.mark.parametrize("value", [None, 7])
    def test_non_string_type_falls_back(self, value):
        rows = render_rows([LogLine(text="odd", type=value)], 20)
        assert rows == [Row(glyph="", color=None, dim=False, text="odd")]

    def test_text_is_opaque(self):
        text = "[red]not markup[/red] \x1b[0m ✓"
        assert render_rows([LogLine.plain(text)], 1)[0].text == text


class TestScenarios:
    """End-to-end projection scenarios."""

    def test_empty_log(self):
        rows = render_rows([], 20)
        assert len(rows) == 1
        assert rows[0].text == "Type / for commands, or enter a task"
        assert rows[0].dim is True
        assert rows[0].glyph == ""

    def test_single_success(self):
        rows = render_rows([LogLine(type="success", text="build ok")], 20)
        assert rows == [Row(glyph="✓ ", color="green", dim=False, text="build ok")]

    def test_truncation_keeps_most_recent(self):
        log = [LogLine(type="error", text="fail"), LogLine(type="info", text="retrying")]
        rows = render_rows(log, 1)
        assert rows == [Row(glyph="→ ", color="cyan", dim=False, text="retrying")]
