"""Tests for ChangeBlockAccumulator."""

from split_diffs.models import HunkContext
from split_diffs.render.change_blocks import ChangeBlockAccumulator
from split_diffs.render.columns import ColumnFormatter


def _render(config, theme, start_a, start_b, lines):
    formatter = ColumnFormatter(config, theme)
    hunk = HunkContext(start_a=start_a, start_b=start_b, header_line="@@", lines=lines)
    return list(ChangeBlockAccumulator.for_hunk(formatter, hunk).render(hunk.lines))


class TestChangeBlockAccumulator:
    """Tests for pairing deletions and insertions."""

    def test_change_then_context(self, config, plain_theme, split_row):
        """Deletions and insertions pair by position; context follows."""
        rows = _render(config, plain_theme, 1, 1, ["-foo", "+bar", "+baz", " qux"])
        assert [split_row(row) for row in rows] == [
            (["1", "-", "foo"], ["1", "+", "bar"]),
            ([], ["2", "+", "baz"]),
            (["2", "qux"], ["3", "qux"]),
        ]

    def test_line_numbers_advance_per_side(self, config, plain_theme, split_row):
        """Each side counts up from its start, skipping missing rows."""
        rows = _render(config, plain_theme, 10, 20, [" a", "-b", "-c", "+d", " e"])
        assert [split_row(row) for row in rows] == [
            (["10", "a"], ["20", "a"]),
            (["11", "-", "b"], ["21", "+", "d"]),
            (["12", "-", "c"], []),
            (["13", "e"], ["22", "e"]),
        ]

    def test_interleaved_changes_are_grouped(self, config, plain_theme, split_row):
        """Order within a change block doesn't matter."""
        rows = _render(config, plain_theme, 1, 1, ["+x", "-a", "+y", "-b"])
        assert [split_row(row) for row in rows] == [
            (["1", "-", "a"], ["1", "+", "x"]),
            (["2", "-", "b"], ["2", "+", "y"]),
        ]

    def test_final_block_is_flushed(self, config, plain_theme, split_row):
        rows = _render(config, plain_theme, 5, 5, [" ctx", "-gone"])
        assert len(rows) == 2
        assert split_row(rows[1]) == (["6", "-", "gone"], [])

    def test_pure_addition(self, config, plain_theme, split_row):
        rows = _render(config, plain_theme, 0, 1, ["+x", "+y"])
        assert [split_row(row) for row in rows] == [
            ([], ["1", "+", "x"]),
            ([], ["2", "+", "y"]),
        ]

    def test_rows_are_full_width(self, config, plain_theme):
        rows = _render(config, plain_theme, 1, 1, ["-" + "word " * 10, "+short", " same"])
        assert all(len(row) == 40 for row in rows)

    def test_wrapped_change_keeps_sides_aligned(self, config, plain_theme):
        """A long deletion next to a short insertion pads the right side."""
        rows = _render(config, plain_theme, 1, 1, ["-" + "a" * 40, "+b", " c"])
        assert len(rows) == 4
        assert rows[1][20:] == rows[2][20:] == " " * 20
        assert rows[3].split() == ["2", "c", "2", "c"]

    def test_truncation_mode_has_one_row_per_pair(self, truncating_config, plain_theme):
        rows = _render(truncating_config, plain_theme, 1, 1, ["-" + "a" * 40, "+b"])
        assert len(rows) == 1

    def test_add_buffers_without_consuming_rows(self, config, plain_theme, split_row):
        """Lines are buffered even if the rows returned by add are ignored."""
        accumulator = ChangeBlockAccumulator(ColumnFormatter(config, plain_theme), 1, 1)
        accumulator.add("-a")
        accumulator.add("+b")
        rows = list(accumulator.flush())
        assert [split_row(row) for row in rows] == [(["1", "-", "a"], ["1", "+", "b"])]

    def test_flush_advances_counters_without_consuming_rows(self, config, plain_theme):
        accumulator = ChangeBlockAccumulator(ColumnFormatter(config, plain_theme), 3, 7)
        accumulator.add("-a")
        accumulator.add(" ctx")
        accumulator.flush()
        assert accumulator.line_no_a == 5
        assert accumulator.line_no_b == 8
        assert accumulator.lines_a == []
        assert accumulator.lines_b == []

    def test_missing_side_colors(self, config, tagging_theme):
        rows = _render(config, tagging_theme, 1, 1, ["-only"])
        assert "<deleted_line_color>" in rows[0]
        assert "<missing_line_color>" in rows[0]
