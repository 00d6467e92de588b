"""Tests for wrapping and truncating line text."""

from split_diffs.render.line_wrapper import FittedText, fit_text_to_width, wrap_line_by_word


class TestWrapLineByWord:
    """Tests for word wrapping."""

    def test_hard_splits_long_word(self):
        """A word wider than the width is split at the boundary."""
        assert list(wrap_line_by_word("abcdefgh", 5)) == ["abcde", "fgh"]

    def test_short_text_is_single_segment(self):
        """Text that fits is yielded unchanged."""
        assert list(wrap_line_by_word("abc", 5)) == ["abc"]

    def test_empty_text_yields_one_empty_segment(self):
        """Empty text still produces a segment."""
        assert list(wrap_line_by_word("", 5)) == [""]

    def test_breaks_at_word_boundaries(self):
        """Whitespace at a break point is dropped."""
        assert list(wrap_line_by_word("hello world foo", 11)) == ["hello world", "foo"]
        assert list(wrap_line_by_word("aa bb cc", 5)) == ["aa bb", "cc"]

    def test_long_word_after_short_word(self):
        """A long word starts a new segment, then is hard-split."""
        assert list(wrap_line_by_word("ab cdefghijkl", 5)) == ["ab", "cdefg", "hijkl"]

    def test_segments_never_exceed_width(self):
        """Every segment fits in the width."""
        text = "the quick brown fox jumps over the extraordinarily lazy dog"
        for width in (1, 3, 7, 10, 16):
            segments = list(wrap_line_by_word(text, width))
            assert all(len(segment) <= width for segment in segments)
            assert "".join(segments).replace(" ", "") == text.replace(" ", "")

    def test_indentation_stays_with_first_word(self):
        """Leading indentation never becomes a segment of its own."""
        assert list(wrap_line_by_word("        some_long_identifier = 1", 15)) == [
            "        some_lo",
            "ng_identifier =",
            "1",
        ]

    def test_zero_width(self):
        """A zero width yields one empty segment instead of looping."""
        assert list(wrap_line_by_word("abc", 0)) == [""]


class TestFitTextToWidth:
    """Tests for the wrap-or-truncate switch."""

    def test_wraps_when_enabled(self):
        assert list(fit_text_to_width("abcdefgh", 5, True)) == ["abcde", "fgh"]

    def test_truncates_when_disabled(self):
        """Truncation keeps exactly one segment of the first characters."""
        assert list(fit_text_to_width("abcdefgh", 5, False)) == ["abcde"]

    def test_truncate_short_text(self):
        assert list(fit_text_to_width("abc", 5, False)) == ["abc"]

    def test_is_restartable(self):
        """Iterating twice produces the same segments."""
        fitted = fit_text_to_width("one two three four", 7, True)
        assert isinstance(fitted, FittedText)
        assert list(fitted) == list(fitted)
        assert list(fitted) == ["one two", "three", "four"]
