"""Unit tests for timestamp recalculation.

WHY: Recalculation rewrites user-visible text. It must touch nothing but the
marker substrings, keep every line, and give the same answer when re-run.
"""

import logging

import pytest

from script_timing import PacingModel, recalculate_timestamps


class TestRecalculateTimestamps:

    def test_sample_script(self, sample_script, sample_recalculated):
        assert recalculate_timestamps(sample_script) == sample_recalculated

    def test_heading_does_not_advance_clock(self):
        text = "## Section\n" + "x" * 45 + "\n(00:00) Next"
        result = recalculate_timestamps(text)
        assert result.split("\n")[2] == "(00:10) Next"

    def test_marker_line_text_does_not_advance_clock(self):
        text = "(00:45) " + "x" * 100 + "\n(00:50) y"
        assert recalculate_timestamps(text) == "(00:00) " + "x" * 100 + "\n(00:00) y"

    def test_blank_lines_do_not_advance_clock(self):
        text = "\n\n   \n(00:09) a"
        assert recalculate_timestamps(text) == "\n\n   \n(00:00) a"

    def test_fractional_seconds_accumulate(self):
        pacing = PacingModel(chars_per_second=2.0)
        # 3 chars -> 1.5 s each; flooring per line would give 2
        result = recalculate_timestamps("abc\nabc\n(00:00) end", pacing)
        assert result.endswith("(00:03) end")

    def test_only_marker_substring_replaced(self):
        text = "**(07:07)** Scene two [wide] **bold**"
        result = recalculate_timestamps(text)
        assert result == "**(00:00)** Scene two [wide] **bold**"

    def test_bare_marker_gets_parentheses(self):
        assert recalculate_timestamps("00:30 Hello") == "(00:00) Hello"

    def test_second_marker_on_line_untouched(self):
        text = "hello world\n(00:00) see 00:40"
        pacing = PacingModel(chars_per_second=1.0)
        assert recalculate_timestamps(text, pacing) == "hello world\n(00:11) see 00:40"

    def test_line_count_preserved(self, sample_script):
        text = sample_script + "\n\n"
        assert len(recalculate_timestamps(text).split("\n")) == len(text.split("\n"))

    def test_no_markers_unchanged(self):
        text = "# Title\nSome text.\n\nMore text."
        assert recalculate_timestamps(text) == text

    def test_stable_under_repetition(self, sample_script):
        once = recalculate_timestamps(sample_script)
        twice = recalculate_timestamps(once)
        assert once == twice

    def test_overrides_manual_timestamps(self):
        assert recalculate_timestamps("(42:42) Hi") == "(00:00) Hi"

    def test_clock_past_99_minutes_leaves_marker(self, caplog):
        pacing = PacingModel(chars_per_second=1.0)
        text = "x" * 6000 + "\n(12:34) late"
        with caplog.at_level(logging.WARNING, logger="script_timing.recalc"):
            result = recalculate_timestamps(text, pacing)
        assert result == text
        assert "does not fit" in caplog.text

    def test_multi_hour_marker_is_plain_text(self):
        pacing = PacingModel(chars_per_second=1.0)
        result = recalculate_timestamps("(100:00) ab\n(00:00) next", pacing)
        assert result == "(100:00) ab\n(00:11) next"


class TestPacingModel:

    def test_defaults(self):
        pacing = PacingModel()
        assert pacing.chars_per_second == 4.5
        assert pacing.trailing_min_seconds == 3
        assert pacing.trailing_chars_per_second == 10

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError, match="chars_per_second"):
            PacingModel(chars_per_second=0)
