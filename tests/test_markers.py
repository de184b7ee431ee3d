"""Unit tests for time marker scanning and formatting.

WHY: Scan and rewrite share one pattern. If it accepted the wrong shapes,
caption export and recalculation would both silently go wrong.

RULES:
- Only the first marker on a line is reported.
- Digit runs longer than two are not markers.
"""

import types

from script_timing import count_markers, find_marker, format_marker, scan_lines


class TestFindMarker:
    """find_marker() on single lines."""

    def test_parenthesised_marker(self):
        marker = find_marker("(12:34) Hello", line_index=3)
        assert marker is not None
        assert marker.minutes == 12
        assert marker.seconds == 34
        assert marker.line_index == 3
        assert marker.span == (0, 7)
        assert marker.total_seconds == 754

    def test_bare_marker(self):
        marker = find_marker("at 05:07 the door opens")
        assert marker is not None
        assert marker.span == (3, 8)
        assert marker.total_seconds == 307

    def test_bold_wrapped_marker(self):
        marker = find_marker("**(01:15)** Next scene")
        assert marker is not None
        assert marker.span == (2, 9)

    def test_first_marker_only(self):
        marker = find_marker("(00:10) then (00:20)")
        assert marker.total_seconds == 10

    def test_seconds_not_range_checked(self):
        marker = find_marker("(00:75)")
        assert marker.total_seconds == 75

    def test_no_marker(self):
        assert find_marker("Just some narration.") is None

    def test_single_digit_minutes_not_a_marker(self):
        assert find_marker("(1:00) Intro") is None

    def test_three_digit_minutes_not_a_marker(self):
        assert find_marker("(100:00) Late in the show") is None

    def test_three_digit_seconds_not_a_marker(self):
        assert find_marker("ratio 12:345") is None


class TestScanLines:
    """scan_lines() over whole scripts."""

    def test_is_lazy(self):
        assert isinstance(scan_lines("a\nb"), types.GeneratorType)

    def test_tags_each_line(self):
        lines = list(scan_lines("# Title\n(00:00) Hi\nmore text"))
        assert [line.index for line in lines] == [0, 1, 2]
        assert [line.has_marker for line in lines] == [False, True, False]
        assert lines[1].marker.line_index == 1

    def test_preserves_text_exactly(self):
        text = "a\n\n(00:05) b\n"
        assert "\n".join(line.text for line in scan_lines(text)) == text

    def test_empty_text(self):
        lines = list(scan_lines(""))
        assert len(lines) == 1
        assert not lines[0].has_marker

    def test_count_markers(self, sample_script):
        assert count_markers(sample_script) == 2
        assert count_markers("no markers here") == 0


class TestFormatMarker:
    """format_marker() renders a running clock."""

    def test_zero(self):
        assert format_marker(0) == "(00:00)"

    def test_floors_fractional_seconds(self):
        assert format_marker(59.99) == "(00:59)"

    def test_minutes(self):
        assert format_marker(600) == "(10:00)"

    def test_largest_representable(self):
        assert format_marker(99 * 60 + 59.9) == "(99:59)"

    def test_out_of_range_returns_none(self):
        assert format_marker(100 * 60) is None
