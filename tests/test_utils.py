"""Tests for visual width measurement (prettyterm/utils.py)."""

from prettyterm import FG_RED, RESET_COLOR, STYLE_BOLD, expand, iter_visual_units, visual_len, visual_width


class TestVisualLen:
    def test_ascii(self):
        assert visual_len("hello") == 5

    def test_empty(self):
        assert visual_len("") == 0

    def test_escape_codes_are_zero_width(self):
        assert visual_len(f"{FG_RED}hi{RESET_COLOR}") == 2

    def test_only_escape_codes(self):
        assert visual_len(f"{FG_RED}{STYLE_BOLD}{RESET_COLOR}") == 0

    def test_multi_parameter_sequence(self):
        assert visual_len("\x1b[1;31;44mx\x1b[0m") == 1

    def test_expanded_plain_text_matches_length(self):
        text = "The quick brown fox"
        assert visual_len(expand(text)) == len(text)

    def test_expanded_tags_do_not_count(self):
        assert visual_len(expand("<red|bold>abc</red|bold> <blue>de</blue>")) == 6

    def test_counts_code_points_not_cells(self):
        # Wide characters and combining marks are one column per code point
        assert visual_len("中文") == 2
        assert visual_len("e\u0301") == 2

    def test_lone_escape_counts_as_a_character(self):
        assert visual_len("\x1bX") == 2

    def test_unterminated_sequence_runs_to_end(self):
        assert visual_len("ab\x1b[31") == 2

    def test_alias(self):
        assert visual_width is visual_len


class TestIterVisualUnits:
    def test_units(self):
        assert list(iter_visual_units("a\x1b[1mb")) == [("a", 1), ("\x1b[1m", 0), ("b", 1)]

    def test_box_drawing_characters(self):
        assert list(iter_visual_units("│─")) == [("│", 1), ("─", 1)]
