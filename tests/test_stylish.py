"""Tests for the inline style tag engine (prettyterm/stylish.py)."""

import pytest

from prettyterm import (
    BG_BLUE,
    FG_GREEN,
    FG_RED,
    RESET_COLOR,
    STYLE_BOLD,
    STYLE_CODES,
    STYLE_CROSSED_OUT,
    STYLE_ITALIC,
    StyleToken,
    expand,
    get_style_code,
    iter_style_tokens,
    process_style_tags,
    sty,
)


class TestStyleCodes:
    def test_table_has_every_style(self):
        assert len(STYLE_CODES) == 22

    def test_lookup_is_case_insensitive(self):
        assert get_style_code("Bold") == STYLE_BOLD
        assert get_style_code("BG-BLUE") == BG_BLUE
        assert get_style_code("crossedout") == STYLE_CROSSED_OUT

    def test_unknown_name_is_empty(self):
        assert get_style_code("sparkly") == ""
        assert get_style_code("") == ""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            STYLE_CODES["red"] = "x"  # type: ignore[index]


class TestIterStyleTokens:
    def test_splits_text_and_tags(self):
        tokens = list(iter_style_tokens("x<red|bold>y</z>"))
        assert tokens == [
            "x",
            StyleToken(False, ["red", "bold"]),
            "y",
            StyleToken(True, ["z"]),
        ]

    def test_plain_text_is_one_run(self):
        assert list(iter_style_tokens("no tags here")) == ["no tags here"]

    def test_unterminated_tag_takes_rest_of_input(self):
        assert list(iter_style_tokens("a<red")) == ["a", StyleToken(False, ["red"])]

    def test_empty_input(self):
        assert list(iter_style_tokens("")) == []


class TestProcessStyleTags:
    def test_single_tag(self):
        assert process_style_tags("<red>Hello</red>") == f"{FG_RED}Hello{RESET_COLOR}"

    def test_combined_tag_applies_in_order(self):
        assert expand("<red|bold>X</red|bold>") == f"{FG_RED}{STYLE_BOLD}X{RESET_COLOR}"

    def test_nested_close_restores_enclosing_style(self):
        result = expand("<red>A<bold>B</bold>C</red>")
        assert result == f"{FG_RED}A{STYLE_BOLD}B{RESET_COLOR}{FG_RED}C{RESET_COLOR}"

    def test_restore_replays_declared_order(self):
        result = expand("<bold|red><bg-blue>x</bg-blue>y</bold|red>")
        assert result == (
            f"{STYLE_BOLD}{FG_RED}{BG_BLUE}x{RESET_COLOR}{STYLE_BOLD}{FG_RED}y{RESET_COLOR}"
        )

    def test_restore_replays_every_open_scope(self):
        result = expand("<red><italic><bold>x</bold>y")
        assert result == (
            f"{FG_RED}{STYLE_ITALIC}{STYLE_BOLD}x{RESET_COLOR}{FG_RED}{STYLE_ITALIC}y{RESET_COLOR}"
        )

    def test_close_without_open_is_noop(self):
        assert expand("</red>text") == "text"

    def test_unclosed_tag_gets_final_reset(self):
        assert expand("<green>abc") == f"{FG_GREEN}abc{RESET_COLOR}"

    def test_closing_body_is_ignored(self):
        assert expand("<red>x</anything at all>") == f"{FG_RED}x{RESET_COLOR}"

    def test_tag_names_are_case_insensitive(self):
        assert expand("<RED>x</RED>") == f"{FG_RED}x{RESET_COLOR}"

    def test_unknown_name_still_opens_a_scope(self):
        assert expand("<sparkly>x</sparkly>") == f"x{RESET_COLOR}"

    def test_whitespace_is_not_stripped_from_names(self):
        assert expand("< red>x</red>") == f"x{RESET_COLOR}"

    def test_plain_text_unchanged(self):
        assert expand("hello world") == "hello world"

    def test_empty_string(self):
        assert expand("") == ""

    def test_only_tags(self):
        assert expand("<red></red>") == f"{FG_RED}{RESET_COLOR}"

    def test_less_than_always_starts_a_tag(self):
        # No escaping: " b" becomes the body of an unterminated opening tag
        assert expand("a < b") == f"a {RESET_COLOR}"

    def test_empty_tag(self):
        assert expand("a<>b") == f"ab{RESET_COLOR}"

    @pytest.mark.parametrize(
        "text, closes",
        [
            ("<red>a</red>", 1),
            ("<red>a<bold>b</bold></red>", 2),
            ("<red|bold>a</red|bold><blue>b</blue>", 2),
            ("plain", 0),
        ],
    )
    def test_one_reset_per_close_when_balanced(self, text, closes):
        assert expand(text).count(RESET_COLOR) == closes

    @pytest.mark.parametrize(
        "text, resets",
        [
            ("<red>a", 1),
            ("<red>a<bold>b</bold>", 2),
            ("<red><bold>a", 1),
            ("</red></red>", 0),
        ],
    )
    def test_one_extra_reset_when_left_open(self, text, resets):
        assert expand(text).count(RESET_COLOR) == resets


class TestSty:
    def test_formats_then_expands(self):
        assert sty("<green>{}</green>", 5) == f"{FG_GREEN}5{RESET_COLOR}"

    def test_keyword_arguments(self):
        assert sty("<red>{name}</red>", name="x") == f"{FG_RED}x{RESET_COLOR}"

    def test_no_arguments_keeps_braces(self):
        assert sty("{literal}") == "{literal}"
