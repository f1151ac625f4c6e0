"""Tests for palette colour parsing and ANSI output."""

import pytest
from rich.color import Color

from anime_quotes.core.color import (
    RESET,
    ColorMode,
    Palette,
    ansi256_fg,
    colorize_cells,
    foreground_escape,
    parse_color,
    parse_color_or_default,
    rgb_to_ansi256,
    truecolor_fg,
)


class TestParseColor:
    def test_six_digit_hex(self):
        assert parse_color("#FF8800") == "#ff8800"

    def test_three_digit_hex(self):
        assert parse_color("#f80") == "#ff8800"

    def test_bad_hex(self):
        assert parse_color("#12345") is None
        assert parse_color("#gggggg") is None
        assert parse_color("ff8800") is None

    def test_names_case_insensitive(self):
        assert parse_color(" Yellow ") == "yellow"
        assert parse_color("CYAN") == "cyan"

    def test_gray_aliases(self):
        assert parse_color("gray") == parse_color("grey") == parse_color("lightgray")
        assert parse_color("darkgrey") == parse_color("darkgray")

    def test_unknown_and_empty(self):
        assert parse_color("chartreuse") is None
        assert parse_color("   ") is None

    @pytest.mark.parametrize(
        "name",
        ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white", "gray", "darkgray"],
    )
    def test_names_are_rich_colors(self, name):
        Color.parse(parse_color(name))

    def test_or_default(self):
        assert parse_color_or_default("nonsense", "blue") == "blue"
        assert parse_color_or_default("#000", "blue") == "#000000"


class TestPalette:
    def test_defaults_are_rich_colors(self):
        palette = Palette()
        for value in vars(palette).values():
            Color.parse(value)


class TestRgbToAnsi256:
    def test_black(self):
        assert rgb_to_ansi256(0, 0, 0) == 16

    def test_white(self):
        assert rgb_to_ansi256(255, 255, 255) == 231

    def test_mid_gray_uses_ramp(self):
        # 128 sits exactly on ramp step 12
        assert rgb_to_ansi256(128, 128, 128) == 244

    def test_pure_red(self):
        assert rgb_to_ansi256(255, 0, 0) == 196

    def test_cube_levels_are_exact(self):
        # (95, 135, 175) → cube coordinates (1, 2, 3)
        assert rgb_to_ansi256(95, 135, 175) == 16 + 36 * 1 + 6 * 2 + 3

    def test_range(self):
        for value in range(0, 256, 17):
            assert 16 <= rgb_to_ansi256(value, 255 - value, value // 2) <= 255


class TestEscapes:
    def test_truecolor_format(self):
        assert truecolor_fg(255, 128, 0) == "\033[38;2;255;128;0m"

    def test_ansi256_format(self):
        assert ansi256_fg(196) == "\033[38;5;196m"

    def test_foreground_escape_modes(self):
        assert foreground_escape((1, 2, 3), ColorMode.TRUECOLOR) == "\033[38;2;1;2;3m"
        assert foreground_escape((255, 0, 0), ColorMode.ANSI256) == "\033[38;5;196m"
        assert foreground_escape((1, 2, 3), ColorMode.NONE) == ""


class TestColorizeCells:
    RED = (255, 0, 0)
    GREEN = (0, 255, 0)

    def test_none_mode(self):
        cells = [("A", self.RED), ("B", self.GREEN)]
        assert colorize_cells(cells, ColorMode.NONE) == "AB"

    def test_truecolor(self):
        result = colorize_cells([("A", self.RED), ("B", self.GREEN)], ColorMode.TRUECOLOR)
        assert result == "\033[38;2;255;0;0mA\033[38;2;0;255;0mB" + RESET

    def test_ansi256(self):
        result = colorize_cells([("X", self.RED)], ColorMode.ANSI256)
        assert result == "\033[38;5;196mX" + RESET

    def test_repeated_color_shares_escape(self):
        result = colorize_cells([("A", self.RED), ("B", self.RED)], ColorMode.TRUECOLOR)
        assert result.count("\033[38;2;255;0;0m") == 1

    def test_empty_line(self):
        assert colorize_cells([], ColorMode.TRUECOLOR) == ""
