"""Color parsing for the UI palette and ANSI escapes for headless output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

# Config color names → rich color names
NAMED_COLORS: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "bright_white",
    "gray": "white",
    "grey": "white",
    "darkgray": "bright_black",
    "darkgrey": "bright_black",
    "lightgray": "white",
    "lightgrey": "white",
}


def _parse_hex_color(value: str) -> str | None:
    if not value.startswith("#"):
        return None
    digits = value[1:]
    try:
        if len(digits) == 6:
            r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        elif len(digits) == 3:
            r, g, b = (int(d, 16) * 17 for d in digits)
        else:
            return None
    except ValueError:
        return None
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_color(value: str) -> str | None:
    """Parse a config color (``#rrggbb``, ``#rgb`` or a name) to a rich color.

    Returns None for anything unrecognised.
    """
    trimmed = value.strip()
    if not trimmed:
        return None
    rgb = _parse_hex_color(trimmed)
    if rgb is not None:
        return rgb
    return NAMED_COLORS.get(trimmed.lower())


def parse_color_or_default(value: str, default: str) -> str:
    parsed = parse_color(value)
    return parsed if parsed is not None else default


@dataclass(frozen=True)
class Palette:
    """Rich color names for each part of the quote display."""

    anime: str = NAMED_COLORS["yellow"]
    character: str = NAMED_COLORS["cyan"]
    japanese: str = NAMED_COLORS["green"]
    romaji: str = NAMED_COLORS["magenta"]
    quote: str = NAMED_COLORS["white"]
    count: str = NAMED_COLORS["gray"]
    instructions: str = NAMED_COLORS["blue"]


class ColorMode(str, Enum):
    NONE = "none"
    ANSI256 = "256"
    TRUECOLOR = "truecolor"


RESET = "\033[0m"

# Channel values of the xterm 6x6x6 cube (indices 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _nearest_level(value: int) -> int:
    return min(range(len(CUBE_LEVELS)), key=lambda i: abs(CUBE_LEVELS[i] - value))


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Closest xterm 256-color index, from the color cube or the gray ramp.

    The gray ramp (232-255) runs 8, 18, ..., 238; on a tie the cube wins.
    """
    ri, gi, bi = _nearest_level(r), _nearest_level(g), _nearest_level(b)
    cube = (CUBE_LEVELS[ri], CUBE_LEVELS[gi], CUBE_LEVELS[bi])

    gray_step = min(23, max(0, round(((r + g + b) / 3 - 8) / 10)))
    gray = 8 + 10 * gray_step

    def distance(target: tuple[int, int, int]) -> int:
        return sum((a - t) ** 2 for a, t in zip((r, g, b), target))

    if distance((gray, gray, gray)) < distance(cube):
        return 232 + gray_step
    return 16 + 36 * ri + 6 * gi + bi


def ansi256_fg(color_idx: int) -> str:
    return f"\033[38;5;{color_idx}m"


def truecolor_fg(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def foreground_escape(color: tuple[int, int, int], mode: ColorMode) -> str:
    """Escape that sets the foreground to ``color``; empty for NONE."""
    if mode == ColorMode.TRUECOLOR:
        return truecolor_fg(*color)
    if mode == ColorMode.ANSI256:
        return ansi256_fg(rgb_to_ansi256(*color))
    return ""


def colorize_cells(
    cells: Iterable[tuple[str, tuple[int, int, int]]],
    mode: ColorMode,
) -> str:
    """Render ``(glyph, (r, g, b))`` pairs as one line of escaped text.

    An escape is emitted only where the color changes, and the line ends
    with a reset whenever any escape was written.
    """
    parts: list[str] = []
    current = ""
    for char, color in cells:
        escape = foreground_escape(color, mode)
        if escape != current:
            parts.append(escape)
            current = escape
        parts.append(char)
    if current:
        parts.append(RESET)
    return "".join(parts)
