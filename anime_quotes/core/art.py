"""The character grid produced by conversion."""

from __future__ import annotations

from dataclasses import dataclass

from anime_quotes.core.color import ColorMode, colorize_cells

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class AsciiCell:
    char: str
    color: RGB


@dataclass(frozen=True)
class AsciiArt:
    """Immutable grid of colored glyphs, indexed ``[row][col]``."""

    rows: tuple[tuple[AsciiCell, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def cell(self, row: int, col: int) -> AsciiCell:
        return self.rows[row][col]

    @property
    def lines(self) -> list[str]:
        """Plain text lines (no color)."""
        return ["".join(cell.char for cell in row) for row in self.rows]

    def to_ansi_lines(self, mode: ColorMode = ColorMode.TRUECOLOR) -> list[str]:
        return [
            colorize_cells(((cell.char, cell.color) for cell in row), mode)
            for row in self.rows
        ]
