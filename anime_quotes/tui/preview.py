"""ASCII art widget for the quote screen."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from anime_quotes.core.art import AsciiArt, AsciiCell

PLACEHOLDER = "Image not available"
PLACEHOLDER_COLOR = "white"


def art_to_text(art: AsciiArt, max_width: int | None = None, max_height: int | None = None) -> Text:
    """Convert an AsciiArt grid to a Rich Text object, one line per row.

    Rows beyond ``max_height`` are cut off the bottom; rows wider than
    ``max_width`` lose equal parts on both sides so the picture stays centered.
    Consecutive cells with the same color share one span.
    """
    rows = art.rows if max_height is None else art.rows[: max(0, max_height)]
    text = Text(no_wrap=True, overflow="crop")

    for row_idx, row in enumerate(rows):
        if row_idx:
            text.append("\n")
        cells = row if max_width is None else _center_crop(row, max(0, max_width))
        run: list[str] = []
        run_color = None
        for cell in cells:
            if cell.color != run_color and run:
                text.append("".join(run), style=_rgb_style(run_color))
                run = []
            run_color = cell.color
            run.append(cell.char)
        if run:
            text.append("".join(run), style=_rgb_style(run_color))

    return text


def _center_crop(row: tuple[AsciiCell, ...], width: int) -> tuple[AsciiCell, ...]:
    if len(row) <= width:
        return row
    start = (len(row) - width) // 2
    return row[start : start + width]


def placeholder_text() -> Text:
    return Text(PLACEHOLDER, style=Style(color=PLACEHOLDER_COLOR), justify="center")


def _rgb_style(color: tuple[int, int, int]) -> Style:
    r, g, b = color
    return Style(color=f"rgb({r},{g},{b})")


class AsciiPreview(Widget):
    """Widget that displays the current quote's picture.

    Shows the placeholder text when the quote has no usable picture.
    """

    DEFAULT_CSS = """
    AsciiPreview {
        width: 1fr;
        height: auto;
        content-align: center top;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._art: AsciiArt | None = None
        self._max_width: int | None = None

    def show(self, art: AsciiArt | None, max_width: int | None = None) -> None:
        self._art = art
        self._max_width = max_width
        self.refresh()

    def render(self) -> Text:
        if self._art is None:
            return placeholder_text()
        text = art_to_text(self._art, max_width=self._max_width, max_height=self.size.height or None)
        text.justify = "center"
        return text
