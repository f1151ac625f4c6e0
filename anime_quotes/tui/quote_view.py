"""Text rendering for a single quote."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from anime_quotes.core.color import Palette
from anime_quotes.core.quotes import Quote

NO_QUOTES = "No quotes found!"
NO_QUOTES_HINT = "Make sure anime.toml exists in project root."


def quote_text(quote: Quote, palette: Palette, index: int, total: int) -> Text:
    """Build the centered text block for ``quote`` (``index`` is 0-based)."""
    lines = [
        Text.assemble("Anime: ", (quote.anime, Style(color=palette.anime, bold=True))),
        Text.assemble(
            "Character: ", (quote.character, Style(color=palette.character, bold=True))
        ),
        Text(""),
        Text.assemble(
            "Japanese: ", (quote.japanese, Style(color=palette.japanese, bold=True))
        ),
    ]
    if quote.romaji is not None:
        lines.append(Text.assemble("Romaji: ", (quote.romaji, Style(color=palette.romaji))))

    lines.extend(
        [
            Text(""),
            Text.assemble('"', (quote.quote, Style(color=palette.quote, italic=True)), '"'),
            Text(""),
            Text(f"({index + 1}/{total})", style=Style(color=palette.count)),
        ]
    )
    return _join(lines)


def empty_text() -> Text:
    return _join(
        [
            Text(NO_QUOTES, style=Style(color="red")),
            Text(NO_QUOTES_HINT, style=Style(color="white")),
        ]
    )


def instructions_text(palette: Palette) -> Text:
    key_style = Style(color=palette.instructions, bold=True)
    return Text.assemble(
        " Previous ",
        ("<Left>", key_style),
        " Next ",
        ("<Right>", key_style),
        " Quit ",
        ("<Q>", key_style),
        " ",
        justify="center",
    )


def _join(lines: list[Text]) -> Text:
    text = Text("\n").join(lines)
    text.justify = "center"
    return text
