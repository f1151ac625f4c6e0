"""Main Textual application: page through quotes with their pictures."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import Resize
from textual.widgets import Static

from anime_quotes.core.color import Palette
from anime_quotes.core.config import DEFAULT_CONFIG_PATH, UiConfig, load_ui_config
from anime_quotes.core.processor import convert_file
from anime_quotes.core.quotes import DEFAULT_QUOTES_PATH, Quote, load_quotes
from anime_quotes.core.settings import AsciiSettings
from anime_quotes.tui.preview import AsciiPreview
from anime_quotes.tui.quote_view import empty_text, instructions_text, quote_text
from anime_quotes.utils.cache import ArtCache
from anime_quotes.utils.layout import IMAGE_TEXT_GAP, IMAGE_TOP_PADDING, quote_layout

logger = logging.getLogger(__name__)


def build_art_cache(quotes: list[Quote], settings: AsciiSettings) -> ArtCache:
    """Convert every distinct quote picture once, in quote order."""
    cache = ArtCache()
    for quote in quotes:
        key = quote.image_key
        if key is None or key in cache:
            continue
        cache.resolve(key, lambda path=quote.image: convert_file(path, settings))
    return cache


class QuoteFrame(Vertical):
    """Bordered area holding the picture and the quote text."""

    DEFAULT_CSS = f"""
    QuoteFrame {{
        border: thick $accent;
        border-title-align: center;
        border-title-style: bold;
        height: 1fr;
        width: 1fr;
    }}

    QuoteFrame AsciiPreview {{
        margin: {IMAGE_TOP_PADDING} 0 {IMAGE_TEXT_GAP} 0;
    }}

    QuoteFrame #quote {{
        width: 1fr;
        height: 1fr;
        text-align: center;
    }}

    QuoteFrame #instructions {{
        dock: bottom;
        width: 1fr;
        height: 1;
        text-align: center;
    }}
    """

    def on_resize(self, event: Resize) -> None:
        self.app.call_after_refresh(self.app.refresh_quote)


class AnimeQuotesApp(App):
    """Terminal quote viewer."""

    TITLE = "Anime Quotes"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("left", "previous_quote", "Previous", priority=True),
        Binding("right", "next_quote", "Next", priority=True),
    ]

    def __init__(
        self,
        quotes: list[Quote],
        ui_config: UiConfig,
        cache: ArtCache,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._quotes = quotes
        self._cache = cache
        self._palette: Palette = ui_config.colors.to_palette()
        self._show_instructions = ui_config.show_instructions
        self._current_index = 0

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_quote(self) -> Quote | None:
        if not self._quotes:
            return None
        return self._quotes[self._current_index]

    def compose(self) -> ComposeResult:
        with QuoteFrame(id="frame"):
            yield AsciiPreview(id="art")
            yield Static(id="quote")
            yield Static(instructions_text(self._palette), id="instructions")

    def on_mount(self) -> None:
        frame = self.query_one(QuoteFrame)
        frame.border_title = " Anime Quotes "
        self.query_one("#instructions", Static).display = self._show_instructions
        self.refresh_quote()

    def refresh_quote(self) -> None:
        """Redraw the picture and text for the current quote."""
        quote = self.current_quote
        preview = self.query_one(AsciiPreview)
        text = self.query_one("#quote", Static)

        if quote is None:
            preview.display = False
            text.update(empty_text())
            return

        preview.display = True
        art = self._cache.art_for(quote.image_key)
        frame = self.query_one(QuoteFrame)
        inner = frame.content_size
        inner_height = inner.height - (1 if self._show_instructions else 0)
        layout = quote_layout(
            inner.width,
            inner_height,
            art.width if art is not None else inner.width,
            art.height if art is not None else 1,
        )
        preview.styles.height = layout.image.height
        preview.show(art, max_width=layout.image.width)
        text.update(quote_text(quote, self._palette, self._current_index, len(self._quotes)))

    # --- Actions ---

    def action_next_quote(self) -> None:
        if not self._quotes:
            return
        self._current_index = (self._current_index + 1) % len(self._quotes)
        self.refresh_quote()

    def action_previous_quote(self) -> None:
        if not self._quotes:
            return
        self._current_index = (self._current_index - 1) % len(self._quotes)
        self.refresh_quote()


def create_app(
    quotes_path: str | Path = DEFAULT_QUOTES_PATH,
    config_path: str | Path = DEFAULT_CONFIG_PATH,
) -> AnimeQuotesApp:
    """Load quotes and config and convert every picture up front."""
    quotes = load_quotes(quotes_path)
    ui_config = load_ui_config(config_path)
    settings = ui_config.ascii.to_settings()
    cache = build_art_cache(quotes, settings)
    logger.info("Prepared %d pictures for %d quotes", len(cache), len(quotes))
    return AnimeQuotesApp(quotes, ui_config, cache)


def run_app(
    quotes_path: str | Path = DEFAULT_QUOTES_PATH,
    config_path: str | Path = DEFAULT_CONFIG_PATH,
) -> None:
    """Launch the TUI application."""
    app = create_app(quotes_path, config_path)
    app.run()
