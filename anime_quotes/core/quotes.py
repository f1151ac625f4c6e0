"""Quote records loaded from ``anime.toml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from anime_quotes.core.config import read_toml
from anime_quotes.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_QUOTES_PATH = Path("anime.toml")

_REQUIRED = ("japanese", "anime", "character", "quote")


@dataclass(frozen=True)
class Quote:
    japanese: str
    anime: str
    character: str
    quote: str
    romaji: str | None = None
    image: Path | None = None

    @property
    def image_key(self) -> str | None:
        """Stable cache key for the quote's picture."""
        return str(self.image) if self.image is not None else None


def _parse_quote(entry: Any, base_dir: Path, position: int) -> Quote | None:
    if not isinstance(entry, dict):
        logger.warning("Skipping quote #%d: not a table", position)
        return None

    missing = [key for key in _REQUIRED if not isinstance(entry.get(key), str)]
    if missing:
        logger.warning("Skipping quote #%d: missing %s", position, ", ".join(missing))
        return None

    romaji = entry.get("romaji")
    image = entry.get("image")
    image_path = None
    if isinstance(image, str) and image.strip():
        image_path = Path(image)
        if not image_path.is_absolute():
            image_path = base_dir / image_path

    return Quote(
        japanese=entry["japanese"],
        anime=entry["anime"],
        character=entry["character"],
        quote=entry["quote"],
        romaji=romaji if isinstance(romaji, str) else None,
        image=image_path,
    )


def load_quotes(path: str | Path = DEFAULT_QUOTES_PATH) -> list[Quote]:
    """Load all valid quotes; returns an empty list if the file is unusable.

    Relative image paths resolve against the quotes file's directory.
    """
    path = Path(path)
    try:
        document = read_toml(path)
    except ConfigError as e:
        logger.error("%s", e)
        return []

    entries = document.get("quotes", [])
    if not isinstance(entries, list):
        logger.error("%s: 'quotes' must be an array of tables", path)
        return []

    base_dir = path.resolve().parent
    quotes = []
    for position, entry in enumerate(entries, start=1):
        quote = _parse_quote(entry, base_dir, position)
        if quote is not None:
            quotes.append(quote)

    logger.info("Loaded %d quotes from %s", len(quotes), path)
    return quotes
