"""Per-image ASCII art cache.

Each image key is converted at most once. A failed conversion is remembered
as unavailable for the rest of the run and never retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from anime_quotes.core.art import AsciiArt
from anime_quotes.core.errors import ImageLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ready:
    art: AsciiArt


@dataclass(frozen=True)
class Unavailable:
    reason: str


ArtEntry = Union[Ready, Unavailable]


class ArtCache:
    """Write-once mapping from image key to conversion result."""

    def __init__(self) -> None:
        self._entries: dict[str, ArtEntry] = {}

    def resolve(self, key: str, factory: Callable[[], AsciiArt]) -> ArtEntry:
        """Return the entry for ``key``, running ``factory`` on first use."""
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        try:
            entry = Ready(factory())
        except ImageLoadError as e:
            logger.error("failed to load image from %s: %s", key, e.reason)
            entry = Unavailable(str(e))
        self._entries[key] = entry
        return entry

    def get(self, key: str) -> ArtEntry | None:
        return self._entries.get(key)

    def art_for(self, key: str | None) -> AsciiArt | None:
        """Converted art for ``key``, or None when missing or unavailable."""
        if key is None:
            return None
        entry = self.get(key)
        if isinstance(entry, Ready):
            return entry.art
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
