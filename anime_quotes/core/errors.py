"""Error types raised while turning images into ASCII art."""

from __future__ import annotations

from pathlib import Path


class ImageLoadError(Exception):
    """An image could not be turned into ASCII art."""

    def __init__(self, path: str | Path | None, reason: str) -> None:
        self.path = str(path) if path is not None else None
        self.reason = reason
        where = self.path if self.path is not None else "<image>"
        super().__init__(f"{where}: {reason}")


class DecodeError(ImageLoadError):
    """Missing, unreadable or corrupt image data."""


class ResizeError(ImageLoadError):
    """The image could not be resampled to the target grid."""


class ConfigError(Exception):
    """A TOML document could not be read or parsed."""
