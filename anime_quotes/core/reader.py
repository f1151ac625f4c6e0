"""Image loading for quote pictures."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from anime_quotes.core.errors import DecodeError

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file.

    The pixel data is loaded eagerly so truncated or corrupt files fail here
    rather than later during resampling.

    Raises:
        DecodeError: the file is missing or cannot be decoded.
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeError(path, "file not found")

    try:
        with Image.open(path) as img:
            img.load()
            image = img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(path, str(e)) from e

    logger.debug("Loaded %s (%dx%d, mode %s)", path, image.width, image.height, image.mode)
    return image
