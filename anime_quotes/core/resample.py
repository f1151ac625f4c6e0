"""Resize a source image to the sample grid used for quantization."""

from __future__ import annotations

import numpy as np
from PIL import Image

from anime_quotes.core.errors import ResizeError
from anime_quotes.core.settings import AsciiSettings


def resample(source: Image.Image, settings: AsciiSettings) -> np.ndarray:
    """Resize ``source`` to the sample buffer for ``settings``.

    Each character cell is covered by ``detail_x * detail_y`` samples; the
    height follows the source aspect ratio scaled by ``char_aspect`` to
    compensate for tall terminal cells.

    Returns:
        RGBA uint8 array of shape (sample_height, sample_width, 4).
    """
    if source.width <= 0 or source.height <= 0:
        raise ResizeError(_source_path(source), "image has no pixels")

    try:
        width, height = settings.sample_dimensions(source.width, source.height)
        # BICUBIC in Pillow is the Catmull-Rom kernel (a = -0.5)
        resized = source.convert("RGBA").resize((width, height), Image.Resampling.BICUBIC)
        return np.array(resized, dtype=np.uint8)
    except (OSError, ValueError, OverflowError, MemoryError) as e:
        raise ResizeError(_source_path(source), str(e)) from e


def _source_path(source: Image.Image) -> str | None:
    return getattr(source, "filename", None) or None
