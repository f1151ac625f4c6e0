"""Image → ASCII art pipeline.

Resample → luminance → serpentine dither → glyph/colour assembly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from anime_quotes.core.art import AsciiArt, AsciiCell
from anime_quotes.core.charsets import resolve_gradient
from anime_quotes.core.dither import serpentine_dither
from anime_quotes.core.luminance import extract_luminance, transparent_mask
from anime_quotes.core.reader import load_image
from anime_quotes.core.resample import resample
from anime_quotes.core.settings import AsciiSettings

logger = logging.getLogger(__name__)

HOLE_CHAR = " "


def quantize_samples(samples: np.ndarray, gradient: str) -> AsciiArt:
    """Turn an RGBA sample buffer into an AsciiArt grid.

    Each cell keeps the sample's own RGB colour; only the glyph is
    quantized. Transparent samples always become a space.
    """
    gradient = resolve_gradient(gradient)
    luminance = extract_luminance(samples)
    holes = transparent_mask(samples)
    indices = serpentine_dither(luminance, len(gradient))

    rows = []
    for y in range(samples.shape[0]):
        row = []
        for x in range(samples.shape[1]):
            r, g, b = (int(c) for c in samples[y, x, :3])
            char = HOLE_CHAR if holes[y, x] else gradient[indices[y, x]]
            row.append(AsciiCell(char=char, color=(r, g, b)))
        rows.append(tuple(row))
    return AsciiArt(rows=tuple(rows))


def convert_image(image: Image.Image, settings: AsciiSettings) -> AsciiArt:
    """Convert a decoded image with the given settings."""
    samples = resample(image, settings)
    art = quantize_samples(samples, settings.gradient)
    logger.debug(
        "Converted %dx%d image to %dx%d cells",
        image.width, image.height, art.width, art.height,
    )
    return art


def convert_file(path: str | Path, settings: AsciiSettings) -> AsciiArt:
    """Load and convert an image file.

    Raises:
        ImageLoadError: the file cannot be decoded or resampled.
    """
    return convert_image(load_image(path), settings)
