"""Per-pixel luminance and transparency extraction."""

from __future__ import annotations

import numpy as np

# Alpha below this (out of 255) makes a pixel a hole in the picture
TRANSPARENCY_THRESHOLD = 32

# Rec. 709 luma coefficients
REC709_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def transparent_mask(samples: np.ndarray) -> np.ndarray:
    """Boolean (h, w) mask of pixels that are nearly fully transparent."""
    return samples[:, :, 3] < TRANSPARENCY_THRESHOLD


def extract_luminance(samples: np.ndarray) -> np.ndarray:
    """Convert an RGBA sample buffer to a float luminance buffer in [0.0, 1.0].

    Transparent pixels are pinned to 1.0 so they land in the brightest
    gradient slot; their glyph is replaced by a space later on.
    """
    rgb = samples[:, :, :3].astype(np.float64)
    luminance = (rgb @ REC709_WEIGHTS) / 255.0
    luminance[transparent_mask(samples)] = 1.0
    return np.clip(luminance, 0.0, 1.0)
