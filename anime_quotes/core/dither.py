"""Serpentine Floyd-Steinberg error diffusion over a luminance buffer."""

from __future__ import annotations

import numpy as np

# (dx ahead of the scan direction, dy, weight)
_DIFFUSION = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)


def serpentine_dither(luminance: np.ndarray, levels: int) -> np.ndarray:
    """Quantize a luminance buffer to gradient indices with error diffusion.

    Rows are walked top to bottom, even rows left to right and odd rows right
    to left; the diffusion kernel is mirrored on right-to-left rows. The
    buffer is updated in place as error accumulates, and every touched value
    is clamped back into [0.0, 1.0]. Indices are rounded half to even.

    Args:
        luminance: 2D float array with values in [0.0, 1.0]. Mutated.
        levels: number of gradient glyphs.

    Returns:
        2D int array of gradient indices in [0, levels - 1].
    """
    h, w = luminance.shape
    indices = np.zeros((h, w), dtype=np.intp)
    levels = max(1, levels)
    max_index = float(levels - 1)
    if max_index <= 0:
        # A single glyph has nothing to diffuse between
        return indices

    for y in range(h):
        step = 1 if y % 2 == 0 else -1
        columns = range(w) if step == 1 else range(w - 1, -1, -1)
        for x in columns:
            value = min(1.0, max(0.0, float(luminance[y, x])))
            scaled = min(max_index, max(0.0, value * max_index))
            index = round(scaled)
            err = value - index / max_index
            indices[y, x] = min(levels - 1, max(0, index))

            for dx, dy, weight in _DIFFUSION:
                nx, ny = x + dx * step, y + dy
                if 0 <= nx < w and ny < h:
                    updated = luminance[ny, nx] + err * weight
                    luminance[ny, nx] = min(1.0, max(0.0, updated))

    return indices
