"""Character gradients used for ASCII art conversion.

A gradient is an ordered string of glyphs; luminance 0.0 selects the first
glyph and luminance 1.0 the last.
"""

from __future__ import annotations

from enum import Enum


class GradientName(str, Enum):
    DEFAULT = "default"
    SIMPLE = "simple"
    BLOCKS = "blocks"


# Dense → sparse, so dark pixels get heavy glyphs and bright ones fade out
DEFAULT_GRADIENT = (
    "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
)

# Sparse → dense (low luminance → high luminance)
SIMPLE_GRADIENT = " .:-=+*#%@"

# Unicode block elements, bottom-up fill
BLOCK_GRADIENT = " ▁▂▃▄▅▆▇█"

GRADIENTS: dict[GradientName, str] = {
    GradientName.DEFAULT: DEFAULT_GRADIENT,
    GradientName.SIMPLE: SIMPLE_GRADIENT,
    GradientName.BLOCKS: BLOCK_GRADIENT,
}


def resolve_gradient(value: str | None) -> str:
    """Return a usable gradient, falling back to the default for blank input.

    A preset name (``"simple"``, ``"blocks"``...) selects that preset; any
    other non-blank string is used verbatim.
    """
    if value is None or not value.strip():
        return DEFAULT_GRADIENT
    try:
        return GRADIENTS[GradientName(value)]
    except ValueError:
        return value
