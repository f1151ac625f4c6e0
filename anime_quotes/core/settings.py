"""Resolved conversion settings."""

from __future__ import annotations

import math
from dataclasses import dataclass

from anime_quotes.core.charsets import DEFAULT_GRADIENT, resolve_gradient

DEFAULT_TARGET_WIDTH = 30
DEFAULT_CHAR_ASPECT = 0.5
DEFAULT_DETAIL_X = 2
DEFAULT_DETAIL_Y = 2

# Upper bound for any grid dimension or multiplier
MAX_DIMENSION = 65535


def _clamp_dimension(value: int) -> int:
    return min(MAX_DIMENSION, max(1, int(value)))


@dataclass(frozen=True)
class AsciiSettings:
    """Settings that affect conversion output.

    Build instances through :meth:`create` so out-of-range values get
    clamped instead of rejected.
    """

    base_width: int = DEFAULT_TARGET_WIDTH
    char_aspect: float = DEFAULT_CHAR_ASPECT
    gradient: str = DEFAULT_GRADIENT
    detail_x: int = DEFAULT_DETAIL_X
    detail_y: int = DEFAULT_DETAIL_Y

    @classmethod
    def create(
        cls,
        base_width: int = DEFAULT_TARGET_WIDTH,
        char_aspect: float = DEFAULT_CHAR_ASPECT,
        gradient: str | None = DEFAULT_GRADIENT,
        detail_x: int = DEFAULT_DETAIL_X,
        detail_y: int = DEFAULT_DETAIL_Y,
    ) -> AsciiSettings:
        char_aspect = float(char_aspect)
        if not math.isfinite(char_aspect) or char_aspect <= 0:
            char_aspect = DEFAULT_CHAR_ASPECT
        return cls(
            base_width=_clamp_dimension(base_width),
            char_aspect=char_aspect,
            gradient=resolve_gradient(gradient),
            detail_x=_clamp_dimension(detail_x),
            detail_y=_clamp_dimension(detail_y),
        )

    def sample_dimensions(self, source_width: int, source_height: int) -> tuple[int, int]:
        """Size of the sample buffer for a source image, as (width, height).

        Both sides are clamped to ``[1, MAX_DIMENSION]``.
        """
        aspect_ratio = source_height / max(1, source_width)
        sample_width = _clamp_dimension(self.base_width * self.detail_x)
        base_height = max(1.0, aspect_ratio * self.base_width * self.char_aspect)
        rows = min(float(MAX_DIMENSION), max(1.0, base_height * self.detail_y))
        # Half rounds up, so 2.5 rows become 3
        sample_height = _clamp_dimension(math.floor(rows + 0.5))
        return sample_width, sample_height
