"""Layout of the quote screen."""

from __future__ import annotations

from dataclasses import dataclass

IMAGE_TOP_PADDING = 2
IMAGE_TEXT_GAP = 1


@dataclass(frozen=True)
class Region:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class QuoteLayout:
    image: Region
    text: Region


def quote_layout(inner_width: int, inner_height: int, art_width: int, art_height: int) -> QuoteLayout:
    """Split the framed area into an image box and a text box.

    The image sits ``IMAGE_TOP_PADDING`` rows below the top, centered
    horizontally and clipped to the available space; the text starts
    ``IMAGE_TEXT_GAP`` rows below the image and takes what is left.
    Coordinates are relative to the inner area.
    """
    inner_width = max(0, inner_width)
    inner_height = max(0, inner_height)

    reserved = IMAGE_TOP_PADDING + IMAGE_TEXT_GAP
    image_height = max(0, min(art_height, inner_height - reserved))
    image_width = max(0, min(art_width, inner_width))
    image_x = (inner_width - image_width) // 2
    image = Region(image_x, IMAGE_TOP_PADDING, image_width, image_height)

    text_y = IMAGE_TOP_PADDING + image_height + IMAGE_TEXT_GAP
    text = Region(0, text_y, inner_width, max(0, inner_height - text_y))
    return QuoteLayout(image=image, text=text)
