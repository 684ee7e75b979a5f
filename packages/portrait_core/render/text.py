"""Text measurement and baseline-anchored drawing on the portrait canvas."""

from __future__ import annotations

import math

from PIL import Image, ImageDraw

from .assets import FontFace
from .canvas import TRANSPARENT


WHITE = (255, 255, 255, 255)


def text_width(face: FontFace, text: str) -> int:
    """Advance width of ``text`` in whole pixels (half rounds up)."""
    return int(math.floor(face.font.getlength(text) + 0.5))


def centered_text_origin(
    region_offset: tuple[int, int],
    region_size: tuple[int, int],
    face: FontFace,
    text: str,
    nudge: int,
) -> tuple[int, int]:
    """Left-baseline point that centers ``text`` inside a badge region.

    ``nudge`` shifts the baseline up to compensate for the gap between the
    glyph ascent and the visual center of digits.
    """
    width = text_width(face, text)
    x = region_offset[0] + (region_size[0] - width) // 2
    y = region_offset[1] + (region_size[1] + face.ascent) // 2 - nudge
    return x, y


def draw_text(
    canvas: Image.Image,
    face: FontFace,
    position: tuple[int, int],
    text: str,
    fill: tuple[int, int, int, int] = WHITE,
) -> None:
    """Draw ``text`` with its left baseline at ``position``, blended over ``canvas``."""
    layer = Image.new("RGBA", canvas.size, TRANSPARENT)
    ImageDraw.Draw(layer).text(position, text, font=face.font, fill=fill, anchor="ls")
    canvas.paste(Image.alpha_composite(canvas, layer))
