"""Fixed-size RGBA canvas and "draw over" compositing."""

from __future__ import annotations

from PIL import Image


CANVAS_WIDTH = 200
CANVAS_HEIGHT = 200
CANVAS_SIZE = (CANVAS_WIDTH, CANVAS_HEIGHT)
TRANSPARENT = (0, 0, 0, 0)


def centering_offset(container: tuple[int, int], content: tuple[int, int]) -> tuple[int, int]:
    """Offset that centers ``content`` inside ``container``.

    Each axis is halved with truncation toward zero, so content one pixel
    larger than the container still lands at 0.
    """
    return (int((container[0] - content[0]) / 2), int((container[1] - content[1]) / 2))


def new_canvas() -> Image.Image:
    """Return a 200x200 canvas cleared to full transparency."""
    return Image.new("RGBA", CANVAS_SIZE, TRANSPARENT)


def _place(layer: Image.Image, size: tuple[int, int], offset: tuple[int, int]) -> Image.Image:
    """Copy ``layer`` onto a transparent sheet of ``size`` at ``offset``, clipping the overflow."""
    if layer.size == size and offset == (0, 0):
        return layer
    sheet = Image.new("RGBA", size, TRANSPARENT)
    sheet.paste(layer, offset)
    return sheet


def draw_over(canvas: Image.Image, layer: Image.Image, offset: tuple[int, int] = (0, 0)) -> None:
    """Alpha-blend ``layer`` onto ``canvas`` in place with its top-left at ``offset``."""
    if layer.mode != "RGBA":
        layer = layer.convert("RGBA")
    composed = Image.alpha_composite(canvas, _place(layer, canvas.size, (int(offset[0]), int(offset[1]))))
    canvas.paste(composed)


def center_over(canvas: Image.Image, layer: Image.Image) -> tuple[int, int]:
    offset = centering_offset(canvas.size, layer.size)
    draw_over(canvas, layer, offset)
    return offset


def place_on_canvas(source: Image.Image) -> Image.Image:
    """Center ``source`` on a fresh transparent canvas."""
    canvas = new_canvas()
    center_over(canvas, source)
    return canvas
