"""Portrait composition pipeline.

Layers are drawn in a fixed order onto a fresh 200x200 canvas: character
art, gear or relic border, level badge and number, then the optional zeta
and omicron badges with their counts. The first asset or font failure aborts
the whole build.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Optional
import logging

from PIL import Image

from ..catalog import Character
from ..validation import MAX_GEAR_LEVEL, PortraitRequest
from .assets import AssetLayout, FontFace, default_asset_layout, load_font, load_image
from .canvas import center_over, draw_over, place_on_canvas
from .text import WHITE, centered_text_origin, draw_text


logger = logging.getLogger("portrait_core.render.builder")

SMALL_FONT_SIZE = 18
LARGE_FONT_SIZE = 24


class PortraitRenderError(RuntimeError):
    """Raised when a composed portrait cannot be encoded."""


@dataclass(frozen=True)
class BadgeSlot:
    name: str
    offset: tuple[int, int]
    size: tuple[int, int]
    nudge: int


LEVEL_BADGE = BadgeSlot(name="level", offset=(75, 128), size=(50, 44), nudge=5)
ZETA_BADGE = BadgeSlot(name="zeta", offset=(18, 100), size=(60, 60), nudge=4)
OMICRON_BADGE = BadgeSlot(name="omicron", offset=(121, 100), size=(60, 60), nudge=4)


def _draw_badge(
    canvas: Image.Image,
    layout: AssetLayout,
    slot: BadgeSlot,
    face: FontFace,
    text: str,
) -> None:
    badge = load_image(layout.badge(slot.name))
    draw_over(canvas, badge, slot.offset)
    origin = centered_text_origin(slot.offset, slot.size, face, text, slot.nudge)
    draw_text(canvas, face, origin, text, WHITE)


def build_portrait(
    request: PortraitRequest,
    character: Character,
    layout: Optional[AssetLayout] = None,
) -> Image.Image:
    """Compose the portrait for a validated request."""
    layout = layout or default_asset_layout()

    small = load_font(layout.font_path, SMALL_FONT_SIZE)
    large = load_font(layout.font_path, LARGE_FONT_SIZE)

    portrait = load_image(layout.character_image(character.image_file))
    canvas = place_on_canvas(portrait)

    if request.gear_level < MAX_GEAR_LEVEL:
        center_over(canvas, load_image(layout.gear_border(request.gear_level)))
    else:
        draw_over(canvas, load_image(layout.relic_border(character.affiliation)), (0, 0))

    _draw_badge(canvas, layout, LEVEL_BADGE, large, str(request.level))

    if request.zetas > 0:
        _draw_badge(canvas, layout, ZETA_BADGE, small, str(request.zetas))

    if request.omicrons > 0:
        _draw_badge(canvas, layout, OMICRON_BADGE, small, str(request.omicrons))

    logger.debug(
        "[BUILD] Composed portrait: char='%s', gear=%d, relic=%d, zetas=%d, omicrons=%d",
        character.character_id,
        request.gear_level,
        request.relic_level,
        request.zetas,
        request.omicrons,
    )
    return canvas


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise PortraitRenderError(f"failed to encode image: {exc}") from exc
    return buf.getvalue()


def render_portrait_png(
    request: PortraitRequest,
    character: Character,
    layout: Optional[AssetLayout] = None,
) -> bytes:
    return encode_png(build_portrait(request, character, layout))
