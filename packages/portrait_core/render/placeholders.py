"""Placeholder artwork for running the portrait service without licensed assets.

Every file the renderer reads is written as flat shapes sized to the
badge slots and canvas the builder draws into.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import logging

from PIL import Image, ImageDraw, ImageFont

from ..catalog import SUPPORTED_CHARACTERS
from ..validation import MAX_GEAR_LEVEL
from .assets import DEFAULT_FONT_NAME, AssetLayout
from .canvas import CANVAS_SIZE, TRANSPARENT


logger = logging.getLogger("portrait_core.render.placeholders")

Color = tuple[int, int, int, int]

PORTRAIT_SIZE = (150, 150)
GEAR_BORDER_SIZE = (164, 164)
LEVEL_BADGE_SIZE = (50, 44)
UPGRADE_BADGE_SIZE = (60, 60)

AFFILIATION_COLORS: dict[str, Color] = {
    "dark_side": (170, 24, 32, 255),
    "light_side": (40, 110, 220, 255),
}
DEFAULT_AFFILIATION_COLOR: Color = (120, 120, 120, 255)

# Gear tiers 1-12, grey through gold.
GEAR_COLORS: tuple[Color, ...] = (
    (150, 150, 150, 255),
    (150, 150, 150, 255),
    (70, 170, 70, 255),
    (70, 170, 70, 255),
    (70, 170, 70, 255),
    (50, 120, 210, 255),
    (50, 120, 210, 255),
    (140, 60, 200, 255),
    (140, 60, 200, 255),
    (140, 60, 200, 255),
    (140, 60, 200, 255),
    (230, 180, 40, 255),
)


def _ring(size: tuple[int, int], color: Color, width: int) -> Image.Image:
    img = Image.new("RGBA", size, TRANSPARENT)
    draw = ImageDraw.Draw(img)
    draw.ellipse((0, 0, size[0] - 1, size[1] - 1), outline=color, width=width)
    return img


def _portrait(color: Color) -> Image.Image:
    w, h = PORTRAIT_SIZE
    img = Image.new("RGBA", PORTRAIT_SIZE, TRANSPARENT)
    draw = ImageDraw.Draw(img)
    draw.ellipse((0, 0, w - 1, h - 1), fill=(28, 28, 36, 255))
    draw.ellipse((w // 3, h // 6, 2 * w // 3, h // 2), fill=color)
    draw.pieslice((w // 6, h // 2, 5 * w // 6, h + h // 3), 180, 360, fill=color)
    return img


def _level_badge() -> Image.Image:
    w, h = LEVEL_BADGE_SIZE
    img = Image.new("RGBA", LEVEL_BADGE_SIZE, TRANSPARENT)
    ImageDraw.Draw(img).rounded_rectangle(
        (0, 0, w - 1, h - 1),
        radius=10,
        fill=(30, 40, 60, 235),
        outline=(220, 220, 230, 255),
        width=2,
    )
    return img


def _upgrade_badge(fill: Color) -> Image.Image:
    w, h = UPGRADE_BADGE_SIZE
    img = Image.new("RGBA", UPGRADE_BADGE_SIZE, TRANSPARENT)
    ImageDraw.Draw(img).regular_polygon(
        (w // 2, h // 2, w // 2 - 8),
        n_sides=6,
        fill=fill,
        outline=(255, 255, 255, 255),
    )
    return img


def bundled_font_bytes() -> Optional[bytes]:
    """TrueType bytes of the font Pillow ships, when built with FreeType."""
    font = ImageFont.load_default(size=24)
    return getattr(font, "font_bytes", None)


def _save(img: Image.Image, path: Path, written: list[Path]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
    written.append(path)


def write_placeholder_assets(
    root: Path,
    *,
    font_source: Optional[Path] = None,
    overwrite: bool = False,
) -> list[Path]:
    """Write a complete placeholder asset tree under ``root``.

    Existing files are kept unless ``overwrite`` is set. The font is copied
    from ``font_source`` when given, otherwise from Pillow's bundled font.
    Returns the paths that were written.
    """
    layout = AssetLayout(root=Path(root), font_path=Path(root) / "fonts" / DEFAULT_FONT_NAME)
    images: list[tuple[Path, Image.Image]] = []

    for character in SUPPORTED_CHARACTERS.values():
        color = AFFILIATION_COLORS.get(character.affiliation, DEFAULT_AFFILIATION_COLOR)
        images.append((layout.character_image(character.image_file), _portrait(color)))
        images.append((layout.relic_border(character.affiliation), _ring(CANVAS_SIZE, color, 10)))

    for gear_level in range(1, MAX_GEAR_LEVEL):
        images.append((layout.gear_border(gear_level), _ring(GEAR_BORDER_SIZE, GEAR_COLORS[gear_level - 1], 8)))

    images.append((layout.badge("level"), _level_badge()))
    images.append((layout.badge("zeta"), _upgrade_badge((120, 40, 160, 240))))
    images.append((layout.badge("omicron"), _upgrade_badge((40, 120, 150, 240))))

    written: list[Path] = []
    for path, img in images:
        if path.exists() and not overwrite:
            continue
        _save(img, path, written)

    if overwrite or not layout.font_path.exists():
        data = font_source.read_bytes() if font_source else bundled_font_bytes()
        if not data:
            raise RuntimeError("Pillow was built without FreeType; pass an explicit font file")
        layout.font_path.parent.mkdir(parents=True, exist_ok=True)
        layout.font_path.write_bytes(data)
        written.append(layout.font_path)

    logger.info("[ASSETS] Wrote %d placeholder assets under %s", len(written), root)
    return written

