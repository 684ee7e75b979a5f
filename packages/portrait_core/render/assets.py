"""Asset and font loading for portrait rendering.

All assets live under a single root directory::

    <root>/fonts/Inter-Regular.ttf
    <root>/characters/<image_file>
    <root>/gear/<gear_level>.png
    <root>/relics/<affiliation>.png
    <root>/badges/{level,zeta,omicron}.png
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import logging
import os

from PIL import Image, ImageFont


logger = logging.getLogger("portrait_core.render.assets")
WORKSPACE_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_FONT_NAME = "Inter-Regular.ttf"


class AssetLoadError(RuntimeError):
    """Raised when an image or font cannot be opened or decoded."""


@dataclass(frozen=True)
class FontFace:
    font: ImageFont.FreeTypeFont
    size: int
    ascent: int
    descent: int


@dataclass(frozen=True)
class AssetLayout:
    root: Path
    font_path: Path

    def character_image(self, image_file: str) -> Path:
        return self.root / "characters" / image_file

    def gear_border(self, gear_level: int) -> Path:
        return self.root / "gear" / f"{int(gear_level)}.png"

    def relic_border(self, affiliation: str) -> Path:
        return self.root / "relics" / f"{affiliation}.png"

    def badge(self, name: str) -> Path:
        return self.root / "badges" / f"{name}.png"


def _resolve_workspace_path(raw: str) -> Path:
    p = Path(raw)
    if not p.is_absolute():
        p = (WORKSPACE_ROOT / p).resolve()
    return p


def _assets_root() -> Path:
    return _resolve_workspace_path(os.environ.get("PORTRAIT_ASSETS_DIR", "assets"))


def _font_path(root: Path) -> Path:
    raw = os.environ.get("PORTRAIT_FONT_PATH")
    if raw:
        return _resolve_workspace_path(raw)
    return root / "fonts" / DEFAULT_FONT_NAME


@lru_cache(maxsize=1)
def default_asset_layout() -> AssetLayout:
    root = _assets_root()
    layout = AssetLayout(root=root, font_path=_font_path(root))
    logger.debug("[ASSETS] Resolved asset root=%s font=%s", layout.root, layout.font_path)
    return layout


def reset_asset_layout_cache_for_tests() -> None:
    default_asset_layout.cache_clear()


def load_image(path: Path) -> Image.Image:
    """Open ``path`` and decode it fully into an RGBA image."""
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise AssetLoadError(f"failed to load image {path}: {exc}") from exc


def load_font(path: Path, size: int) -> FontFace:
    """Rasterize the font at ``path`` at ``size`` pixels (72 dpi points)."""
    try:
        font = ImageFont.truetype(str(path), size)
    except (OSError, ValueError) as exc:
        raise AssetLoadError(f"failed to load font {path}: {exc}") from exc
    ascent, descent = font.getmetrics()
    return FontFace(font=font, size=size, ascent=int(ascent), descent=int(descent))
