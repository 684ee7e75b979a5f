"""Image composition primitives for character portraits."""

from .assets import AssetLayout, AssetLoadError, FontFace, default_asset_layout, load_font, load_image
from .builder import PortraitRenderError, build_portrait, encode_png, render_portrait_png
from .canvas import CANVAS_SIZE, center_over, centering_offset, draw_over, new_canvas, place_on_canvas
from .text import centered_text_origin, draw_text, text_width

__all__ = [
    "AssetLayout",
    "AssetLoadError",
    "FontFace",
    "default_asset_layout",
    "load_font",
    "load_image",
    "PortraitRenderError",
    "build_portrait",
    "encode_png",
    "render_portrait_png",
    "CANVAS_SIZE",
    "center_over",
    "centering_offset",
    "draw_over",
    "new_canvas",
    "place_on_canvas",
    "centered_text_origin",
    "draw_text",
    "text_width",
]
