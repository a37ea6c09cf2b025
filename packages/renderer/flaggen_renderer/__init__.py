"""Renderer package for procedural flag generation."""

from .compositor import compose, fill_stripes
from .encoding import flag_to_image, flag_to_rgb_bytes, format_for_path, preview_data_url, save_flag
from .generator import random_flag
from .models import Background, Circle, Color, Flag, Foreground, ForegroundShape, LeftTriangle, Ring, random_shape
from .palette import random_color, seeded_rng
from .shapes import draw_shape, shape_mask

__all__ = [
    "Background",
    "Circle",
    "Color",
    "Flag",
    "Foreground",
    "ForegroundShape",
    "LeftTriangle",
    "Ring",
    "compose",
    "draw_shape",
    "fill_stripes",
    "flag_to_image",
    "flag_to_rgb_bytes",
    "format_for_path",
    "preview_data_url",
    "random_color",
    "random_flag",
    "random_shape",
    "save_flag",
    "seeded_rng",
    "shape_mask",
]
