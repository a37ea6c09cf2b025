"""Image conversion and file output for rendered flags."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

from PIL import Image

from .models import Flag

SUPPORTED_FORMATS = ("PNG", "BMP", "PPM", "TIFF", "JPEG")
_EXTENSIONS = {
    "png": "PNG",
    "bmp": "BMP",
    "ppm": "PPM",
    "tif": "TIFF",
    "tiff": "TIFF",
    "jpg": "JPEG",
    "jpeg": "JPEG",
}


def _require_pixels(flag: Flag) -> None:
    if flag.empty:
        raise ValueError("cannot encode an empty flag")


def flag_to_image(flag: Flag) -> Image.Image:
    _require_pixels(flag)
    return Image.fromarray(flag.pixels)


def flag_to_rgb_bytes(flag: Flag) -> bytes:
    """Packed RGB24 rows, stride ``width * 3``."""
    _require_pixels(flag)
    return flag.pixels.tobytes()


def format_for_path(path: Path, default: str = "PNG") -> str:
    return _EXTENSIONS.get(path.suffix.lower().lstrip("."), default)


def save_flag(flag: Flag, path: Path, format: str | None = None) -> Path:
    image = flag_to_image(flag)
    fmt = (format or format_for_path(path)).upper()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported image format: {fmt}")
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format=fmt)
    return path


def preview_data_url(flag: Flag) -> str:
    buf = BytesIO()
    flag_to_image(flag).save(buf, format="PNG")
    b64 = base64.b64encode(buf.getvalue()).decode("ascii")
    return f"data:image/png;base64,{b64}"
