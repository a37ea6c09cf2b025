"""Flag composition: stripe fill followed by the optional emblem."""

from __future__ import annotations

import logging

import numpy as np

from .models import Background, Flag, Foreground
from .shapes import draw_shape

_LOGGER_NAME = "flaggen.renderer"


def stripe_indices(count: int, length: int, stripes: int) -> np.ndarray:
    """Map ``count`` positions along an axis of ``length`` to stripe indices."""
    pos = np.arange(count, dtype=np.float32) / np.float32(length)
    index = (pos * np.float32(stripes)).astype(np.int64)
    return np.minimum(index, stripes - 1)


def fill_stripes(background: Background, width: int, height: int) -> np.ndarray:
    palette = np.array([c.as_tuple() for c in background.stripes], dtype=np.uint8)
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    if width == 0 or height == 0:
        return pixels

    n = len(background.stripes)
    if background.horizontal:
        pixels[:, :] = palette[stripe_indices(width, width, n)][np.newaxis, :, :]
    else:
        pixels[:, :] = palette[stripe_indices(height, height, n)][:, np.newaxis, :]
    return pixels


def compose(
    background: Background,
    foreground: Foreground | None,
    width: int,
    height: int,
) -> Flag:
    if width < 0 or height < 0:
        raise ValueError(f"Flag dimensions must be non-negative, got {width}x{height}")

    logging.getLogger(_LOGGER_NAME).debug(
        f"creating {width}x{height} flag",
        extra={
            "event": "flag_compose",
            "background": background.to_dict(),
            "foreground": foreground.to_dict() if foreground is not None else None,
        },
    )

    pixels = fill_stripes(background, width, height)
    if foreground is not None:
        draw_shape(foreground.shape, foreground.color, pixels)

    return Flag(width=width, height=height, pixels=pixels, background=background, foreground=foreground)
