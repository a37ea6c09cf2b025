"""Emblem rasterization on normalized, resolution-independent coordinates."""

from __future__ import annotations

import numpy as np

from .models import Circle, Color, ForegroundShape, LeftTriangle, Ring

EMBLEM_RADIUS = np.float32(0.8 / 2.0)


def _pixel_grid(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    ys, xs = np.mgrid[0:height, 0:width]
    return xs.astype(np.int64), ys.astype(np.int64)


def _centered_distance(width: int, height: int) -> np.ndarray:
    xs, ys = _pixel_grid(width, height)
    scale = np.float32(min(width, height))
    nx = (xs - width // 2).astype(np.float32) / scale
    ny = (ys - height // 2).astype(np.float32) / scale
    return np.sqrt(nx * nx + ny * ny)


def circle_mask(width: int, height: int) -> np.ndarray:
    return _centered_distance(width, height) <= EMBLEM_RADIUS


def ring_mask(width: int, height: int, ring_width: float) -> np.ndarray:
    # Inner edge moves with the width; the outer edge stays on the circle radius.
    distance = _centered_distance(width, height)
    inner = EMBLEM_RADIUS - np.float32(ring_width) / np.float32(2.0)
    return (distance >= inner) & (distance <= EMBLEM_RADIUS)


def left_triangle_mask(width: int, height: int) -> np.ndarray:
    xs, ys = _pixel_grid(width, height)
    scale = np.float32(min(width, height))
    nx = xs.astype(np.float32) / scale
    ny = ys.astype(np.float32) / scale
    return (nx + np.abs(ny - np.float32(0.5))) < np.float32(0.5)


def shape_mask(shape: ForegroundShape, width: int, height: int) -> np.ndarray:
    """Return a ``(height, width)`` boolean membership mask for ``shape``.

    Coordinates are divided by the shorter canvas side, so on non-square
    canvases the emblem stretches along the longer axis.
    """
    if width <= 0 or height <= 0:
        return np.zeros((max(height, 0), max(width, 0)), dtype=bool)
    if isinstance(shape, Circle):
        return circle_mask(width, height)
    if isinstance(shape, Ring):
        return ring_mask(width, height, shape.width)
    if isinstance(shape, LeftTriangle):
        return left_triangle_mask(width, height)
    raise TypeError(f"Unknown foreground shape: {shape!r}")


def draw_shape(shape: ForegroundShape, color: Color, pixels: np.ndarray) -> None:
    height, width = pixels.shape[:2]
    mask = shape_mask(shape, width, height)
    pixels[mask] = color.as_tuple()
