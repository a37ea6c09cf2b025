"""Typed flag models: colors, backgrounds, emblems, and the rendered flag."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np

from .palette import random_color

MIN_STRIPES = 1
MAX_STRIPES = 5
RING_WIDTH_MIN = 0.1
RING_WIDTH_SPAN = 0.5


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    @classmethod
    def random(cls, rng: random.Random) -> Color:
        return cls(*random_color(rng))


@dataclass(frozen=True)
class Background:
    """Striped pattern; ``horizontal`` means the stripe index varies with x."""

    horizontal: bool
    stripes: tuple[Color, ...]

    def __post_init__(self) -> None:
        if not self.stripes:
            raise ValueError("Background needs at least one stripe")
        object.__setattr__(self, "stripes", tuple(self.stripes))

    @property
    def solid(self) -> bool:
        return len(self.stripes) == 1

    @classmethod
    def random(cls, rng: random.Random) -> Background:
        amount = rng.randint(MIN_STRIPES, MAX_STRIPES)
        stripes = tuple(Color.random(rng) for _ in range(amount))
        return cls(horizontal=rng.random() < 0.5, stripes=stripes)

    def to_dict(self) -> dict[str, Any]:
        return {"horizontal": self.horizontal, "stripes": [c.hex() for c in self.stripes]}


@dataclass(frozen=True)
class Circle:
    def to_dict(self) -> dict[str, Any]:
        return {"kind": "circle"}


@dataclass(frozen=True)
class Ring:
    width: float

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "ring", "width": round(self.width, 4)}


@dataclass(frozen=True)
class LeftTriangle:
    def to_dict(self) -> dict[str, Any]:
        return {"kind": "left-triangle"}


ForegroundShape = Union[Circle, Ring, LeftTriangle]

SHAPE_KINDS = ("circle", "ring", "left-triangle")


def random_shape(rng: random.Random) -> ForegroundShape:
    kind = SHAPE_KINDS[rng.randrange(len(SHAPE_KINDS))]
    if kind == "circle":
        return Circle()
    if kind == "ring":
        return Ring(width=rng.random() * RING_WIDTH_SPAN + RING_WIDTH_MIN)
    return LeftTriangle()


@dataclass(frozen=True)
class Foreground:
    color: Color
    shape: ForegroundShape

    @classmethod
    def random(cls, rng: random.Random) -> Foreground:
        color = Color.random(rng)
        return cls(color=color, shape=random_shape(rng))

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color.hex(), "shape": self.shape.to_dict()}


@dataclass(frozen=True)
class Flag:
    width: int
    height: int
    pixels: np.ndarray = field(repr=False, compare=False)
    background: Background
    foreground: Foreground | None = None

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def pixel(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} flag")
        r, g, b = (int(v) for v in self.pixels[y, x])
        return Color(r, g, b)

    def describe(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "background": self.background.to_dict(),
            "foreground": self.foreground.to_dict() if self.foreground is not None else None,
        }
