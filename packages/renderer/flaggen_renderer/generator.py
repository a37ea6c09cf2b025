"""Random flag assembly."""

from __future__ import annotations

import random
from dataclasses import replace

from .compositor import compose
from .models import Background, Circle, Flag, Foreground
from .palette import seeded_rng


def random_flag(width: int, height: int, rng: random.Random | None = None) -> Flag:
    """Generate a random flag of ``width`` x ``height`` pixels.

    A solid (single stripe) background always gets an emblem, and that
    emblem is always a plain circle.
    """
    rng = rng or seeded_rng()
    background = Background.random(rng)

    has_foreground = rng.random() < 0.5
    if background.solid:
        has_foreground = True

    foreground = Foreground.random(rng) if has_foreground else None
    if foreground is not None and background.solid:
        foreground = replace(foreground, shape=Circle())

    return compose(background, foreground, width, height)
