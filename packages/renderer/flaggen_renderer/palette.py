"""Uniform color sampling and seeded random sources."""

from __future__ import annotations

import random


def seeded_rng(seed: int | None = None) -> random.Random:
    # None seeds from OS entropy, giving each caller an independent stream.
    return random.Random(seed)


def random_color(rng: random.Random) -> tuple[int, int, int]:
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))
