"""logic/helpers.py — Scalar sampling and planar distance.

Pure functions; the random source is always passed in so seeded runs
stay reproducible.
"""

from __future__ import annotations
import math
import random


def random_range(lo: float, hi: float, rng: random.Random | None = None) -> float:
    """Uniform sample between *lo* and *hi*.

    ``[lo, hi)`` when ``lo < hi``, ``(hi, lo]`` when the bounds are
    swapped, and exactly *lo* when they are equal.
    """
    r = rng if rng is not None else random
    return lo + (hi - lo) * r.random()


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)
