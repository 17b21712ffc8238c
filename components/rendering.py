"""components.rendering — Draw instructions produced by entities.

Entities never touch a surface.  ``render()`` returns a list of these
plain records and ``scenes.fireworks_draw`` turns them into pygame
calls, which keeps rendering deterministic and testable headless.

Colours are HSLA: hue in degrees, saturation and lightness in percent,
alpha in ``0..1``.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class LineCmd:
    start: tuple[float, float]
    end: tuple[float, float]
    hue: float
    lightness: float
    alpha: float = 1.0
    saturation: float = 100.0
    width: int = 1


@dataclass(frozen=True)
class RingCmd:
    """Outline circle, used for the firework target indicator."""
    center: tuple[float, float]
    radius: float
    hue: float
    lightness: float
    alpha: float = 1.0
    saturation: float = 100.0
    width: int = 1


DrawCommand = LineCmd | RingCmd
