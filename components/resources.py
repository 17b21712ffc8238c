"""components.resources — Show-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class PointerState:
    """Last known pointer state, written by input capture.

    The engine only reads it during its trigger phase.  Coordinates are
    in surface pixels and already bounds-checked by the scene.
    """
    down: bool = False
    x: float = 0.0
    y: float = 0.0


@dataclass
class ShowStats:
    """Cumulative counters fed from the event bus, shown on the HUD."""
    launched: int = 0
    manual: int = 0
    bursts: int = 0
    particles_spawned: int = 0
