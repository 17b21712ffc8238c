"""components — Plain data types shared by the engine and the scene.

Submodules
----------
trail       Trail (fixed-length position window)
rendering   LineCmd, RingCmd, DrawCommand
resources   PointerState, ShowStats
dev_log     DevLog

All public names are re-exported here so code can do
``from components import Trail``.
"""

from components.trail import Trail
from components.rendering import LineCmd, RingCmd, DrawCommand
from components.resources import PointerState, ShowStats
from components.dev_log import DevLog

__all__ = [
    "Trail",
    "LineCmd", "RingCmd", "DrawCommand",
    "PointerState", "ShowStats",
    "DevLog",
]
