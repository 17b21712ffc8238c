"""logic/fireworks.py — Rising shells.

A firework flies in a straight line from its launch point to its target,
multiplying its speed by ``acceleration`` every tick.  Arrival is
decided with a one-tick look-ahead: the distance from the start to the
*next* position is compared with the distance to the target, so the
shell is flagged one tick before its drawn position would reach the
target.  The engine then bursts it at the target itself, not at the last
drawn position.  The last drawn position may therefore fall short of the
target by up to one tick of travel; this is accepted as-is.
"""

from __future__ import annotations
import math
import random

from components.rendering import DrawCommand, LineCmd, RingCmd
from components.trail import Trail
from core.config import FireworkConfig
from logic.helpers import distance, random_range


class Firework:
    __slots__ = ("x", "y", "sx", "sy", "tx", "ty", "distance_to_target",
                 "distance_traveled", "angle", "speed", "acceleration",
                 "brightness", "trail", "target_radius", "arrived", "_cfg")

    def __init__(
        self,
        sx: float, sy: float,
        tx: float, ty: float,
        config: FireworkConfig | None = None,
        rng: random.Random | None = None,
    ):
        if not all(math.isfinite(v) for v in (sx, sy, tx, ty)):
            raise ValueError(
                f"firework coordinates must be finite: ({sx}, {sy}) → ({tx}, {ty})")

        cfg = config or FireworkConfig()
        self._cfg = cfg
        self.x = float(sx)
        self.y = float(sy)
        self.sx = float(sx)
        self.sy = float(sy)
        self.tx = float(tx)
        self.ty = float(ty)

        self.distance_to_target = distance(sx, sy, tx, ty)
        self.distance_traveled = 0.0
        # atan2(0, 0) is already 0; spelled out for the zero-length launch.
        if self.distance_to_target == 0.0:
            self.angle = 0.0
        else:
            self.angle = math.atan2(ty - sy, tx - sx)

        self.speed = cfg.speed
        self.acceleration = cfg.acceleration
        self.brightness = random_range(cfg.brightness_min, cfg.brightness_max, rng)
        self.trail = Trail(self.x, self.y, cfg.trail_length)
        self.target_radius = cfg.target_radius_min
        self.arrived = False

    def advance(self) -> bool:
        """Move one tick.  Returns True once the target has been reached."""
        if self.arrived:
            return True

        self.trail.push(self.x, self.y)

        cfg = self._cfg
        if self.target_radius < cfg.target_radius_max:
            self.target_radius += cfg.target_radius_step
        else:
            self.target_radius = cfg.target_radius_min

        self.speed *= self.acceleration
        vx = math.cos(self.angle) * self.speed
        vy = math.sin(self.angle) * self.speed

        traveled = distance(self.sx, self.sy, self.x + vx, self.y + vy)
        self.distance_traveled = max(self.distance_traveled, traveled)

        if self.distance_traveled >= self.distance_to_target:
            self.arrived = True
        else:
            self.x += vx
            self.y += vy
        return self.arrived

    def render(self, hue: float) -> list[DrawCommand]:
        cmds: list[DrawCommand] = [LineCmd(
            start=self.trail.oldest,
            end=(self.x, self.y),
            hue=hue,
            lightness=self.brightness,
        )]
        if self._cfg.target_indicator:
            cmds.append(RingCmd(
                center=(self.tx, self.ty),
                radius=self.target_radius,
                hue=hue,
                lightness=self.brightness,
            ))
        return cmds
