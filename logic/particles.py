"""logic/particles.py — Burst particles.

Usage:
    burst = create_burst(x, y, hue, cfg.particle, rng)
    for p in burst:
        expired = p.advance()

Each particle is a gravity-affected point with a short trail.  Alpha
falls by ``decay`` every tick; the particle reports itself expired once
alpha reaches ``ALPHA_EPSILON``.  Drawing is handled by
scenes/fireworks_draw.py from the commands ``render()`` returns.
"""

from __future__ import annotations
import math
import random

from components.rendering import LineCmd
from components.trail import Trail
from core.config import ParticleConfig
from logic.helpers import random_range

# Alpha at or below this counts as fully faded.  Accumulated float error
# can leave 1.0 - 50 * 0.02 a hair above zero.
ALPHA_EPSILON = 1e-9


class Particle:
    __slots__ = ("x", "y", "vx", "vy", "friction", "gravity", "alpha",
                 "decay", "brightness", "hue", "trail", "expired")

    def __init__(
        self,
        x: float, y: float,
        hue: float,
        config: ParticleConfig | None = None,
        rng: random.Random | None = None,
    ):
        cfg = config or ParticleConfig()
        self.x = x
        self.y = y

        angle = random_range(0.0, 2 * math.pi, rng)
        speed = random_range(cfg.speed_min, cfg.speed_max, rng)
        self.vx = math.cos(angle) * speed
        self.vy = math.sin(angle) * speed

        self.friction = cfg.friction
        self.gravity = cfg.gravity
        self.alpha = cfg.transparency
        self.decay = random_range(cfg.decay_min, cfg.decay_max, rng)
        self.brightness = random_range(cfg.brightness_min, cfg.brightness_max, rng)
        self.hue = random_range(hue - cfg.hue_variance, hue + cfg.hue_variance, rng)
        self.trail = Trail(x, y, cfg.trail_length)
        self.expired = False

    def advance(self) -> bool:
        """Move one tick.  Returns True once the particle has faded out."""
        if self.expired:
            return True

        self.trail.push(self.x, self.y)

        self.vx *= self.friction
        self.vy *= self.friction
        self.vy += self.gravity
        self.x += self.vx
        self.y += self.vy

        self.alpha -= self.decay
        if self.alpha <= ALPHA_EPSILON:
            self.expired = True
        return self.expired

    def render(self) -> list[LineCmd]:
        if self.expired:
            return []
        return [LineCmd(
            start=self.trail.oldest,
            end=(self.x, self.y),
            hue=self.hue,
            lightness=self.brightness,
            alpha=self.alpha,
        )]


def create_burst(
    x: float, y: float,
    hue: float,
    config: ParticleConfig | None = None,
    rng: random.Random | None = None,
) -> list[Particle]:
    """Emit ``config.count`` particles from one point, all on the same hue."""
    cfg = config or ParticleConfig()
    return [Particle(x, y, hue, cfg, rng) for _ in range(cfg.count)]
