"""logic/engine.py — Per-tick show orchestrator.

The engine owns the only two live collections (fireworks, particles),
the rotating hue and the trigger cooldowns.  One ``advance()`` call is
one tick::

    engine = SimulationEngine(960, 640, ShowConfig(), rng=random.Random(7))
    engine.pointer.down = True          # written by input capture
    engine.advance()
    cmds = engine.render()              # handed to the renderer

Tick order:
  1. bump tick counters
  2. fireworks   advance, collect arrivals, compact once
  3. particles   advance, compact once, then append this tick's bursts
                 (new particles are first advanced on the next tick)
  4. triggers    manual (pointer held) and automatic (random interval)
  5. hue         rotate, wrapping at 360
"""

from __future__ import annotations
import random

from components.rendering import DrawCommand
from components.resources import PointerState
from core.config import ShowConfig
from core.events import EventBus, FireworkBurst, FireworkLaunched
from logic.fireworks import Firework
from logic.helpers import random_range
from logic.particles import Particle, create_burst


class SimulationEngine:
    """Owns and advances every firework and particle on one surface."""

    def __init__(
        self,
        width: float,
        height: float,
        config: ShowConfig | None = None,
        rng: random.Random | None = None,
        bus: EventBus | None = None,
    ):
        self.width = width
        self.height = height
        self.config = config or ShowConfig()
        self.rng = rng if rng is not None else random.Random()
        self.bus = bus

        self.pointer = PointerState()
        self._fireworks: list[Firework] = []
        self._particles: list[Particle] = []

        self.hue = 120.0
        self.tick = 0
        self.ticks_since_manual = 0
        self.ticks_since_auto = 0
        self.auto_threshold = self._draw_auto_threshold()

    # ── Read-only views ──────────────────────────────────────────────

    @property
    def fireworks(self) -> tuple[Firework, ...]:
        return tuple(self._fireworks)

    @property
    def particles(self) -> tuple[Particle, ...]:
        return tuple(self._particles)

    @property
    def launch_point(self) -> tuple[float, float]:
        """Where manual launches start: bottom centre of the surface."""
        return self.width / 2, self.height

    # ── Launching ────────────────────────────────────────────────────

    def launch(self, sx: float, sy: float, tx: float, ty: float,
               manual: bool = False) -> Firework:
        """Add one firework to the live collection and return it."""
        fw = Firework(sx, sy, tx, ty, self.config.firework, self.rng)
        self._fireworks.append(fw)
        if self.bus is not None:
            self.bus.emit(FireworkLaunched(tick=self.tick, sx=sx, sy=sy,
                                           tx=tx, ty=ty, manual=manual))
        return fw

    def _draw_auto_threshold(self) -> float:
        lc = self.config.launch
        return random_range(lc.auto_min_ticks, lc.auto_max_ticks, self.rng)

    # ── Tick ─────────────────────────────────────────────────────────

    def advance(self) -> None:
        self.tick += 1
        self.ticks_since_manual += 1
        self.ticks_since_auto += 1

        bursts = self._advance_fireworks()
        self._advance_particles()
        for burst in bursts:
            self._particles.extend(burst)

        self._trigger_manual()
        self._trigger_auto()

        self.hue = (self.hue + self.config.launch.hue_step) % 360

    def _advance_fireworks(self) -> list[list[Particle]]:
        bursts: list[list[Particle]] = []
        alive: list[Firework] = []
        for fw in self._fireworks:
            if not fw.advance():
                alive.append(fw)
                continue
            burst = create_burst(fw.tx, fw.ty, self.hue,
                                 self.config.particle, self.rng)
            bursts.append(burst)
            if self.bus is not None:
                self.bus.emit(FireworkBurst(tick=self.tick, x=fw.tx, y=fw.ty,
                                            hue=self.hue, count=len(burst)))
        self._fireworks = alive
        return bursts

    def _advance_particles(self) -> None:
        self._particles = [p for p in self._particles if not p.advance()]

    def _trigger_manual(self) -> None:
        ptr = self.pointer
        if not ptr.down:
            return
        if self.ticks_since_manual > self.config.launch.manual_min_ticks:
            sx, sy = self.launch_point
            self.launch(sx, sy, ptr.x, ptr.y, manual=True)
            self.ticks_since_manual = 0

    def _trigger_auto(self) -> None:
        lc = self.config.launch
        if not lc.auto_enabled:
            return
        if self.ticks_since_auto > self.auto_threshold:
            sx = random_range(0, self.width, self.rng)
            tx = random_range(0, self.width, self.rng)
            ty = random_range(0, self.height * lc.auto_target_ceiling, self.rng)
            self.launch(sx, self.height, tx, ty)
            self.ticks_since_auto = 0
            self.auto_threshold = self._draw_auto_threshold()

    # ── Render / reset ───────────────────────────────────────────────

    def render(self) -> list[DrawCommand]:
        """Draw commands for the current state; fireworks first."""
        cmds: list[DrawCommand] = []
        for fw in self._fireworks:
            cmds.extend(fw.render(self.hue))
        for p in self._particles:
            cmds.extend(p.render())
        return cmds

    def reset(self) -> None:
        """Drop every live entity and restart both cooldowns."""
        self._fireworks.clear()
        self._particles.clear()
        self.ticks_since_manual = 0
        self.ticks_since_auto = 0
        self.auto_threshold = self._draw_auto_threshold()

    def __repr__(self) -> str:
        return (f"SimulationEngine(tick={self.tick}, fireworks={len(self._fireworks)}, "
                f"particles={len(self._particles)}, hue={self.hue:.1f})")
