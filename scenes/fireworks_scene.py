"""scenes/fireworks_scene.py — The show.

Input capture and frame plumbing around ``SimulationEngine``:

  * LMB held   → manual launches towards the pointer
  * F1         → HUD (counts + recent launches / bursts)
  * Esc        → quit

Pointer coordinates outside the surface are dropped here and never
reach the engine.
"""

from __future__ import annotations
import math
import random
import pygame

from core.app import App
from core.config import ShowConfig
from core.events import EventBus, FireworkBurst, FireworkLaunched
from core.scene import Scene
from components.dev_log import DevLog
from components.resources import ShowStats
from logic.engine import SimulationEngine
from scenes.fireworks_draw import draw_commands, draw_hud, fade


class FireworksScene(Scene):
    def __init__(self, config: ShowConfig | None = None, seed: int | None = None):
        self.config = config or ShowConfig()
        self.bus = EventBus()
        self.log = DevLog()
        self.stats = ShowStats()
        self.show_hud = False
        self.engine: SimulationEngine | None = None
        self._seed = seed

        self.log.attach(self.bus)
        self.bus.subscribe("FireworkLaunched", self._count_launch)
        self.bus.subscribe("FireworkBurst", self._count_burst)

    # ── Lifecycle ────────────────────────────────────────────────────

    def on_enter(self, app: App):
        if self.engine is None:
            w, h = app.size
            self.engine = SimulationEngine(w, h, self.config,
                                           rng=random.Random(self._seed),
                                           bus=self.bus)
            self.log.record(0, "system", f"show started {w}x{h}",
                            details={"seed": self._seed})

    def on_exit(self, app: App):
        if self.engine is not None:
            print(f"[SHOW] stopped at tick {self.engine.tick} — "
                  f"{self.stats.launched} launched, {self.stats.bursts} bursts")

    # ── Input ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        if self.engine is None:
            return
        ptr = self.engine.pointer
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.running = False
            elif event.key == pygame.K_F1:
                self.show_hud = not self.show_hud
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._accept(event.pos, app):
                ptr.down = True
                ptr.x, ptr.y = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            ptr.down = False
        elif event.type == pygame.MOUSEMOTION:
            if self._accept(event.pos, app):
                ptr.x, ptr.y = event.pos

    @staticmethod
    def _accept(pos, app: App) -> bool:
        x, y = pos
        w, h = app.size
        return (math.isfinite(x) and math.isfinite(y)
                and 0 <= x < w and 0 <= y < h)

    # ── Frame ────────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        # One tick per frame regardless of dt.
        self.engine.advance()
        self.bus.drain()

    def draw(self, surface: pygame.Surface, app: App):
        fade(surface, self.config.display.cleanup_alpha)
        draw_commands(surface, self.engine.render())
        if self.show_hud:
            draw_hud(surface, app, self.engine, self.stats, self.log)

    # ── Bus handlers ─────────────────────────────────────────────────

    def _count_launch(self, ev: FireworkLaunched):
        self.stats.launched += 1
        if ev.manual:
            self.stats.manual += 1

    def _count_burst(self, ev: FireworkBurst):
        self.stats.bursts += 1
        self.stats.particles_spawned += ev.count
