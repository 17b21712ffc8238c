"""scenes/fireworks_draw.py — Rendering helpers for the fireworks scene.

Turns the engine's draw commands into pygame calls, runs the fade
pass that gives trails their persistence, and draws the F1 HUD.

    fade(surface, cfg.display.cleanup_alpha)
    draw_commands(surface, engine.render())
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable
import pygame

from components.rendering import DrawCommand, LineCmd, RingCmd

if TYPE_CHECKING:
    from core.app import App
    from components.dev_log import DevLog
    from components.resources import ShowStats
    from logic.engine import SimulationEngine


_fade_layers: dict[tuple[tuple[int, int], int], pygame.Surface] = {}


def hsla_to_rgb(hue: float, saturation: float, lightness: float,
                alpha: float = 1.0) -> tuple[int, int, int]:
    """HSL colour with *alpha* premultiplied, for drawing on black."""
    h = hue % 360.0
    if h >= 360.0:  # -1e-17 % 360.0 == 360.0
        h = 0.0
    c = pygame.Color(0, 0, 0)
    c.hsla = (h,
              max(0.0, min(100.0, saturation)),
              max(0.0, min(100.0, lightness)),
              100.0)
    a = max(0.0, min(1.0, alpha))
    return int(c.r * a), int(c.g * a), int(c.b * a)


def fade(surface: pygame.Surface, alpha: float):
    """Composite a translucent black layer over the whole surface."""
    size = surface.get_size()
    a = int(255 * max(0.0, min(1.0, alpha)))
    key = (size, a)
    layer = _fade_layers.get(key)
    if layer is None:
        layer = pygame.Surface(size, pygame.SRCALPHA)
        layer.fill((0, 0, 0, a))
        _fade_layers[key] = layer
    surface.blit(layer, (0, 0))


def draw_commands(surface: pygame.Surface, cmds: Iterable[DrawCommand]):
    for cmd in cmds:
        color = hsla_to_rgb(cmd.hue, cmd.saturation, cmd.lightness, cmd.alpha)
        if isinstance(cmd, LineCmd):
            pygame.draw.line(surface, color, cmd.start, cmd.end, cmd.width)
        elif isinstance(cmd, RingCmd):
            radius = max(1, int(round(cmd.radius)))
            center = (int(cmd.center[0]), int(cmd.center[1]))
            pygame.draw.circle(surface, color, center, radius, cmd.width)


# ── HUD ────────────────────────────────────────────────────────────

_HUD_TEXT = (200, 200, 200)
_CAT_COLORS: dict[str, tuple[int, int, int]] = {
    "launch": (255, 200, 80),
    "burst":  (120, 200, 255),
    "system": (180, 180, 180),
}


def draw_hud(surface: pygame.Surface, app: App, engine: SimulationEngine,
             stats: ShowStats, log: DevLog, lines: int = 8):
    x, y = 8, 8
    app.draw_text_bg(surface,
                     f"tick {engine.tick}  fps {app.clock.get_fps():.0f}  "
                     f"hue {engine.hue:.1f}",
                     x, y, color=_HUD_TEXT)
    y += 18
    app.draw_text_bg(surface,
                     f"fireworks {len(engine.fireworks)}  "
                     f"particles {len(engine.particles)}  "
                     f"launched {stats.launched} ({stats.manual} manual)  "
                     f"bursts {stats.bursts}",
                     x, y, color=_HUD_TEXT)
    y += 22
    for entry in log.recent(lines):
        color = _CAT_COLORS.get(entry["cat"], _HUD_TEXT)
        app.draw_text_bg(surface, f"{entry['tick']:>6}  {entry['msg']}",
                         x, y, color=color, font=app.font_sm)
        y += 14
