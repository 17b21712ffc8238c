"""test_render.py — Headless rendering and scene plumbing tests.

Uses SDL's dummy video driver, so no window is opened.  Checks the
HSLA conversion, the fade pass, command drawing, pointer capture in
the scene (including boundary rejection), and a short app run.

Run:  python test_render.py
"""
from __future__ import annotations
import os
import random
import sys
import traceback

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from core.config import LaunchConfig, ShowConfig
from components.rendering import LineCmd, RingCmd
from logic.engine import SimulationEngine
from scenes.fireworks_draw import draw_commands, fade, hsla_to_rgb
from scenes.fireworks_scene import FireworksScene


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")


def _close(a, b, tol: int = 2) -> bool:
    return all(abs(x - y) <= tol for x, y in zip(a, b))


class _StubApp:
    """The bits of ``core.app.App`` a scene touches outside of draw_hud."""

    def __init__(self, w: int = 320, h: int = 240):
        self.size = (w, h)
        self.running = True


# ════════════════════════════════════════════════════════════════════════
#  Colour / fade / commands
# ════════════════════════════════════════════════════════════════════════

def test_hsla_to_rgb():
    assert _close(hsla_to_rgb(0, 100, 50), (255, 0, 0))
    assert _close(hsla_to_rgb(120, 100, 50), (0, 255, 0))
    assert _close(hsla_to_rgb(480, 100, 50), (0, 255, 0))
    assert _close(hsla_to_rgb(-120, 100, 50), (0, 0, 255))
    ok("hue wraps into 0..360")

    assert _close(hsla_to_rgb(0, 100, 50, 0.5), (127, 0, 0))
    assert hsla_to_rgb(0, 100, 50, 0.0) == (0, 0, 0)
    assert hsla_to_rgb(0, 100, 50, -0.2) == (0, 0, 0)
    ok("alpha is premultiplied and clamped")


def test_fade():
    surf = pygame.Surface((8, 8))
    surf.fill((255, 255, 255))
    fade(surf, 0.3)
    r, g, b, _ = surf.get_at((4, 4))
    assert 170 <= r <= 185 and r == g == b, (r, g, b)
    ok("fade darkens the whole surface by the cleanup alpha")

    fade(surf, 1.0)
    assert max(tuple(surf.get_at((0, 0)))[:3]) <= 1
    ok("fade with alpha 1 clears to black")


def test_draw_commands():
    surf = pygame.Surface((20, 20))
    surf.fill((0, 0, 0))
    draw_commands(surf, [LineCmd(start=(0, 5), end=(19, 5), hue=0, lightness=50)])
    assert _close(tuple(surf.get_at((10, 5)))[:3], (255, 0, 0))
    assert tuple(surf.get_at((10, 10)))[:3] == (0, 0, 0)
    ok("line command draws the trail segment")

    surf.fill((0, 0, 0))
    draw_commands(surf, [RingCmd(center=(10, 10), radius=5, hue=240, lightness=50)])
    row = [tuple(surf.get_at((x, 10)))[:3] for x in range(11, 20)]
    assert any(_close(px, (0, 0, 255)) for px in row), row
    assert tuple(surf.get_at((10, 10)))[:3] == (0, 0, 0)
    ok("ring command draws an outline only")


def test_render_idempotent_pixels():
    cfg = ShowConfig(launch=LaunchConfig(auto_enabled=False))
    eng = SimulationEngine(200, 200, cfg, rng=random.Random(3))
    eng.launch(100, 200, 100, 190)
    for _ in range(4):
        eng.advance()
    eng.launch(50, 200, 150, 20)
    eng.advance()

    a = pygame.Surface((200, 200))
    b = pygame.Surface((200, 200))
    draw_commands(a, eng.render())
    draw_commands(b, eng.render())
    assert pygame.image.tobytes(a, "RGB") == pygame.image.tobytes(b, "RGB")
    ok("two renders without an advance produce identical pixels")


# ════════════════════════════════════════════════════════════════════════
#  Scene
# ════════════════════════════════════════════════════════════════════════

def test_scene_pointer_capture():
    app = _StubApp()
    scene = FireworksScene(ShowConfig(launch=LaunchConfig(auto_enabled=False)), seed=1)
    scene.on_enter(app)
    ptr = scene.engine.pointer

    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(50, 60), button=1), app)
    assert ptr.down and (ptr.x, ptr.y) == (50, 60)
    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(70, 80), rel=(20, 20), buttons=(1, 0, 0)), app)
    assert (ptr.x, ptr.y) == (70, 80)
    ok("press and drag update the pointer")

    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(900, 80), rel=(0, 0), buttons=(1, 0, 0)), app)
    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, -4), rel=(0, 0), buttons=(1, 0, 0)), app)
    assert (ptr.x, ptr.y) == (70, 80)
    ok("off-surface coordinates are dropped at the boundary")

    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(70, 80), button=1), app)
    assert not ptr.down
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=3), app)
    assert not ptr.down
    ok("release clears the pointer; other buttons are ignored")

    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F1, mod=0), app)
    assert scene.show_hud
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0), app)
    assert app.running is False
    ok("F1 toggles the HUD, Escape stops the loop")


def test_scene_frames():
    app = _StubApp()
    scene = FireworksScene(ShowConfig(launch=LaunchConfig(auto_enabled=False)), seed=2)
    scene.on_enter(app)
    ptr = scene.engine.pointer
    ptr.down, ptr.x, ptr.y = True, 160.0, 40.0

    surf = pygame.Surface(app.size)
    for _ in range(60):
        scene.update(1 / 60, app)
        scene.draw(surf, app)
    assert scene.stats.launched == scene.stats.manual == 10
    assert scene.stats.bursts >= 1
    assert scene.stats.particles_spawned == 80 * scene.stats.bursts
    assert scene.log.for_cat("launch") and scene.log.for_cat("burst")
    assert pygame.transform.average_color(surf)[:3] != (0, 0, 0)
    ok("60 frames: launches, bursts, dev log and pixels all line up")


def test_app_smoke():
    from core.app import App

    app = App(title="test", width=160, height=120, fps=0)
    scene = FireworksScene(ShowConfig(), seed=9)
    assert app.screen.get_size() == app.size == (160, 120)
    assert app._render_surface.get_size() == app.screen.get_size()
    app.push_scene(scene)
    scene.show_hud = True
    app.run(max_frames=5)
    assert app.frames == 5
    assert scene.engine.tick == 5
    ok("app window matches the canvas 1:1 and runs a bounded number of frames")


# ════════════════════════════════════════════════════════════════════════
#  Runner
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("HSLA", test_hsla_to_rgb),
        ("Fade", test_fade),
        ("Draw commands", test_draw_commands),
        ("Render idempotence", test_render_idempotent_pixels),
        ("Scene pointer", test_scene_pointer_capture),
        ("Scene frames", test_scene_frames),
        ("App smoke", test_app_smoke),
    ]

    for name, fn in sections:
        print(f"\n=== {name} ===")
        try:
            fn()
        except Exception:
            _failed += 1
            print(f"\n  [FAIL] {name}")
            traceback.print_exc()

    print(f"\n{'=' * 60}")
    print(f"  Render Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
