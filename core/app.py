"""
core/app.py — Pygame application shell

Handles the window, the frame clock (the tick source), and the scene
stack.  You don't edit this file to change the show; you write Scenes
and push/pop them.

    app = App(title="Fireworks", width=960, height=640)
    app.push_scene(FireworksScene(config))
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Fireworks", width: int = 960, height: int = 640,
                 fps: int = 60):
        pygame.init()
        self.size = (width, height)
        # Persistent canvas — scenes draw over last frame's pixels, which
        # is what lets fading trails accumulate.
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0
        self.frames = 0

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    # -- Main loop --

    def run(self, max_frames: int | None = None):
        """Drive the top scene until quit (or *max_frames* frames)."""
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif self.scene:
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)
                self.scene.draw(self._render_surface, self)

            self.screen.blit(self._render_surface, (0, 0))
            pygame.display.flip()

            self.frames += 1
            if max_frames is not None and self.frames >= max_frames:
                self.running = False

        while self._scenes:
            self._scenes.pop().on_exit(self)
        pygame.quit()

    # -- Convenience --

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Draw text with a semi-transparent background box."""
        f = font or self.font
        img = f.render(text, True, color)
        w, h = img.get_size()
        bg_surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        bg_surf.fill(bg)
        surface.blit(bg_surf, (x - pad, y - pad))
        return surface.blit(img, (x, y))
