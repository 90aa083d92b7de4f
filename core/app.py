"""
core/app.py — Window and frame loop for Crab Town

    app = App(create_session())
    app.push_scene(TownScene())
    app.run()

Everything is drawn onto one fixed-size canvas, which is stretched to
the window on flip.  ``pygame.time.Clock`` is the only wall-clock reader
in the program: each frame's ``dt`` goes to the top scene, which feeds
the session's ``GameClock``.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.ecs import World


class App:
    def __init__(self, world: World, title: str = "Crab Town",
                 width: int = 960, height: int = 640, fps: int = 60):
        pygame.init()
        self.world = world
        self.fps = fps
        self.canvas = pygame.Surface((width, height))
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.frame_clock = pygame.time.Clock()
        self.running = True
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)
        self.font_lg = pygame.font.SysFont("monospace", 22, bold=True)

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self.scene:
            self.scene.on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def quit(self):
        self.running = False

    # ── loop ─────────────────────────────────────────────────────────

    def run(self):
        while self.running:
            dt = self.frame_clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quit()
                elif event.type == pygame.VIDEORESIZE:
                    self.window = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    self.scene.handle_event(event, self)

            top = self.scene
            if top:
                top.update(dt, self)
                top.draw(self.canvas, self)
            pygame.transform.scale(self.canvas, self.window.get_size(),
                                   self.window)
            pygame.display.flip()

        while self._scenes:
            self._scenes.pop().on_exit(self)
        pygame.quit()

    # ── text ─────────────────────────────────────────────────────────

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None, alpha: int = 255,
                  center: bool = False) -> pygame.Rect:
        img = (font or self.font).render(text, True, color)
        if alpha < 255:
            img.set_alpha(alpha)
        if center:
            x -= img.get_width() // 2
        return surface.blit(img, (x, y))

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2) -> pygame.Rect:
        """Text on a translucent plate, for HUD labels over the sand."""
        img = (font or self.font).render(text, True, color)
        plate = pygame.Surface((img.get_width() + pad * 2,
                                img.get_height() + pad * 2), pygame.SRCALPHA)
        plate.fill(bg)
        surface.blit(plate, (x - pad, y - pad))
        return surface.blit(img, (x, y))
