"""
core/scene.py — Base class for what the App shows

Override only the hooks you need.  Scenes read the session world when
drawing and change it only through ``logic`` (``tick_systems`` each
frame, ``submit_message`` on input):

    class HeadlessTown(Scene):
        def update(self, dt, app):
            tick_systems(app.world, dt)

        def on_exit(self, app):
            end_session(app.world)
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        pass

    def on_exit(self, app: App):
        """Covered by another scene, or the app is shutting down."""

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        """*dt* is wall-clock seconds since the last frame."""

    def draw(self, surface: pygame.Surface, app: App):
        pass
