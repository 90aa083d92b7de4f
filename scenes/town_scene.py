"""
scenes/town_scene.py — The beach town view

Crabs wander the sand; typed messages float above the town square and
fade out.  The scene owns no simulation state: ``update`` hands the
frame's ``dt`` to ``tick_systems`` and ``draw`` renders snapshots.

Keys:
    any key     dismiss the welcome panel
    typing      edit the message line
    Enter       send the message
    Backspace   delete a character
    Esc         clear the line (quit when empty)
    F4          hot-reload data/tuning.toml
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core import constants as C
from core import tuning as tuning_mod
from core.bootstrap import end_session
from components import GameClock, Session
from logic.tick import (
    tick_systems, submit_message, agent_snapshot, message_snapshot,
)
from logic.messages import MessageBoard
from scenes.town_draw import (
    draw_ground, draw_agents, draw_messages, draw_hud,
    draw_input_line, draw_welcome,
)


class TownScene(Scene):
    def __init__(self, show_welcome: bool = True):
        self.show_welcome = show_welcome
        self.input_text = ""

    def on_enter(self, app: App):
        pygame.key.set_repeat(400, 40)

    def on_exit(self, app: App):
        end_session(app.world)

    # ── input ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        if self.show_welcome:
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self.show_welcome = False
            return

        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_F4:
            tuning_mod.reload()
            return
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            submit_message(app.world, self.input_text)
            self.input_text = ""
            return
        if event.key == pygame.K_ESCAPE:
            if self.input_text:
                self.input_text = ""
            else:
                app.quit()
            return
        if event.key == pygame.K_BACKSPACE:
            self.input_text = self.input_text[:-1]
            return
        max_len = int(tuning_mod.get("messages", "max_len", C.MESSAGE_MAX_LEN))
        if event.unicode and event.unicode.isprintable() \
                and len(self.input_text) < max_len:
            self.input_text += event.unicode

    # ── tick ─────────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        tick_systems(app.world, dt)

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        sw, sh = surface.get_size()
        origin = (sw // 2 - 60, int(sh * 0.52))
        clock = app.world.res(GameClock)
        t = clock.time if clock else 0.0
        ground_half = float(tuning_mod.get("world", "ground_half_extent",
                                           C.GROUND_HALF_EXTENT))

        draw_ground(surface, origin, t, ground_half)
        draw_agents(surface, app, origin, agent_snapshot(app.world))
        draw_messages(surface, app, origin, message_snapshot(app.world))

        session = app.world.res(Session)
        board = app.world.res(MessageBoard)
        draw_hud(surface, app, session.handle, board.count if board else 0)
        draw_input_line(surface, app, self.input_text, t,
                        int(tuning_mod.get("messages", "max_len", C.MESSAGE_MAX_LEN)))

        if self.show_welcome:
            draw_welcome(surface, app, session.handle)
