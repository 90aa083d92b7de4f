"""scenes/town_draw.py — Rendering helpers for the town scene.

All pure-draw functions live here so that TownScene.draw() stays thin.
Every function receives the data it needs as parameters (snapshots,
never live components) so nothing here can change the simulation.

Projection is a fixed oblique view: x goes right, z goes down the
screen at half scale, y goes up.
"""

from __future__ import annotations
import math
import pygame
from core.app import App
from core import constants as C
from logic.messages import MessageView
from logic.tick import AgentView


def project(x: float, y: float, z: float,
            origin: tuple[int, int]) -> tuple[int, int]:
    """World (x, y, z) → virtual-surface pixel."""
    ox, oy = origin
    return (int(ox + x * C.PX_PER_UNIT),
            int(oy + z * C.PX_PER_UNIT * 0.5 - y * C.PX_PER_UNIT * 0.8))


# ── Ground ──────────────────────────────────────────────────────────

def draw_ground(surface: pygame.Surface, origin: tuple[int, int],
                t: float, ground_half: float):
    surface.fill(C.SKY_COLOR)

    left, top = project(-ground_half, 0.0, -ground_half, origin)
    right, bottom = project(ground_half, 0.0, ground_half, origin)
    pygame.draw.rect(surface, C.SAND_COLOR, (left, top, right - left, bottom - top))

    # Town square
    cx, cy = project(0.0, 0.0, -4.0, origin)
    rx = 5 * C.PX_PER_UNIT
    pygame.draw.ellipse(surface, C.SQUARE_COLOR, (cx - rx, cy - rx // 2, rx * 2, rx))

    # Sea along the right edge, with drifting wave lines
    sea_left = right
    pygame.draw.rect(surface, C.WATER_COLOR,
                     (sea_left, top, surface.get_width() - sea_left, bottom - top))
    for i in range(6):
        wz = -ground_half + (i + 0.5) * (2 * ground_half / 6)
        _, wy = project(0.0, 0.0, wz, origin)
        wy += int(math.sin(t + i) * 3)
        pygame.draw.line(surface, (116, 185, 255),
                         (sea_left + 10, wy), (surface.get_width() - 10, wy), 1)


# ── Agents ──────────────────────────────────────────────────────────

def draw_agents(surface: pygame.Surface, app: App,
                origin: tuple[int, int], agents: list[AgentView]):
    # Painter's order: far (small z) first
    for a in sorted(agents, key=lambda v: v.z):
        _draw_crab(surface, app, origin, a)


def _draw_crab(surface: pygame.Surface, app: App,
               origin: tuple[int, int], a: AgentView):
    sx, sy = project(a.x, 0.2, a.z, origin)
    r = int(0.3 * C.PX_PER_UNIT)
    leg_swing = math.sin(a.gait_phase) * 0.2
    claw_lift = math.sin(a.gesture_phase) * 0.1 + 0.3

    # Body axis on screen: the heading turns the crab around y
    ax = math.cos(a.heading)
    az = math.sin(a.heading) * 0.5

    # Legs — three per side, alternating swing
    for side in (-1, 1):
        for i in range(3):
            swing = leg_swing if i % 2 == 0 else -leg_swing
            along = (i - 1) * 0.35 * r
            bx = sx + ax * along
            by = sy + az * along
            angle = side * (0.8 + swing)
            ex = bx + side * -az * r * 1.6 + math.sin(angle) * r * 0.4
            ey = by + side * ax * r * 0.8 + math.cos(angle) * r * 0.6
            pygame.draw.line(surface, a.color, (bx, by), (ex, ey), 2)

    pygame.draw.circle(surface, a.color, (sx, sy), r)

    # Claws
    for side in (-1, 1):
        cx = sx + ax * side * r * 1.3
        cy = sy + az * side * r * 1.3 - claw_lift * C.PX_PER_UNIT * 0.5
        pygame.draw.circle(surface, a.color, (int(cx), int(cy)), max(2, r // 2))

    # Eyes on stalks
    for side in (-1, 1):
        ex = sx + side * r // 3
        pygame.draw.line(surface, a.color, (ex, sy - r // 2), (ex, sy - r - 4), 2)
        pygame.draw.circle(surface, (26, 26, 26), (ex, sy - r - 4), 2)

    app.draw_text(surface, a.name, sx, sy - r - 20,
                  color=C.TEXT_COLOR, font=app.font_sm, center=True)


# ── Messages ────────────────────────────────────────────────────────

def draw_messages(surface: pygame.Surface, app: App,
                  origin: tuple[int, int], messages: list[MessageView]):
    for m in messages:
        if m.opacity <= 0.0:
            continue
        sx, sy = project(m.x, m.y + m.float_offset, m.z, origin)
        alpha = int(255 * m.opacity * 0.95)

        width_u = min(len(m.text) * 0.12 + 0.5, 4.0)
        w = int(width_u * C.PX_PER_UNIT * 1.6)
        h = 40
        bubble = pygame.Surface((w, h + 8), pygame.SRCALPHA)
        pygame.draw.rect(bubble, (255, 255, 255, alpha), (0, 0, w, h), border_radius=8)
        pygame.draw.polygon(bubble, (255, 255, 255, alpha),
                            [(w // 2 - 6, h), (w // 2 + 6, h), (w // 2, h + 8)])
        surface.blit(bubble, (sx - w // 2, sy - h - 8))

        app.draw_text(surface, m.author, sx, sy - h - 4,
                      color=C.HANDLE_COLOR, font=app.font_sm,
                      alpha=alpha, center=True)
        app.draw_text(surface, _clip(m.text, app.font, w - 8), sx, sy - h + 14,
                      color=C.TEXT_COLOR, font=app.font,
                      alpha=alpha, center=True)


def _clip(text: str, font: pygame.font.Font, max_w: int) -> str:
    """Trim *text* with an ellipsis until it fits *max_w* pixels."""
    if font.size(text)[0] <= max_w:
        return text
    while text and font.size(text + "…")[0] > max_w:
        text = text[:-1]
    return text + "…"


# ── HUD / overlays ──────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, handle: str,
             message_count: int):
    sw = surface.get_width()
    app.draw_text_bg(surface, "Crab Town", 12, 10,
                     color=(214, 93, 46), bg=(255, 255, 255, 200),
                     font=app.font_lg, pad=6)
    app.draw_text_bg(surface, f"Playing as {handle}", sw - 12 - 8 * (11 + len(handle)), 14,
                     color=C.HANDLE_COLOR, bg=(255, 255, 255, 200), pad=4)
    if message_count > 0:
        plural = "" if message_count == 1 else "s"
        app.draw_text_bg(surface, f"{message_count} message{plural} floating",
                         12, 52, color=(160, 98, 30),
                         bg=(255, 255, 255, 170), pad=4)


def draw_input_line(surface: pygame.Surface, app: App, text: str,
                    t: float, max_len: int):
    sw, sh = surface.get_size()
    box = pygame.Rect(sw // 2 - 300, sh - 70, 600, 36)
    pygame.draw.rect(surface, (255, 255, 255), box, border_radius=10)
    pygame.draw.rect(surface, (255, 234, 167), box, 2, border_radius=10)
    if text:
        caret = "_" if int(t * 2) % 2 == 0 else " "
        app.draw_text(surface, text + caret, box.x + 10, box.y + 10,
                      color=C.TEXT_COLOR)
    else:
        app.draw_text(surface, "Share a message with the town... (Enter to send)",
                      box.x + 10, box.y + 10, color=(230, 170, 100))
    app.draw_text(surface, f"{len(text)}/{max_len}", box.right - 60, box.y + 10,
                  color=(180, 180, 180), font=app.font_sm)


def draw_welcome(surface: pygame.Surface, app: App, handle: str):
    sw, sh = surface.get_size()
    shade = pygame.Surface((sw, sh), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 100))
    surface.blit(shade, (0, 0))

    panel = pygame.Rect(sw // 2 - 220, sh // 2 - 130, 440, 260)
    pygame.draw.rect(surface, (255, 248, 235), panel, border_radius=18)
    pygame.draw.rect(surface, (255, 234, 167), panel, 4, border_radius=18)
    cx = panel.centerx
    app.draw_text(surface, "Welcome to Crab Town", cx, panel.y + 24,
                  color=(154, 52, 18), font=app.font_lg, center=True)
    app.draw_text(surface, "A tiny beach town where crabs roam free.",
                  cx, panel.y + 70, color=(120, 80, 30), center=True)
    app.draw_text(surface, "Your handle:", cx, panel.y + 110,
                  color=(120, 80, 30), center=True)
    app.draw_text(surface, handle, cx, panel.y + 132,
                  color=C.HANDLE_COLOR, font=app.font_lg, center=True)
    app.draw_text(surface, "Type to send messages that float above the town.",
                  cx, panel.y + 180, color=(150, 110, 60),
                  font=app.font_sm, center=True)
    app.draw_text(surface, "Press any key to enter", cx, panel.y + 216,
                  color=(214, 93, 46), center=True)
