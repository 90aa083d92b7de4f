"""logic/tick.py — System tick orchestration.

Houses the per-frame system pipeline, the one user command
(``submit_message``) and the read-only snapshots the renderer pulls
each frame.

Usage::

    from logic.tick import tick_systems, submit_message, agent_snapshot
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from components import (
    GameClock, Session, DevLog,
    Position, Heading, Gait, Wander, MotionState, Identity, Sprite,
)
from logic.motion import motion_system
from logic.messages import MessageBoard, MessageView

if TYPE_CHECKING:
    from core.ecs import World


@dataclass(frozen=True)
class AgentView:
    """One agent as the renderer sees it on one frame."""
    eid: int
    name: str
    color: tuple
    x: float
    z: float
    heading: float
    gait_phase: float
    gesture_phase: float
    state: MotionState


# ── Frame pipeline ───────────────────────────────────────────────────

def tick_systems(world: "World", dt: float) -> None:
    """Run all simulation systems for one frame.

    Parameters
    ----------
    world : World
        The session world.
    dt : float
        Seconds since the previous frame.
    """
    clock = world.res(GameClock)
    ticks = clock.advance(dt) if clock else 0

    motion_system(world, dt)

    # Maintenance runs at most once per frame, however many periods
    # a long frame spanned; prune is idempotent.
    if ticks:
        maintenance_system(world)


def maintenance_system(world: "World") -> int:
    """Prune expired messages.  Returns how many were removed."""
    board = world.res(MessageBoard)
    clock = world.res(GameClock)
    if board is None or clock is None:
        return 0
    removed = board.prune(clock.time)
    if removed:
        _log_chat(world, f"expired {removed}",
                  details={"remaining": board.count})
    return removed


# ── Commands ─────────────────────────────────────────────────────────

def submit_message(world: "World", text: str):
    """Post *text* as the session's user at the current session time.

    Returns the new ``Message``, or ``None`` if *text* was blank.
    """
    board = world.res(MessageBoard)
    session = world.res(Session)
    clock = world.res(GameClock)
    now = clock.time if clock else 0.0
    msg = board.submit(text, session.handle, now)
    if msg is None:
        _log_chat(world, "rejected empty")
        return None
    print(f"[CHAT] {msg.author}: {msg.text}")
    _log_chat(world, "posted", details={"id": msg.id, "len": len(msg.text)})
    return msg


# ── Snapshots ────────────────────────────────────────────────────────

def agent_snapshot(world: "World") -> list[AgentView]:
    """Every agent in spawn order."""
    views = []
    for eid, ident, sprite, pos, heading, gait, wander in world.query(
            Identity, Sprite, Position, Heading, Gait, Wander):
        views.append(AgentView(
            eid=eid,
            name=ident.name,
            color=sprite.color,
            x=pos.x, z=pos.z,
            heading=heading.angle,
            gait_phase=gait.phase,
            gesture_phase=gait.gesture,
            state=wander.state,
        ))
    return views


def message_snapshot(world: "World") -> list[MessageView]:
    """Live messages at the current session time, oldest first."""
    board = world.res(MessageBoard)
    clock = world.res(GameClock)
    if board is None:
        return []
    return board.live_view(clock.time if clock else 0.0)


def _log_chat(world: "World", msg: str, **kw):
    log = world.res(DevLog)
    if log is None:
        return
    clock = world.res(GameClock)
    log.record(0, "chat", msg, name="board",
               t=clock.time if clock else 0.0, **kw)
