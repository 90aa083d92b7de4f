"""logic/motion.py — Crab wander state machine.

Every agent loops forever between two states::

    WANDERING ──(within arrival threshold)──▶ WAITING
        ▲                                        │
        └──────(wait timer ran out, new target)──┘

``advance(world, eid, dt)`` steps one agent; ``motion_system(world, dt)``
steps them all in spawn order.  Neither owns a timer — the frame loop
passes ``dt`` in.  Randomness comes from the world's ``random.Random``
resource so tests can seed it.

Numbers (threshold, wait range, phase rates, roaming square) come from
``[agents.motion]`` / ``[world]`` in ``data/tuning.toml``.
"""

from __future__ import annotations
import math
import random

from core import constants as C
from core.ecs import World
from core.tuning import get as _tun
from components import (
    Position, Heading, Gait, Wander, MotionState,
    Identity, GameClock, DevLog,
)


class MotionFault(ValueError):
    """Raised for a negative / non-finite ``dt`` or a non-finite result."""


# ── Tunables ─────────────────────────────────────────────────────────

def roam_half_extent() -> float:
    return float(_tun("world", "roam_half_extent", C.ROAM_HALF_EXTENT))


def _motion(key: str, default: float) -> float:
    return float(_tun("agents.motion", key, default))


# ── Random picks ─────────────────────────────────────────────────────

def pick_target(rng) -> tuple[float, float]:
    """Uniform point in the roaming square, each axis in ``[-h, h)``."""
    half = roam_half_extent()
    return ((rng.random() - 0.5) * 2.0 * half,
            (rng.random() - 0.5) * 2.0 * half)


def pick_wait(rng) -> float:
    """Uniform wait duration in ``[wait_min, wait_max)``."""
    lo = _motion("wait_min", C.WAIT_MIN)
    hi = _motion("wait_max", C.WAIT_MAX)
    return lo + rng.random() * (hi - lo)


# ── State machine ────────────────────────────────────────────────────

def step(pos: Position, heading: Heading, gait: Gait, wander: Wander,
         dt: float, rng) -> MotionState | None:
    """Advance one agent's components by *dt* seconds.

    Returns the state entered this step, or ``None`` if the state did
    not change.
    """
    if not math.isfinite(dt) or dt < 0.0:
        raise MotionFault(f"dt must be finite and >= 0, got {dt!r}")
    if not math.isfinite(wander.speed) or wander.speed <= 0.0:
        raise MotionFault(f"speed must be finite and > 0, got {wander.speed!r}")

    gait.phase += dt * wander.speed * _motion("gait_rate", C.GAIT_RATE)
    gait.gesture += dt * _motion("gesture_rate", C.GESTURE_RATE)

    entered = None
    if wander.state is MotionState.WAITING:
        wander.wait -= dt
        if wander.wait <= 0.0:
            wander.wait = 0.0
            wander.target_x, wander.target_z = pick_target(rng)
            wander.state = MotionState.WANDERING
            entered = MotionState.WANDERING
    else:
        threshold = _motion("arrival_threshold", C.ARRIVAL_THRESHOLD)
        dx = wander.target_x - pos.x
        dz = wander.target_z - pos.z
        dist = math.hypot(dx, dz)
        if dist == 0.0 or dist < threshold:
            entered = _start_waiting(wander, rng)
        else:
            stride = wander.speed * dt
            pos.x += dx / dist * stride
            pos.z += dz / dist * stride
            heading.angle = math.atan2(dx, dz) + C.HEADING_OFFSET
            # Settle on the frame we arrive instead of the next one
            if math.hypot(wander.target_x - pos.x,
                          wander.target_z - pos.z) < threshold:
                entered = _start_waiting(wander, rng)

    if not (math.isfinite(pos.x) and math.isfinite(pos.z)
            and math.isfinite(heading.angle)):
        raise MotionFault(
            f"non-finite motion state: pos=({pos.x}, {pos.z}) "
            f"heading={heading.angle}")
    return entered


def _start_waiting(wander: Wander, rng) -> MotionState:
    wander.state = MotionState.WAITING
    wander.wait = pick_wait(rng)
    return MotionState.WAITING


# ── World-level entry points ─────────────────────────────────────────

def advance(world: World, eid: int, dt: float) -> MotionState | None:
    """Step agent *eid* by *dt* seconds and log any state change.

    Raises ``MotionFault`` if *eid* lacks any of the agent components.
    """
    pos = world.get(eid, Position)
    heading = world.get(eid, Heading)
    gait = world.get(eid, Gait)
    wander = world.get(eid, Wander)
    if pos is None or heading is None or gait is None or wander is None:
        raise MotionFault(f"entity {eid} is not a complete agent")

    entered = step(pos, heading, gait, wander, dt, session_rng(world))
    if entered is MotionState.WAITING:
        _log(world, eid, "→ waiting",
             details={"x": round(pos.x, 2), "z": round(pos.z, 2),
                      "wait": round(wander.wait, 2)})
    elif entered is MotionState.WANDERING:
        _log(world, eid, "→ wandering",
             details={"tx": round(wander.target_x, 2),
                      "tz": round(wander.target_z, 2)})
    return entered


def motion_system(world: World, dt: float) -> None:
    """Advance every agent, in spawn order."""
    for eid, _ in list(world.query(Wander)):
        advance(world, eid, dt)


def session_rng(world: World):
    rng = world.res(random.Random)
    return rng if rng is not None else random


def _log(world: World, eid: int, msg: str, **kw):
    """Write a motion entry to DevLog if available."""
    log = world.res(DevLog)
    if log is None:
        return
    clock = world.res(GameClock)
    ident = world.get(eid, Identity)
    name = ident.name if ident else f"e{eid}"
    log.record(eid, "motion", msg, name=name,
               t=clock.time if clock else 0.0, **kw)
