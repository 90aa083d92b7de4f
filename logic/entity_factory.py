"""logic/entity_factory.py — Agent spawning.

``spawn_agent`` attaches the full component set an agent needs.  Every
argument can be given explicitly (tests do this); anything left out is
drawn from the world's random source using the ``[agents]`` and
``[world]`` tuning sections.
"""

from __future__ import annotations
import math

from core import constants as C
from core.ecs import World
from core.tuning import get as _tun
from components import Position, Heading, Gait, Wander, MotionState, Identity, Sprite
from logic.motion import roam_half_extent, session_rng
from logic.names import generate_agent_name


def spawn_agent(world: World, *,
                x: float | None = None, z: float | None = None,
                speed: float | None = None,
                name: str | None = None,
                color: tuple | None = None,
                state: MotionState = MotionState.WANDERING,
                target: tuple[float, float] | None = None,
                wait: float = 0.0) -> int:
    """Spawn one agent and return its entity id.

    With no *target* the agent aims at its own spawn point, so its
    first tick puts it straight into WAITING.
    """
    rng = session_rng(world)
    half = roam_half_extent()
    if x is None:
        x = (rng.random() - 0.5) * 2.0 * half
    if z is None:
        z = (rng.random() - 0.5) * 2.0 * half
    if speed is None:
        lo = float(_tun("agents", "speed_min", C.AGENT_SPEED_MIN))
        hi = float(_tun("agents", "speed_max", C.AGENT_SPEED_MAX))
        speed = lo + rng.random() * (hi - lo)
    if not math.isfinite(speed) or speed <= 0.0:
        raise ValueError(f"agent speed must be > 0, got {speed!r}")
    if name is None:
        name = generate_agent_name(rng)
    if color is None:
        color = rng.choice(C.AGENT_COLORS)
    tx, tz = target if target is not None else (x, z)

    eid = world.spawn()
    world.add(eid, Identity(name=name))
    world.add(eid, Sprite(color=color))
    world.add(eid, Position(x=x, z=z))
    world.add(eid, Heading())
    world.add(eid, Gait())
    world.add(eid, Wander(speed=speed, state=state,
                          target_x=tx, target_z=tz, wait=wait))
    return eid
