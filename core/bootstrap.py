"""core/bootstrap.py — Session bootstrap helpers.

Builds the one ``World`` a session lives in:
  - Resources: GameClock, random.Random, DevLog, MessageBoard, Session
  - Agents: ``agent_count`` crabs scattered over the roaming square

and tears it down again with ``end_session``.
"""

from __future__ import annotations
import random

from core import constants as C
from core.ecs import World
from core.tuning import get as _tun
from components import GameClock, Session, DevLog
from logic.entity_factory import spawn_agent
from logic.messages import MessageBoard
from logic.names import generate_user_handle


# ── Resources ────────────────────────────────────────────────────────

def setup_world_resources(world: World, rng: random.Random) -> None:
    """Register GameClock, the random source, DevLog, MessageBoard, Session."""
    period = float(_tun("clock", "maintenance_period", C.MAINTENANCE_PERIOD))
    world.set_res(GameClock(period=period))
    world.set_res(rng)
    world.set_res(DevLog())
    world.set_res(MessageBoard(rng))
    world.set_res(Session(handle=generate_user_handle(rng)))


# ── Session lifecycle ───────────────────────────────────────────────

def create_session(seed: int | None = None,
                   agent_count: int | None = None) -> World:
    """Return a fresh session world.  Pass *seed* for a repeatable one."""
    if agent_count is None:
        agent_count = int(_tun("agents", "count", C.AGENT_COUNT))

    world = World()
    setup_world_resources(world, random.Random(seed))
    for _ in range(agent_count):
        spawn_agent(world)

    print(f"[SESSION] started as {world.res(Session).handle} "
          f"with {agent_count} crabs")
    return world


def end_session(world: World) -> None:
    """Stop the maintenance tick.  Safe to call more than once."""
    clock = world.res(GameClock)
    if clock is not None and clock.running:
        clock.stop()
        print("[SESSION] ended")
