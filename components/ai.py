"""components.ai — Wander state machine and animation phases."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class MotionState(Enum):
    """The two states of an agent's wander loop."""
    WANDERING = "wandering"   # walking toward ``Wander.target``
    WAITING = "waiting"       # standing still until ``Wander.wait`` runs out


@dataclass
class Wander:
    """Self-directed roaming.

    ``speed``    — base movement speed (u/s), always > 0.
    ``state``    — current ``MotionState``.
    ``target_x/z`` — where the agent is heading; always inside the
                   roaming square.
    ``wait``     — seconds left to stand still while WAITING (s).

    A freshly spawned agent targets its own spawn point, so its first
    tick lands straight in WAITING.
    """
    speed: float = 1.0         # u/s
    state: MotionState = MotionState.WANDERING
    target_x: float = 0.0      # u
    target_z: float = 0.0      # u
    wait: float = 0.0          # s


@dataclass
class Gait:
    """Animation phase accumulators read by the renderer.

    ``phase``   — leg cycle, advances with distance-ish (dt × speed).
    ``gesture`` — idle claw wave, advances with time only.

    Both only ever grow; the renderer takes their sine, so no wrapping.
    """
    phase: float = 0.0         # rad
    gesture: float = 0.0       # rad
