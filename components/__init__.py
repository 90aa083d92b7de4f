"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Heading
rendering      Identity, Sprite
ai             MotionState, Wander, Gait
resources      GameClock, Session
dev_log        DevLog

All public names are re-exported here so code can simply do
``from components import Position``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Heading

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Identity, Sprite

# ── AI ───────────────────────────────────────────────────────────────
from components.ai import MotionState, Wander, Gait

# ── World resources / singletons ─────────────────────────────────────
from components.resources import GameClock, Session
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Position", "Heading",
    # rendering
    "Identity", "Sprite",
    # ai
    "MotionState", "Wander", "Gait",
    # resources
    "GameClock", "Session", "DevLog",
]
