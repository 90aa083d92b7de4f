"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Most of these are defaults; ``data/tuning.toml`` can override them at
startup (see ``core.tuning``).

Unit System
-----------
The town is a flat beach on the x/z plane, y is up.

    Distance / position     u       (world units, ~1 crab = 0.6 u)
    Speed                   u/s
    Time                    s       (session seconds, see GameClock)
    Angles                  rad
    Phases                  rad     (only sin/cos is ever consumed)

Rendering converts to pixels via ``PX_PER_UNIT``.
No simulation code should reference pixels — only the renderer.

Region Hierarchy (small → large):
     6 u   Message spawn half-extent (bubbles float over the square)
     9 u   Roaming square half-extent (agent spawn + wander targets)
    12 u   Visible ground half-extent
"""

import math

# ── World regions ───────────────────────────────────────────────────
ROAM_HALF_EXTENT: float = 9.0      # u
GROUND_HALF_EXTENT: float = 12.0   # u

# ── Agents ──────────────────────────────────────────────────────────
AGENT_COUNT: int = 12
AGENT_SPEED_MIN: float = 0.5       # u/s
AGENT_SPEED_MAX: float = 2.0       # u/s
AGENT_COLORS: list[tuple[int, int, int]] = [
    (225, 112, 85),
    (214, 48, 49),
    (232, 67, 147),
    (253, 121, 168),
    (250, 177, 160),
    (255, 118, 117),
]

# ── Motion state machine ────────────────────────────────────────────
ARRIVAL_THRESHOLD: float = 0.5     # u
WAIT_MIN: float = 1.0              # s
WAIT_MAX: float = 4.0              # s  (exclusive)
GAIT_RATE: float = 15.0            # rad per unit travelled
GESTURE_RATE: float = 2.0          # rad/s, independent of speed
HEADING_OFFSET: float = math.pi / 2  # crabs walk sideways

# ── Messages ────────────────────────────────────────────────────────
MESSAGE_TTL: float = 15.0          # s
MESSAGE_MAX_LEN: int = 100         # chars
MESSAGE_HALF_EXTENT: float = 6.0   # u
MESSAGE_HEIGHT_MIN: float = 3.0    # u
MESSAGE_HEIGHT_MAX: float = 5.0    # u  (exclusive)
MESSAGE_BOB_AMPLITUDE: float = 0.1   # u
MESSAGE_DRIFT_RATE: float = 0.05     # u/s

# ── Clock ───────────────────────────────────────────────────────────
FPS: int = 60
MAINTENANCE_PERIOD: float = 1.0    # s

# ── Rendering ───────────────────────────────────────────────────────
PX_PER_UNIT: int = 28
SAND_COLOR = (245, 214, 186)
SQUARE_COLOR = (221, 208, 194)
WATER_COLOR = (9, 132, 227)
SKY_COLOR = (129, 207, 224)
TEXT_COLOR = (45, 52, 54)
HANDLE_COLOR = (225, 112, 85)
