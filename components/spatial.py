"""components.spatial — Position and heading on the beach plane.

All coordinates are world units on the x/z ground plane; agents
always stand at y = 0, so y is not stored.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Position:
    x: float = 0.0        # u
    z: float = 0.0        # u


@dataclass
class Heading:
    """Facing angle around the vertical axis.

    ``atan2(dx, dz)`` of the last travel direction plus a quarter turn,
    because crabs walk sideways.  Only updated while wandering.
    """
    angle: float = 0.0    # rad
