"""components.rendering — Visual identity and display."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Identity:
    name: str = "unnamed"


@dataclass
class Sprite:
    """Cosmetic only — the simulation never reads it."""
    color: tuple = (225, 112, 85)
    size: float = 0.3          # u, body radius
