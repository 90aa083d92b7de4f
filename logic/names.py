"""logic/names.py — Random crab names and user handles."""

from __future__ import annotations

CRAB_NAMES = [
    "Pinchy", "Snippy", "Clawdia", "Sheldon", "Sandy", "Coral", "Bubbles",
    "Neptune", "Tide", "Kelp", "Marina", "Barnacle", "Reef", "Scuttle",
    "Waddle",
]
ADJECTIVES = [
    "Grumpy", "Happy", "Sleepy", "Speedy", "Lazy", "Curious", "Shy",
    "Bold", "Tiny", "Big",
]
HANDLE_WORDS = [
    "Crab", "Shell", "Wave", "Sand", "Tide", "Reef", "Coral", "Pearl",
    "Ocean", "Beach",
]


def generate_agent_name(rng) -> str:
    """``"<Adjective> <Name>"``, e.g. ``"Grumpy Pinchy"``."""
    return f"{rng.choice(ADJECTIVES)} {rng.choice(CRAB_NAMES)}"


def generate_user_handle(rng) -> str:
    """Two beach words and a number below 999, e.g. ``"WaveCrab42"``."""
    first = rng.choice(HANDLE_WORDS)
    second = rng.choice(HANDLE_WORDS)
    return f"{first}{second}{rng.randrange(999)}"
