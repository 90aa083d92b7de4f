"""logic — Simulation systems package.

Top-level modules
-----------------
tick            — per-frame system orchestrator, submit command, snapshots
motion          — crab wander state machine
messages        — floating chat message board
entity_factory  — agent spawning
names           — crab names and user handles
"""
