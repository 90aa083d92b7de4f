"""components.dev_log — Structured simulation event log.

A ring-buffer resource that records timestamped state transitions of
agents and the comings and goings of chat messages.  Cheap enough to
write every frame, unlike console output.

Usage:
    log = world.res(DevLog)
    log.record(eid, "motion", "→ waiting", t=clock.time, details={"wait": 2.3})

Each entry is a dict:
    {"t": float, "eid": int, "name": str, "cat": str,
     "msg": str, "details": dict | None}

Messages are not entities; their chat entries use ``eid = 0``.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring-buffer of simulation events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500

    def record(self, eid: int, cat: str, msg: str, *,
               name: str = "", t: float = 0.0,
               details: dict | None = None) -> None:
        self.entries.append({
            "t": t,
            "eid": eid,
            "name": name,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def clear(self):
        self.entries.clear()

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self.entries if e["cat"] == cat][-n:]
