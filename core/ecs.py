"""
core/ecs.py — Entity-Component-System

Entities are ints. Components are any object, stored by type.
Query by component types to get matching entities.

    w = World()
    e = w.spawn()
    w.add(e, Position(5.0, 3.0))
    w.add(e, Wander(speed=1.2))

    for eid, pos, wander in w.query(Position, Wander):
        ...

One World is one session: every agent, the message board, the clock
and the random source live here and nowhere else.  Crabs are never
destroyed, so there is no kill/purge cycle.
"""

from __future__ import annotations
from typing import Any, Iterator


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for entities that have ALL types.

        Entities come out in spawn order.
        """
        if not types:
            return
        stores = [self._stores.get(t, {}) for t in types]
        for eid in sorted(min(stores, key=len)):
            if eid >= 0 and all(eid in s for s in stores):
                yield (eid, *(s[eid] for s in stores))

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        self._stores.setdefault(type(resource), {})[-1] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(-1)
