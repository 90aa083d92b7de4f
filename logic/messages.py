"""logic/messages.py — Floating chat messages

Usage:
    board = MessageBoard(rng)
    world.set_res(board)

    # On user submit:
    board.submit("Hello town", "WaveCrab42", now=clock.time)

    # Once per maintenance tick (1 Hz):
    board.prune(clock.time)

    # Once per rendered frame:
    for view in board.live_view(clock.time):
        ...

Messages never change after they are posted.  Their opacity and bob
are pure functions of ``(message, now)`` and are recomputed on every
read, so nothing can go stale.  Reads never remove anything; only the
scheduled ``prune`` does.
"""

from __future__ import annotations
import itertools
import math
import random
from dataclasses import dataclass

from core import constants as C
from core.tuning import get as _tun


@dataclass(frozen=True)
class Message:
    id: int
    text: str
    author: str
    created_at: float          # s, session time
    x: float                   # u
    y: float                   # u, above ground
    z: float                   # u


@dataclass(frozen=True)
class MessageView:
    """What the renderer gets for one live message on one frame."""
    id: int
    text: str
    author: str
    x: float
    y: float
    z: float
    opacity: float             # 0–1
    float_offset: float        # u, added to y


# ── Derived attributes ───────────────────────────────────────────────

def message_ttl() -> float:
    ttl = float(_tun("messages", "ttl", C.MESSAGE_TTL))
    if not math.isfinite(ttl) or ttl <= 0:
        raise ValueError(f"messages.ttl must be a positive number, got {ttl}")
    return ttl


def opacity(age: float, ttl: float | None = None) -> float:
    """``clamp(1 - age / ttl, 0, 1)`` — exactly 0 once ``age >= ttl``."""
    if ttl is None:
        ttl = message_ttl()
    elif ttl <= 0:
        raise ValueError(f"ttl must be positive, got {ttl}")
    if age >= ttl:
        return 0.0
    return max(0.0, min(1.0, 1.0 - age / ttl))


def float_offset(msg: Message, now: float) -> float:
    """Gentle bob plus a slow upward drift with age."""
    age = now - msg.created_at
    bob = float(_tun("messages", "bob_amplitude", C.MESSAGE_BOB_AMPLITUDE))
    drift = float(_tun("messages", "drift_rate", C.MESSAGE_DRIFT_RATE))
    return math.sin(now + msg.created_at) * bob + age * drift


# ── Board ────────────────────────────────────────────────────────────

class MessageBoard:
    """Ordered store of posted messages.  Stored as a world resource."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self._messages: list[Message] = []
        self._ids = itertools.count(1)

    @property
    def count(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> list[Message]:
        """Read-only access to the stored messages, oldest first."""
        return list(self._messages)

    # ── commands ─────────────────────────────────────────────────────

    def submit(self, raw_text: str, author: str, now: float) -> Message | None:
        """Post a message.  Blank text is silently ignored (returns None)."""
        _check_time(now)
        text = raw_text.strip()
        if not text:
            return None
        max_len = int(_tun("messages", "max_len", C.MESSAGE_MAX_LEN))
        half = float(_tun("messages", "half_extent", C.MESSAGE_HALF_EXTENT))
        y_lo = float(_tun("messages", "height_min", C.MESSAGE_HEIGHT_MIN))
        y_hi = float(_tun("messages", "height_max", C.MESSAGE_HEIGHT_MAX))

        rng = self._rng
        msg = Message(
            id=next(self._ids),
            text=text[:max_len],
            author=author,
            created_at=now,
            x=(rng.random() - 0.5) * 2.0 * half,
            y=y_lo + rng.random() * (y_hi - y_lo),
            z=(rng.random() - 0.5) * 2.0 * half,
        )
        self._messages = [*self._messages, msg]
        return msg

    def prune(self, now: float) -> int:
        """Drop every message aged ``>= ttl``.  Returns how many went.

        Survivors keep their order.  The old list is replaced, not
        edited, so a reader iterating it is unaffected.
        """
        _check_time(now)
        ttl = message_ttl()
        alive = [m for m in self._messages if now - m.created_at < ttl]
        removed = len(self._messages) - len(alive)
        if removed:
            self._messages = alive
        return removed

    def clear(self):
        """Remove all messages immediately."""
        self._messages = []

    # ── queries ──────────────────────────────────────────────────────

    def live_view(self, now: float) -> list[MessageView]:
        """Snapshot of every unexpired message with its look at *now*."""
        _check_time(now)
        ttl = message_ttl()
        views: list[MessageView] = []
        for m in self._messages:
            age = now - m.created_at
            if age >= ttl:
                continue
            views.append(MessageView(
                id=m.id,
                text=m.text,
                author=m.author,
                x=m.x, y=m.y, z=m.z,
                opacity=opacity(age, ttl),
                float_offset=float_offset(m, now),
            ))
        return views


def _check_time(now: float):
    if not math.isfinite(now):
        raise ValueError(f"message clock must be finite, got {now!r}")
