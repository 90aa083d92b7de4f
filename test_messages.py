"""test_messages.py — Message board lifecycle tests.

Submit guards (blank, trim, truncate), spawn placement, derived
opacity / float offset, exact prune sets, and reader isolation.

Run:  python test_messages.py      (or under pytest)
"""
from __future__ import annotations
import sys, math, random, tempfile, traceback, dataclasses
from pathlib import Path

# ── Bootstrap ────────────────────────────────────────────────────────
from core.tuning import load as _load_tuning
_load_tuning()

from logic.messages import MessageBoard, opacity, float_offset, message_ttl


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label}: {detail}")

TTL = 15.0


def _board(seed: int = 5) -> MessageBoard:
    return MessageBoard(random.Random(seed))


# ═══════════════════════════════════════════════════════════════════════
#  1: Hello town
# ═══════════════════════════════════════════════════════════════════════

def test_hello_town():
    """One message from post to prune."""
    print("\n=== 1: Hello town ===")
    board = _board()
    board.submit("Hello town", "WaveCrab42", 0.0)

    views = board.live_view(0.0)
    check(len(views) == 1, "1a: one live entry at t=0", f"{len(views)}")
    v = views[0]
    check(v.text == "Hello town" and v.author == "WaveCrab42",
          "1b: text and author stored", f"{v.text!r} by {v.author!r}")
    check(v.opacity == 1.0, "1c: opacity 1.0 at t=0", f"{v.opacity}")

    v = board.live_view(7.5)[0]
    check(math.isclose(v.opacity, 0.5), "1d: opacity ≈ 0.5 at t=7.5", f"{v.opacity}")

    removed = board.prune(16.0)
    check(removed == 1 and board.count == 0, "1e: pruned at t=16",
          f"removed={removed} count={board.count}")
    check(board.live_view(16.0) == [], "1f: live view empty afterwards")


# ═══════════════════════════════════════════════════════════════════════
#  2: Submit guards
# ═══════════════════════════════════════════════════════════════════════

def test_submit_guards():
    """Blank input is dropped; text is trimmed then cut to 100 chars."""
    print("\n=== 2: Submit guards ===")
    board = _board()
    board.submit("first", "A", 0.0)
    for raw in ("", "   ", "\t\n "):
        result = board.submit(raw, "A", 1.0)
        check(result is None and board.count == 1,
              f"2a: {raw!r} ignored", f"count={board.count}")

    msg = board.submit("   padded   ", "A", 1.0)
    check(msg.text == "padded", "2b: surrounding whitespace trimmed", repr(msg.text))

    long_text = "  " + "".join(chr(ord("a") + i % 26) for i in range(150)) + "  "
    msg = board.submit(long_text, "A", 2.0)
    check(msg.text == long_text.strip()[:100] and len(msg.text) == 100,
          "2c: 150 chars → first 100 of the trimmed text", f"len={len(msg.text)}")

    exactly = "x" * 100
    msg = board.submit(exactly, "A", 2.0)
    check(msg.text == exactly, "2d: exactly 100 chars kept whole")

    check(board.count == 4, "2e: each accepted submit adds exactly one",
          f"count={board.count}")

    try:
        board.submit("hi", "A", math.nan)
    except ValueError:
        ok("2f: non-finite timestamp rejected")
    else:
        check(False, "2f: non-finite timestamp rejected", "no exception")


# ═══════════════════════════════════════════════════════════════════════
#  3: Identity, order, placement
# ═══════════════════════════════════════════════════════════════════════

def test_identity_and_placement():
    """Ids grow in post order; bubbles spawn over the square, 3–5 u up."""
    print("\n=== 3: Identity + placement ===")
    board = _board(9)
    posted = [board.submit(f"msg {i}", "A", i * 0.1) for i in range(200)]

    ids = [m.id for m in posted]
    check(ids == sorted(ids) and len(set(ids)) == 200, "3a: ids unique and increasing")
    check([v.id for v in board.live_view(1.0)][:5] == ids[:5],
          "3b: live view in insertion order")

    bad = [m for m in posted
           if not (-6.0 <= m.x < 6.0 and -6.0 <= m.z < 6.0 and 3.0 <= m.y < 5.0)]
    check(not bad, "3c: every spawn within x,z ∈ [-6,6), y ∈ [3,5)",
          f"{len(bad)} outside")

    m = posted[0]
    try:
        m.text = "edited"
    except dataclasses.FrozenInstanceError:
        ok("3d: posted messages are immutable")
    else:
        check(False, "3d: posted messages are immutable", "assignment succeeded")


# ═══════════════════════════════════════════════════════════════════════
#  4: Derived attributes
# ═══════════════════════════════════════════════════════════════════════

def test_derived_attributes():
    """Opacity falls monotonically to 0 at the TTL; the bob stays bounded."""
    print("\n=== 4: Derived attributes ===")
    ages = [i * 0.25 for i in range(-4, 81)]
    values = [opacity(a) for a in ages]
    check(all(b <= a for a, b in zip(values, values[1:])),
          "4a: opacity non-increasing in age")
    check(opacity(TTL) == 0.0 and opacity(TTL + 5) == 0.0,
          "4b: opacity exactly 0 at and after the TTL")
    check(opacity(-1.0) == 1.0 and all(0.0 <= v <= 1.0 for v in values),
          "4c: opacity clamped to [0, 1]")

    board = _board()
    msg = board.submit("bob", "A", 2.0)
    worst = 0.0
    for i in range(0, 130):
        now = 2.0 + i * 0.1
        age = now - msg.created_at
        worst = max(worst, abs(float_offset(msg, now) - age * 0.05))
    check(worst <= 0.1 + 1e-12, "4d: offset = drift ± 0.1 bob", f"worst={worst}")

    v1 = board.live_view(5.0)[0]
    v2 = board.live_view(5.0)[0]
    check(v1 == v2, "4e: same now → same view (pure function)")


# ═══════════════════════════════════════════════════════════════════════
#  5: Prune
# ═══════════════════════════════════════════════════════════════════════

def test_prune():
    """Exactly the aged-out set goes; the rest keep order; reads never prune."""
    print("\n=== 5: Prune ===")
    board = _board()
    a = board.submit("a", "A", 0.0)
    b = board.submit("b", "A", 5.0)
    c = board.submit("c", "A", 10.0)
    d = board.submit("d", "A", 1.0)

    check(board.live_view(100.0) == [] and board.count == 4,
          "5a: live_view hides expired entries without removing them")

    held = board._messages
    removed = board.prune(15.0)
    check(removed == 1 and [m.id for m in board.messages] == [b.id, c.id, d.id],
          "5b: age 15 removed, others kept in order",
          f"removed={removed} ids={[m.id for m in board.messages]}")
    check(len(held) == 4 and held[0] is a,
          "5c: a reader's list is untouched by prune")

    check(board.prune(15.0) == 0 and board.prune(15.5) == 0,
          "5d: repeated prune is idempotent")

    removed = board.prune(20.0)
    check(removed == 2 and [m.id for m in board.messages] == [c.id],
          "5e: t=20 drops b (age 15) and d (age 19)",
          f"ids={[m.id for m in board.messages]}")

    board.clear()
    check(board.count == 0 and board.prune(99.0) == 0, "5f: clear empties the board")


# ═══════════════════════════════════════════════════════════════════════
#  6: TTL guard
# ═══════════════════════════════════════════════════════════════════════

def test_ttl_guard():
    """A zero TTL, passed in or hot-reloaded, is refused rather than divided by."""
    print("\n=== 6: TTL guard ===")
    try:
        opacity(-1.0, 0.0)
    except ValueError:
        ok("6a: opacity(age, ttl=0) raises ValueError")
    else:
        check(False, "6a: opacity(age, ttl=0) raises ValueError", "no exception")

    board = _board()
    board.submit("hi", "A", 0.0)
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tuning.toml"
        path.write_text("[messages]\nttl = 0\n")
        _load_tuning(path)
        try:
            for label, read in (("message_ttl", message_ttl),
                                ("live_view", lambda: board.live_view(1.0)),
                                ("prune", lambda: board.prune(1.0))):
                try:
                    read()
                except ValueError:
                    ok(f"6b: {label} refuses ttl = 0")
                else:
                    check(False, f"6b: {label} refuses ttl = 0", "no exception")
        finally:
            _load_tuning()
    check(message_ttl() == TTL and board.count == 1,
          "6c: defaults restored, board untouched")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Hello Town", test_hello_town),
        ("Submit Guards", test_submit_guards),
        ("Identity + Placement", test_identity_and_placement),
        ("Derived Attributes", test_derived_attributes),
        ("Prune", test_prune),
        ("TTL Guard", test_ttl_guard),
    ]

    for name, fn in sections:
        try:
            fn()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Message Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
