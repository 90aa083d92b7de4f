"""core/tuning.py — Data-driven tuning constants.

All simulation numbers can be overridden in ``data/tuning.toml``, which
is loaded once at startup.  Any system can read a value with::

    from core.tuning import get
    ttl = get("messages", "ttl", 15.0)

The defaults passed to ``get`` are the values in ``core.constants`` so
a missing file changes nothing.

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F4.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
    """
    global _data, _path

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "tuning.toml"
    else:
        path = Path(path)

    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    count = _count_leaves(_data)
    print(f"[TUNING] Loaded {count} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk (hot-reload)."""
    load(_path)


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"agents.motion"`` looks up ``[agents.motion]``.

    >>> get("agents.motion", "arrival_threshold", 0.5)
    0.5
    """
    node = _section_node(section)
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def _section_node(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
