"""core/tuning.py — Data-driven show constants.

Every number the display uses lives in ``data/tuning.toml`` and is
loaded once at startup.  Sections are read whole::

    from core.tuning import section
    fw = section("firework")        # {"speed": 5.0, ...}

``core.config.ShowConfig`` snapshots the sections into frozen
dataclasses when the engine is built.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    try:
        import tomli as tomllib            # pip install tomli
    except ModuleNotFoundError:
        tomllib = None                     # type: ignore[assignment]


_data: dict = {}


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
    """
    global _data

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "tuning.toml"
    else:
        path = Path(path)

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    if tomllib is None:
        print("[TUNING] No TOML parser available (need Python 3.11+ or `pip install tomli`)")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    count = _count_leaves(_data)
    print(f"[TUNING] Loaded {count} values from {path}")


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _data
    for part in section_path.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return {}
        if node is None:
            return {}
    if isinstance(node, dict):
        return dict(node)
    return {}


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
