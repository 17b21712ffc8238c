"""core/events.py — Lightweight event bus.

Decouples the engine, which *signals* launches and bursts, from the
systems that *react* to them (dev log, HUD counters).  The scene owns
the bus and hands it to the engine::

    from core.events import EventBus
    bus = EventBus()
    bus.subscribe("FireworkBurst", on_burst)

The engine emits during ``advance()``; the scene drains once per frame::

    bus.drain()          # calls all handlers for pending events

Design rules:
  - Events are plain dataclasses — no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed next drain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class FireworkLaunched:
    """A firework entered the live collection."""
    tick: int = 0
    sx: float = 0.0
    sy: float = 0.0
    tx: float = 0.0
    ty: float = 0.0
    manual: bool = False


@dataclass
class FireworkBurst:
    """A firework reached its target and was replaced by particles."""
    tick: int = 0
    x: float = 0.0
    y: float = 0.0
    hue: float = 0.0
    count: int = 0


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"FireworkBurst"``.
        """
        self._subs[event_type].append(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Handlers may emit new events — those are processed in the
        same drain pass (breadth-first).
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._stats[name] += 1
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        import traceback; traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def stats(self) -> dict[str, int]:
        """Return cumulative event counts by type."""
        return dict(self._stats)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
