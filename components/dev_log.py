"""components.dev_log — Structured show event log.

A ring-buffer that records tick-stamped launches, bursts and system
notices.  The HUD (F1) reads the tail of it so the developer gets a
live feed of what the engine is doing.

Usage:
    log = DevLog()
    log.record(tick, "launch", "auto → (412, 180)", details={"manual": False})

Each entry is a dict:
    {"tick": int, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field

from core.events import EventBus, FireworkLaunched, FireworkBurst


@dataclass
class DevLog:
    """Ring-buffer of show events for the HUD."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500

    def record(self, tick: int, cat: str, msg: str, *,
               details: dict | None = None) -> None:
        self.entries.append({
            "tick": tick,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def recent(self, n: int = 50) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]

    # ── Bus wiring ───────────────────────────────────────────────────

    def attach(self, bus: EventBus) -> None:
        """Subscribe to the engine's launch / burst events."""
        bus.subscribe("FireworkLaunched", self._on_launch)
        bus.subscribe("FireworkBurst", self._on_burst)

    def _on_launch(self, ev: FireworkLaunched) -> None:
        kind = "manual" if ev.manual else "auto"
        self.record(ev.tick, "launch",
                    f"{kind} ({ev.sx:.0f}, {ev.sy:.0f}) → ({ev.tx:.0f}, {ev.ty:.0f})",
                    details={"manual": ev.manual})

    def _on_burst(self, ev: FireworkBurst) -> None:
        self.record(ev.tick, "burst",
                    f"{ev.count} @ ({ev.x:.0f}, {ev.y:.0f}) hue {ev.hue:.1f}",
                    details={"hue": ev.hue, "count": ev.count})
