"""components.trail — Fixed-length position history."""

from __future__ import annotations
from collections import deque


class Trail:
    """Sliding window of the most recent positions, newest first.

    The window is pre-filled with the spawn point so its length never
    changes: every ``push()`` drops exactly one point off the old end.
    """

    __slots__ = ("_points",)

    def __init__(self, x: float, y: float, length: int):
        length = max(1, int(length))
        self._points: deque[tuple[float, float]] = deque(
            [(x, y)] * length, maxlen=length)

    def push(self, x: float, y: float) -> None:
        self._points.appendleft((x, y))

    @property
    def oldest(self) -> tuple[float, float]:
        return self._points[-1]

    @property
    def newest(self) -> tuple[float, float]:
        return self._points[0]

    def points(self) -> list[tuple[float, float]]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)
