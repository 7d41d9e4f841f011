"""Milestones — gold thresholds that unlock permanent, one-time achievements."""

from __future__ import annotations

from collections.abc import Iterable

from goldclicker.data.balance import BALANCE


class MilestoneTracker:
    """Remembers which thresholds have been crossed and reports each one once.

    Unlocks are permanent for the life of the tracker: gold dropping below a
    threshold and climbing back never fires it again. Only ``reset`` re-locks.
    """

    def __init__(self, thresholds: Iterable[float] = BALANCE.milestones.thresholds) -> None:
        self.thresholds: tuple[float, ...] = tuple(sorted(set(thresholds)))
        self._unlocked: set[float] = set()

    def evaluate(self, current_gold: float) -> list[float]:
        """Unlock every threshold ``current_gold`` has reached. Returns the new ones, ascending."""
        newly_unlocked = []
        for threshold in self.thresholds:
            if threshold in self._unlocked:
                continue
            if current_gold >= threshold:
                self._unlocked.add(threshold)
                newly_unlocked.append(threshold)
        return newly_unlocked

    def is_unlocked(self, threshold: float) -> bool:
        return threshold in self._unlocked

    @property
    def unlocked(self) -> tuple[float, ...]:
        return tuple(t for t in self.thresholds if t in self._unlocked)

    def reset(self) -> None:
        self._unlocked.clear()
