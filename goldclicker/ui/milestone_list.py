"""Achievements widget — one badge per unlocked gold milestone."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from goldclicker.engine.economy import format_number
from goldclicker.engine.milestones import MilestoneTracker


class MilestoneList(Widget):
    DEFAULT_CSS = """
    MilestoneList {
        width: 100%;
        height: auto;
        min-height: 5;
        padding: 1;
    }
    """

    unlocked: reactive[tuple] = reactive(tuple)

    def __init__(self, tracker: MilestoneTracker, **kwargs) -> None:
        super().__init__(**kwargs)
        self._tracker = tracker

    def render(self) -> Text:
        text = Text()
        text.append("  ─── Achievements ───\n", style="bold yellow")
        for threshold in self._tracker.thresholds:
            if threshold in self.unlocked:
                text.append(f"  ★ {format_number(threshold)} gold\n", style="bold yellow")
            else:
                text.append(f"  · {format_number(threshold)} gold\n", style="dim")
        return text

    def update_from_tracker(self) -> None:
        self.unlocked = self._tracker.unlocked
