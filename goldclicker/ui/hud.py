"""HUD widget — gold counter and production rates."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from goldclicker.engine.economy import DerivedStats, format_number
from goldclicker.engine.game_state import GameState


class HUD(Widget):
    """Heads-up display showing core game stats."""

    DEFAULT_CSS = """
    HUD {
        width: 100%;
        height: 100%;
        padding: 1;
    }
    """

    gold: reactive[str] = reactive("0")
    per_click: reactive[str] = reactive("1")
    per_second: reactive[str] = reactive("0/s")

    def render(self) -> Text:
        text = Text()
        text.append("  === Gold Mine ===\n\n", style="bold yellow")

        text.append("  Gold: ", style="dim")
        text.append(f"{self.gold}\n", style="bold yellow")

        text.append("  Per Click: ", style="dim")
        text.append(f"{self.per_click}\n", style="green")

        text.append("  Per Second: ", style="dim")
        text.append(f"{self.per_second}\n", style="green")

        text.append("\n")
        text.append("  [Space] Mine  [1-3] Buy\n", style="dim italic")
        text.append("  [S] Save  [R] Reset\n", style="dim italic")
        text.append("  [Q] Quit\n", style="dim italic")
        return text

    def update_from_state(self, state: GameState, derived: DerivedStats) -> None:
        """Sync HUD with game state."""
        self.gold = format_number(state.gold)
        self.per_click = format_number(derived.gold_per_click)
        self.per_second = f"{format_number(derived.gold_per_second)}/s"
