"""Shop panel — every upgrade with its level, next cost and affordability."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from goldclicker.data.upgrades import ProductionMode, UpgradeCatalog, UpgradeDef
from goldclicker.engine.economy import DerivedStats, can_afford, format_number
from goldclicker.engine.game_state import GameState


def _effect_summary(udef: UpgradeDef, level: int) -> str:
    """Current total contribution of an upgrade; empty when none owned."""
    if level <= 0:
        return ""
    total = format_number(udef.increment * level)
    if udef.mode is ProductionMode.PER_CLICK:
        return f"+{total} gold/click"
    return f"+{total} gold/s"


class ShopPanel(Widget):
    """Displays the upgrade catalog with cost and affordability."""

    DEFAULT_CSS = """
    ShopPanel {
        width: 100%;
        height: 100%;
        padding: 1;
        overflow-y: auto;
    }
    """

    # Serialized shop data for reactivity
    shop_text: reactive[str] = reactive("")

    def __init__(self, catalog: UpgradeCatalog, **kwargs) -> None:
        super().__init__(**kwargs)
        self._catalog = catalog
        self._state: GameState | None = None
        self._derived: DerivedStats | None = None

    def render(self) -> Text:
        text = Text()
        text.append("  ═══ Shop ═══\n\n", style="bold magenta")

        if self._state is None or self._derived is None:
            return text

        for i, (key, udef) in enumerate(self._catalog.items()):
            level = self._state.level(udef.state_key)
            cost = self._derived.next_costs[key]
            affordable = can_afford(self._state, key, self._catalog)

            text.append(f"  [{i + 1}] ", style="bold")
            text.append(f"{udef.name} ", style="bold green" if affordable else "bold red")
            text.append(f"Lv.{level}\n", style="dim")
            text.append(f"      {udef.description}\n", style="dim italic")

            effect = _effect_summary(udef, level)
            if effect:
                text.append(f"      Now: {effect}\n", style="cyan")

            text.append(
                f"      Cost: {format_number(cost)} gold\n",
                style="green" if affordable else "red",
            )
            text.append("\n")

        return text

    def update_from_state(self, state: GameState, derived: DerivedStats) -> None:
        """Sync panel with game state."""
        self._state = state
        self._derived = derived
        # Trigger re-render via reactive
        self.shop_text = "|".join(
            f"{key}:{state.level(udef.state_key)}" for key, udef in self._catalog.items()
        ) + f"|g:{int(state.gold)}"
