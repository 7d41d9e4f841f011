"""Gold Clicker — Main Textual Application.

Wires a GameSession into a playable TUI: a timer drives live ticks and
autosave, key bindings drive mining and purchases.
"""

from __future__ import annotations

import time

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import Footer, Header

from goldclicker.engine.economy import format_number
from goldclicker.engine.session import GameSession
from goldclicker.ui.confirm_screen import ConfirmResetScreen
from goldclicker.ui.hud import HUD
from goldclicker.ui.milestone_list import MilestoneList
from goldclicker.ui.shop_panel import ShopPanel


class GoldClickerApp(App):
    """The Gold Clicker TUI game application."""

    TITLE = "Gold Clicker"
    SUB_TITLE = "Dig. Hire. Drill."

    BINDINGS = [
        Binding("space", "mine", "Mine", show=True, priority=True),
        Binding("enter", "mine", "Mine", show=False),
        Binding("1", "buy(0)", "Buy #1", show=False),
        Binding("2", "buy(1)", "Buy #2", show=False),
        Binding("3", "buy(2)", "Buy #3", show=False),
        Binding("s", "save", "Save", show=True),
        Binding("r", "reset", "Reset", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self._session = session
        self._last_tick: float = time.monotonic()
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="game-container"):
            with Vertical(id="left-panel"):
                yield HUD(id="hud-panel")
                yield MilestoneList(self._session.tracker, id="milestone-list")
            yield ShopPanel(self._session.catalog, id="shop-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Restore the game, credit offline gains and start the loop timer."""
        if not self._session.started:
            gained = self._session.start()
            if gained > 0:
                self.notify(f"+{format_number(gained)} gold recovered while away.", timeout=4)

        interval = 1.0 / self._session.balance.tick_rate_hz
        self._last_tick = time.monotonic()
        self._tick_timer = self.set_interval(interval, self._game_tick)
        self._sync_ui()

    def _game_tick(self) -> None:
        """Main game loop, called tick_rate_hz times per second."""
        now = time.monotonic()
        dt = now - self._last_tick
        self._last_tick = now

        self._announce(self._session.advance(dt))

        if self._session.maybe_autosave() is False:
            self.notify("Autosave failed, progress kept in memory.", severity="error", timeout=3)

        self._sync_ui()

    def _sync_ui(self) -> None:
        """Push game state to all UI widgets."""
        state = self._session.state
        derived = self._session.derived
        self.query_one("#hud-panel", HUD).update_from_state(state, derived)
        self.query_one("#shop-panel", ShopPanel).update_from_state(state, derived)
        self.query_one("#milestone-list", MilestoneList).update_from_tracker()

    def _announce(self, milestones: list[float]) -> None:
        for threshold in milestones:
            self.notify(f"Milestone reached: {format_number(threshold)} gold!", timeout=3)

    # ── Actions ──────────────────────────────────────

    def action_mine(self) -> None:
        _, milestones = self._session.mine()
        self._announce(milestones)
        self._sync_ui()

    def action_buy(self, index: int) -> None:
        """Purchase the upgrade at shop position ``index`` (0-based)."""
        keys = list(self._session.catalog)
        if index >= len(keys):
            return

        result, milestones = self._session.buy(keys[index])
        if result.success:
            udef = self._session.catalog[keys[index]]
            self.notify(f"Bought {udef.name} for {format_number(result.cost)} gold.", timeout=1)
            self._announce(milestones)
        else:
            self.notify("Not enough gold.", severity="warning", timeout=1)
        self._sync_ui()

    def action_save(self) -> None:
        if self._session.save():
            self.notify("Game saved.", timeout=1)
        else:
            self.notify("Save failed, progress kept in memory.", severity="error", timeout=3)

    def action_reset(self) -> None:
        self.push_screen(ConfirmResetScreen(), self._on_reset_confirmed)

    def _on_reset_confirmed(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self._session.reset()
        self._sync_ui()
        self.notify("Progress reset.", severity="warning", timeout=2)

    async def action_quit(self) -> None:
        """Save and quit. Also reached by Textual's built-in quit binding."""
        self._session.save()
        self.exit()
