"""Reset confirmation — a small modal that dismisses with True or False."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static


class ConfirmResetScreen(ModalScreen[bool]):
    """Asks before wiping the save."""

    BINDINGS = [
        Binding("y", "confirm", "Reset"),
        Binding("n", "cancel", "Keep playing"),
        Binding("escape", "cancel", "Keep playing", show=False),
    ]

    DEFAULT_CSS = """
    ConfirmResetScreen {
        align: center middle;
    }

    #confirm-box {
        width: 50;
        height: auto;
        padding: 1 2;
        border: thick $error;
        background: $surface;
    }
    """

    def compose(self) -> ComposeResult:
        body = Text()
        body.append("Reset the game?\n\n", style="bold bright_red")
        body.append("All gold, upgrades and achievements will be lost.\n\n", style="dim")
        body.append("[Y] Reset    [N] Cancel", style="bold")
        with Vertical(id="confirm-box"):
            yield Static(body)

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
