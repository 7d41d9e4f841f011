"""Game session — owns the live state and sequences engine calls.

The front-end (TUI, tests, anything with a timer) drives a session: call
``start`` once, then ``advance`` on every frame, ``mine`` / ``buy`` on player
actions and ``maybe_autosave`` periodically. All calls are synchronous and
must not overlap.
"""

from __future__ import annotations

import logging
import math

from goldclicker.data.balance import BALANCE, GameBalance
from goldclicker.data.upgrades import CATALOG, UpgradeCatalog
from goldclicker.engine.economy import (
    DerivedStats,
    PurchaseResult,
    apply_offline_progress,
    buy_upgrade,
    compute_derived,
    format_number,
    mine,
    tick,
)
from goldclicker.engine.game_state import GameState, now_ms
from goldclicker.engine.milestones import MilestoneTracker
from goldclicker.engine.save import Clock, load_state, new_game, save_state
from goldclicker.engine.store import KeyValueStore

logger = logging.getLogger(__name__)


class GameSession:
    """The single game in play, plus its milestones and save slot."""

    def __init__(
        self,
        store: KeyValueStore,
        catalog: UpgradeCatalog = CATALOG,
        balance: GameBalance = BALANCE,
        clock: Clock = now_ms,
        tracker: MilestoneTracker | None = None,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.balance = balance
        self.clock = clock
        self.tracker = tracker if tracker is not None else MilestoneTracker(balance.milestones.thresholds)
        self._state: GameState | None = None
        # Seconds of play advanced since the last save, independent of the wall clock
        self._since_save: float = 0.0

    # ── Lifecycle ────────────────────────────────────

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("session not started; call start() first")
        return self._state

    def start(self) -> float:
        """Load the saved game and credit offline progress. Returns gold gained offline.

        Milestones already below the loaded gold are unlocked silently so they
        do not fire again as fresh achievements.
        """
        if self._state is not None:
            raise RuntimeError("session already started")

        state = load_state(self.store, self.catalog, self.balance, self.clock)
        gained = apply_offline_progress(state, self.clock(), self.catalog, self.balance)
        self._state = state
        self._since_save = 0.0
        self.tracker.evaluate(state.gold)

        if gained > 0:
            logger.info("Offline progress: +%s gold", format_number(gained))
        return gained

    def reset(self) -> GameState:
        """Throw the current game away and start over from defaults."""
        self._state = new_game(self.catalog, self.clock)
        self.tracker.reset()
        self.save()
        logger.info("Game reset")
        return self._state

    # ── Player actions ───────────────────────────────

    @property
    def derived(self) -> DerivedStats:
        return compute_derived(self.state, self.catalog, self.balance)

    def mine(self) -> tuple[float, list[float]]:
        """Manual mine. Returns (gold earned, newly unlocked milestones)."""
        earned = mine(self.state, self.catalog, self.balance)
        return earned, self.tracker.evaluate(self.state.gold)

    def buy(self, key: str) -> tuple[PurchaseResult, list[float]]:
        """Buy one level of ``key``. Returns (result, newly unlocked milestones)."""
        result = buy_upgrade(self.state, key, self.catalog)
        if result.success:
            return result, self.tracker.evaluate(self.state.gold)
        return result, []

    # ── Time ─────────────────────────────────────────

    def advance(self, dt_seconds: float) -> list[float]:
        """Live tick for ``dt_seconds``. Returns newly unlocked milestones."""
        tick(self.state, dt_seconds, self.catalog)
        if math.isfinite(dt_seconds) and dt_seconds > 0:
            self._since_save += dt_seconds
        return self.tracker.evaluate(self.state.gold)

    # ── Persistence ──────────────────────────────────

    def save(self) -> bool:
        self._since_save = 0.0
        return save_state(self.state, self.store, self.catalog, self.balance, self.clock)

    def maybe_autosave(self) -> bool | None:
        """Save once ``advance`` has covered the autosave interval since the last save.

        Measured in advanced play time, so a wall clock stepping back does not
        delay it. Returns None when no save was due, otherwise whether the
        write succeeded.
        """
        if self._since_save < self.balance.save.autosave_interval_s:
            return None
        return self.save()
