"""Economy engine — gold generation, purchases, time accrual, number formatting.

Every function here mutates only the ``GameState`` it is given. Catalog and
balance default to the module singletons and can be swapped for tests.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from goldclicker.data.balance import BALANCE, GameBalance
from goldclicker.data.upgrades import CATALOG, ProductionMode, UpgradeCatalog
from goldclicker.engine.game_state import GameState


@dataclass(frozen=True)
class DerivedStats:
    """Yields and next-level costs for one state. Recomputed on demand, never stored."""

    gold_per_click: float
    gold_per_second: float
    next_costs: dict[str, int | float] = field(default_factory=dict)


class PurchaseFailure(Enum):
    """Why a purchase was declined."""

    UNKNOWN = "unknown"             # key not in the catalog
    INSUFFICIENT = "insufficient"   # not enough gold


@dataclass(frozen=True)
class PurchaseResult:
    success: bool
    cost: int | float
    reason: PurchaseFailure | None = None


def compute_derived(
    state: GameState,
    catalog: UpgradeCatalog = CATALOG,
    balance: GameBalance = BALANCE,
) -> DerivedStats:
    """Compute gold per click, gold per second and next costs from current levels."""
    per_click = balance.economy.base_gold_per_click
    per_second = 0.0
    next_costs: dict[str, int | float] = {}

    for key, udef in catalog.items():
        level = state.level(udef.state_key)
        if udef.mode is ProductionMode.PER_CLICK:
            per_click += level * udef.increment
        else:
            per_second += level * udef.increment
        next_costs[key] = udef.cost_at_level(level)

    return DerivedStats(
        gold_per_click=per_click,
        gold_per_second=per_second,
        next_costs=next_costs,
    )


def mine(
    state: GameState,
    catalog: UpgradeCatalog = CATALOG,
    balance: GameBalance = BALANCE,
) -> float:
    """Handle a single manual mine. Returns gold earned."""
    earned = compute_derived(state, catalog, balance).gold_per_click
    state.gold += earned
    return earned


def can_afford(state: GameState, key: str, catalog: UpgradeCatalog = CATALOG) -> bool:
    """Check if the player can afford the next level of an upgrade."""
    if key not in catalog:
        return False
    return state.gold >= catalog[key].cost_at_level(state.level(catalog[key].state_key))


def buy_upgrade(state: GameState, key: str, catalog: UpgradeCatalog = CATALOG) -> PurchaseResult:
    """Attempt to buy one level of an upgrade.

    Either both the debit and the level increment happen, or nothing does.
    The cost is always the one for the level owned before this call.
    """
    udef = catalog.get(key)
    if udef is None:
        return PurchaseResult(success=False, cost=0, reason=PurchaseFailure.UNKNOWN)

    cost = compute_derived(state, catalog).next_costs[key]
    if state.gold < cost:
        return PurchaseResult(success=False, cost=cost, reason=PurchaseFailure.INSUFFICIENT)

    level = state.level(udef.state_key)
    state.gold -= cost
    state.levels[udef.state_key] = level + 1
    return PurchaseResult(success=True, cost=cost)


def tick(state: GameState, dt_seconds: float, catalog: UpgradeCatalog = CATALOG) -> float:
    """Apply passive income for ``dt_seconds``. Returns gold earned.

    Negative or non-finite durations earn nothing; gold never goes down here.
    """
    if not math.isfinite(dt_seconds) or dt_seconds <= 0:
        return 0.0
    earned = compute_derived(state, catalog).gold_per_second * dt_seconds
    state.gold += earned
    return earned


def apply_offline_progress(
    state: GameState,
    now_ms: int,
    catalog: UpgradeCatalog = CATALOG,
    balance: GameBalance = BALANCE,
) -> float:
    """Grant passive income for the time since ``state.last_saved_at``.

    Elapsed time is clamped to ``[0, max_offline_seconds]``, so a clock that
    went backwards yields nothing. Moves ``last_saved_at`` to ``now_ms`` and
    returns the gold gained.
    """
    elapsed_s = (now_ms - state.last_saved_at) / 1000
    elapsed_s = max(0.0, min(elapsed_s, balance.economy.max_offline_seconds))

    gained = compute_derived(state, catalog, balance).gold_per_second * elapsed_s
    state.gold += gained
    state.last_saved_at = now_ms
    return gained


def format_number(n: float) -> str:
    """Format a number with suffixes for readability. Values are truncated, never rounded up."""
    if math.isnan(n):
        return "NaN"
    if n < 0:
        return f"-{format_number(-n)}"
    if math.isinf(n):
        return "∞"

    for threshold, suffix in reversed(BALANCE.economy.suffixes):
        if n >= threshold:
            value = n / threshold
            if value >= 100:
                return f"{math.floor(value)}{suffix}"
            elif value >= 10:
                return f"{math.floor(value * 10) / 10:.1f}{suffix}"
            else:
                return f"{math.floor(value * 100) / 100:.2f}{suffix}"

    return str(math.floor(n))
