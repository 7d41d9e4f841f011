"""Game save/load — persists the current game through a key-value store."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable

from goldclicker.data.balance import BALANCE, GameBalance
from goldclicker.data.upgrades import CATALOG, UpgradeCatalog
from goldclicker.engine.game_state import GameState, now_ms
from goldclicker.engine.store import KeyValueStore, StoreWriteError

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


# ── Coercion helpers ─────────────────────────────────────────────


def _as_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _coerce_gold(value: object) -> float:
    number = _as_number(value)
    if number is None or number < 0:
        return 0.0
    return number


def _coerce_count(value: object) -> int:
    number = _as_number(value)
    if number is None or number < 0:
        return 0
    return int(number)


def _coerce_timestamp(value: object, fallback: int) -> int:
    number = _as_number(value)
    if number is None or number <= 0:
        return fallback
    return int(number)


# ── Serialisation helpers ────────────────────────────────────────


def _state_to_dict(state: GameState, catalog: UpgradeCatalog) -> dict:
    data: dict = {"gold": state.gold}
    for state_key in catalog.state_keys:
        data[state_key] = state.level(state_key)
    data["last_saved_at"] = state.last_saved_at
    return data


def _dict_to_state(d: dict, catalog: UpgradeCatalog, clock: Clock) -> GameState:
    return GameState(
        gold=_coerce_gold(d.get("gold")),
        levels={key: _coerce_count(d.get(key)) for key in catalog.state_keys},
        last_saved_at=_coerce_timestamp(d.get("last_saved_at"), clock()),
    )


# ── Public API ───────────────────────────────────────────────────


def new_game(catalog: UpgradeCatalog = CATALOG, clock: Clock = now_ms) -> GameState:
    """Fresh default state: no gold, every upgrade at level 0."""
    return GameState(
        gold=0.0,
        levels={key: 0 for key in catalog.state_keys},
        last_saved_at=clock(),
    )


def load_state(
    store: KeyValueStore,
    catalog: UpgradeCatalog = CATALOG,
    balance: GameBalance = BALANCE,
    clock: Clock = now_ms,
) -> GameState:
    """Load the saved game, or a new one if nothing usable is stored.

    A corrupt save is treated as a new game. A partially valid one keeps every
    field that parses; the rest fall back to zero.
    """
    key = balance.save.store_key
    try:
        raw = store.get(key)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read save %r, starting a new game: %s", key, exc)
        return new_game(catalog, clock)

    if not raw:
        return new_game(catalog, clock)

    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.warning("Corrupt save %r, starting a new game: %s", key, exc)
        return new_game(catalog, clock)

    if not isinstance(data, dict):
        logger.warning(
            "Corrupt save %r (expected an object, got %s), starting a new game",
            key, type(data).__name__,
        )
        return new_game(catalog, clock)

    return _dict_to_state(data, catalog, clock)


def save_state(
    state: GameState,
    store: KeyValueStore,
    catalog: UpgradeCatalog = CATALOG,
    balance: GameBalance = BALANCE,
    clock: Clock = now_ms,
) -> bool:
    """Stamp ``state.last_saved_at`` and persist the game.

    Returns False when the store refused the write. That is non-fatal: the
    in-memory state stays authoritative and play continues.
    """
    state.last_saved_at = clock()
    payload = json.dumps(_state_to_dict(state, catalog))
    try:
        store.set(balance.save.store_key, payload)
    except StoreWriteError as exc:
        logger.warning("Save failed, continuing in memory: %s", exc)
        return False
    return True
