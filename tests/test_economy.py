"""Tests for the economy engine."""

import copy

from goldclicker.data.balance import BALANCE, EconomyBalance, GameBalance
from goldclicker.data.upgrades import CATALOG
from goldclicker.engine.economy import (
    PurchaseFailure,
    apply_offline_progress,
    buy_upgrade,
    can_afford,
    compute_derived,
    format_number,
    mine,
    tick,
)
from goldclicker.engine.game_state import GameState


def _state(gold=0.0, last_saved_at=1_000_000, **levels) -> GameState:
    return GameState(gold=gold, levels=dict(levels), last_saved_at=last_saved_at)


# ── Derived stats ────────────────────────────────────────────────


def test_fresh_state_derived():
    derived = compute_derived(_state())
    assert derived.gold_per_click == BALANCE.economy.base_gold_per_click
    assert derived.gold_per_second == 0
    assert derived.next_costs == {"pickaxe": 15, "miner": 100, "drill": 1200}


def test_derived_follows_catalog_order():
    assert list(compute_derived(_state()).next_costs) == list(CATALOG)


def test_gold_per_click_adds_pickaxe_levels():
    assert compute_derived(_state(pickaxe_level=4)).gold_per_click == 5


def test_gold_per_second_scenario():
    derived = compute_derived(_state(miner_count=1, drill_count=1))
    assert derived.gold_per_second == 11


def test_garbage_levels_read_as_zero():
    state = _state()
    state.levels = {"pickaxe_level": "lots", "miner_count": -2, "drill_count": None}
    derived = compute_derived(state)
    assert derived.gold_per_click == 1
    assert derived.gold_per_second == 0
    assert derived.next_costs["pickaxe"] == 15


def test_compute_derived_is_pure():
    state = _state(gold=50, pickaxe_level=2, miner_count=3)
    before = copy.deepcopy(state)
    assert compute_derived(state) == compute_derived(state)
    assert state == before


# ── Purchases ────────────────────────────────────────────────────


def test_pickaxe_scenario():
    state = _state(gold=10)
    result = buy_upgrade(state, "pickaxe")
    assert not result.success
    assert result.reason is PurchaseFailure.INSUFFICIENT
    assert result.reason.value == "insufficient"

    state.gold = 15
    result = buy_upgrade(state, "pickaxe")
    assert result.success
    assert result.cost == 15
    assert result.reason is None
    assert state.gold == 0
    assert state.level("pickaxe_level") == 1
    assert compute_derived(state).next_costs["pickaxe"] == 17


def test_failed_purchase_leaves_state_unchanged():
    state = _state(gold=99.5, miner_count=0)
    before = copy.deepcopy(state)
    result = buy_upgrade(state, "miner")
    assert not result.success
    assert result.cost == 100
    assert state == before


def test_unknown_upgrade_is_declined_without_mutation():
    state = _state(gold=1e9)
    before = copy.deepcopy(state)
    result = buy_upgrade(state, "dynamite")
    assert not result.success
    assert result.cost == 0
    assert result.reason is PurchaseFailure.UNKNOWN
    assert result.reason.value == "unknown"
    assert state == before


def test_purchase_debits_pre_purchase_cost():
    state = _state(gold=10_000, miner_count=3)
    expected_cost = compute_derived(state).next_costs["miner"]
    result = buy_upgrade(state, "miner")
    assert result.success
    assert result.cost == expected_cost
    assert state.gold == 10_000 - expected_cost
    assert state.level("miner_count") == 4


def test_repeated_purchases_get_more_expensive():
    state = _state(gold=1_000)
    paid = []
    result = buy_upgrade(state, "pickaxe")
    while result.success:
        paid.append(result.cost)
        result = buy_upgrade(state, "pickaxe")

    assert all(b > a for a, b in zip(paid, paid[1:]))
    assert state.level("pickaxe_level") == len(paid)
    assert state.gold == 1_000 - sum(paid)
    assert state.gold < CATALOG["pickaxe"].cost_at_level(len(paid))


def test_can_afford():
    assert not can_afford(_state(gold=14), "pickaxe")
    assert can_afford(_state(gold=15), "pickaxe")
    assert not can_afford(_state(gold=1e9), "dynamite")


# ── Mining ───────────────────────────────────────────────────────


def test_mine_adds_gold_per_click():
    state = _state(pickaxe_level=2)
    earned = mine(state)
    assert earned == 3
    assert state.gold == 3


# ── Live tick ────────────────────────────────────────────────────


def test_tick_scenario():
    state = _state(miner_count=1, drill_count=1)
    earned = tick(state, 2)
    assert earned == 22
    assert state.gold == 22


def test_tick_zero_is_noop():
    state = _state(gold=5, miner_count=3)
    before = copy.deepcopy(state)
    assert tick(state, 0) == 0
    assert state == before


def test_tick_negative_never_reduces_gold():
    state = _state(gold=5, miner_count=3)
    tick(state, -10)
    assert state.gold == 5
    tick(state, float("nan"))
    assert state.gold == 5


def test_tick_is_additive():
    split = _state(miner_count=1, drill_count=1)
    whole = copy.deepcopy(split)
    tick(split, 0.5)
    tick(split, 1.25)
    tick(whole, 1.75)
    assert split.gold == whole.gold


def test_tick_without_producers_earns_nothing():
    state = _state(gold=3, pickaxe_level=10)
    tick(state, 100)
    assert state.gold == 3


# ── Offline progress ─────────────────────────────────────────────


def test_offline_progress_scenario():
    now = 50_000_000
    state = _state(miner_count=5, last_saved_at=now - 10_000 * 1000)
    gained = apply_offline_progress(state, now)
    assert gained == 50_000
    assert state.gold == 50_000
    assert state.last_saved_at == now


def test_offline_progress_is_capped():
    now = 10_000_000_000
    state = _state(miner_count=5, last_saved_at=now - 30 * 24 * 3600 * 1000)
    gained = apply_offline_progress(state, now)
    assert gained == 5 * BALANCE.economy.max_offline_seconds


def test_offline_cap_comes_from_balance():
    balance = GameBalance(economy=EconomyBalance(max_offline_seconds=60))
    state = _state(miner_count=2, last_saved_at=0)
    assert apply_offline_progress(state, 3_600_000, balance=balance) == 120


def test_offline_progress_clock_skew_grants_nothing():
    state = _state(gold=7, miner_count=5, last_saved_at=2_000_000)
    gained = apply_offline_progress(state, 1_000_000)
    assert gained == 0
    assert state.gold == 7
    assert state.last_saved_at == 1_000_000


def test_offline_progress_no_elapsed_time():
    state = _state(miner_count=5, last_saved_at=2_000_000)
    assert apply_offline_progress(state, 2_000_000) == 0


# ── Formatting ───────────────────────────────────────────────────


def test_format_number_small_truncates():
    assert format_number(0) == "0"
    assert format_number(5) == "5"
    assert format_number(99.9) == "99"


def test_format_number_thousands():
    assert format_number(1500) == "1.50K"
    assert format_number(12_399) == "12.3K"


def test_format_number_non_finite():
    assert format_number(float("inf")) == "∞"
    assert format_number(float("-inf")) == "-∞"
    assert format_number(float("nan")) == "NaN"


def test_format_number_millions():
    assert format_number(2_300_000).endswith("M")
