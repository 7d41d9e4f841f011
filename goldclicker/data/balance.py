"""Balance constants — all tuning knobs in one place.

Tweak these to adjust pacing. Upgrade cost curves live with each upgrade in
``goldclicker.data.upgrades``; everything else is here.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class EconomyBalance:
    """Tuning for gold generation and offline catch-up."""

    # Gold per manual mine before any pickaxe levels
    base_gold_per_click: float = 1.0

    # Offline gains are capped to this many seconds (4 hours)
    max_offline_seconds: float = 4 * 60 * 60

    # Large number formatting thresholds
    suffixes: tuple[tuple[float, str], ...] = (
        (1e3, "K"),
        (1e6, "M"),
        (1e9, "B"),
        (1e12, "T"),
        (1e15, "Qa"),
        (1e18, "Qi"),
    )


@dataclass(frozen=True)
class SaveBalance:
    """Where and how often the game is persisted."""

    # One save slot per installation, stored under this key
    store_key: str = "goldclicker_save_v0"
    autosave_interval_s: float = 10.0
    save_dir: Path = Path.home() / ".goldclicker"
    log_file: str = "goldclicker.log"


@dataclass(frozen=True)
class MilestoneBalance:
    """Gold thresholds that unlock one-time achievements."""

    thresholds: tuple[float, ...] = (100, 1_000, 10_000, 100_000)


@dataclass(frozen=True)
class GameBalance:
    """Top-level container for all balance constants."""

    economy: EconomyBalance = field(default_factory=EconomyBalance)
    save: SaveBalance = field(default_factory=SaveBalance)
    milestones: MilestoneBalance = field(default_factory=MilestoneBalance)

    # Game loop ticks per second
    tick_rate_hz: float = 30.0


# Singleton, import this everywhere
BALANCE = GameBalance()
