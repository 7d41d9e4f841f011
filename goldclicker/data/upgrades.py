"""Upgrade definitions — all purchasable upgrades and their effects."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto


class ProductionMode(Enum):
    """Which yield an owned level adds to."""

    PER_CLICK = auto()    # Added to gold per manual mine
    PER_SECOND = auto()   # Added to passive gold per second


class CatalogError(ValueError):
    """Raised at startup when the upgrade configuration is invalid."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, 17.25 -> 17)."""
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value))


@dataclass(frozen=True)
class UpgradeDef:
    """Definition of a single upgrade."""

    id: str
    name: str
    description: str
    # Counter this upgrade increments in GameState.levels (and in the save blob)
    state_key: str
    mode: ProductionMode
    # Yield added per owned level, per click or per second depending on mode
    increment: float
    base_cost: float
    # Geometric growth per level already owned
    cost_multiplier: float

    def cost_at_level(self, level: int) -> int | float:
        """Cost of buying the next level when ``level`` are already owned.

        Beyond float range the cost is ``math.inf``: still listed, never affordable.
        """
        try:
            raw = self.base_cost * self.cost_multiplier ** level
        except OverflowError:
            return math.inf
        if not math.isfinite(raw):
            return math.inf
        return round_half_up(raw)


class UpgradeCatalog(Mapping[str, UpgradeDef]):
    """Ordered, read-only registry of upgrades, validated once on construction."""

    def __init__(self, upgrades: Iterable[UpgradeDef]) -> None:
        self._upgrades: dict[str, UpgradeDef] = {}
        state_keys: set[str] = set()
        for udef in upgrades:
            if udef.id in self._upgrades:
                raise CatalogError(f"duplicate upgrade id {udef.id!r}")
            if udef.state_key in state_keys:
                raise CatalogError(f"duplicate state key {udef.state_key!r}")
            if not udef.base_cost > 0:
                raise CatalogError(f"{udef.id}: base_cost must be > 0, got {udef.base_cost}")
            if not udef.cost_multiplier > 1:
                raise CatalogError(
                    f"{udef.id}: cost_multiplier must be > 1, got {udef.cost_multiplier}"
                )
            if not udef.increment > 0:
                raise CatalogError(f"{udef.id}: increment must be > 0, got {udef.increment}")
            if not isinstance(udef.mode, ProductionMode):
                raise CatalogError(f"{udef.id}: unknown production mode {udef.mode!r}")
            state_keys.add(udef.state_key)
            self._upgrades[udef.id] = udef

    def __getitem__(self, key: str) -> UpgradeDef:
        return self._upgrades[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._upgrades)

    def __len__(self) -> int:
        return len(self._upgrades)

    def __repr__(self) -> str:
        return f"UpgradeCatalog({list(self._upgrades)!r})"

    @property
    def state_keys(self) -> tuple[str, ...]:
        """State keys in catalog order."""
        return tuple(u.state_key for u in self._upgrades.values())


# ── Base upgrades ────────────────────────────────────────────────

PICKAXE = UpgradeDef(
    id="pickaxe",
    name="Pickaxe",
    description="A sharper edge. +1 gold per click per level.",
    state_key="pickaxe_level",
    mode=ProductionMode.PER_CLICK,
    increment=1,
    base_cost=15,
    cost_multiplier=1.15,
)

MINER = UpgradeDef(
    id="miner",
    name="Miner",
    description="Hires a miner who digs while you rest. +1 gold per second.",
    state_key="miner_count",
    mode=ProductionMode.PER_SECOND,
    increment=1,
    base_cost=100,
    cost_multiplier=1.17,
)

DRILL = UpgradeDef(
    id="drill",
    name="Drill",
    description="A steam drill bores through the rock. +10 gold per second.",
    state_key="drill_count",
    mode=ProductionMode.PER_SECOND,
    increment=10,
    base_cost=1200,
    cost_multiplier=1.22,
)

# ── All upgrades registry ────────────────────────────────────────

CATALOG = UpgradeCatalog([PICKAXE, MINER, DRILL])
