"""Game state — single source of truth for the current game."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field


def now_ms() -> int:
    """Wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class GameState:
    """Complete mutable state for one game."""

    # ── Core resource ────────────────────────────────────
    gold: float = 0.0   # fractional internally, displayed truncated

    # ── Upgrades: state_key → owned levels ───────────────
    levels: dict[str, int] = field(default_factory=dict)

    # ── Persistence checkpoint (epoch ms) ────────────────
    last_saved_at: int = field(default_factory=now_ms)

    def level(self, state_key: str) -> int:
        """Owned levels for ``state_key``; missing or garbage values read as 0."""
        value = self.levels.get(state_key, 0)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        if not math.isfinite(value) or value < 0:
            return 0
        return int(value)
