"""Drop scheduling configuration dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FillWindow:
    """Inclusive bounds on how many item stacks go into one drop."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low < 1:
            raise ValueError(f"low must be >= 1, got {self.low}")
        if self.high < self.low:
            raise ValueError(
                f"high must be >= low, got low={self.low} high={self.high}"
            )

    def clamp(self, value: int) -> int:
        return max(self.low, min(self.high, value))


@dataclass(frozen=True)
class DropConfig:
    """Immutable configuration for drop scheduling.

    Attributes:
        days_per_week: In-game days per scheduling week.
        tier_thresholds: ``(max_week_inclusive, tier)`` rows, checked in
            order. Weeks past the last row unlock ``max_tier``.
        max_tier: Highest tier reachable by progression.
        tiered_fill: Fixed stack-count window for automatic and manual drops.
        daily_fill: Clamp window for the daily refresh, applied to ``week + 1``.
        daily_refresh: Run the daily refresh flow on every day pass.
        main_scene: Scene name the host waits for before wiring handlers.
    """

    days_per_week: int = 7
    tier_thresholds: tuple[tuple[int, int], ...] = ((1, 1), (3, 2))
    max_tier: int = 3
    tiered_fill: FillWindow = field(default_factory=lambda: FillWindow(2, 5))
    daily_fill: FillWindow = field(default_factory=lambda: FillWindow(2, 5))
    daily_refresh: bool = False
    main_scene: str = "Main"

    def __post_init__(self) -> None:
        if self.days_per_week <= 0:
            raise ValueError("days_per_week must be positive")
        last_week = -1
        last_tier = 0
        for max_week, tier in self.tier_thresholds:
            if max_week <= last_week or tier < last_tier:
                raise ValueError(
                    "tier_thresholds must be sorted by week with non-decreasing tiers"
                )
            last_week, last_tier = max_week, tier
        if self.max_tier < last_tier:
            raise ValueError(
                f"max_tier {self.max_tier} is below threshold tier {last_tier}"
            )
