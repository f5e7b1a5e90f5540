"""Scheduling-policy helpers shared by the drop flows.

All randomness goes through a ``RandomSource`` so callers can seed it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, TypeVar

if TYPE_CHECKING:
    from paxstacks.config import FillWindow
    from paxstacks.ports import ItemDefinition, RandomSource

_T = TypeVar("_T")


def roll_scheduled_day(rng: RandomSource, days_per_week: int = 7) -> int:
    """Pick this week's automatic drop day uniformly from [0, days_per_week)."""
    return rng.randint(0, days_per_week - 1)


def tiered_fill_count(rng: RandomSource, window: FillWindow) -> int:
    """Stack count for automatic and manual drops: uniform in the window."""
    return rng.randint(window.low, window.high)


def daily_fill_count(week: int, window: FillWindow) -> int:
    """Stack count for the daily refresh: ``week + 1`` clamped to the window."""
    return window.clamp(week + 1)


def pick_many(rng: RandomSource, items: Sequence[_T], count: int) -> list[_T]:
    """Pick ``count`` items, distinct while the pool lasts.

    When ``count`` exceeds ``len(items)`` every item appears once and the
    remainder is drawn with replacement, so the result may hold duplicates.
    An empty pool yields an empty list.
    """
    if count <= 0 or not items:
        return []
    distinct = min(count, len(items))
    picked = rng.sample(items, distinct)
    if count > distinct:
        picked.extend(rng.choices(items, k=count - distinct))
    return picked


def roll_quantity(rng: RandomSource, definition: ItemDefinition) -> int:
    """Uniform in [1, stack_limit]; exactly 1 when the item does not stack."""
    if definition.stack_limit <= 1:
        return 1
    return rng.randint(1, definition.stack_limit)


def format_position(position: tuple[float, float, float]) -> str:
    x, y, z = position
    return f"({x:.1f}, {y:.1f}, {z:.1f})"
