"""Core data types for drop scheduling."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paxstacks.ports import Location

Tier = int
ItemRef = str


class DropState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class DropFailure(str, Enum):
    """Reason a spawn attempt was refused."""

    UNKNOWN_TIER = "unknown tier"
    NOT_UNLOCKED = "not unlocked yet"
    NO_LOCATIONS = "no locations"


class SnapshotError(Exception):
    """Raised when restoring scheduler state from invalid snapshot data."""


class ItemCreationError(Exception):
    """Raised when an item instance cannot be created or stored."""


@dataclass(frozen=True)
class DropRequest:
    """Outcome of a single spawn attempt. Not persisted.

    Attributes:
        tier: Requested tier.
        manual: True for player-requested drops, False for scheduled ones.
        spawned: Whether a drop was placed in the world.
        reason: Why the attempt failed, None on success.
        location: Where the drop was placed, None on failure.
    """

    tier: Tier
    manual: bool
    spawned: bool
    reason: DropFailure | None = None
    location: Location | None = None

    def __bool__(self) -> bool:
        return self.spawned


@dataclass
class SchedulerState:
    """Mutable scheduling state, owned by a single DropScheduler.

    ``last_auto_drop_week`` and ``scheduled_day`` are None until the first
    automatic drop fires / the first week is rolled.
    """

    active_drop: Location | None = None
    last_auto_drop_week: int | None = None
    scheduled_day: int | None = None

    @property
    def active_drop_present(self) -> bool:
        return self.active_drop is not None

    @property
    def state(self) -> DropState:
        return DropState.ACTIVE if self.active_drop is not None else DropState.IDLE
