"""paxstacks - Scheduled loot drops relayed through an NPC contact."""
from paxstacks.catalog import DEFAULT_TIER_LOOT, TierCatalog
from paxstacks.config import DropConfig, FillWindow
from paxstacks.contact import MrStacks
from paxstacks.scheduler import DropScheduler
from paxstacks.types import (
    DropFailure,
    DropRequest,
    DropState,
    ItemCreationError,
    SchedulerState,
    SnapshotError,
)

__all__ = [
    "DEFAULT_TIER_LOOT",
    "DropConfig",
    "DropFailure",
    "DropRequest",
    "DropScheduler",
    "DropState",
    "FillWindow",
    "ItemCreationError",
    "MrStacks",
    "SchedulerState",
    "SnapshotError",
    "TierCatalog",
]
