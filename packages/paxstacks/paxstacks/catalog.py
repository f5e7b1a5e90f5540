"""TierCatalog: static tier-to-loot table and the week unlock policy."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Sequence

from paxstacks.config import DropConfig
from paxstacks.types import ItemRef, Tier

if TYPE_CHECKING:
    from paxstacks.ports import ItemCatalog, ItemDefinition

logger = logging.getLogger(__name__)

DEFAULT_TIER_LOOT: Mapping[Tier, tuple[ItemRef, ...]] = MappingProxyType({
    1: ("cash", "soda", "energy_drink"),
    2: ("weed_bag", "fertilizer", "clippers"),
    3: ("goldwatch", "m1911", "goldbar"),
})


class TierCatalog:
    """Read-only mapping from tier to an ordered list of item ids.

    The tier set is fixed at construction. Unknown tiers are never created
    implicitly: ``loot_for`` returns an empty tuple and logs a warning.
    """

    def __init__(
        self,
        loot: Mapping[Tier, Sequence[ItemRef]] | None = None,
        config: DropConfig | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        source = DEFAULT_TIER_LOOT if loot is None else loot
        self._loot: dict[Tier, tuple[ItemRef, ...]] = {
            tier: tuple(ids) for tier, ids in source.items()
        }
        self._config = config if config is not None else DropConfig()
        self._log = log if log is not None else logger

    # --- Queries ---

    def is_valid_tier(self, tier: int) -> bool:
        return tier in self._loot

    def tiers(self) -> list[Tier]:
        """All defined tiers, ascending."""
        return sorted(self._loot)

    def loot_for(self, tier: int) -> tuple[ItemRef, ...]:
        """Item ids for a tier, or an empty tuple (with a warning) if unknown."""
        if tier not in self._loot:
            self._log.warning("Invalid tier requested: %s", tier)
            return ()
        return self._loot[tier]

    def unlocked_tier_for(self, week: int) -> Tier:
        """Highest tier reachable at ``week``. Monotonic non-decreasing."""
        for max_week, tier in self._config.tier_thresholds:
            if week <= max_week:
                return tier
        return self._config.max_tier

    # --- Resolution ---

    def resolve(self, tier: int, items: ItemCatalog) -> list[ItemDefinition]:
        """Resolve a tier's ids to item definitions, skipping unknown ids."""
        resolved: list[ItemDefinition] = []
        for item_id in self.loot_for(tier):
            definition = items.resolve(item_id)
            if definition is None:
                self._log.warning("Item not found for ID: %s", item_id)
                continue
            resolved.append(definition)
        return resolved
