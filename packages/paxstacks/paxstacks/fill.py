"""Filling a drop's storage with rolled loot."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from paxstacks.policy import pick_many, roll_quantity

if TYPE_CHECKING:
    from paxstacks.ports import ItemCatalog, ItemDefinition, RandomSource, StorageHandle

logger = logging.getLogger(__name__)


def try_add_item(
    storage: StorageHandle,
    items: ItemCatalog,
    definition: ItemDefinition,
    quantity: int,
    log: logging.Logger = logger,
) -> bool:
    """Create one stack and store it. Returns False instead of raising.

    A None instance and any exception from the catalog or storage are logged
    and reported as a skipped item.
    """
    try:
        instance = items.create_instance(definition, quantity)
        if instance is None:
            log.warning("Failed to create instance: %s", definition.id)
            return False
        storage.add_item(instance)
    except Exception as exc:
        log.warning("Error adding item %s: %s", definition.id, exc)
        return False
    log.info("Added: %s x%d", definition.id, quantity)
    return True


def fill_storage(
    storage: StorageHandle,
    items: ItemCatalog,
    loot: Sequence[ItemDefinition],
    count: int,
    rng: RandomSource,
    log: logging.Logger = logger,
) -> int:
    """Put ``count`` rolled stacks from ``loot`` into ``storage``.

    Returns how many stacks were actually stored. Per-item failures shrink
    the drop but never abort it.
    """
    if not loot:
        log.warning("No items retrieved for tier, drop will be empty.")
        return 0

    added = 0
    for definition in pick_many(rng, loot, count):
        quantity = roll_quantity(rng, definition)
        if try_add_item(storage, items, definition, quantity, log):
            added += 1
    return added
