"""Tests for paxstacks.fill — lenient storage filling."""
from __future__ import annotations

import logging
import random

import pytest

from paxstacks.fill import fill_storage, try_add_item
from paxstacks.memory import ItemDef, ItemStack, MemoryItemCatalog, MemoryStorage

LOOT = [ItemDef("cash", 1000), ItemDef("soda", 1), ItemDef("energy_drink", 6)]


class TestTryAddItem:
    def test_success(self) -> None:
        storage = MemoryStorage()
        items = MemoryItemCatalog(LOOT)
        assert try_add_item(storage, items, LOOT[0], 50) is True
        assert storage.contents == [ItemStack("cash", 50)]

    def test_none_instance_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        storage = MemoryStorage()
        items = MemoryItemCatalog(LOOT, broken=["soda"])
        with caplog.at_level(logging.WARNING):
            assert try_add_item(storage, items, LOOT[1], 1) is False
        assert storage.contents == []
        assert "Failed to create instance: soda" in caplog.text

    def test_raising_catalog_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        storage = MemoryStorage()
        items = MemoryItemCatalog(LOOT, raising=["cash"])
        with caplog.at_level(logging.WARNING):
            assert try_add_item(storage, items, LOOT[0], 3) is False
        assert "Error adding item cash" in caplog.text

    def test_full_storage_skipped(self) -> None:
        storage = MemoryStorage(capacity=0)
        items = MemoryItemCatalog(LOOT)
        assert try_add_item(storage, items, LOOT[2], 2) is False


class TestFillStorage:
    def test_fills_requested_count(self) -> None:
        storage = MemoryStorage()
        added = fill_storage(storage, MemoryItemCatalog(LOOT), LOOT, 4, random.Random(0))
        assert added == 4
        assert len(storage.contents) == 4

    def test_quantities_respect_stack_limits(self) -> None:
        rng = random.Random(1)
        limits = {d.id: d.stack_limit for d in LOOT}
        for _ in range(50):
            storage = MemoryStorage()
            fill_storage(storage, MemoryItemCatalog(LOOT), LOOT, 5, rng)
            for stack in storage.contents:
                assert 1 <= stack.quantity <= max(1, limits[stack.item_id])

    def test_empty_loot_logs_and_adds_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        storage = MemoryStorage()
        with caplog.at_level(logging.WARNING):
            added = fill_storage(storage, MemoryItemCatalog(), [], 3, random.Random(2))
        assert added == 0
        assert storage.contents == []
        assert "drop will be empty" in caplog.text

    def test_failures_do_not_abort_remaining(self) -> None:
        storage = MemoryStorage()
        items = MemoryItemCatalog(LOOT, broken=["soda"], raising=["cash"])
        added = fill_storage(storage, items, LOOT, 5, random.Random(3))
        # pick_many covers every item when count exceeds the pool
        assert added >= 1
        assert all(s.item_id == "energy_drink" for s in storage.contents)
        assert len(storage.contents) == added

    def test_capacity_overflow_is_partial(self) -> None:
        storage = MemoryStorage(capacity=2)
        added = fill_storage(storage, MemoryItemCatalog(LOOT), LOOT, 5, random.Random(4))
        assert added == 2
        assert len(storage.contents) == 2
