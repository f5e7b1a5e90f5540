"""In-memory host environment for tests, demos and headless runs.

Conforms to the capability protocols in ``paxstacks.ports``. Supports
injecting per-item failures so lenient fill behaviour can be exercised.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from paxstacks.types import ItemCreationError


@dataclass(frozen=True)
class ItemDef:
    """Item definition. ``stack_limit`` <= 1 means the item does not stack."""

    id: str
    stack_limit: int = 1


@dataclass(frozen=True)
class ItemStack:
    item_id: str
    quantity: int


class MemoryItemCatalog:
    """Item lookup backed by a dict.

    Args:
        definitions: Known item definitions.
        broken: Item ids whose ``create_instance`` returns None.
        raising: Item ids whose ``create_instance`` raises ItemCreationError.
    """

    def __init__(
        self,
        definitions: Iterable[ItemDef] = (),
        broken: Iterable[str] = (),
        raising: Iterable[str] = (),
    ) -> None:
        self._definitions: dict[str, ItemDef] = {d.id: d for d in definitions}
        self._broken = set(broken)
        self._raising = set(raising)
        self.resolve_calls: list[str] = []

    def define(self, definition: ItemDef) -> None:
        self._definitions[definition.id] = definition

    def resolve(self, item_id: str) -> ItemDef | None:
        self.resolve_calls.append(item_id)
        return self._definitions.get(item_id)

    def create_instance(self, definition: ItemDef, quantity: int) -> ItemStack | None:
        if definition.id in self._raising:
            raise ItemCreationError(f"cannot create {definition.id}")
        if definition.id in self._broken:
            return None
        return ItemStack(item_id=definition.id, quantity=quantity)


@dataclass
class MemoryStorage:
    """Storage container recording added stacks.

    ``capacity`` of -1 means unlimited; adding past capacity raises.
    """

    contents: list[ItemStack] = field(default_factory=list)
    capacity: int = -1

    def add_item(self, instance: ItemStack) -> None:
        if self.capacity != -1 and len(self.contents) >= self.capacity:
            raise ItemCreationError("storage is full")
        self.contents.append(instance)


@dataclass(eq=False)
class DropSite:
    guid: str
    position: tuple[float, float, float]
    storage: MemoryStorage = field(default_factory=MemoryStorage)


class MemoryLocationProvider:
    def __init__(self, sites: Iterable[DropSite] = ()) -> None:
        self._sites: list[DropSite] = list(sites)

    def add(self, site: DropSite) -> None:
        self._sites.append(site)

    def clear(self) -> None:
        self._sites.clear()

    def all_locations(self) -> Sequence[DropSite]:
        return list(self._sites)


class RecordingNotifier:
    """Notifier that keeps every message it is asked to send."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def send_message(self, text: str) -> None:
        self.messages.append(text)


@dataclass
class FixedTimeSource:
    """Time source whose day count is set directly."""

    elapsed_days: int = 0

    def advance(self, days: int = 1) -> None:
        self.elapsed_days += days
