"""Capability protocols the drop core consumes from its host environment.

The core never imports the host. Anything that quacks like these protocols
can be passed in; ``random.Random`` already satisfies ``RandomSource``.
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

_T = TypeVar("_T")


@runtime_checkable
class TimeSource(Protocol):
    """Read access to the in-game calendar."""

    @property
    def elapsed_days(self) -> int: ...


@runtime_checkable
class StorageHandle(Protocol):
    """Container backing a drop. ``add_item`` may raise per item."""

    def add_item(self, instance: Any) -> None: ...


@runtime_checkable
class Location(Protocol):
    """A place in the world where a drop can be placed."""

    @property
    def guid(self) -> str: ...

    @property
    def position(self) -> tuple[float, float, float]: ...

    @property
    def storage(self) -> StorageHandle: ...


@runtime_checkable
class LocationProvider(Protocol):
    def all_locations(self) -> Sequence[Location]: ...


@runtime_checkable
class ItemDefinition(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def stack_limit(self) -> int: ...


@runtime_checkable
class ItemCatalog(Protocol):
    """Resolves item ids and creates stackable instances.

    Both methods return None when the item cannot be produced.
    """

    def resolve(self, item_id: str) -> ItemDefinition | None: ...

    def create_instance(self, definition: ItemDefinition, quantity: int) -> Any | None: ...


@runtime_checkable
class Notifier(Protocol):
    """Delivers a user-visible text message to the player."""

    def send_message(self, text: str) -> None: ...


class RandomSource(Protocol):
    """Uniform selection primitives. Bounds of ``randint`` are inclusive."""

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[_T]) -> _T: ...

    def choices(self, population: Sequence[_T], *, k: int = 1) -> list[_T]: ...

    def sample(self, population: Sequence[_T], k: int) -> list[_T]: ...
