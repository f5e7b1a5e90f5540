"""PaxStacksMod: waits for the main scene, then hooks the drop system to host events."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import TYPE_CHECKING, Mapping, Sequence

from paxstacks import DropConfig, DropScheduler, MrStacks, TierCatalog

from paxstacks_host.events import HostEvents

if TYPE_CHECKING:
    from paxstacks.ports import ItemCatalog, LocationProvider, Notifier, RandomSource

logger = logging.getLogger(__name__)


class PaxStacksMod:
    """Mod entry point.

    ``initialize`` only hooks ``scene_loaded``. The first time the main scene
    loads, the hook removes itself, the scheduler is initialized and the
    time and player hooks are registered. Later scene loads do nothing.

    Raises ValueError if the calendar and the scheduler disagree on the
    length of a week.
    """

    def __init__(
        self,
        events: HostEvents,
        scheduler: DropScheduler,
        contact: MrStacks,
        log: logging.Logger | None = None,
    ) -> None:
        calendar_week = events.calendar.days_per_week
        scheduler_week = scheduler.config.days_per_week
        if calendar_week != scheduler_week:
            raise ValueError(
                f"Calendar week of {calendar_week} days does not match "
                f"scheduler week of {scheduler_week} days"
            )
        self._events = events
        self.scheduler = scheduler
        self.contact = contact
        self._log = log if log is not None else logger
        self._initialized = False
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def initialize(self) -> bool:
        """Hook scene loading. Returns False if already initialized."""
        if self._initialized:
            return False
        self._initialized = True
        self._events.scene_loaded.add(self._on_scene_loaded)
        self._log.info(
            "PaxStacks initialized. Awaiting scene %r...",
            self.scheduler.config.main_scene,
        )
        return True

    def shutdown(self) -> None:
        """Unhook every handler this mod registered."""
        events = self._events
        events.scene_loaded.remove(self._on_scene_loaded)
        events.week_pass.remove(self.scheduler.on_week_pass)
        events.day_pass.remove(self.scheduler.on_day_pass)
        events.sleep_start.remove(self.scheduler.on_sleep_start)
        events.drop_request.remove(self._on_drop_request)
        self._started = False

    # --- Handlers ---

    def _on_scene_loaded(self, scene: str) -> None:
        if scene != self.scheduler.config.main_scene:
            return
        self._events.scene_loaded.remove(self._on_scene_loaded)
        self._log.info("Scene %r detected. Starting PaxStacks...", scene)

        self.scheduler.initialize()
        self._events.week_pass.add(self.scheduler.on_week_pass)
        self._events.day_pass.add(self.scheduler.on_day_pass)
        self._events.sleep_start.add(self.scheduler.on_sleep_start)
        self._events.drop_request.add(self._on_drop_request)
        self._started = True

    def _on_drop_request(self, tier: object) -> None:
        # bool is an int subclass; True must not order a tier 1 drop
        if isinstance(tier, bool) or not isinstance(tier, int):
            self._log.warning("Drop request without a usable tier: %r", tier)
            return
        self.contact.request_custom_drop(tier)


def make_mod(
    events: HostEvents,
    locations: LocationProvider,
    items: ItemCatalog,
    notifier: Notifier,
    loot: Mapping[int, Sequence[str]] | None = None,
    rng: RandomSource | None = None,
    config: DropConfig | None = None,
) -> PaxStacksMod:
    """Build the catalog, scheduler and contact on ``events.calendar``."""
    config = config if config is not None else DropConfig()
    rng = rng if rng is not None else _random_mod.Random()
    catalog = TierCatalog(loot, config)
    scheduler = DropScheduler(
        catalog, events.calendar, locations, items, notifier, rng=rng, config=config
    )
    contact = MrStacks(scheduler, catalog, notifier)
    return PaxStacksMod(events, scheduler, contact)
