"""DropScheduler: the day/week state machine behind automatic and manual drops."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import TYPE_CHECKING, Any, Callable

from paxstacks import messages
from paxstacks.catalog import TierCatalog
from paxstacks.config import DropConfig
from paxstacks.fill import fill_storage
from paxstacks.policy import (
    daily_fill_count,
    format_position,
    roll_scheduled_day,
    tiered_fill_count,
)
from paxstacks.types import (
    DropFailure,
    DropRequest,
    DropState,
    ItemRef,
    SchedulerState,
    SnapshotError,
)

if TYPE_CHECKING:
    from paxstacks.ports import (
        ItemCatalog,
        LocationProvider,
        Notifier,
        RandomSource,
        TimeSource,
    )

logger = logging.getLogger(__name__)


class DropScheduler:
    """Owns drop scheduling state and reacts to time signals.

    States are Idle (no drop placed) and Active (one drop placed). Any
    successful spawn moves to Active and replaces the previous drop
    reference; a sleep start always returns to Idle.

    Transitions, all invoked synchronously by the host:

    - ``on_week_pass``: re-roll the scheduled day for this week.
    - ``on_day_pass``: if this week's automatic drop has not fired and today
      is the scheduled day, roll a tier from the catalog and spawn it.
    - ``on_sleep_start``: forget the active drop.
    - ``request_manual_drop``: spawn a player-requested tier if it is known
      and unlocked for the current week.
    """

    def __init__(
        self,
        catalog: TierCatalog,
        time: TimeSource,
        locations: LocationProvider,
        items: ItemCatalog,
        notifier: Notifier,
        rng: RandomSource | None = None,
        config: DropConfig | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._time = time
        self._locations = locations
        self._items = items
        self._notifier = notifier
        self._rng: RandomSource = rng if rng is not None else _random_mod.Random()
        self.config: DropConfig = config if config is not None else DropConfig()
        self._log = log if log is not None else logger
        self._state = SchedulerState()
        self._initialized = False
        self._on_daily_drop: list[Callable[[DropRequest], None]] = []

    # --- Queries ---

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def drop_state(self) -> DropState:
        return self._state.state

    @property
    def current_week(self) -> int:
        return self._time.elapsed_days // self.config.days_per_week

    @property
    def today(self) -> int:
        """Day of the week, 0-based."""
        return self._time.elapsed_days % self.config.days_per_week

    def loot_for_current_week(self) -> tuple[ItemRef, ...]:
        """Item ids of the highest tier unlocked this week."""
        return self._catalog.loot_for(self._catalog.unlocked_tier_for(self.current_week))

    # --- Callback registration ---

    def on_daily_drop(self, cb: Callable[[DropRequest], None]) -> None:
        """Register callback fired after a daily refresh drop spawns.

        Signature: (result) -> None.
        """
        self._on_daily_drop.append(cb)

    # --- Lifecycle ---

    def initialize(self) -> bool:
        """One-time setup. Returns False if already initialized."""
        if self._initialized:
            return False
        self._initialized = True
        self._log.info(
            "Drop scheduler initialized (week=%d, tiers=%s)",
            self.current_week,
            self._catalog.tiers(),
        )
        return True

    # --- Time signals ---

    def on_week_pass(self) -> None:
        self._state.scheduled_day = roll_scheduled_day(
            self._rng, self.config.days_per_week
        )
        self._log.info(
            "Week %d began (elapsed_days=%d), automatic drop scheduled for day %d",
            self.current_week,
            self._time.elapsed_days,
            self._state.scheduled_day,
        )

    def on_day_pass(self) -> None:
        week = self.current_week
        today = self.today
        self._log.info("New in-game day %d of week %d", today, week)

        if self.config.daily_refresh:
            self.spawn_daily_drop()

        if self._state.last_auto_drop_week == week:
            return
        scheduled = self._state.scheduled_day
        if scheduled is None or today != scheduled:
            return

        tier = self._rng.choice(self._catalog.tiers())
        self._log.info("Automatic drop due today (day %d), rolled tier %d", today, tier)
        result = self.spawn_drop(tier)
        if result.spawned:
            self._state.last_auto_drop_week = week

    def on_sleep_start(self) -> None:
        active = self._state.active_drop
        if active is not None:
            self._log.info("Cleaning up drop %s", active.guid)
        self._state.active_drop = None

    # --- Drop requests ---

    def try_manual_drop(self, tier: int) -> DropRequest:
        """Attempt a player-requested drop, returning the detailed outcome.

        A tier is allowed once ``unlocked_tier_for(current_week)`` reaches it,
        so with the default thresholds tier 3 opens at week 4. The original
        mod accepted tier 3 from week 3, disagreeing with its own week table.
        """
        if not self._catalog.is_valid_tier(tier):
            self._log.warning("Manual drop rejected: unknown tier %s", tier)
            return DropRequest(tier, manual=True, spawned=False, reason=DropFailure.UNKNOWN_TIER)

        week = self.current_week
        if tier > self._catalog.unlocked_tier_for(week):
            self._log.info(
                "Manual drop for tier %d blocked due to insufficient week (%d)", tier, week
            )
            return DropRequest(tier, manual=True, spawned=False, reason=DropFailure.NOT_UNLOCKED)

        return self._spawn(
            tier,
            manual=True,
            count=lambda: tiered_fill_count(self._rng, self.config.tiered_fill),
        )

    def request_manual_drop(self, tier: int) -> bool:
        return self.try_manual_drop(tier).spawned

    def spawn_drop(self, tier: int) -> DropRequest:
        """Spawn an automatic drop of ``tier`` using the fixed fill window."""
        return self._spawn(
            tier,
            manual=False,
            count=lambda: tiered_fill_count(self._rng, self.config.tiered_fill),
        )

    def spawn_daily_drop(self) -> DropRequest:
        """Unconditional daily refresh at the unlocked tier, week-scaled fill."""
        week = self.current_week
        tier = self._catalog.unlocked_tier_for(week)
        result = self._spawn(
            tier,
            manual=False,
            count=lambda: daily_fill_count(week, self.config.daily_fill),
        )
        if result.spawned:
            for cb in self._on_daily_drop:
                cb(result)
        return result

    def _spawn(
        self,
        tier: int,
        manual: bool,
        count: Callable[[], int],
    ) -> DropRequest:
        if not self._catalog.is_valid_tier(tier):
            self._log.warning("Spawn rejected: unknown tier %s", tier)
            return DropRequest(tier, manual, spawned=False, reason=DropFailure.UNKNOWN_TIER)

        self._log.info("Spawning dead drop for tier %d...", tier)
        locations = list(self._locations.all_locations())
        if not locations:
            self._log.warning("No dead drops found in the scene. Aborting spawn.")
            return DropRequest(tier, manual, spawned=False, reason=DropFailure.NO_LOCATIONS)

        location = self._rng.choice(locations)
        position = format_position(location.position)
        self._log.info("Drop selected: guid=%s location=%s", location.guid, position)

        previous = self._state.active_drop
        if previous is not None and previous is not location:
            self._log.info("Replacing active drop %s", previous.guid)

        loot = self._catalog.resolve(tier, self._items)
        wanted = count()
        added = fill_storage(
            location.storage, self._items, loot, wanted, self._rng, self._log
        )
        self._log.info("Fill complete: %d/%d stacks at %s", added, wanted, position)

        self._state.active_drop = location
        self._notifier.send_message(messages.drop_live(tier, position))
        return DropRequest(tier, manual, spawned=True, location=location)

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize scheduling counters. The active drop is not persisted."""
        return {
            "last_auto_drop_week": self._state.last_auto_drop_week,
            "scheduled_day": self._state.scheduled_day,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Restore counters. Always lands in Idle.

        Raises SnapshotError if a counter is out of range; the current state
        is left untouched in that case.
        """
        last_week = data.get("last_auto_drop_week")
        if last_week is not None and (
            isinstance(last_week, bool) or not isinstance(last_week, int) or last_week < 0
        ):
            raise SnapshotError(f"Invalid last_auto_drop_week {last_week!r}")

        scheduled_day = data.get("scheduled_day")
        days = self.config.days_per_week
        if scheduled_day is not None and (
            isinstance(scheduled_day, bool)
            or not isinstance(scheduled_day, int)
            or not 0 <= scheduled_day < days
        ):
            raise SnapshotError(
                f"scheduled_day {scheduled_day!r} outside [0, {days})"
            )

        self._state = SchedulerState(
            last_auto_drop_week=last_week, scheduled_day=scheduled_day
        )
