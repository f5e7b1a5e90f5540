"""MrStacks: the NPC contact the player orders drops through."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from paxstacks import messages
from paxstacks.types import DropFailure, DropRequest

if TYPE_CHECKING:
    from paxstacks.catalog import TierCatalog
    from paxstacks.ports import Notifier
    from paxstacks.scheduler import DropScheduler

logger = logging.getLogger(__name__)


class MrStacks:
    """Player-facing side of the drop system.

    Wraps a DropScheduler so every explicit player request gets a reply
    through the notifier, whether or not a drop was spawned. Daily refresh
    drops are announced here as they spawn.
    """

    def __init__(
        self,
        scheduler: DropScheduler,
        catalog: TierCatalog,
        notifier: Notifier,
        log: logging.Logger | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._catalog = catalog
        self._notifier = notifier
        self._log = log if log is not None else logger
        scheduler.on_daily_drop(self._on_daily_drop)

    def request_custom_drop(self, tier: int) -> bool:
        """Handle a player's drop order. Returns whether a drop was spawned."""
        if not self._catalog.is_valid_tier(tier):
            self._log.warning("Invalid tier requested: %s", tier)
            self._notifier.send_message(messages.request_denied(tier, DropFailure.UNKNOWN_TIER))
            return False

        result = self._scheduler.try_manual_drop(tier)
        if result.spawned:
            self._notifier.send_message(messages.request_accepted(tier))
        else:
            self._notifier.send_message(messages.request_denied(tier, result.reason))
        return result.spawned

    def send_daily_drop_message(self) -> None:
        """Announce this week's unlocked tier and what it can contain."""
        tier = self._catalog.unlocked_tier_for(self._scheduler.current_week)
        loot = self._scheduler.loot_for_current_week()
        self._notifier.send_message(messages.daily_tier(tier, loot))

    def _on_daily_drop(self, result: DropRequest) -> None:
        self.send_daily_drop_message()
