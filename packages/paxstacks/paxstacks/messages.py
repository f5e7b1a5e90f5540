"""Player-facing message texts sent through the notifier."""
from __future__ import annotations

from typing import Sequence

from paxstacks.types import DropFailure


def drop_live(tier: int, position: str) -> str:
    return f"Tier {tier} package is live. Go get it: {position} 📍"


def daily_tier(tier: int, loot: Sequence[str]) -> str:
    if not loot:
        return f"Today's drop tier: {tier}. Better loot awaits. 💼"
    return f"Today's drop tier: {tier}. Better loot awaits: {', '.join(loot)}. 💼"


def request_accepted(tier: int) -> str:
    return f"You got it. Dropping tier {tier} supply now. 📦"


def request_denied(tier: int, reason: DropFailure | None) -> str:
    if reason is DropFailure.UNKNOWN_TIER:
        return "I don't know what kind of drop you're asking for. ❌"
    if reason is DropFailure.NO_LOCATIONS:
        return "No safe spots open right now. Hit me up later. 🚫"
    return f"You're not high enough in the game to get a tier {tier} drop yet. 📉"
