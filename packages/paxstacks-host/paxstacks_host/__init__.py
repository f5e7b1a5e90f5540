"""paxstacks-host - Calendar, host events and bootstrap for the paxstacks mod."""
from __future__ import annotations

from paxstacks_host.clock import DAY_PASS, WEEK_PASS, GameCalendar
from paxstacks_host.events import Hook, HostEvents
from paxstacks_host.mod import PaxStacksMod, make_mod

__all__ = [
    "DAY_PASS",
    "WEEK_PASS",
    "GameCalendar",
    "Hook",
    "HostEvents",
    "PaxStacksMod",
    "make_mod",
]
