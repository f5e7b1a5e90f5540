"""HostEvents: the game-side signals the mod hooks, driven by a GameCalendar."""
from __future__ import annotations

from typing import Callable, Generic, ParamSpec

from paxstacks_host.clock import DAY_PASS, WEEK_PASS, GameCalendar

_P = ParamSpec("_P")


class Hook(Generic[_P]):
    """Synchronous multicast hook.

    Handlers run in registration order. A handler may add or remove
    handlers while the hook fires; the change applies from the next fire.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: list[Callable[_P, None]] = []

    def add(self, handler: Callable[_P, None]) -> None:
        self._handlers.append(handler)

    def remove(self, handler: Callable[_P, None]) -> bool:
        """Remove one registration. Returns False if it was not registered."""
        if handler not in self._handlers:
            return False
        self._handlers.remove(handler)
        return True

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def fire(self, *args: _P.args, **kwargs: _P.kwargs) -> None:
        for handler in list(self._handlers):
            handler(*args, **kwargs)


class HostEvents:
    """Game lifecycle, time and player signals.

    Time hooks take no arguments; read the calendar for the current day.
    ``tick`` and ``sleep`` advance ``calendar`` and fire the boundaries it
    reports, week before day.
    """

    def __init__(self, calendar: GameCalendar) -> None:
        self.calendar = calendar
        self.scene_loaded: Hook[[str]] = Hook("scene_loaded")
        self.day_pass: Hook[[]] = Hook(DAY_PASS)
        self.week_pass: Hook[[]] = Hook(WEEK_PASS)
        self.sleep_start: Hook[[]] = Hook("sleep_start")
        self.drop_request: Hook[[object]] = Hook("drop_request")

    def load_scene(self, scene: str) -> None:
        self.scene_loaded.fire(scene)

    def request_drop(self, tier: object) -> None:
        """Player ordered a drop. ``tier`` comes from UI input, unvalidated."""
        self.drop_request.fire(tier)

    def tick(self) -> None:
        """Advance the calendar one tick."""
        self._fire_boundaries(self.calendar.advance())

    def sleep(self) -> None:
        """Player goes to bed: sleep start, then skip to the next morning."""
        self.sleep_start.fire()
        self._fire_boundaries(self.calendar.skip_to_next_day())

    def _fire_boundaries(self, boundaries: list[str]) -> None:
        for boundary in boundaries:
            if boundary == WEEK_PASS:
                self.week_pass.fire()
            elif boundary == DAY_PASS:
                self.day_pass.fire()
