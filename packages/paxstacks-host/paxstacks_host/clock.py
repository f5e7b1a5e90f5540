"""GameCalendar: tick-driven in-game day and week counter."""
from __future__ import annotations

DAY_PASS = "day_pass"
WEEK_PASS = "week_pass"


class GameCalendar:
    """Maps engine ticks onto in-game days and weeks.

    Satisfies ``paxstacks.ports.TimeSource``. ``advance`` reports the
    boundaries crossed by a tick, week before day so a freshly rolled week
    is in place when its first day is evaluated.
    """

    def __init__(
        self, ticks_per_day: int, days_per_week: int = 7, elapsed_days: int = 0
    ) -> None:
        if ticks_per_day <= 0:
            raise ValueError("ticks_per_day must be positive")
        if days_per_week <= 0:
            raise ValueError("days_per_week must be positive")
        if elapsed_days < 0:
            raise ValueError("elapsed_days must be >= 0")
        self._ticks_per_day = ticks_per_day
        self._days_per_week = days_per_week
        self._tick_number = elapsed_days * ticks_per_day

    @property
    def ticks_per_day(self) -> int:
        return self._ticks_per_day

    @property
    def days_per_week(self) -> int:
        return self._days_per_week

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_days(self) -> int:
        return self._tick_number // self._ticks_per_day

    @property
    def day_of_week(self) -> int:
        return self.elapsed_days % self._days_per_week

    @property
    def week(self) -> int:
        return self.elapsed_days // self._days_per_week

    def advance(self) -> list[str]:
        """Advance one tick. Returns crossed boundaries, in delivery order."""
        self._tick_number += 1
        if self._tick_number % self._ticks_per_day != 0:
            return []
        if self.day_of_week == 0:
            return [WEEK_PASS, DAY_PASS]
        return [DAY_PASS]

    def skip_to_next_day(self) -> list[str]:
        """Jump to the start of the next day (sleeping through the night)."""
        remainder = self._tick_number % self._ticks_per_day
        self._tick_number += self._ticks_per_day - remainder - 1
        return self.advance()

    def reset(self, elapsed_days: int = 0) -> None:
        self._tick_number = elapsed_days * self._ticks_per_day
