"""Current date and time providers."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current calendar date and timestamp."""

    def today(self) -> date:
        """Return the local calendar date."""

    def now(self) -> datetime:
        """Return the current timezone-aware timestamp."""


@dataclass
class SystemClock(Clock):
    """Wall-clock implementation, optionally pinned to a timezone."""

    timezone_name: str | None = None

    def today(self) -> date:
        if self.timezone_name:
            return datetime.now(tz=ZoneInfo(self.timezone_name)).date()
        return datetime.now().astimezone().date()

    def now(self) -> datetime:
        return datetime.now(tz=UTC)
