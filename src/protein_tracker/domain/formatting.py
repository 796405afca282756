"""Date and display formatting helpers."""

import math
import re
from datetime import date, datetime

from protein_tracker.errors import InvalidInputError

DAY_FORMAT = "%Y-%m-%d"

_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def format_day(value: date) -> str:
    """Return the `YYYY-MM-DD` bucket key for a date."""
    return value.isoformat()


def parse_day(value: str) -> date:
    """Parse a `YYYY-MM-DD` string into a date."""
    try:
        return datetime.strptime(value.strip(), DAY_FORMAT).date()
    except (AttributeError, ValueError) as exc:
        raise InvalidInputError("day", "Enter a date as YYYY-MM-DD.") from exc


def coerce_day(value: date | str) -> date:
    """Accept either a date or its `YYYY-MM-DD` text form."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_day(value)


def parse_number(raw: str | None) -> float | None:
    """Return the leading decimal number in raw form input, if any."""
    if raw is None:
        return None
    match = _NUMBER_PREFIX.match(raw.strip())
    if not match:
        return None
    return float(match.group(0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def format_grams(value: float) -> str:
    return f"{round_half_up(value)} g"


def format_kcal(value: float) -> str:
    return f"{round_half_up(value)} kcal"


def format_goal_progress(consumed_g: float, goal_g: float) -> str:
    """Format consumed protein against the goal, e.g. `50 / 120 g`."""
    return f"{round_half_up(consumed_g)} / {round_half_up(goal_g)} g"


def format_entry_time(created_at: datetime) -> str:
    """Format an entry timestamp as local `HH:MM`."""
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone()
    return created_at.strftime("%H:%M")
