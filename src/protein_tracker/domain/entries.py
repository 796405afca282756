"""Domain models for logged entries."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Entry:
    """A logged food item tied to a calendar day."""

    id: int
    day: date
    name: str
    protein_g: float
    calories: float | None
    created_at: datetime
