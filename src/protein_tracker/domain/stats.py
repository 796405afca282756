"""Domain models for daily aggregates."""

from dataclasses import dataclass
from datetime import date

from protein_tracker.domain.entries import Entry


@dataclass(frozen=True)
class DailyTotals:
    """Protein and calorie totals for one day."""

    day: date
    protein_g: float
    calories: float


@dataclass(frozen=True)
class DayHistory:
    """Per-day aggregate row in the history window."""

    day: date
    protein_g: float
    calories: float
    entry_count: int


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a day's protein against the goal."""

    goal_protein_g: float
    consumed_protein_g: float
    remaining_protein_g: float
    fraction: float

    @property
    def is_met(self) -> bool:
        return self.consumed_protein_g >= self.goal_protein_g


@dataclass(frozen=True)
class DayOverview:
    """Everything needed to render a single day."""

    day: date
    totals: DailyTotals
    progress: GoalProgress
    entries: list[Entry]
