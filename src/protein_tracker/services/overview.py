"""Per-day overview combining the goal and logged entries."""

from dataclasses import dataclass
from datetime import date

from protein_tracker.domain.formatting import coerce_day
from protein_tracker.domain.stats import DailyTotals, DayOverview, GoalProgress
from protein_tracker.services.entries import EntryService, sum_entries
from protein_tracker.services.settings import SettingsService


@dataclass
class OverviewService:
    """Service that assembles what a day view renders."""

    settings_service: SettingsService
    entry_service: EntryService

    def get_day(self, day: date | str | None = None) -> DayOverview:
        """Return goal progress, totals and entries for a day (today by default)."""
        bucket = self.entry_service.clock.today() if day is None else coerce_day(day)
        goal = self.settings_service.get_goal()
        entries = self.entry_service.list_for_day(bucket)
        totals = sum_entries(bucket, entries)
        return DayOverview(
            day=bucket,
            totals=totals,
            progress=compute_progress(totals, goal),
            entries=entries,
        )


def compute_progress(totals: DailyTotals, goal_protein_g: float) -> GoalProgress:
    consumed = totals.protein_g
    fraction = consumed / goal_protein_g if goal_protein_g > 0 else 0.0
    return GoalProgress(
        goal_protein_g=goal_protein_g,
        consumed_protein_g=consumed,
        remaining_protein_g=max(goal_protein_g - consumed, 0.0),
        fraction=max(0.0, min(1.0, fraction)),
    )
