"""Tests for day overview service."""

from datetime import date

from protein_tracker.domain.stats import DailyTotals
from protein_tracker.services.overview import OverviewService, compute_progress


def test_compute_progress_clamps_fraction() -> None:
    day = date(2024, 1, 10)

    under = compute_progress(DailyTotals(day=day, protein_g=60, calories=0), 120)
    over = compute_progress(DailyTotals(day=day, protein_g=150, calories=0), 120)

    assert under.fraction == 0.5
    assert under.remaining_protein_g == 60
    assert not under.is_met
    assert over.fraction == 1.0
    assert over.remaining_protein_g == 0
    assert over.is_met


def test_compute_progress_with_zero_goal() -> None:
    progress = compute_progress(
        DailyTotals(day=date(2024, 1, 10), protein_g=10, calories=0), 0
    )

    assert progress.fraction == 0.0


def test_get_day_defaults_to_today(settings_service, entry_service) -> None:
    service = OverviewService(
        settings_service=settings_service, entry_service=entry_service
    )
    entry_service.create(None, "Chicken breast", 32, 165)
    entry_service.create(None, "Greek yogurt", 18)
    entry_service.create("2024-01-09", "Beans", 15)

    overview = service.get_day()

    assert overview.day == date(2024, 1, 10)
    assert [entry.name for entry in overview.entries] == [
        "Greek yogurt",
        "Chicken breast",
    ]
    assert overview.totals.protein_g == 50
    assert overview.progress.goal_protein_g == 120.0
    assert overview.progress.remaining_protein_g == 70


def test_get_day_with_sqlite(container) -> None:
    container.settings_service.set_goal(40)
    container.entry_service.create("2024-01-10", "Chicken breast", 32, 165)

    overview = container.overview_service.get_day("2024-01-10")

    assert overview.progress.fraction == 0.8
    assert overview.totals.calories == 165
