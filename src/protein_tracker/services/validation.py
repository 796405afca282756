"""Input validation for entries and settings."""

import math

from protein_tracker.errors import InvalidInputError

NAME_MESSAGE = "Add a short label like 'Chicken breast'."
PROTEIN_MESSAGE = "Enter grams of protein (e.g., 32)."
CALORIES_MESSAGE = "Enter calories as a number of zero or more, or leave it blank."
GOAL_MESSAGE = "Enter a positive number of grams."
RANGE_MESSAGE = "Enter a positive number of days."


def _to_finite_float(value: object) -> float | None:
    """Return `value` as a finite float, or None when it is not one."""
    if not isinstance(value, int | float) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def clean_name(name: str | None) -> str:
    """Return the trimmed label or reject an empty one."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInputError("name", NAME_MESSAGE)
    return cleaned


def check_protein(protein_g: object) -> float:
    number = _to_finite_float(protein_g)
    if number is None or number <= 0:
        raise InvalidInputError("protein_g", PROTEIN_MESSAGE)
    return number


def check_calories(calories: object) -> float | None:
    if calories is None:
        return None
    number = _to_finite_float(calories)
    if number is None or number < 0:
        raise InvalidInputError("calories", CALORIES_MESSAGE)
    return number


def check_goal(value: object) -> float:
    number = _to_finite_float(value)
    if number is None or number <= 0:
        raise InvalidInputError("goal_protein_g", GOAL_MESSAGE)
    return number


def check_range_days(range_days: object) -> int:
    if not isinstance(range_days, int) or isinstance(range_days, bool) or range_days <= 0:
        raise InvalidInputError("range_days", RANGE_MESSAGE)
    return range_days
