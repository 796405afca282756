"""Daily goal settings service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from protein_tracker.domain.formatting import parse_number
from protein_tracker.errors import InvalidInputError, NotInitializedError
from protein_tracker.services.validation import GOAL_MESSAGE, check_goal

_logger = logging.getLogger(__name__)


class SettingsRepository(Protocol):
    """Persistence interface for the singleton settings row."""

    def get_goal(self) -> float | None:
        """Return the stored goal, or None when the row is missing."""

    def set_goal(self, goal_protein_g: float) -> bool:
        """Overwrite the goal and return False when the row is missing."""


@dataclass
class SettingsService:
    """Service for reading and updating the daily protein goal."""

    repository: SettingsRepository

    def get_goal(self) -> float:
        """Return the current daily protein goal."""
        goal = self.repository.get_goal()
        if goal is None:
            raise NotInitializedError("settings row is missing")
        return goal

    def set_goal(self, value: float) -> float:
        """Validate and persist a new daily protein goal."""
        goal = check_goal(value)
        if not self.repository.set_goal(goal):
            raise NotInitializedError("settings row is missing")
        _logger.info("Daily protein goal set: goal_protein_g=%s", goal)
        return goal

    def set_goal_from_text(self, raw: str) -> float:
        """Parse goal form input and persist it."""
        value = parse_number(raw)
        if value is None:
            raise InvalidInputError("goal_protein_g", GOAL_MESSAGE)
        return self.set_goal(value)
