"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_GOAL_PROTEIN_G = 120.0
DEFAULT_HISTORY_DAYS = 30


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    db_path: str = "protein.db"
    default_goal_protein_g: float = Field(default=DEFAULT_GOAL_PROTEIN_G, gt=0)
    history_days: int = Field(default=DEFAULT_HISTORY_DAYS, gt=0)
    timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
