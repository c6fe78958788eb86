"""Application configuration."""

import os

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Signal policy defaults loaded from environment variables."""

    min_workouts_per_week: PositiveInt = 3
    weight_window_days: PositiveInt = 30
    body_fat_window_days: PositiveInt = 30
    sleep_window_days: PositiveInt = 7
    resting_hr_window_days: PositiveInt = 7
    week_window_days: PositiveInt = 7
    month_window_days: PositiveInt = 30
    monthly_workout_goal: PositiveInt = 12
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
