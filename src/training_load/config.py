"""Configuration settings for the training load engine."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/training_load/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """
    Thresholds used by the load and modification validators.

    Defaults are the values observed in production coaching; every one of
    them can be overridden with a TRAINING_LOAD_<NAME> environment variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRAINING_LOAD_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Ramp rate (CTL points per week)
    ramp_rate_warning: float = 8.0     # (8, 10] -> warning
    ramp_rate_danger: float = 10.0     # > 10 -> danger

    # Monotony / strain (Foster)
    monotony_warning: float = 2.0
    strain_danger: float = 2000.0
    uniform_load_monotony: float = 10.0  # same non-zero load every day

    # Consecutive hard sessions before warning
    consecutive_hard_days_warning: int = 2

    # Form (TSB) limits
    overreaching_tsb: float = -25.0      # tsb <= this with a loaded workout
    overreaching_min_tss: float = 50.0
    critical_tsb: float = -30.0          # tsb < this with a demanding workout

    # ATL time constant used for the acute contribution of a new workout
    atl_time_constant: int = 7

    # Workout modification
    modification_warning_pct: float = 50.0
    modification_danger_pct: float = 100.0
    high_fatigue_tss_increase_pct: float = 25.0
    suggested_duration_cap: float = 1.25


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
