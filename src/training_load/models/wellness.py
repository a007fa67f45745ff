"""Daily check-in and readiness/fatigue vocabulary."""

from datetime import date as date_type
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import InputModel


class Readiness(str, Enum):
    """Same-day training readiness traffic light."""
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class FatigueLevel(str, Enum):
    """Fatigue level derived from form (TSB)."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class TravelStatus(str, Enum):
    """Where the athlete is training from today."""
    HOME = "home"
    TRAVELING = "traveling"
    RETURNING = "returning"


class DailyCheckIn(InputModel):
    """Subjective and objective wellness inputs for one day."""

    checkin_date: Optional[date_type] = None

    # Wellness metrics (1-10 scale)
    sleep_quality: Optional[float] = Field(None, ge=1, le=10)
    sleep_hours: Optional[float] = Field(None, ge=0, le=24)
    energy_level: Optional[float] = Field(None, ge=1, le=10)
    stress_level: Optional[float] = Field(None, ge=1, le=10)
    overall_soreness: Optional[float] = Field(None, ge=1, le=10)

    # Objective data
    resting_hr: Optional[float] = Field(None, gt=0)
    hrv_ms: Optional[float] = Field(None, gt=0)

    # Context for today
    available_time_minutes: Optional[float] = Field(None, ge=0)
    equipment_access: List[str] = Field(default_factory=list)
    travel_status: TravelStatus = TravelStatus.HOME
