"""Result records for fitness analysis (form, trend, weekly load, recovery, race)."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict


class FormStatus(str, Enum):
    """Form categories derived from TSB, from freshest to most fatigued."""
    RACE_READY = "race_ready"
    FRESH = "fresh"
    OPTIMAL = "optimal"
    TIRED = "tired"
    OVERTRAINED = "overtrained"


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class RecoveryFatigueLevel(str, Enum):
    """Fatigue banding of the latest ATL."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class FormTrend:
    """Form direction over a window of fitness points."""

    direction: TrendDirection
    tsb_change: float
    ctl_change: float
    atl_change: float
    current_tsb: float
    average_tsb: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "direction": self.direction.value,
            "tsbChange": self.tsb_change,
            "ctlChange": self.ctl_change,
            "atlChange": self.atl_change,
            "currentTsb": self.current_tsb,
            "averageTsb": self.average_tsb,
        }


@dataclass(frozen=True)
class WeeklyLoadSummary:
    """Training load for one Monday-start week."""

    week_start: date
    total_tss: float
    activity_count: int
    average_tss_per_activity: float
    total_duration: float  # minutes

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "weekStart": self.week_start.isoformat(),
            "totalTss": self.total_tss,
            "activityCount": self.activity_count,
            "averageTssPerActivity": self.average_tss_per_activity,
            "totalDuration": self.total_duration,
        }


@dataclass(frozen=True)
class RecoveryAssessment:
    """Current fatigue and overreaching state."""

    fatigue_level: RecoveryFatigueLevel
    suggested_recovery_days: int
    ramp_rate: float  # CTL change across the last 7 points
    is_overreaching: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "fatigueLevel": self.fatigue_level.value,
            "suggestedRecoveryDays": self.suggested_recovery_days,
            "rampRate": self.ramp_rate,
            "isOverreaching": self.is_overreaching,
        }


@dataclass(frozen=True)
class RaceReadiness:
    """Projected form on race day."""

    days_until_race: int
    projected_tsb: float
    current_form: FormStatus
    recommendation: str
    confidence: Confidence

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "daysUntilRace": self.days_until_race,
            "projectedTsb": self.projected_tsb,
            "currentForm": self.current_form.value,
            "recommendation": self.recommendation,
            "confidence": self.confidence.value,
        }
