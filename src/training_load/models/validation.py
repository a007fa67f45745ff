"""Validation verdicts for proposed and modified workouts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from .common import InputModel
from .constraints import Constraint
from .wellness import FatigueLevel, Readiness
from .workouts import HistoryActivity, ProposedWorkout


class RiskLevel(str, Enum):
    """Overall overtraining / modification risk."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class WarningSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class LoadWarningType(str, Enum):
    OVERREACHING = "overreaching"
    RAMP_RATE = "ramp_rate"
    MONOTONY = "monotony"
    STRAIN = "strain"
    CONSECUTIVE_HARD = "consecutive_hard"


class ModificationWarningType(str, Enum):
    INTENSITY_JUMP = "intensity_jump"
    LOAD_INCREASE = "load_increase"
    DURATION_INCREASE = "duration_increase"
    CONSTRAINT_VIOLATION = "constraint_violation"
    FATIGUE_RISK = "fatigue_risk"
    CONSECUTIVE_HARD_DAYS = "consecutive_hard_days"


# =============================================================================
# Training load validation
# =============================================================================


@dataclass(frozen=True)
class LoadMetrics:
    """Load snapshot, current or projected after the proposed workout."""

    weekly_tss: float
    ctl: float
    atl: float
    tsb: float
    ramp_rate: float
    monotony: Optional[float] = None
    strain: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {
            "weeklyTSS": self.weekly_tss,
            "ctl": self.ctl,
            "atl": self.atl,
            "tsb": self.tsb,
            "rampRate": self.ramp_rate,
        }
        if self.monotony is not None:
            data["monotony"] = self.monotony
        if self.strain is not None:
            data["strain"] = self.strain
        return data


@dataclass(frozen=True)
class LoadWarning:
    type: LoadWarningType
    severity: WarningSeverity
    message: str
    threshold: Optional[float] = None
    actual: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.threshold is not None:
            data["threshold"] = self.threshold
        if self.actual is not None:
            data["actual"] = self.actual
        return data


@dataclass(frozen=True)
class TrainingLoadValidation:
    """Overtraining verdict for a proposed workout."""

    is_valid: bool
    risk: RiskLevel
    current_load: LoadMetrics
    projected_load: Optional[LoadMetrics] = None
    warnings: Tuple[LoadWarning, ...] = ()
    recommendations: Tuple[str, ...] = ()

    def warning_types(self) -> List[LoadWarningType]:
        return [w.type for w in self.warnings]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "isValid": self.is_valid,
            "risk": self.risk.value,
            "currentLoad": self.current_load.to_dict(),
            "projectedLoad": self.projected_load.to_dict() if self.projected_load else None,
            "warnings": [w.to_dict() for w in self.warnings],
            "recommendations": list(self.recommendations),
        }


# =============================================================================
# Workout modification validation
# =============================================================================


class ModificationContext(InputModel):
    """
    Athlete state around a modification.

    ``constraints`` should already be filtered to active, started constraints;
    inactive ones are skipped regardless.
    """

    readiness: Optional[Readiness] = None
    fatigue: Optional[FatigueLevel] = None
    constraints: List[Constraint] = Field(default_factory=list)
    recent_activities: List[HistoryActivity] = Field(default_factory=list)


@dataclass(frozen=True)
class ModificationWarning:
    type: ModificationWarningType
    severity: WarningSeverity
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class WorkoutModificationValidation:
    """Safety verdict for a user edit of a proposed workout."""

    is_valid: bool
    risk: RiskLevel
    warnings: Tuple[ModificationWarning, ...] = ()
    recommendations: Tuple[str, ...] = ()
    suggested_modification: Optional[ProposedWorkout] = field(default=None)

    def warning_types(self) -> List[ModificationWarningType]:
        return [w.type for w in self.warnings]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        suggestion = None
        if self.suggested_modification is not None:
            suggestion = self.suggested_modification.model_dump(mode="json", by_alias=True)
        return {
            "isValid": self.is_valid,
            "risk": self.risk.value,
            "warnings": [w.to_dict() for w in self.warnings],
            "recommendations": list(self.recommendations),
            "suggestedModification": suggestion,
        }
