"""Input models and result records."""

from .common import to_camel, parse_calendar_date
from .workouts import (
    INTENSITY_ORDER,
    LENIENT_INTENSITY,
    WorkoutIntensity,
    WorkoutSport,
    ProposedWorkout,
    HistoryActivity,
)
from .fitness import (
    FitnessDataPoint,
    ActivityRecord,
    FitnessMetrics,
    TrainingHistory,
)
from .wellness import (
    Readiness,
    FatigueLevel,
    TravelStatus,
    DailyCheckIn,
)
from .constraints import (
    Constraint,
    ConstraintStatus,
    InjurySeverity,
    InjuryConstraint,
    TravelConstraint,
    AvailabilityConstraint,
    active_injuries,
)
from .analysis import (
    FormStatus,
    TrendDirection,
    RecoveryFatigueLevel,
    Confidence,
    FormTrend,
    WeeklyLoadSummary,
    RecoveryAssessment,
    RaceReadiness,
)
from .validation import (
    RiskLevel,
    WarningSeverity,
    LoadWarningType,
    ModificationWarningType,
    LoadMetrics,
    LoadWarning,
    TrainingLoadValidation,
    ModificationContext,
    ModificationWarning,
    WorkoutModificationValidation,
)

__all__ = [
    # Helpers
    "to_camel",
    "parse_calendar_date",
    # Workouts
    "INTENSITY_ORDER",
    "LENIENT_INTENSITY",
    "WorkoutIntensity",
    "WorkoutSport",
    "ProposedWorkout",
    "HistoryActivity",
    # Fitness
    "FitnessDataPoint",
    "ActivityRecord",
    "FitnessMetrics",
    "TrainingHistory",
    # Wellness
    "Readiness",
    "FatigueLevel",
    "TravelStatus",
    "DailyCheckIn",
    # Constraints
    "Constraint",
    "ConstraintStatus",
    "InjurySeverity",
    "InjuryConstraint",
    "TravelConstraint",
    "AvailabilityConstraint",
    "active_injuries",
    # Analysis results
    "FormStatus",
    "TrendDirection",
    "RecoveryFatigueLevel",
    "Confidence",
    "FormTrend",
    "WeeklyLoadSummary",
    "RecoveryAssessment",
    "RaceReadiness",
    # Validation results
    "RiskLevel",
    "WarningSeverity",
    "LoadWarningType",
    "ModificationWarningType",
    "LoadMetrics",
    "LoadWarning",
    "TrainingLoadValidation",
    "ModificationContext",
    "ModificationWarning",
    "WorkoutModificationValidation",
]
