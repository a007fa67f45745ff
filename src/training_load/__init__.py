"""
Training-load analytics and workout safety validation.

Form classification, trends, weekly load, recovery and race readiness over a
fitness time series, plus validation of proposed workouts and user edits of
workouts against training load, readiness, fatigue and constraints.
"""

__version__ = "0.1.0"

from .exceptions import (
    ErrorCode,
    TrainingLoadError,
    ValidationError,
    InvalidIntensityError,
    InvalidMetricError,
    InvalidDateError,
    InputParseError,
)
from .metrics import (
    classify_form,
    build_fitness_series,
    estimate_workout_tss,
    calculate_monotony_strain,
)
from .analysis import (
    analyze_trend,
    recent_window,
    aggregate_weekly_loads,
    assess_recovery,
    project_race_readiness,
)
from .services import (
    validate_training_load,
    validate_modification,
    suggest_safe_modification,
    check_training_readiness,
    check_fatigue_level,
    check_constraint_compatibility,
)

__all__ = [
    "__version__",
    # Errors
    "ErrorCode",
    "TrainingLoadError",
    "ValidationError",
    "InvalidIntensityError",
    "InvalidMetricError",
    "InvalidDateError",
    "InputParseError",
    # Metrics
    "classify_form",
    "build_fitness_series",
    "estimate_workout_tss",
    "calculate_monotony_strain",
    # Analysis
    "analyze_trend",
    "recent_window",
    "aggregate_weekly_loads",
    "assess_recovery",
    "project_race_readiness",
    # Validation
    "validate_training_load",
    "validate_modification",
    "suggest_safe_modification",
    "check_training_readiness",
    "check_fatigue_level",
    "check_constraint_compatibility",
]
