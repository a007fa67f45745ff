"""Validation and safety services."""

from .load_validation import (
    calculate_current_load,
    project_load,
    validate_training_load,
)
from .modification_validation import (
    suggest_safe_modification,
    validate_modification,
)
from .safety_service import (
    ReadinessAssessment,
    FatigueAssessment,
    ConstraintCompatibility,
    check_training_readiness,
    check_fatigue_level,
    check_constraint_compatibility,
)

__all__ = [
    # Training load
    "calculate_current_load",
    "project_load",
    "validate_training_load",
    # Modification
    "suggest_safe_modification",
    "validate_modification",
    # Safety checks
    "ReadinessAssessment",
    "FatigueAssessment",
    "ConstraintCompatibility",
    "check_training_readiness",
    "check_fatigue_level",
    "check_constraint_compatibility",
]
