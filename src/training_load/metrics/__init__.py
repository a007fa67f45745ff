"""Training metrics calculations."""

from .fitness import (
    classify_form,
    calculate_ewma,
    build_fitness_series,
)
from .load import (
    TSS_PER_HOUR,
    MonotonyStrainResult,
    estimate_workout_tss,
    daily_load_window,
    calculate_monotony_strain,
)

__all__ = [
    # Fitness model
    "classify_form",
    "calculate_ewma",
    "build_fitness_series",
    # Load
    "TSS_PER_HOUR",
    "MonotonyStrainResult",
    "estimate_workout_tss",
    "daily_load_window",
    "calculate_monotony_strain",
]
