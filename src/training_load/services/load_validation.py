"""
Training load validation for proposed workouts.

Checks a proposed workout against recent history for overtraining risk:
ramp rate, monotony, strain, consecutive hard days and overreaching.
"""

import logging
from typing import List, Optional

from ..config import Settings, get_settings
from ..metrics.load import (
    calculate_monotony_strain,
    daily_load_window,
    estimate_workout_tss,
)
from ..models.fitness import TrainingHistory
from ..models.validation import (
    LoadMetrics,
    LoadWarning,
    LoadWarningType,
    RiskLevel,
    TrainingLoadValidation,
    WarningSeverity,
)
from ..models.workouts import ProposedWorkout


logger = logging.getLogger(__name__)

LOAD_WINDOW_DAYS = 7
SAFE_LOAD_MESSAGE = "Training load is within safe parameters"
CRITICAL_LOAD_MESSAGE = "Skip this workout - take a rest day or a very light recovery session"


# =============================================================================
# Load metrics
# =============================================================================


def calculate_current_load(
    history: TrainingHistory,
    settings: Optional[Settings] = None,
) -> LoadMetrics:
    """
    Current load from the fitness snapshot and the last 7 days of activity.

    Weekly TSS, monotony and strain come from the 7 calendar days ending on
    the most recent activity. An empty history yields zeros.
    """
    settings = settings or get_settings()
    metrics = history.fitness_metrics

    daily_loads = daily_load_window(history.activities, days=LOAD_WINDOW_DAYS)
    monotony_strain = calculate_monotony_strain(
        daily_loads,
        uniform_load_monotony=settings.uniform_load_monotony,
    )

    return LoadMetrics(
        weekly_tss=monotony_strain.total_load,
        ctl=metrics.ctl,
        atl=metrics.atl,
        tsb=metrics.tsb,
        ramp_rate=metrics.ramp_rate if metrics.ramp_rate is not None else 0.0,
        monotony=monotony_strain.monotony,
        strain=monotony_strain.strain,
    )


def project_load(
    current: LoadMetrics,
    workout_tss: float,
    settings: Optional[Settings] = None,
) -> LoadMetrics:
    """
    Load after completing a workout of ``workout_tss``.

    ATL rises (and TSB falls) by the workout's acute contribution,
    TSS / ATL time constant; weekly TSS rises by the full TSS.
    """
    settings = settings or get_settings()
    acute_contribution = workout_tss / settings.atl_time_constant

    return LoadMetrics(
        weekly_tss=current.weekly_tss + workout_tss,
        ctl=current.ctl,
        atl=current.atl + acute_contribution,
        tsb=current.tsb - acute_contribution,
        ramp_rate=current.ramp_rate,
    )


# =============================================================================
# Warning checks
# =============================================================================


def _check_ramp_rate(load: LoadMetrics, settings: Settings) -> Optional[LoadWarning]:
    if load.ramp_rate > settings.ramp_rate_danger:
        return LoadWarning(
            type=LoadWarningType.RAMP_RATE,
            severity=WarningSeverity.DANGER,
            message=(
                f"Ramp rate of {load.ramp_rate:.1f} CTL/week is far above the safe limit "
                f"- high injury risk"
            ),
            threshold=settings.ramp_rate_danger,
            actual=load.ramp_rate,
        )
    if load.ramp_rate > settings.ramp_rate_warning:
        return LoadWarning(
            type=LoadWarningType.RAMP_RATE,
            severity=WarningSeverity.WARNING,
            message=f"Ramp rate of {load.ramp_rate:.1f} CTL/week is above the recommended limit",
            threshold=settings.ramp_rate_warning,
            actual=load.ramp_rate,
        )
    return None


def _check_consecutive_hard(consecutive_hard_days: int, settings: Settings) -> Optional[LoadWarning]:
    if consecutive_hard_days >= settings.consecutive_hard_days_warning:
        return LoadWarning(
            type=LoadWarningType.CONSECUTIVE_HARD,
            severity=WarningSeverity.WARNING,
            message=f"{consecutive_hard_days} consecutive hard days already completed",
            threshold=float(settings.consecutive_hard_days_warning),
            actual=float(consecutive_hard_days),
        )
    return None


def _check_monotony(load: LoadMetrics, settings: Settings) -> Optional[LoadWarning]:
    if load.monotony is not None and load.monotony > settings.monotony_warning:
        return LoadWarning(
            type=LoadWarningType.MONOTONY,
            severity=WarningSeverity.WARNING,
            message=(
                f"Training monotony is {load.monotony:.1f} - repetitive training "
                f"increases illness and injury risk"
            ),
            threshold=settings.monotony_warning,
            actual=load.monotony,
        )
    return None


def _check_strain(load: LoadMetrics, settings: Settings) -> Optional[LoadWarning]:
    if load.strain is not None and load.strain > settings.strain_danger:
        return LoadWarning(
            type=LoadWarningType.STRAIN,
            severity=WarningSeverity.DANGER,
            message=f"Weekly training strain of {load.strain:.0f} is very high",
            threshold=settings.strain_danger,
            actual=load.strain,
        )
    return None


def _check_overreaching(
    load: LoadMetrics,
    workout_tss: float,
    settings: Settings,
) -> Optional[LoadWarning]:
    if load.tsb <= settings.overreaching_tsb and workout_tss >= settings.overreaching_min_tss:
        return LoadWarning(
            type=LoadWarningType.OVERREACHING,
            severity=WarningSeverity.DANGER,
            message=(
                f"Form is already {load.tsb:.1f} TSB - adding {workout_tss:.0f} TSS "
                f"risks non-functional overreaching"
            ),
            threshold=settings.overreaching_tsb,
            actual=load.tsb,
        )
    return None


# =============================================================================
# Risk and recommendations
# =============================================================================


def _assess_risk(
    warnings: List[LoadWarning],
    load: LoadMetrics,
    workout: ProposedWorkout,
    settings: Settings,
) -> RiskLevel:
    overreaching = any(
        w.type == LoadWarningType.OVERREACHING and w.severity == WarningSeverity.DANGER
        for w in warnings
    )
    if overreaching or (load.tsb < settings.critical_tsb and workout.intensity.is_hard):
        return RiskLevel.CRITICAL

    if any(w.severity == WarningSeverity.DANGER for w in warnings) or len(warnings) >= 3:
        return RiskLevel.HIGH

    if warnings:
        return RiskLevel.MODERATE

    return RiskLevel.LOW


def _build_recommendations(
    warnings: List[LoadWarning],
    risk: RiskLevel,
    settings: Settings,
) -> List[str]:
    fired = {w.type for w in warnings}
    recommendations = []

    if risk == RiskLevel.CRITICAL:
        recommendations.append(CRITICAL_LOAD_MESSAGE)

    if LoadWarningType.OVERREACHING in fired:
        recommendations.append(
            "Replace this session with rest or easy recovery until form recovers"
        )
    if LoadWarningType.RAMP_RATE in fired:
        recommendations.append(
            f"Slow the weekly volume increase to keep ramp rate under "
            f"{settings.ramp_rate_warning:.0f} CTL/week"
        )
    if LoadWarningType.MONOTONY in fired:
        recommendations.append("Vary training intensity - alternate hard and easy days")
    if LoadWarningType.STRAIN in fired:
        recommendations.append("Reduce overall weekly strain with an easy day or rest day")
    if LoadWarningType.CONSECUTIVE_HARD in fired:
        recommendations.append("Schedule an easy or recovery day after consecutive hard sessions")

    if not recommendations:
        recommendations.append(SAFE_LOAD_MESSAGE)

    return recommendations


# =============================================================================
# Core Function
# =============================================================================


def validate_training_load(
    workout: ProposedWorkout,
    history: TrainingHistory,
    consecutive_hard_days: int = 0,
    settings: Optional[Settings] = None,
) -> TrainingLoadValidation:
    """
    Evaluate a proposed workout against recent history for overtraining risk.

    Args:
        workout: The proposed workout
        history: Recent daily loads and the current fitness snapshot
        consecutive_hard_days: Hard days completed in a row before this workout
        settings: Thresholds (defaults to get_settings())

    Returns:
        TrainingLoadValidation. Risk "critical" marks the workout as not
        valid; every other level is allowed with caution.
    """
    settings = settings or get_settings()

    current = calculate_current_load(history, settings)
    workout_tss = estimate_workout_tss(workout)
    projected = project_load(current, workout_tss, settings)

    checks = [
        _check_ramp_rate(current, settings),
        _check_consecutive_hard(consecutive_hard_days, settings),
        _check_monotony(current, settings),
        _check_strain(current, settings),
        _check_overreaching(current, workout_tss, settings),
    ]
    warnings = [w for w in checks if w is not None]

    risk = _assess_risk(warnings, current, workout, settings)
    recommendations = _build_recommendations(warnings, risk, settings)

    logger.debug(
        f"Training load validation: {workout.intensity.value} {workout.duration_minutes:.0f}min "
        f"({workout_tss:.0f} TSS) -> risk={risk.value}, warnings={[w.type.value for w in warnings]}"
    )

    return TrainingLoadValidation(
        is_valid=risk != RiskLevel.CRITICAL,
        risk=risk,
        current_load=current,
        projected_load=projected,
        warnings=tuple(warnings),
        recommendations=tuple(recommendations),
    )
