"""
Workout modification validation.

Evaluates a user-edited workout against the AI-proposed original: intensity,
duration and load jumps, interaction with readiness/fatigue and active
injuries, and back-to-back hard days. Proposes a capped fallback when the
edit is high risk.
"""

import logging
from typing import List, Optional

from ..config import Settings, get_settings
from ..metrics.load import estimate_workout_tss
from ..models.constraints import InjurySeverity, active_injuries
from ..models.validation import (
    ModificationContext,
    ModificationWarning,
    ModificationWarningType,
    RiskLevel,
    WarningSeverity,
    WorkoutModificationValidation,
)
from ..models.wellness import FatigueLevel, Readiness
from ..models.workouts import HistoryActivity, ProposedWorkout, WorkoutIntensity


logger = logging.getLogger(__name__)

HIGH_INTENSITY_RESTRICTION = "high_intensity"
SAFE_MODIFICATION_MESSAGE = "Modification is within safe limits"


def _percent_increase(original: float, modified: float) -> Optional[float]:
    """Percent change over the original; None when the original is zero."""
    if original <= 0:
        return None
    return (modified - original) / original * 100


# =============================================================================
# Rules
# =============================================================================


def _check_intensity_jump(
    original: ProposedWorkout,
    modified: ProposedWorkout,
) -> Optional[ModificationWarning]:
    delta = modified.intensity.order - original.intensity.order
    if delta >= 3:
        severity = WarningSeverity.DANGER
    elif delta == 2:
        severity = WarningSeverity.WARNING
    else:
        return None

    return ModificationWarning(
        type=ModificationWarningType.INTENSITY_JUMP,
        severity=severity,
        message=(
            f"Intensity raised {delta} levels, from {original.intensity.value} "
            f"to {modified.intensity.value}"
        ),
    )


def _check_increase(
    warning_type: ModificationWarningType,
    label: str,
    percent: Optional[float],
    settings: Settings,
) -> Optional[ModificationWarning]:
    if percent is None or percent <= settings.modification_warning_pct:
        return None

    if percent > settings.modification_danger_pct:
        severity = WarningSeverity.DANGER
    else:
        severity = WarningSeverity.WARNING

    return ModificationWarning(
        type=warning_type,
        severity=severity,
        message=f"{label} increased by {percent:.0f}% over the planned workout",
    )


def _check_readiness(
    readiness: Optional[Readiness],
    intensity_increased: bool,
) -> Optional[ModificationWarning]:
    if not intensity_increased or readiness is None:
        return None

    if readiness == Readiness.RED:
        return ModificationWarning(
            type=ModificationWarningType.FATIGUE_RISK,
            severity=WarningSeverity.DANGER,
            message="Readiness is red - raising intensity today risks injury or illness",
        )
    if readiness == Readiness.YELLOW:
        return ModificationWarning(
            type=ModificationWarningType.FATIGUE_RISK,
            severity=WarningSeverity.WARNING,
            message="Readiness is yellow - a harder session may not be absorbed well",
        )
    return None


def _check_fatigue(
    fatigue: Optional[FatigueLevel],
    tss_increased: bool,
    tss_percent: Optional[float],
    settings: Settings,
) -> Optional[ModificationWarning]:
    if not tss_increased or fatigue is None:
        return None

    if fatigue == FatigueLevel.CRITICAL:
        return ModificationWarning(
            type=ModificationWarningType.FATIGUE_RISK,
            severity=WarningSeverity.DANGER,
            message="Fatigue is critical - adding training load is unsafe",
        )
    if (
        fatigue == FatigueLevel.HIGH
        and tss_percent is not None
        and tss_percent > settings.high_fatigue_tss_increase_pct
    ):
        return ModificationWarning(
            type=ModificationWarningType.FATIGUE_RISK,
            severity=WarningSeverity.WARNING,
            message=f"Fatigue is high - load increase of {tss_percent:.0f}% adds to accumulated fatigue",
        )
    return None


def _check_constraints(
    original: ProposedWorkout,
    modified: ProposedWorkout,
    context: ModificationContext,
) -> Optional[ModificationWarning]:
    if modified.sport == original.sport:
        return None

    sport = modified.sport.value
    violated = []
    for injury in active_injuries(context.constraints):
        restrictions = {r.lower() for r in injury.injury_restrictions}
        if sport in restrictions or (
            HIGH_INTENSITY_RESTRICTION in restrictions and modified.intensity.is_hard
        ):
            violated.append(injury)

    if not violated:
        return None

    severe = any(i.injury_severity == InjurySeverity.SEVERE for i in violated)
    titles = ", ".join(i.title for i in violated)
    return ModificationWarning(
        type=ModificationWarningType.CONSTRAINT_VIOLATION,
        severity=WarningSeverity.DANGER if severe else WarningSeverity.WARNING,
        message=f"Switching to {sport} conflicts with injury restrictions ({titles})",
    )


def _check_consecutive_hard(
    original: ProposedWorkout,
    modified: ProposedWorkout,
    recent_activities: List[HistoryActivity],
) -> Optional[ModificationWarning]:
    # Unchanged workouts and edits that lower intensity are exempt
    if modified == original or modified.intensity < original.intensity:
        return None
    if not modified.intensity.is_hard:
        return None

    last_two = sorted(recent_activities, key=lambda a: a.date)[-2:]
    if len(last_two) < 2 or not all(a.intensity.is_hard for a in last_two):
        return None

    return ModificationWarning(
        type=ModificationWarningType.CONSECUTIVE_HARD_DAYS,
        severity=WarningSeverity.DANGER,
        message="Third hard day in a row - the last two sessions were threshold or harder",
    )


# =============================================================================
# Risk, recommendations and fallback
# =============================================================================


def _assess_risk(warnings: List[ModificationWarning]) -> RiskLevel:
    danger_count = sum(1 for w in warnings if w.severity == WarningSeverity.DANGER)

    if danger_count >= 2:
        return RiskLevel.CRITICAL
    if danger_count == 1 or len(warnings) >= 2:
        return RiskLevel.HIGH
    if warnings:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def suggest_safe_modification(
    original: ProposedWorkout,
    modified: ProposedWorkout,
    revert_sport: bool = False,
    settings: Optional[Settings] = None,
) -> ProposedWorkout:
    """
    Cap a risky modification.

    Intensity is capped at one level above the original and duration at
    ``suggested_duration_cap`` times the original; neither cap raises the
    modification. TSS is re-estimated for the capped workout.
    """
    settings = settings or get_settings()

    intensity_cap = WorkoutIntensity.from_order(original.intensity.order + 1)
    intensity = min(modified.intensity, intensity_cap)
    duration = min(
        modified.duration_minutes,
        original.duration_minutes * settings.suggested_duration_cap,
    )

    suggestion = ProposedWorkout(
        sport=original.sport if revert_sport else modified.sport,
        duration_minutes=duration,
        intensity=intensity,
    )
    return suggestion.model_copy(
        update={"estimated_tss": round(estimate_workout_tss(suggestion), 1)}
    )


_RECOMMENDATIONS = {
    ModificationWarningType.INTENSITY_JUMP: (
        "Limit the change to one intensity level above the planned session"
    ),
    ModificationWarningType.LOAD_INCREASE: (
        "Keep training load within 50% of the planned session"
    ),
    ModificationWarningType.DURATION_INCREASE: (
        "Extend duration gradually rather than in a single session"
    ),
    ModificationWarningType.FATIGUE_RISK: (
        "Current readiness and fatigue favour the planned workout or an easier one"
    ),
    ModificationWarningType.CONSTRAINT_VIOLATION: (
        "Respect active injury restrictions and keep to the planned sport"
    ),
    ModificationWarningType.CONSECUTIVE_HARD_DAYS: (
        "Keep today easy to break up consecutive hard days"
    ),
}


def _build_recommendations(
    warnings: List[ModificationWarning],
    risk: RiskLevel,
) -> List[str]:
    recommendations = []
    for warning in warnings:
        text = _RECOMMENDATIONS[warning.type]
        if text not in recommendations:
            recommendations.append(text)

    if risk in (RiskLevel.HIGH, RiskLevel.CRITICAL):
        recommendations.append("Consider the suggested safer alternative")

    if not recommendations:
        recommendations.append(SAFE_MODIFICATION_MESSAGE)

    return recommendations


# =============================================================================
# Core Function
# =============================================================================


def validate_modification(
    original: ProposedWorkout,
    modified: ProposedWorkout,
    context: Optional[ModificationContext] = None,
    settings: Optional[Settings] = None,
) -> WorkoutModificationValidation:
    """
    Validate a user modification of a proposed workout.

    Args:
        original: Workout as proposed
        modified: Workout as edited by the athlete
        context: Readiness, fatigue, active constraints and recent activities
        settings: Thresholds (defaults to get_settings())

    Returns:
        WorkoutModificationValidation. Risk "critical" (two or more danger
        warnings) marks the modification as not valid; a suggested
        modification is attached for high and critical risk.
    """
    settings = settings or get_settings()
    context = context or ModificationContext()

    original_tss = estimate_workout_tss(original)
    modified_tss = estimate_workout_tss(modified)
    tss_percent = _percent_increase(original_tss, modified_tss)
    duration_percent = _percent_increase(original.duration_minutes, modified.duration_minutes)

    checks = [
        _check_intensity_jump(original, modified),
        _check_increase(ModificationWarningType.LOAD_INCREASE, "Training load", tss_percent, settings),
        _check_increase(ModificationWarningType.DURATION_INCREASE, "Duration", duration_percent, settings),
        _check_readiness(context.readiness, modified.intensity > original.intensity),
        _check_fatigue(context.fatigue, modified_tss > original_tss, tss_percent, settings),
        _check_constraints(original, modified, context),
        _check_consecutive_hard(original, modified, context.recent_activities),
    ]
    warnings = [w for w in checks if w is not None]

    risk = _assess_risk(warnings)

    suggestion = None
    if risk in (RiskLevel.HIGH, RiskLevel.CRITICAL):
        revert_sport = any(
            w.type == ModificationWarningType.CONSTRAINT_VIOLATION for w in warnings
        )
        suggestion = suggest_safe_modification(original, modified, revert_sport, settings)

    logger.debug(
        f"Modification {original.intensity.value}/{original.duration_minutes:.0f}min -> "
        f"{modified.intensity.value}/{modified.duration_minutes:.0f}min: risk={risk.value}, "
        f"warnings={[w.type.value for w in warnings]}"
    )

    return WorkoutModificationValidation(
        is_valid=risk != RiskLevel.CRITICAL,
        risk=risk,
        warnings=tuple(warnings),
        recommendations=tuple(_build_recommendations(warnings, risk)),
        suggested_modification=suggestion,
    )
