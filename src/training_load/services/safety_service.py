"""
Safety checks that feed workout decisions.

Turns a daily check-in into a readiness traffic light, a fitness snapshot
into a fatigue level, and checks a workout against today's constraints.
The readiness and fatigue results are the inputs the modification
validator consumes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import logging

from ..models.constraints import (
    InjuryConstraint,
    TravelConstraint,
    active_injuries,
)
from ..models.fitness import FitnessMetrics
from ..models.wellness import DailyCheckIn, FatigueLevel, Readiness, TravelStatus
from ..models.workouts import ProposedWorkout, WorkoutSport


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

GREEN_READINESS_SCORE = 70
YELLOW_READINESS_SCORE = 40

EQUIPMENT_BY_SPORT: Dict[WorkoutSport, List[str]] = {
    WorkoutSport.SWIM: ["pool", "swim_goggles"],
    WorkoutSport.BIKE: ["bike", "bike_trainer"],
    WorkoutSport.RUN: ["running_shoes"],
    WorkoutSport.STRENGTH: ["gym", "weights"],
}


# =============================================================================
# Data Models
# =============================================================================


@dataclass(frozen=True)
class ReadinessAssessment:
    """Training readiness from wellness inputs."""
    readiness: Readiness
    score: int  # 0-100
    concerns: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "readiness": self.readiness.value,
            "score": self.score,
            "concerns": self.concerns,
            "recommendations": self.recommendations,
        }


@dataclass(frozen=True)
class FatigueAssessment:
    """Fatigue level from the current fitness snapshot."""
    level: FatigueLevel
    tsb: float
    concerns: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "level": self.level.value,
            "tsb": self.tsb,
            "concerns": self.concerns,
            "recommendations": self.recommendations,
        }


@dataclass(frozen=True)
class ConstraintCompatibility:
    """Whether a workout fits today's constraints."""
    compatible: bool
    issues: List[str] = field(default_factory=list)
    modifications: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "compatible": self.compatible,
            "issues": self.issues,
            "modifications": self.modifications,
        }


@dataclass
class _MetricAnalysis:
    penalty: int = 0
    concern: Optional[str] = None
    recommendation: Optional[str] = None


# =============================================================================
# Readiness
# =============================================================================


def _analyze_sleep_duration(hours: Optional[float]) -> _MetricAnalysis:
    if hours is None:
        return _MetricAnalysis()
    if hours < 5:
        return _MetricAnalysis(
            30,
            "Very low sleep duration (<5 hours)",
            "Consider rest day or very light activity only",
        )
    if hours < 6:
        return _MetricAnalysis(15, "Low sleep duration (<6 hours)", "Reduce workout intensity")
    if hours < 7:
        return _MetricAnalysis(5)
    return _MetricAnalysis()


def _analyze_sleep_quality(quality: Optional[float]) -> _MetricAnalysis:
    if quality is None:
        return _MetricAnalysis()
    if quality <= 4:
        return _MetricAnalysis(20, "Poor sleep quality", "Avoid high-intensity training")
    if quality <= 6:
        return _MetricAnalysis(10)
    return _MetricAnalysis()


def _analyze_energy(level: Optional[float]) -> _MetricAnalysis:
    if level is None:
        return _MetricAnalysis()
    if level <= 3:
        return _MetricAnalysis(25, "Very low energy", "Rest or very light activity recommended")
    if level <= 5:
        return _MetricAnalysis(10, "Below normal energy")
    return _MetricAnalysis()


def _analyze_stress(level: Optional[float]) -> _MetricAnalysis:
    if level is None:
        return _MetricAnalysis()
    if level >= 9:
        return _MetricAnalysis(
            25,
            "Extremely high stress",
            "Training may add stress - consider rest or light activity",
        )
    if level >= 7:
        return _MetricAnalysis(10, "Elevated stress level")
    return _MetricAnalysis()


def _analyze_soreness(level: Optional[float]) -> _MetricAnalysis:
    if level is None:
        return _MetricAnalysis()
    if level >= 8:
        return _MetricAnalysis(
            20,
            "High muscle soreness",
            "Avoid loading sore muscles - consider recovery day",
        )
    if level >= 6:
        return _MetricAnalysis(10, "Moderate soreness")
    return _MetricAnalysis()


def _analyze_resting_hr(current: Optional[float], baseline: Optional[float]) -> _MetricAnalysis:
    if current is None or baseline is None:
        return _MetricAnalysis()
    diff = current - baseline
    if diff > 10:
        return _MetricAnalysis(
            25,
            f"Resting HR significantly elevated (+{diff:.0f} bpm)",
            "Elevated HR may indicate illness, stress, or overtraining",
        )
    if diff > 5:
        return _MetricAnalysis(10, f"Resting HR elevated (+{diff:.0f} bpm)")
    return _MetricAnalysis()


def _analyze_hrv(current: Optional[float], baseline: Optional[float]) -> _MetricAnalysis:
    if current is None or not baseline:
        return _MetricAnalysis()
    drop_pct = (baseline - current) / baseline * 100
    if drop_pct > 20:
        return _MetricAnalysis(
            20,
            f"HRV significantly below baseline (-{drop_pct:.0f}%)",
            "Low HRV suggests recovery deficit",
        )
    if drop_pct > 10:
        return _MetricAnalysis(10, f"HRV below baseline (-{drop_pct:.0f}%)")
    return _MetricAnalysis()


def check_training_readiness(
    check_in: DailyCheckIn,
    baseline_rhr: Optional[float] = None,
    baseline_hrv: Optional[float] = None,
) -> ReadinessAssessment:
    """
    Check training readiness from a daily wellness check-in.

    Each metric subtracts a penalty from a score of 100:
        - >= 70: green
        - >= 40: yellow
        - below: red

    Args:
        check_in: Today's check-in
        baseline_rhr: Athlete's baseline resting heart rate
        baseline_hrv: Athlete's baseline HRV (ms)

    Returns:
        ReadinessAssessment with score (floored at 0), concerns and advice
    """
    analyses = [
        _analyze_sleep_duration(check_in.sleep_hours),
        _analyze_sleep_quality(check_in.sleep_quality),
        _analyze_energy(check_in.energy_level),
        _analyze_stress(check_in.stress_level),
        _analyze_soreness(check_in.overall_soreness),
        _analyze_resting_hr(check_in.resting_hr, baseline_rhr),
        _analyze_hrv(check_in.hrv_ms, baseline_hrv),
    ]

    score = 100 - sum(a.penalty for a in analyses)
    concerns = [a.concern for a in analyses if a.concern]
    recommendations = [a.recommendation for a in analyses if a.recommendation]

    if score >= GREEN_READINESS_SCORE:
        readiness = Readiness.GREEN
    elif score >= YELLOW_READINESS_SCORE:
        readiness = Readiness.YELLOW
        if not recommendations:
            recommendations.append("Consider reduced volume or intensity")
    else:
        readiness = Readiness.RED
        if not recommendations:
            recommendations.append("Rest day or very light recovery activity only")

    logger.debug(f"Readiness score {score} -> {readiness.value} ({len(concerns)} concerns)")

    return ReadinessAssessment(
        readiness=readiness,
        score=max(0, score),
        concerns=concerns,
        recommendations=recommendations,
    )


# =============================================================================
# Fatigue
# =============================================================================


def check_fatigue_level(metrics: FitnessMetrics) -> FatigueAssessment:
    """
    Check fatigue level from fitness metrics.

    TSB bands:
        - < -40: critical
        - < -25: high
        - < -10: moderate (normal productive training)
        - otherwise: low

    Ramp rate above 8 CTL/week is always a concern; above 5 it is noted when
    the athlete is not fresh.
    """
    concerns = []
    recommendations = []

    if metrics.tsb < -40:
        level = FatigueLevel.CRITICAL
        concerns.append("Extremely high fatigue (TSB < -40)")
        recommendations.append("Mandatory rest or very light recovery only")
        recommendations.append("Risk of overtraining syndrome if continued")
    elif metrics.tsb < -25:
        level = FatigueLevel.HIGH
        concerns.append("High fatigue (TSB < -25)")
        recommendations.append("Reduce training load")
        recommendations.append("Prioritize recovery activities")
    elif metrics.tsb < -10:
        level = FatigueLevel.MODERATE
        recommendations.append("Good training zone - maintain current approach")
    else:
        level = FatigueLevel.LOW
        if metrics.tsb > 10:
            concerns.append("Very fresh but may be losing fitness")
            recommendations.append("Can increase training load if desired")

    if metrics.ramp_rate is not None:
        if metrics.ramp_rate > 8:
            concerns.append(f"Ramp rate too high ({metrics.ramp_rate:.1f} TSS/week)")
            recommendations.append("Slow down fitness build to avoid injury")
        elif metrics.ramp_rate > 5 and level != FatigueLevel.LOW:
            concerns.append(f"Elevated ramp rate ({metrics.ramp_rate:.1f} TSS/week)")

    return FatigueAssessment(
        level=level,
        tsb=metrics.tsb,
        concerns=concerns,
        recommendations=recommendations,
    )


# =============================================================================
# Constraint compatibility
# =============================================================================


def _has_equipment(available: Sequence[str], needle: str) -> bool:
    return any(needle.lower() in item.lower() for item in available)


def check_constraint_compatibility(
    workout: ProposedWorkout,
    constraints: Sequence[Any] = (),
    check_in: Optional[DailyCheckIn] = None,
) -> ConstraintCompatibility:
    """
    Check if a workout is compatible with active constraints and today's check-in.

    Evaluates available time, equipment for the sport, active injury
    restrictions (sport, "high_intensity", "impact" for running) and travel
    access to pool or bike. Time limits come from the check-in only;
    availability constraints are informational here.
    """
    issues: List[str] = []
    modifications: List[str] = []

    available_equipment = list(check_in.equipment_access) if check_in else []
    available_time = check_in.available_time_minutes if check_in else None

    if available_time is not None and workout.duration_minutes > available_time:
        issues.append(
            f"Workout ({workout.duration_minutes:.0f} min) exceeds available time "
            f"({available_time:.0f} min)"
        )
        modifications.append(f"Reduce workout to {available_time:.0f} minutes")

    needed = EQUIPMENT_BY_SPORT.get(workout.sport, [])
    if needed and available_equipment:
        if not any(_has_equipment(available_equipment, eq) for eq in needed):
            issues.append(f"Required equipment for {workout.sport.value} may not be available")
            modifications.append("Consider alternative sport with available equipment")

    for injury in active_injuries(list(constraints)):
        _check_injury(workout, injury, issues, modifications)

    traveling = check_in is not None and check_in.travel_status == TravelStatus.TRAVELING
    travel_constraints = [
        c for c in constraints if isinstance(c, TravelConstraint) and c.is_active()
    ]
    if traveling or travel_constraints:
        travel_equipment = available_equipment + [
            item
            for c in travel_constraints
            for item in c.travel_equipment_available + c.travel_facilities_available
        ]
        if workout.sport == WorkoutSport.SWIM and not _has_equipment(travel_equipment, "pool"):
            issues.append("Pool access uncertain while traveling")
            modifications.append("Confirm pool access or choose alternative")
        if workout.sport == WorkoutSport.BIKE and not _has_equipment(travel_equipment, "bike"):
            issues.append("Bike access uncertain while traveling")
            modifications.append("Consider running or hotel gym workout")

    return ConstraintCompatibility(
        compatible=not issues,
        issues=issues,
        modifications=modifications,
    )


def _check_injury(
    workout: ProposedWorkout,
    injury: InjuryConstraint,
    issues: List[str],
    modifications: List[str],
) -> None:
    restrictions = {r.lower() for r in injury.injury_restrictions}
    sport = workout.sport.value

    if sport in restrictions:
        issues.append(f"{sport} is restricted due to {injury.title}")
        modifications.append(f"Avoid {sport} until injury resolves")

    if "high_intensity" in restrictions and workout.intensity.is_hard:
        issues.append(f"High intensity restricted due to {injury.title}")
        modifications.append("Reduce intensity to moderate or below")

    if "impact" in restrictions and workout.sport == WorkoutSport.RUN:
        issues.append(f"Running (impact) restricted due to {injury.title}")
        modifications.append("Consider swimming or cycling instead")
