"""Workout intensity vocabulary and workout input models."""

import logging
from datetime import date as date_type
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import Field, ValidationInfo, field_validator

from ..exceptions import InvalidIntensityError
from .common import InputModel


logger = logging.getLogger(__name__)


class WorkoutSport(str, Enum):
    """Sports a workout can be prescribed in."""
    SWIM = "swim"
    BIKE = "bike"
    RUN = "run"
    STRENGTH = "strength"


class WorkoutIntensity(str, Enum):
    """
    Workout intensity, totally ordered from recovery to sprint.

    Comparisons between members use the training order, not the string value.
    """
    RECOVERY = "recovery"
    EASY = "easy"
    MODERATE = "moderate"
    TEMPO = "tempo"
    THRESHOLD = "threshold"
    VO2MAX = "vo2max"
    SPRINT = "sprint"

    @property
    def order(self) -> int:
        return INTENSITY_ORDER[self]

    @property
    def is_hard(self) -> bool:
        """Threshold or harder."""
        return self.order >= INTENSITY_ORDER[WorkoutIntensity.THRESHOLD]

    @classmethod
    def from_order(cls, order: int) -> "WorkoutIntensity":
        """Get the intensity at a given order, clamped to the valid range."""
        clamped = max(0, min(order, len(_BY_ORDER) - 1))
        return _BY_ORDER[clamped]

    @classmethod
    def parse(
        cls,
        value: Union[str, "WorkoutIntensity"],
        strict: bool = True,
    ) -> "WorkoutIntensity":
        """
        Parse an intensity from external input.

        Args:
            value: Intensity name (case-insensitive) or enum member
            strict: Raise on unknown values; when False, fall back to moderate

        Raises:
            InvalidIntensityError: Unknown value in strict mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        if strict:
            raise InvalidIntensityError(value)
        logger.warning(f"Unknown workout intensity {value!r}, defaulting to moderate")
        return cls.MODERATE

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, WorkoutIntensity):
            return self.order < other.order
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, WorkoutIntensity):
            return self.order <= other.order
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, WorkoutIntensity):
            return self.order > other.order
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, WorkoutIntensity):
            return self.order >= other.order
        return NotImplemented


INTENSITY_ORDER: Dict[WorkoutIntensity, int] = {
    WorkoutIntensity.RECOVERY: 0,
    WorkoutIntensity.EASY: 1,
    WorkoutIntensity.MODERATE: 2,
    WorkoutIntensity.TEMPO: 3,
    WorkoutIntensity.THRESHOLD: 4,
    WorkoutIntensity.VO2MAX: 5,
    WorkoutIntensity.SPRINT: 6,
}

_BY_ORDER = sorted(INTENSITY_ORDER, key=INTENSITY_ORDER.get)

# Validation context key: parse ProposedWorkout intensity leniently
LENIENT_INTENSITY = "lenient_intensity"


class ProposedWorkout(InputModel):
    """
    A workout under evaluation (AI-proposed or user-modified).

    Intensity is strict by default. Validating with
    ``context={LENIENT_INTENSITY: True}`` maps unknown intensities to
    moderate, the policy for AI-proposed workouts.
    """

    sport: WorkoutSport
    duration_minutes: float = Field(..., ge=0, description="Planned duration in minutes")
    intensity: WorkoutIntensity
    estimated_tss: Optional[float] = Field(None, ge=0, alias="estimatedTSS")

    @field_validator("intensity", mode="before")
    @classmethod
    def _parse_intensity(cls, value: Any, info: ValidationInfo) -> WorkoutIntensity:
        lenient = bool((info.context or {}).get(LENIENT_INTENSITY))
        return WorkoutIntensity.parse(value, strict=not lenient)

    @field_validator("sport", mode="before")
    @classmethod
    def _normalize_sport(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class HistoryActivity(InputModel):
    """
    One day of aggregated training in the validation history.

    Intensities arrive from upstream sync and coaching payloads, so unknown
    values degrade to moderate instead of failing the whole history.
    """

    date: date_type
    tss: float = Field(0.0, ge=0)
    intensity: WorkoutIntensity = WorkoutIntensity.MODERATE

    @field_validator("intensity", mode="before")
    @classmethod
    def _parse_intensity(cls, value: Any) -> WorkoutIntensity:
        return WorkoutIntensity.parse(value, strict=False)
