"""
Parse external JSON payloads into the engine's input models.

All schema problems surface as InputParseError (or InvalidIntensityError for
strict intensity fields); the calculators only ever see well-typed input.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InputParseError, ValidationError
from .models.fitness import ActivityRecord, FitnessDataPoint, TrainingHistory
from .models.validation import ModificationContext
from .models.wellness import DailyCheckIn
from .models.workouts import LENIENT_INTENSITY, ProposedWorkout

ModelT = TypeVar("ModelT", bound=BaseModel)

_POINTS_ADAPTER = TypeAdapter(List[FitnessDataPoint])
_ACTIVITIES_ADAPTER = TypeAdapter(List[ActivityRecord])


def load_json(path: Union[str, Path]) -> Any:
    """Read a JSON document from disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputParseError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e
    except OSError as e:
        raise InputParseError(f"Cannot read {path}: {e.strerror}") from e


def _errors(exc: PydanticValidationError) -> list:
    return [
        {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]


def _parse_model(
    model: Type[ModelT],
    data: Any,
    what: str,
    context: Optional[Dict[str, Any]] = None,
) -> ModelT:
    try:
        return model.model_validate(data, context=context)
    except PydanticValidationError as e:
        raise InputParseError(f"Invalid {what}", errors=_errors(e)) from e


def parse_fitness_points(data: Any) -> List[FitnessDataPoint]:
    """
    Parse a fitness series, sorted ascending by date.

    Raises:
        InputParseError: Schema errors
        ValidationError: Two points on the same date
    """
    try:
        points = _POINTS_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        raise InputParseError("Invalid fitness data points", errors=_errors(e)) from e

    points.sort(key=lambda p: p.date)
    for previous, current in zip(points, points[1:]):
        if previous.date == current.date:
            raise ValidationError(
                f"Duplicate fitness point for {current.date.isoformat()}",
                field="date",
            )
    return points


def parse_activities(data: Any) -> List[ActivityRecord]:
    """Parse a flat list of activity records."""
    try:
        return _ACTIVITIES_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        raise InputParseError("Invalid activity records", errors=_errors(e)) from e


def parse_workout(data: Any, strict: bool = True) -> ProposedWorkout:
    """
    Parse a workout.

    User-entered workouts are strict. AI-proposed workouts pass
    ``strict=False`` so an unknown intensity defaults to moderate.
    """
    context = None if strict else {LENIENT_INTENSITY: True}
    return _parse_model(ProposedWorkout, data, "workout", context)


def parse_training_history(data: Any) -> TrainingHistory:
    """Parse recent daily loads plus the current fitness snapshot."""
    return _parse_model(TrainingHistory, data, "training history")


def parse_modification_context(data: Any) -> ModificationContext:
    """Parse readiness/fatigue/constraints/recent activities; None gives an empty context."""
    if data is None:
        return ModificationContext()
    return _parse_model(ModificationContext, data, "modification context")


def parse_check_in(data: Any) -> DailyCheckIn:
    """Parse a daily wellness check-in."""
    return _parse_model(DailyCheckIn, data, "check-in")
