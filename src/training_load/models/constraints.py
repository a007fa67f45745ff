"""
Athlete constraint variants.

Constraints are a tagged union keyed by ``constraint_type``: each variant only
carries the fields relevant to it, and payloads are routed to the right model
by the tag.
"""

from datetime import date as date_type
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag

from .common import InputModel


class ConstraintStatus(str, Enum):
    ACTIVE = "active"
    RESOLVED = "resolved"


class InjurySeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class _BaseConstraint(InputModel):
    id: Optional[str] = None
    title: str
    description: Optional[str] = None
    start_date: Optional[date_type] = None
    end_date: Optional[date_type] = None
    status: ConstraintStatus = ConstraintStatus.ACTIVE

    def is_active(self, on: Optional[date_type] = None) -> bool:
        """Active status, and within the date range when a day is given."""
        if self.status != ConstraintStatus.ACTIVE:
            return False
        if on is None:
            return True
        if self.start_date is not None and on < self.start_date:
            return False
        if self.end_date is not None and on > self.end_date:
            return False
        return True


class InjuryConstraint(_BaseConstraint):
    """Injury limiting sports or intensities (e.g. restrictions ["run", "high_intensity"])."""

    constraint_type: Literal["injury"] = "injury"
    injury_body_part: Optional[str] = None
    injury_severity: InjurySeverity = InjurySeverity.MODERATE
    injury_restrictions: List[str] = Field(default_factory=list)


class TravelConstraint(_BaseConstraint):
    """Travel period with limited equipment or facilities."""

    constraint_type: Literal["travel"] = "travel"
    travel_destination: Optional[str] = None
    travel_equipment_available: List[str] = Field(default_factory=list)
    travel_facilities_available: List[str] = Field(default_factory=list)


class AvailabilityConstraint(_BaseConstraint):
    """Reduced training time."""

    constraint_type: Literal["availability"] = "availability"
    availability_hours_per_week: Optional[float] = Field(None, ge=0)
    availability_days_available: List[str] = Field(default_factory=list)


def _constraint_tag(value: Any) -> Optional[str]:
    # Payloads may use either key style; parsed models carry the attribute
    if isinstance(value, dict):
        return value.get("constraintType", value.get("constraint_type"))
    return getattr(value, "constraint_type", None)


Constraint = Annotated[
    Union[
        Annotated[InjuryConstraint, Tag("injury")],
        Annotated[TravelConstraint, Tag("travel")],
        Annotated[AvailabilityConstraint, Tag("availability")],
    ],
    Discriminator(_constraint_tag),
]


def active_injuries(
    constraints: List[Union[InjuryConstraint, TravelConstraint, AvailabilityConstraint]],
    on: Optional[date_type] = None,
) -> List[InjuryConstraint]:
    """Active injury constraints, in input order."""
    return [
        c for c in constraints
        if isinstance(c, InjuryConstraint) and c.is_active(on)
    ]
