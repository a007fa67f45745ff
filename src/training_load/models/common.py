"""Shared helpers for boundary models."""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..exceptions import InvalidDateError


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class InputModel(BaseModel):
    """Immutable input record accepting camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def parse_calendar_date(value: Any, field: Optional[str] = None) -> date:
    """
    Parse a calendar date from a date, datetime or YYYY-MM-DD string.

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            raise InvalidDateError(value, field=field) from None
    raise InvalidDateError(value, field=field)
