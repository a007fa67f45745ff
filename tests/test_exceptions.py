"""Tests for engine exceptions."""

from training_load.exceptions import (
    ErrorCode,
    InputParseError,
    InvalidDateError,
    InvalidIntensityError,
    TrainingLoadError,
    ValidationError,
)


class TestExceptions:
    """Tests for exception codes and payloads."""

    def test_hierarchy(self):
        error = InvalidIntensityError("hard")

        assert isinstance(error, ValidationError)
        assert isinstance(error, TrainingLoadError)

    def test_to_dict(self):
        error = InvalidIntensityError("hard")

        data = error.to_dict()

        assert data["error"]["code"] == "INVALID_INTENSITY"
        assert data["error"]["details"] == {"value": "hard", "field": "intensity"}

    def test_date_error(self):
        error = InvalidDateError("2024-13-01", field="race_date")

        assert error.code == ErrorCode.INVALID_DATE
        assert error.details["field"] == "race_date"

    def test_parse_error_carries_errors(self):
        error = InputParseError("Invalid workout", errors=[{"loc": "sport", "msg": "bad"}])

        assert error.code == ErrorCode.INPUT_PARSE_ERROR
        assert error.details["errors"][0]["loc"] == "sport"

    def test_base_error_without_details(self):
        data = TrainingLoadError("boom").to_dict()

        assert data == {"error": {"code": "INTERNAL_ERROR", "message": "boom"}}
        assert repr(TrainingLoadError("boom")) == "TrainingLoadError(code=INTERNAL_ERROR, message='boom')"
