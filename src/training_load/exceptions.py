"""
Custom exceptions for the training load engine.

The calculators themselves never raise for "not enough data" (they return
None); these exceptions cover malformed input rejected at the boundary.
Each exception includes:
- A descriptive message
- An error code
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error payloads."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Input errors
    INVALID_INTENSITY = "INVALID_INTENSITY"
    INVALID_METRIC = "INVALID_METRIC"
    INVALID_DATE = "INVALID_DATE"
    INPUT_PARSE_ERROR = "INPUT_PARSE_ERROR"


class TrainingLoadError(Exception):
    """
    Base exception for all training load engine errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for error responses."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(TrainingLoadError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


class InvalidIntensityError(ValidationError):
    """Raised when a workout intensity string is not recognised."""

    def __init__(self, value: Any, field: Optional[str] = "intensity") -> None:
        super().__init__(
            message=f"Unknown workout intensity: {value!r}",
            field=field,
            details={"value": value},
        )
        self.code = ErrorCode.INVALID_INTENSITY


class InvalidMetricError(ValidationError):
    """Raised when a numeric training metric cannot be classified (e.g. NaN)."""

    def __init__(self, metric: str, value: Any) -> None:
        super().__init__(
            message=f"Invalid value for {metric}: {value!r}",
            field=metric,
            details={"value": repr(value)},
        )
        self.code = ErrorCode.INVALID_METRIC


class InvalidDateError(ValidationError):
    """Raised when a calendar date cannot be parsed."""

    def __init__(self, value: Any, field: Optional[str] = None) -> None:
        super().__init__(
            message=f"Invalid calendar date (expected YYYY-MM-DD): {value!r}",
            field=field,
            details={"value": repr(value)},
        )
        self.code = ErrorCode.INVALID_DATE


class InputParseError(ValidationError):
    """Raised when an external JSON payload does not match the expected schema."""

    def __init__(
        self,
        message: str,
        errors: Optional[list] = None,
    ) -> None:
        super().__init__(message=message, details={"errors": errors or []})
        self.code = ErrorCode.INPUT_PARSE_ERROR
