"""
Custom exception classes and error handling.

Provides consistent error responses across the API.
"""
from fastapi import HTTPException, status
from typing import Optional, Dict, Any

from services.plan_engine.errors import PlanValidationError, TrainingPlanError


class APIException(HTTPException):
    """Base API exception with consistent structure."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class PlanValidationFailed(APIException):
    """Plan rejected by the validator. The message is shown to the user verbatim."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="VALIDATION_ERROR"
        )


class PlanGenerationFailed(APIException):
    """A generation strategy failed."""

    def __init__(self, status_code: int, detail: str, error_code: str):
        super().__init__(status_code=status_code, detail=detail, error_code=error_code)


def to_api_exception(exc: Exception) -> APIException:
    """Map plan engine errors to API exceptions."""
    if isinstance(exc, PlanValidationError):
        return PlanValidationFailed(exc.message)
    if isinstance(exc, TrainingPlanError):
        return PlanGenerationFailed(exc.http_status, exc.user_message, exc.code)
    raise TypeError(f"No API mapping for {type(exc).__name__}")
