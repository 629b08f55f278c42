"""
Plan engine errors.

PlanValidationError carries the exact, user-facing message of the first
violated plan rule. TrainingPlanError covers generation failures and maps
each error code to an HTTP status for the API layer.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


class PlanValidationError(ValueError):
    """A plan failed structural validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ErrorMetadata:
    http_status: int
    user_message: str


TRAINING_PLAN_ERROR_METADATA: Dict[str, ErrorMetadata] = {
    "INVALID_PARAMETERS": ErrorMetadata(400, "Invalid training plan parameters provided"),
    "AI_SERVICE_ERROR": ErrorMetadata(503, "Unable to generate training plan at this time"),
    "GENERATION_FAILED": ErrorMetadata(500, "Failed to generate training plan"),
    "VALIDATION_ERROR": ErrorMetadata(400, "Training plan validation failed"),
    "STORAGE_ERROR": ErrorMetadata(500, "Failed to save training plan"),
    "PLAN_NOT_FOUND": ErrorMetadata(404, "Training plan not found"),
    "NOT_AUTHORIZED": ErrorMetadata(403, "Not authorized to access this training plan"),
}


class TrainingPlanError(Exception):
    """
    Error raised by a plan generation strategy.

    Args:
        code: One of TRAINING_PLAN_ERROR_METADATA's keys
        message: Internal message (logged)
        details: Optional context (original exception, payload, ...)
    """

    def __init__(self, code: str, message: str, details: Optional[Any] = None):
        metadata = TRAINING_PLAN_ERROR_METADATA.get(code)
        if metadata is None:
            raise ValueError(f"Invalid training plan error code: {code}")

        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details
        self.http_status = metadata.http_status
        self.user_message = metadata.user_message
