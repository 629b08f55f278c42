"""
Plan Validator

Structural checks run on any plan before it is accepted, whether it came
from the deterministic generator, an external strategy, or a user edit.

Validation is fail-fast: the first violated rule raises PlanValidationError
with a user-facing message, and later rules are not evaluated. Rules run in
this order:

1. Goal present
2. At least one week
3. Start/end dates present
4. Start/end dates parse
5. End after start, compared as instants when times are given
6. Every week has a non-empty workouts list
7. Every workout has a date and description, the date parses and is not
   before the plan start, and the distance is positive

Week and workout numbers in messages are 1-based positions.
"""

import logging
from numbers import Real
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from .errors import PlanValidationError
from .plan_utils import parse_date, parse_datetime

logger = logging.getLogger(__name__)


def _get(obj: Any, key: str) -> Any:
    if not isinstance(obj, Mapping):
        return None
    return obj.get(key)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_positive(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


def _fail(message: str):
    logger.info(f"Plan validation failed: {message}")
    raise PlanValidationError(message)


def validate_plan(plan: Union[BaseModel, Mapping[str, Any]]) -> None:
    """
    Validate a plan, raising on the first violated rule.

    Args:
        plan: A TrainingPlan model or a camelCase mapping

    Raises:
        PlanValidationError: with the exact user-facing message
    """
    data = plan.model_dump(by_alias=True) if isinstance(plan, BaseModel) else plan

    if _is_blank(_get(data, "goal")):
        _fail("Training goal is required and cannot be empty")

    weekly_plans = _get(data, "weeklyPlans")
    if not isinstance(weekly_plans, list) or len(weekly_plans) == 0:
        _fail("Weekly plans are required and must contain at least one week")

    start_value = _get(data, "startDate")
    end_value = _get(data, "endDate")
    if not start_value or not end_value:
        _fail("Start date and end date are required")

    start_at = parse_datetime(start_value)
    if start_at is None:
        _fail(f"Invalid start date format: {start_value}")

    end_at = parse_datetime(end_value)
    if end_at is None:
        _fail(f"Invalid end date format: {end_value}")

    # Compared as instants, not calendar days
    if end_at <= start_at:
        _fail("End date must be after start date")
    start_date = start_at.date()

    for week_num, week in enumerate(weekly_plans, start=1):
        workouts = _get(week, "workouts")
        if not isinstance(workouts, list):
            _fail(f"Week {week_num} has invalid workouts data")
        if len(workouts) == 0:
            _fail(f"Week {week_num} must have at least one workout")

        for workout_num, workout in enumerate(workouts, start=1):
            day = _get(workout, "day")
            if not day:
                _fail(f"Workout {workout_num} in week {week_num} is missing a date")

            if _is_blank(_get(workout, "description")):
                _fail(f"Workout {workout_num} in week {week_num} is missing a description")

            workout_date = parse_date(day)
            if workout_date is None:
                _fail(f"Invalid date format for workout {workout_num} in week {week_num}: {day}")

            if workout_date < start_date:
                _fail("Workout date cannot be before plan start date")

            if not _is_positive(_get(workout, "distance")):
                _fail("Workout distance must be positive")


def is_plan_valid(plan: Union[BaseModel, Mapping[str, Any]]) -> Tuple[bool, Optional[str]]:
    """Result-style wrapper: (True, None) or (False, first failure message)."""
    try:
        validate_plan(plan)
    except PlanValidationError as e:
        return False, e.message
    return True, None
