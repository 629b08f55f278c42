"""
Training Plans API Router

Thin HTTP boundary over the plan engine.

Endpoints for:
- Generating a plan from runner preferences
- Validating any plan (generated, external, or user-edited)
- Summarizing a plan's weekly mileage

Validator messages are returned verbatim as 400 responses.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from core.config import settings
from core.exceptions import to_api_exception
from services.plan_engine import (
    PlanGenerationStrategy,
    PlanValidationError,
    StrategyRegistry,
    TrainingPlanError,
    TrainingPreferencesInput,
    validate_plan,
)
from services.plan_engine.plan_utils import calculate_plan_metrics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/training-plans", tags=["Training Plans"])

_registry: Optional[StrategyRegistry] = None


def get_strategy_registry() -> StrategyRegistry:
    """Built on first use, so rules come from the configured PLAN_CONFIG_DIR."""
    global _registry
    if _registry is None:
        _registry = StrategyRegistry.default()
    return _registry


def get_plan_strategy(
    registry: StrategyRegistry = Depends(get_strategy_registry),
) -> PlanGenerationStrategy:
    try:
        return registry.get(settings.PLAN_DEFAULT_STRATEGY)
    except TrainingPlanError as e:
        raise to_api_exception(e)


# ============ Response Models ============

class GeneratePlanResponse(BaseModel):
    plan: Dict[str, Any]
    suggestions: List[str]
    strategy: str


class ValidatePlanResponse(BaseModel):
    valid: bool


class PlanMetricsResponse(BaseModel):
    totalWeeks: int
    totalMileage: float
    weeklyAverage: int


# ============ Endpoints ============

@router.post("/generate", response_model=GeneratePlanResponse)
def generate_plan(
    request: TrainingPreferencesInput,
    strategy: PlanGenerationStrategy = Depends(get_plan_strategy),
):
    """
    Generate and validate a plan.

    The caller's startDate is used as-is.
    """
    try:
        plan = strategy.generate(request)
        validate_plan(plan)
    except (PlanValidationError, TrainingPlanError) as e:
        raise to_api_exception(e)

    logger.info(
        f"Generated plan with {len(plan.weekly_plans)} weeks",
        extra={"extra_fields": {"strategy": strategy.name, "weeks": len(plan.weekly_plans)}},
    )

    return GeneratePlanResponse(
        plan=plan.to_dict(),
        suggestions=strategy.suggestions(request),
        strategy=strategy.name,
    )


@router.post("/validate", response_model=ValidatePlanResponse)
def validate_training_plan(plan: Dict[str, Any] = Body(...)):
    """Validate a camelCase plan object. 400 with the first failure otherwise."""
    try:
        validate_plan(plan)
    except PlanValidationError as e:
        raise to_api_exception(e)
    return ValidatePlanResponse(valid=True)


@router.post("/metrics", response_model=PlanMetricsResponse)
def plan_metrics(plan: Dict[str, Any] = Body(...)):
    """Totals and weekly average for a plan's weekly mileage."""
    try:
        validate_plan(plan)
    except PlanValidationError as e:
        raise to_api_exception(e)
    return PlanMetricsResponse(**calculate_plan_metrics(plan["weeklyPlans"]))
