"""
Plan Generation Strategies

Every way of producing a plan sits behind PlanGenerationStrategy and returns
the same TrainingPlan shape, so validate_plan() treats them all alike.

- DeterministicPlanStrategy: the rule-based PlanGenerator
- ExternalPlanStrategy: wraps an injected provider callable (e.g. an AI
  client living outside this package) that returns {"weeklyPlans": [...]}

Usage:
    registry = StrategyRegistry.default()
    strategy = registry.get("deterministic")
    plan = strategy.generate(preferences)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import ValidationError

from .errors import TrainingPlanError
from .generator import PlanGenerator
from .models import TrainingPlan, TrainingPreferencesInput, WeeklyPlan

logger = logging.getLogger(__name__)

PlanProvider = Callable[[Dict[str, Any]], Mapping[str, Any]]


class PlanGenerationStrategy(ABC):
    """Contract shared by all plan generators."""

    name: str = ""

    @abstractmethod
    def generate(self, preferences: TrainingPreferencesInput) -> TrainingPlan:
        """Produce a plan for the runner's preferences."""

    def suggestions(self, preferences: TrainingPreferencesInput) -> List[str]:
        """Advisory messages for the caller. None by default."""
        return []


class DeterministicPlanStrategy(PlanGenerationStrategy):
    name = "deterministic"

    def __init__(self, generator: Optional[PlanGenerator] = None):
        self.generator = generator or PlanGenerator()

    def generate(self, preferences: TrainingPreferencesInput) -> TrainingPlan:
        return self.generator.generate(preferences)

    def suggestions(self, preferences: TrainingPreferencesInput) -> List[str]:
        return list(self.generator.normalizer.normalize(preferences).suggestions)


class ExternalPlanStrategy(PlanGenerationStrategy):
    """
    Adapter for an externally generated plan.

    The provider receives the preferences as a camelCase dict and returns
    the weekly plans; everything else on the plan comes from the request.
    Its output is NOT checked here beyond shape; run validate_plan().
    """

    name = "external"

    def __init__(self, provider: PlanProvider, name: Optional[str] = None):
        self.provider = provider
        if name:
            self.name = name

    def generate(self, preferences: TrainingPreferencesInput) -> TrainingPlan:
        payload = preferences.model_dump(by_alias=True, mode="json")

        try:
            response = self.provider(payload)
        except Exception as e:
            logger.error(f"Plan provider '{self.name}' failed: {e}", exc_info=True)
            raise TrainingPlanError(
                "AI_SERVICE_ERROR", "Failed to generate training plan", details=str(e)
            ) from e

        if not isinstance(response, Mapping) or not response.get("weeklyPlans"):
            logger.error(f"Invalid response from plan provider '{self.name}'")
            raise TrainingPlanError("GENERATION_FAILED", "Invalid plan generated", details=response)

        try:
            weekly_plans = [
                WeeklyPlan.model_validate({
                    **week,
                    "workouts": [{**workout, "completed": False} for workout in week.get("workouts") or []],
                })
                for week in response["weeklyPlans"]
            ]
        except (ValidationError, TypeError, AttributeError) as e:
            raise TrainingPlanError(
                "VALIDATION_ERROR", "Plan provider returned malformed weekly plans", details=str(e)
            ) from e

        return TrainingPlan(
            goal=preferences.goal,
            goal_description=preferences.goal_description,
            start_date=preferences.start_date.isoformat(),
            end_date=preferences.end_date.isoformat(),
            weekly_mileage=preferences.training_preferences.max_weekly_mileage,
            weekly_plans=weekly_plans,
            target_race=preferences.target_race,
            running_experience=preferences.running_experience,
            training_preferences=preferences.training_preferences,
            active=True,
        )


class StrategyRegistry:
    """Name -> strategy lookup."""

    def __init__(self):
        self._strategies: Dict[str, PlanGenerationStrategy] = {}

    @classmethod
    def default(cls) -> "StrategyRegistry":
        registry = cls()
        registry.register(DeterministicPlanStrategy())
        return registry

    def register(self, strategy: PlanGenerationStrategy):
        if not strategy.name:
            raise ValueError("Strategy must have a name")
        self._strategies[strategy.name] = strategy
        logger.debug(f"Registered plan strategy: {strategy.name}")

    def get(self, name: str) -> PlanGenerationStrategy:
        try:
            return self._strategies[name]
        except KeyError:
            raise TrainingPlanError(
                "INVALID_PARAMETERS", f"Unknown plan generation strategy: {name}"
            ) from None

    def names(self) -> List[str]:
        return sorted(self._strategies)
