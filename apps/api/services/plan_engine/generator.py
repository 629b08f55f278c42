"""
Plan Generator

Main orchestrator for deterministic plan generation.
Coordinates all components to produce a complete training plan:

    preferences -> PreferenceNormalizer -> PhaseScheduler / MileageCurve
                -> WorkoutDistributor -> WorkoutTypeSelector -> TrainingPlan

Usage:
    generator = PlanGenerator()
    plan = generator.generate(preferences)

    # With the normalizer's advisory messages
    result = generator.generate_with_suggestions(preferences)
    result.plan, result.suggestions

Generation never raises for a well-typed input and never validates; run
validate_plan() on the result before persisting it.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from .config import ConfigService, PlanRules
from .mileage_curve import MileageCurve
from .models import TrainingPlan, TrainingPreferences, TrainingPreferencesInput, WeeklyPlan
from .normalizer import EffectivePreferences, PreferenceNormalizer
from .phase_scheduler import PhaseScheduler, total_weeks_between
from .workout_distributor import WorkoutDistributor
from .workout_selector import WorkoutTypeSelector

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """A generated plan plus the normalizer's advisory suggestions."""
    plan: TrainingPlan
    suggestions: List[str] = field(default_factory=list)


class PlanGenerator:
    """
    Deterministic plan generator.

    Rules are resolved once at construction (from ConfigService unless
    given), so generate() is a pure function of its input.
    """

    def __init__(self, rules: Optional[PlanRules] = None):
        self.rules = rules or ConfigService.get_rules()
        self.normalizer = PreferenceNormalizer(self.rules)
        self.phase_scheduler = PhaseScheduler(self.rules)
        self.mileage_curve = MileageCurve(self.rules)
        self.distributor = WorkoutDistributor()
        self.selector = WorkoutTypeSelector(self.rules)

    def generate(self, preferences: TrainingPreferencesInput) -> TrainingPlan:
        """Generate a plan from the runner's preferences."""
        return self.generate_with_suggestions(preferences).plan

    def generate_with_suggestions(self, preferences: TrainingPreferencesInput) -> GenerationResult:
        effective = self.normalizer.normalize(preferences)
        total_weeks = total_weeks_between(preferences.start_date, preferences.end_date)

        logger.info(
            f"Generating plan: {total_weeks}w, level={effective.level.value if effective.level else 'unknown'}, "
            f"{effective.weekly_running_days}d/w, max={effective.max_weekly_mileage:g}"
        )

        weekly_plans = [
            self._build_week(week, total_weeks, effective, preferences)
            for week in range(1, total_weeks + 1)
        ]

        plan = TrainingPlan(
            goal=preferences.goal,
            goal_description=preferences.goal_description,
            start_date=preferences.start_date.isoformat(),
            end_date=preferences.end_date.isoformat(),
            weekly_mileage=effective.max_weekly_mileage,
            weekly_plans=weekly_plans,
            target_race=preferences.target_race,
            running_experience=preferences.running_experience,
            training_preferences=self._effective_training_preferences(preferences, effective),
            active=True,
        )
        return GenerationResult(plan=plan, suggestions=list(effective.suggestions))

    def _build_week(
        self,
        week: int,
        total_weeks: int,
        effective: EffectivePreferences,
        preferences: TrainingPreferencesInput,
    ) -> WeeklyPlan:
        week_start = preferences.start_date + timedelta(weeks=week - 1)
        phase = self.phase_scheduler.phase_for_week(week, total_weeks)
        mileage = self.mileage_curve.weekly_mileage(
            week, total_weeks, effective.starting_mileage, effective.max_weekly_mileage
        )

        slots = self.distributor.assign_days(week_start, effective, plan_end=preferences.end_date)
        workouts = [
            self.selector.classify(slot, mileage, effective, preferences.target_race)
            for slot in slots
        ]

        logger.debug(f"Week {week}: {phase.value}, {mileage} mi, {len(workouts)} workouts")

        return WeeklyPlan(
            week=week,
            phase=phase.value,
            total_mileage=mileage,
            workouts=workouts,
        )

    @staticmethod
    def _effective_training_preferences(
        preferences: TrainingPreferencesInput,
        effective: EffectivePreferences,
    ) -> TrainingPreferences:
        return TrainingPreferences(
            weekly_running_days=effective.weekly_running_days,
            max_weekly_mileage=effective.max_weekly_mileage,
            weekly_workouts=effective.weekly_workouts,
            preferred_long_run_day=effective.preferred_long_run_day,
            coaching_style=preferences.training_preferences.coaching_style,
        )
