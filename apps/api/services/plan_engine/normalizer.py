"""
Preference Normalizer

Derives the effective preferences the generator works from:
- Experience-based caps for beginners
- Starting mileage seed for the mileage curve
- Advisory suggestions when the runner asked for more than we allow

The caller's input is never modified; a new EffectivePreferences is returned.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .config import DEFAULT_RULES, PlanRules
from .constants import ExperienceLevel, Weekday
from .models import TrainingPreferencesInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectivePreferences:
    """Clamped preferences plus derived values."""
    level: Optional[ExperienceLevel]
    weekly_running_days: int
    max_weekly_mileage: float
    weekly_workouts: int
    preferred_long_run_day: Weekday
    starting_mileage: float
    suggestions: List[str] = field(default_factory=list)

    @property
    def is_beginner(self) -> bool:
        return self.level == ExperienceLevel.BEGINNER


def coerce_level(level: Union[ExperienceLevel, str, None]) -> Optional[ExperienceLevel]:
    """Map a raw level to the enum, or None when unrecognized."""
    if isinstance(level, ExperienceLevel):
        return level
    try:
        return ExperienceLevel(level)
    except ValueError:
        return None


def starting_mileage_for(
    level: Union[ExperienceLevel, str, None],
    max_weekly_mileage: float,
    rules: PlanRules = DEFAULT_RULES,
) -> float:
    """
    Week-1 seed for the mileage ramp.

    Unrecognized levels get the Advanced/Expert ratio.
    """
    lvl = coerce_level(level)
    if lvl == ExperienceLevel.BEGINNER:
        return min(rules.beginner_starting_ceiling, max_weekly_mileage * rules.beginner_starting_ratio)
    if lvl == ExperienceLevel.INTERMEDIATE:
        return max_weekly_mileage * rules.intermediate_starting_ratio
    return max_weekly_mileage * rules.advanced_starting_ratio


class PreferenceNormalizer:
    """Turn a runner's raw request into EffectivePreferences. Never raises."""

    def __init__(self, rules: PlanRules = DEFAULT_RULES):
        self.rules = rules

    def normalize(self, preferences: TrainingPreferencesInput) -> EffectivePreferences:
        raw = preferences.training_preferences
        level = coerce_level(preferences.running_experience.level)
        suggestions: List[str] = []

        max_mileage = raw.max_weekly_mileage
        workouts = raw.weekly_workouts
        running_days = raw.weekly_running_days

        if level == ExperienceLevel.BEGINNER:
            cap = self.rules.beginner_max_weekly_mileage
            if max_mileage > cap:
                suggestions.append(
                    f"As a beginner, we recommend a maximum of {cap:g} miles per week. "
                    f"Your plan has been adjusted from {max_mileage:g} to {cap:g} miles."
                )
                max_mileage = cap

            cap = self.rules.beginner_weekly_workouts
            if workouts > cap:
                suggestions.append(
                    f"As a beginner, we recommend no more than {cap} quality workout per week. "
                    f"Your plan has been adjusted from {workouts} to {cap}."
                )
                workouts = cap

            cap = self.rules.beginner_weekly_running_days
            if running_days > cap:
                suggestions.append(
                    f"As a beginner, we recommend running no more than {cap} days per week "
                    f"with rest days in between. Your plan has been adjusted from {running_days} to {cap} days."
                )
                running_days = cap

        # Keep downstream stages total for out-of-range values
        if running_days < self.rules.min_running_days:
            suggestions.append(
                f"Plans need at least {self.rules.min_running_days} running day per week. "
                f"Your plan has been adjusted from {running_days} to {self.rules.min_running_days}."
            )
            running_days = self.rules.min_running_days
        elif running_days > self.rules.max_running_days:
            suggestions.append(
                f"A week has only {self.rules.max_running_days} days. "
                f"Your plan has been adjusted from {running_days} to {self.rules.max_running_days} running days."
            )
            running_days = self.rules.max_running_days

        if workouts < 0:
            suggestions.append("Weekly workouts cannot be negative. Your plan has been adjusted to 0.")
            workouts = 0

        effective = EffectivePreferences(
            level=level,
            weekly_running_days=running_days,
            max_weekly_mileage=max_mileage,
            weekly_workouts=workouts,
            preferred_long_run_day=raw.preferred_long_run_day,
            starting_mileage=starting_mileage_for(level, max_mileage, self.rules),
            suggestions=suggestions,
        )

        if suggestions:
            level_name = level.value if level else "unrecognized level"
            logger.info(f"Adjusted preferences ({level_name}): {len(suggestions)} suggestion(s)")

        return effective
