"""
Workout Type Selector

Turns a day slot into a concrete workout:
- Long run slot: 30% of weekly mileage (25% for beginners)
- Quality slot: 15% of weekly mileage, speed work for 5K/10K goals,
  tempo otherwise (beginners always get an easier tempo)
- Everything else: easy run, weekly mileage split across running days

Distances are whole units and never below the configured minimum (1).

Usage:
    selector = WorkoutTypeSelector()
    workout = selector.classify(slot, weekly_mileage=32, preferences=prefs, target_race=race)
"""

import re
from typing import Dict, Optional

from .config import DEFAULT_RULES, PlanRules
from .constants import SPEED_WORK_RACE_DISTANCES, ExperienceLevel, WorkoutType
from .mileage_curve import round_half_up
from .models import TargetRace, Workout
from .normalizer import EffectivePreferences
from .workout_distributor import DaySlot


LONG_RUN_DESCRIPTIONS: Dict[Optional[ExperienceLevel], str] = {
    ExperienceLevel.BEGINNER: (
        "Long run at an easy, conversational pace. Walk breaks are fine. "
        "Focus on time on your feet, not speed."
    ),
    ExperienceLevel.INTERMEDIATE: (
        "Long run at a comfortable pace, 60-90 seconds per mile slower than goal race pace. "
        "Stay relaxed and fuel as you would on race day."
    ),
    ExperienceLevel.ADVANCED: (
        "Long run at steady aerobic effort, 45-75 seconds per mile slower than goal race pace. "
        "Finish the last few miles a little quicker if you feel good."
    ),
    ExperienceLevel.EXPERT: (
        "Long run at steady aerobic effort. Include the final 20-25% at goal race pace "
        "to practice pacing and fueling under fatigue."
    ),
}

SPEED_WORK_DESCRIPTION = (
    "Warm up 1-2 miles, then 6-8 x 400m at 5K race pace with 200m easy jog recovery. "
    "Cool down 1 mile."
)

TEMPO_DESCRIPTION = (
    "Warm up 1 mile, then 20-30 minutes at threshold pace (comfortably hard, "
    "roughly half marathon effort). Cool down 1 mile."
)

BEGINNER_TEMPO_DESCRIPTION = (
    "Easy warm-up, then 10-15 minutes at a comfortably hard effort where you can speak "
    "in short phrases. Ease back to an easy jog to finish."
)

EASY_DESCRIPTION = (
    "Easy run at conversational pace. You should be able to hold a full conversation "
    "throughout."
)


def is_speed_race(target_race: Optional[TargetRace]) -> bool:
    """True when the goal race distance is a 5K or 10K."""
    if target_race is None or not target_race.distance:
        return False
    normalized = re.sub(r"\s+", "", target_race.distance).lower()
    return normalized in SPEED_WORK_RACE_DISTANCES


class WorkoutTypeSelector:

    def __init__(self, rules: PlanRules = DEFAULT_RULES):
        self.rules = rules

    def classify(
        self,
        slot: DaySlot,
        weekly_mileage: float,
        preferences: EffectivePreferences,
        target_race: Optional[TargetRace] = None,
    ) -> Workout:
        """Build the workout for a slot."""
        if slot.is_long_run:
            return self._long_run(slot, weekly_mileage, preferences)
        if slot.is_quality:
            return self._quality(slot, weekly_mileage, preferences, target_race)
        return self._easy_run(slot, weekly_mileage, preferences)

    def _distance(self, value: float) -> int:
        return max(self.rules.min_distance, round_half_up(value))

    def _long_run(self, slot: DaySlot, weekly_mileage: float, preferences: EffectivePreferences) -> Workout:
        fraction = (
            self.rules.beginner_long_run_fraction
            if preferences.is_beginner
            else self.rules.long_run_fraction
        )
        description = LONG_RUN_DESCRIPTIONS.get(
            preferences.level, LONG_RUN_DESCRIPTIONS[ExperienceLevel.ADVANCED]
        )
        return Workout(
            day=slot.date.isoformat(),
            type=WorkoutType.LONG_RUN.value,
            distance=self._distance(weekly_mileage * fraction),
            description=description,
            completed=False,
        )

    def _quality(
        self,
        slot: DaySlot,
        weekly_mileage: float,
        preferences: EffectivePreferences,
        target_race: Optional[TargetRace],
    ) -> Workout:
        if preferences.is_beginner:
            workout_type, description = WorkoutType.TEMPO_RUN, BEGINNER_TEMPO_DESCRIPTION
        elif is_speed_race(target_race):
            workout_type, description = WorkoutType.SPEED_WORK, SPEED_WORK_DESCRIPTION
        else:
            workout_type, description = WorkoutType.TEMPO_RUN, TEMPO_DESCRIPTION

        return Workout(
            day=slot.date.isoformat(),
            type=workout_type.value,
            distance=self._distance(weekly_mileage * self.rules.quality_fraction),
            description=description,
            completed=False,
        )

    def _easy_run(self, slot: DaySlot, weekly_mileage: float, preferences: EffectivePreferences) -> Workout:
        return Workout(
            day=slot.date.isoformat(),
            type=WorkoutType.EASY_RUN.value,
            distance=self._distance(weekly_mileage / preferences.weekly_running_days),
            description=EASY_DESCRIPTION,
            completed=False,
        )
