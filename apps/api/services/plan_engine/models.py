"""
Plan engine data models.

Field names are snake_case in Python and camelCase on the wire
(e.g. ``weekly_plans`` <-> ``weeklyPlans``). Dump with
``model_dump(by_alias=True, mode="json")`` for API output.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .constants import ExperienceLevel, Weekday


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ============ Input ============

class RunningExperience(FrozenCamelModel):
    level: ExperienceLevel
    fitness_level: str = ""


class TrainingPreferences(FrozenCamelModel):
    weekly_running_days: int
    # Weekly targets and distances never drop below 1, so neither may the cap
    max_weekly_mileage: float = Field(ge=1)
    weekly_workouts: int
    preferred_long_run_day: Weekday
    coaching_style: str = ""


class CustomDistance(FrozenCamelModel):
    value: float
    unit: str


class TargetRace(FrozenCamelModel):
    distance: str
    date: str
    custom_distance: Optional[CustomDistance] = None
    goal_time: Optional[str] = None
    previous_best: Optional[str] = None


class TrainingPreferencesInput(FrozenCamelModel):
    """Runner-supplied plan request. Never mutated by the engine."""
    goal: str
    goal_description: Optional[str] = None
    start_date: date
    end_date: date
    running_experience: RunningExperience
    training_preferences: TrainingPreferences
    target_race: Optional[TargetRace] = None


# ============ Output ============

class Workout(CamelModel):
    day: str
    type: str
    distance: float
    description: str
    completed: bool = False


class WeeklyPlan(CamelModel):
    week: int
    phase: str
    total_mileage: float
    workouts: List[Workout]


class TrainingPlan(CamelModel):
    """
    Assembled plan.

    Built by a generation strategy (deterministic or external) or supplied
    by a caller, then handed to the validator unchanged.
    """
    goal: str
    goal_description: Optional[str] = None
    start_date: str
    end_date: str
    weekly_mileage: float
    weekly_plans: List[WeeklyPlan]
    target_race: Optional[TargetRace] = None
    running_experience: RunningExperience
    training_preferences: TrainingPreferences
    active: bool = True

    def get_week(self, week_num: int) -> Optional[WeeklyPlan]:
        """Get a week by its 1-based number."""
        for week in self.weekly_plans:
            if week.week == week_num:
                return week
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary for JSON serialization."""
        return self.model_dump(by_alias=True, mode="json")
