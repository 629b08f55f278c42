"""
Constants for plan generation.

These are DEFAULTS that can be overridden by config (plan_rules.yaml).
They exist here for type safety and documentation.
"""

from enum import Enum
from typing import Any, Dict


class ExperienceLevel(str, Enum):
    """Runner experience levels. Values are matched case-sensitively."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Weekday(str, Enum):
    """Full weekday names accepted for the preferred long run day."""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class Phase(str, Enum):
    """Training phase labels embedded in every weekly plan."""
    BASE_BUILDING = "Base Building"
    PEAK_TRAINING = "Peak Training"
    TAPERING = "Tapering"


class WorkoutType(str, Enum):
    """Workout types a plan may contain."""
    EASY_RUN = "Easy Run"
    LONG_RUN = "Long Run"
    TEMPO_RUN = "Tempo Run"
    SPEED_WORK = "Speed Work"
    RECOVERY_RUN = "Recovery Run"
    REST_DAY = "Rest Day"


# Index matches date.weekday() (0=Monday, 6=Sunday)
DAY_NAMES = [day.value for day in Weekday]

# Beginners run every other day starting on the long run day
BEGINNER_DAY_OFFSETS = [0, 2, 4, 6]

# Race distances that get interval sessions instead of tempo runs
SPEED_WORK_RACE_DISTANCES = {"5k", "10k"}


# Default plan rules. Keys mirror plan_rules.yaml so a config file can
# override any subset of them.
PLAN_RULES: Dict[str, Any] = {
    "beginner_caps": {
        "max_weekly_mileage": 20,
        "weekly_workouts": 1,
        "weekly_running_days": 4,
    },
    "starting_mileage": {
        # Fraction of max weekly mileage used for week 1 of the ramp
        "beginner_ratio": 0.4,
        "beginner_ceiling": 10,
        "intermediate_ratio": 0.5,
        "advanced_ratio": 0.6,
    },
    "phases": {
        # Phase LABELS: 60% base, 20% peak, 20% taper
        "base_fraction": 0.6,
        "peak_fraction": 0.8,
    },
    "mileage_curve": {
        # Volume WINDOWS: 70% buildup, 20% taper. Deliberately not the
        # same split as the phase labels.
        "buildup_fraction": 0.7,
        "taper_fraction": 0.2,
        "taper_reduction": 0.2,
    },
    "workouts": {
        "long_run_fraction": 0.30,
        "beginner_long_run_fraction": 0.25,
        "quality_fraction": 0.15,
        "min_distance": 1,
    },
    "running_days": {
        "min": 1,
        "max": 7,
    },
}
