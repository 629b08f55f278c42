# Plan Engine
#
# Deterministic training-plan generation plus plan validation.
#
# Architecture:
# - PreferenceNormalizer: experience caps, starting mileage
# - PhaseScheduler: Base Building / Peak Training / Tapering labels
# - MileageCurve: buildup / peak / taper weekly targets
# - WorkoutDistributor + WorkoutTypeSelector: per-day workouts
# - PlanGenerator: composes the above into a TrainingPlan
# - validate_plan: fail-fast structural checks for any plan
# - Strategies: deterministic and external generators behind one contract

from .config import ConfigService, PlanRules, DEFAULT_RULES
from .constants import ExperienceLevel, Weekday, Phase, WorkoutType
from .errors import PlanValidationError, TrainingPlanError
from .models import (
    TrainingPreferencesInput,
    RunningExperience,
    TrainingPreferences,
    TargetRace,
    TrainingPlan,
    WeeklyPlan,
    Workout,
)
from .normalizer import PreferenceNormalizer, EffectivePreferences
from .phase_scheduler import PhaseScheduler, PhaseBoundaries, total_weeks_between
from .mileage_curve import MileageCurve
from .workout_distributor import WorkoutDistributor, DaySlot
from .workout_selector import WorkoutTypeSelector
from .generator import PlanGenerator, GenerationResult
from .validator import validate_plan, is_plan_valid
from .strategies import (
    PlanGenerationStrategy,
    DeterministicPlanStrategy,
    ExternalPlanStrategy,
    StrategyRegistry,
)

__all__ = [
    # Config
    'ConfigService',
    'PlanRules',
    'DEFAULT_RULES',

    # Constants
    'ExperienceLevel',
    'Weekday',
    'Phase',
    'WorkoutType',

    # Errors
    'PlanValidationError',
    'TrainingPlanError',

    # Models
    'TrainingPreferencesInput',
    'RunningExperience',
    'TrainingPreferences',
    'TargetRace',
    'TrainingPlan',
    'WeeklyPlan',
    'Workout',

    # Generator components
    'PreferenceNormalizer',
    'EffectivePreferences',
    'PhaseScheduler',
    'PhaseBoundaries',
    'total_weeks_between',
    'MileageCurve',
    'WorkoutDistributor',
    'DaySlot',
    'WorkoutTypeSelector',

    # Main generator
    'PlanGenerator',
    'GenerationResult',

    # Validation
    'validate_plan',
    'is_plan_valid',

    # Strategies
    'PlanGenerationStrategy',
    'DeterministicPlanStrategy',
    'ExternalPlanStrategy',
    'StrategyRegistry',
]
