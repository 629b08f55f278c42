"""
Tests for PreferenceNormalizer

Beginner caps, running-day clamping, starting mileage and the
advisory suggestions returned alongside the effective values.
"""
import pytest
from pydantic import ValidationError

from services.plan_engine import (
    DEFAULT_RULES,
    ExperienceLevel,
    PreferenceNormalizer,
    Weekday,
)
from services.plan_engine.normalizer import coerce_level, starting_mileage_for
from tests.plan_validation_helpers import make_preferences


@pytest.fixture
def normalizer():
    return PreferenceNormalizer()


class TestBeginnerCaps:
    """Beginners are capped at 20 mi, 1 workout, 4 running days."""

    def test_mileage_and_workouts_clamped(self, normalizer):
        prefs = make_preferences(level="Beginner", max_weekly_mileage=50, weekly_workouts=3)
        effective = normalizer.normalize(prefs)

        assert effective.max_weekly_mileage == 20
        assert effective.weekly_workouts == 1
        assert len(effective.suggestions) == 2
        assert "adjusted from 50 to 20" in effective.suggestions[0]

    def test_running_days_clamped(self, normalizer):
        prefs = make_preferences(level="Beginner", weekly_running_days=6)
        effective = normalizer.normalize(prefs)

        assert effective.weekly_running_days == 4
        assert any("6 to 4 days" in s for s in effective.suggestions)

    def test_zero_workouts_stays_zero(self, normalizer):
        prefs = make_preferences(level="Beginner", max_weekly_mileage=15, weekly_workouts=0, weekly_running_days=3)
        effective = normalizer.normalize(prefs)

        assert effective.weekly_workouts == 0
        assert effective.max_weekly_mileage == 15
        assert effective.weekly_running_days == 3
        assert effective.suggestions == []

    @pytest.mark.parametrize("level", ["Intermediate", "Advanced", "Expert"])
    def test_non_beginners_not_capped(self, normalizer, level):
        prefs = make_preferences(level=level, max_weekly_mileage=70, weekly_workouts=3, weekly_running_days=6)
        effective = normalizer.normalize(prefs)

        assert effective.max_weekly_mileage == 70
        assert effective.weekly_workouts == 3
        assert effective.weekly_running_days == 6
        assert effective.suggestions == []


class TestRunningDayBounds:

    def test_zero_days_raised_to_one(self, normalizer):
        effective = normalizer.normalize(make_preferences(weekly_running_days=0))
        assert effective.weekly_running_days == 1
        assert len(effective.suggestions) == 1

    def test_more_than_seven_days_lowered(self, normalizer):
        effective = normalizer.normalize(make_preferences(weekly_running_days=9))
        assert effective.weekly_running_days == 7

    def test_negative_workouts_raised_to_zero(self, normalizer):
        effective = normalizer.normalize(make_preferences(weekly_workouts=-2))
        assert effective.weekly_workouts == 0


class TestStartingMileage:

    def test_beginner_uses_ratio_below_ceiling(self):
        assert starting_mileage_for(ExperienceLevel.BEGINNER, 20) == pytest.approx(8)

    def test_beginner_ceiling(self):
        rules = DEFAULT_RULES
        assert starting_mileage_for("Beginner", 100, rules) == rules.beginner_starting_ceiling

    def test_intermediate_half_of_max(self):
        assert starting_mileage_for(ExperienceLevel.INTERMEDIATE, 40) == pytest.approx(20)

    @pytest.mark.parametrize("level", [ExperienceLevel.ADVANCED, ExperienceLevel.EXPERT, "Elite", None])
    def test_advanced_and_unknown_levels(self, level):
        assert starting_mileage_for(level, 50) == pytest.approx(30)

    def test_normalized_seed_uses_capped_max(self, normalizer):
        effective = normalizer.normalize(make_preferences(level="Beginner", max_weekly_mileage=50))
        assert effective.starting_mileage == pytest.approx(8)


class TestInputUntouched:

    def test_normalize_does_not_mutate(self, normalizer):
        prefs = make_preferences(level="Beginner", max_weekly_mileage=50, weekly_workouts=3)
        before = prefs.model_dump()
        normalizer.normalize(prefs)
        assert prefs.model_dump() == before

    def test_long_run_day_carried_through(self, normalizer):
        effective = normalizer.normalize(make_preferences(preferred_long_run_day="Saturday"))
        assert effective.preferred_long_run_day == Weekday.SATURDAY


class TestCoerceLevel:

    def test_enum_passthrough(self):
        assert coerce_level(ExperienceLevel.EXPERT) is ExperienceLevel.EXPERT

    def test_string_is_case_sensitive(self):
        assert coerce_level("Advanced") is ExperienceLevel.ADVANCED
        assert coerce_level("advanced") is None


class TestMileageFloor:
    """Targets are floored at 1 mile, so the cap itself must be at least 1."""

    @pytest.mark.parametrize("max_weekly_mileage", [0, 0.5, -10])
    def test_cap_below_one_rejected(self, max_weekly_mileage):
        with pytest.raises(ValidationError):
            make_preferences(max_weekly_mileage=max_weekly_mileage)

    def test_cap_of_one_accepted(self, normalizer):
        effective = normalizer.normalize(make_preferences(max_weekly_mileage=1))
        assert effective.max_weekly_mileage == 1
