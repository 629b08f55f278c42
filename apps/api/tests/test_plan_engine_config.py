"""
Tests for ConfigService plan rule loading.
"""
import pytest

from services.plan_engine import DEFAULT_RULES, ConfigService, PlanGenerator
from services.plan_engine.constants import PLAN_RULES
from tests.plan_validation_helpers import make_preferences


class TestDefaults:

    def test_defaults_without_config_dir(self, tmp_path):
        ConfigService.configure(tmp_path)
        assert ConfigService.get_rules() == DEFAULT_RULES

    def test_bundled_yaml_matches_defaults(self):
        assert ConfigService.get_rules() == DEFAULT_RULES

    def test_dotted_get(self, tmp_path):
        ConfigService.configure(tmp_path)
        assert ConfigService.get("plan_rules.beginner_caps.max_weekly_mileage") == 20
        assert ConfigService.get("plan_rules.nope", "fallback") == "fallback"

    def test_defaults_never_mutated(self, tmp_path):
        ConfigService.configure(tmp_path)
        ConfigService.set("plan_rules.beginner_caps.max_weekly_mileage", 30)
        assert PLAN_RULES["beginner_caps"]["max_weekly_mileage"] == 20


class TestOverrides:

    def test_yaml_partial_override(self, tmp_path):
        (tmp_path / "plan_rules.yaml").write_text(
            "beginner_caps:\n  max_weekly_mileage: 25\n"
        )
        ConfigService.configure(tmp_path)
        rules = ConfigService.get_rules()

        assert rules.beginner_max_weekly_mileage == 25
        assert rules.beginner_weekly_workouts == DEFAULT_RULES.beginner_weekly_workouts
        assert rules.quality_fraction == DEFAULT_RULES.quality_fraction

    def test_set_in_memory(self, tmp_path):
        ConfigService.configure(tmp_path)
        ConfigService.set("plan_rules.workouts.long_run_fraction", 0.5)
        assert ConfigService.get_rules().long_run_fraction == 0.5

    def test_generator_picks_up_rules(self, tmp_path):
        ConfigService.configure(tmp_path)
        ConfigService.set("plan_rules.beginner_caps.max_weekly_mileage", 15)
        plan = PlanGenerator().generate(make_preferences(level="Beginner"))
        assert plan.weekly_mileage == 15

    def test_reload_reads_file_again(self, tmp_path):
        config_file = tmp_path / "plan_rules.yaml"
        config_file.write_text("phases:\n  base_fraction: 0.5\n")
        ConfigService.configure(tmp_path)
        assert ConfigService.get_rules().base_fraction == 0.5

        config_file.write_text("phases:\n  base_fraction: 0.4\n")
        ConfigService.reload()
        assert ConfigService.get_rules().base_fraction == 0.4


class TestBadConfig:

    def test_invalid_yaml_ignored(self, tmp_path):
        (tmp_path / "plan_rules.yaml").write_text("beginner_caps: [unclosed\n")
        ConfigService.configure(tmp_path)
        assert ConfigService.get_rules() == DEFAULT_RULES

    def test_broken_section_falls_back(self, tmp_path):
        ConfigService.configure(tmp_path)
        ConfigService.set("plan_rules.workouts", "oops")
        assert ConfigService.get_rules() == DEFAULT_RULES
