"""
Tests for plan date helpers, metrics and submission cleanup.
"""
from copy import deepcopy
from datetime import date, datetime, timezone

import pytest

from services.plan_engine.plan_utils import (
    calculate_plan_metrics,
    format_date_for_api,
    format_date_for_display,
    is_valid_date,
    parse_date,
    parse_datetime,
    prepare_plan_data,
)


class TestParseDate:

    @pytest.mark.parametrize("value,expected", [
        ("2025-03-15", date(2025, 3, 15)),
        ("2025-03-15T10:00:00", date(2025, 3, 15)),
        ("2025-03-15T23:30:00Z", date(2025, 3, 15)),
        ("2025-03-15T23:30:00-05:00", date(2025, 3, 16)),
        (date(2025, 1, 2), date(2025, 1, 2)),
    ])
    def test_valid(self, value, expected):
        assert parse_date(value) == expected

    @pytest.mark.parametrize("value", ["invalid", "2025-02-30", "", "   ", None, 20250315])
    def test_invalid(self, value):
        assert parse_date(value) is None
        assert not is_valid_date(value)


class TestParseDatetime:

    def test_date_only_is_midnight_utc(self):
        assert parse_datetime("2025-03-15") == datetime(2025, 3, 15, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self):
        assert parse_datetime("2025-03-15T23:30:00-05:00") == datetime(2025, 3, 16, 4, 30, tzinfo=timezone.utc)

    def test_naive_read_as_utc(self):
        assert parse_datetime("2025-03-15T06:00:00") == datetime(2025, 3, 15, 6, tzinfo=timezone.utc)

    def test_invalid(self):
        assert parse_datetime("2025-13-01") is None


class TestFormatting:

    def test_api_format(self):
        assert format_date_for_api("2025-03-15T12:00:00Z") == "2025-03-15"

    def test_api_format_rejects_invalid(self):
        with pytest.raises(ValueError, match="Invalid date format: nope"):
            format_date_for_api("nope")

    def test_display_format(self):
        assert format_date_for_display("2025-03-05") == "Mar 05"
        assert format_date_for_display("2025-03-05", "%Y/%m/%d") == "2025/03/05"

    def test_display_invalid(self):
        assert format_date_for_display("nope") == "Invalid date"


class TestPlanMetrics:

    def test_totals_and_average(self):
        weeks = [{"totalMileage": 20}, {"totalMileage": 25}, {"totalMileage": 30}, {"totalMileage": 22}]
        assert calculate_plan_metrics(weeks) == {
            "totalWeeks": 4,
            "totalMileage": 97,
            "weeklyAverage": 24,
        }

    def test_average_rounds_half_up(self):
        metrics = calculate_plan_metrics([{"totalMileage": 20}, {"totalMileage": 21}])
        assert metrics["weeklyAverage"] == 21

    def test_empty(self):
        assert calculate_plan_metrics([]) == {"totalWeeks": 0, "totalMileage": 0, "weeklyAverage": 0}


class TestPreparePlanData:

    def test_cleans_without_mutating(self, valid_plan):
        valid_plan["startDate"] = "2025-03-15T00:00:00Z"
        valid_plan["weeklyPlans"][0]["workouts"][0]["completed"] = True
        valid_plan["active"] = False
        original = deepcopy(valid_plan)

        prepared = prepare_plan_data(valid_plan)

        assert valid_plan == original
        assert prepared["startDate"] == "2025-03-15"
        assert prepared["name"] == "Training Plan - Complete Marathon"
        assert prepared["active"] is True
        assert prepared["weeklyPlans"][0]["workouts"][0]["completed"] is False

    def test_keeps_explicit_name(self, valid_plan):
        valid_plan["name"] = "Spring Block"
        assert prepare_plan_data(valid_plan)["name"] == "Spring Block"

    def test_invalid_dates_raise(self, valid_plan):
        valid_plan["endDate"] = "bad"
        with pytest.raises(ValueError):
            prepare_plan_data(valid_plan)
