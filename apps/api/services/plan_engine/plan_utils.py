"""
Plan utilities: date parsing/formatting and plan summaries shared by the
validator and the API layer.
"""

import re
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional

from .mileage_curve import round_half_up

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO date or datetime string to an aware UTC datetime.

    Date-only strings resolve to midnight UTC and naive datetimes are read
    as UTC. Returns None for anything that is not a real calendar date
    (e.g. "2025-02-30", "invalid", "", None).
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif not isinstance(value, str) or not value.strip():
        return None
    else:
        text = value.strip()
        try:
            if _DATE_ONLY.match(text):
                day = date.fromisoformat(text)
                return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_date(value: Any) -> Optional[date]:
    """Calendar (UTC) date of an ISO date or datetime string, or None."""
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None


def is_valid_date(value: Any) -> bool:
    return parse_date(value) is not None


def format_date_for_api(value: Any) -> str:
    """YYYY-MM-DD for any valid date string; raises ValueError otherwise."""
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date format: {value}")
    return parsed.isoformat()


def format_date_for_display(value: Any, fmt: str = "%b %d") -> str:
    parsed = parse_date(value)
    if parsed is None:
        return "Invalid date"
    return parsed.strftime(fmt)


def calculate_plan_metrics(weekly_plans: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    """
    Summarize weekly plans (camelCase mappings).

    Returns:
        {"totalWeeks", "totalMileage", "weeklyAverage"}
    """
    weeks = list(weekly_plans)
    total_weeks = len(weeks)
    total_mileage = sum(week.get("totalMileage", 0) or 0 for week in weeks)
    weekly_average = round_half_up(total_mileage / total_weeks) if total_weeks else 0
    return {
        "totalWeeks": total_weeks,
        "totalMileage": total_mileage,
        "weeklyAverage": weekly_average,
    }


def prepare_plan_data(plan: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Clean a plan for submission.

    Builds a new dict: dates normalized to YYYY-MM-DD, every workout reset
    to not completed, a default name, and active=True. The input is left
    untouched. Raises ValueError for unparseable dates.
    """
    target_race = plan.get("targetRace")
    return {
        "name": plan.get("name") or f"Training Plan - {plan.get('goal')}",
        "goal": plan.get("goal"),
        "goalDescription": plan.get("goalDescription") or "",
        "startDate": format_date_for_api(plan.get("startDate")),
        "endDate": format_date_for_api(plan.get("endDate")),
        "weeklyMileage": plan.get("weeklyMileage"),
        "weeklyPlans": [
            {
                "week": week.get("week"),
                "phase": week.get("phase"),
                "totalMileage": week.get("totalMileage"),
                "workouts": [
                    {
                        "day": format_date_for_api(workout.get("day")),
                        "type": workout.get("type"),
                        "distance": workout.get("distance"),
                        "description": workout.get("description"),
                        "completed": False,
                    }
                    for workout in week.get("workouts") or []
                ],
            }
            for week in plan.get("weeklyPlans") or []
        ],
        "targetRace": dict(target_race) if target_race else None,
        "runningExperience": dict(plan.get("runningExperience") or {}),
        "trainingPreferences": dict(plan.get("trainingPreferences") or {}),
        "active": True,
    }
