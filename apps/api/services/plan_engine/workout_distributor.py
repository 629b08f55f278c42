"""
Workout Distributor

Picks the running days of a week and tags the long run and quality slots.

Day selection walks forward from the preferred long run day:
- Non-beginners: consecutive offsets 0..days-1
- Beginners: offsets 0, 2, 4, 6 (a rest day between runs)

Offset 0 is the long run. When the plan end cuts a trailing week short and
drops that day, the latest remaining slot becomes the long run instead, so
every week keeps exactly one. A slot can become a quality workout only if
it is not the long run, not the day right after the long run, and the week
still has quality sessions left to hand out.
"""

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import List, Optional

from .constants import BEGINNER_DAY_OFFSETS, DAY_NAMES
from .normalizer import EffectivePreferences


@dataclass(frozen=True)
class DaySlot:
    """One running day within a week."""
    date: date
    day_index: int  # 0=Monday, 6=Sunday
    offset: int     # Days after the long run day (0 = long run day)
    is_long_run: bool
    is_quality: bool

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_index]


def date_for_day_index(week_start: date, day_index: int) -> date:
    """The date within [week_start, week_start + 6] falling on day_index."""
    return week_start + timedelta(days=(day_index - week_start.weekday()) % 7)


class WorkoutDistributor:

    def day_offsets(self, preferences: EffectivePreferences) -> List[int]:
        days = preferences.weekly_running_days
        if preferences.is_beginner:
            return BEGINNER_DAY_OFFSETS[:days]
        return list(range(days))

    def assign_days(
        self,
        week_start: date,
        preferences: EffectivePreferences,
        plan_end: Optional[date] = None,
    ) -> List[DaySlot]:
        """
        Assign workout slots for the week starting on week_start.

        Args:
            week_start: First day of the 7-day week
            preferences: Effective (normalized) preferences
            plan_end: Last plan day; slots after it are dropped

        Returns:
            Slots in date order
        """
        long_run_index = DAY_NAMES.index(preferences.preferred_long_run_day.value)
        day_after_long_run = (long_run_index + 1) % 7

        slots = []
        quality_assigned = 0
        for offset in self.day_offsets(preferences):
            day_index = (long_run_index + offset) % 7
            is_long_run = day_index == long_run_index

            is_quality = (
                preferences.weekly_workouts > 0
                and not is_long_run
                and day_index != day_after_long_run
                and quality_assigned < preferences.weekly_workouts
            )
            if is_quality:
                quality_assigned += 1

            slots.append(DaySlot(
                date=date_for_day_index(week_start, day_index),
                day_index=day_index,
                offset=offset,
                is_long_run=is_long_run,
                is_quality=is_quality,
            ))

        if plan_end is not None:
            in_range = [s for s in slots if s.date <= plan_end]
            if not in_range:
                # Trailing partial week where every chosen day falls past the end
                in_range = [DaySlot(
                    date=plan_end,
                    day_index=plan_end.weekday(),
                    offset=(plan_end.weekday() - long_run_index) % 7,
                    is_long_run=True,
                    is_quality=False,
                )]
            if not any(s.is_long_run for s in in_range):
                latest = max(in_range, key=lambda s: s.date)
                in_range = [s for s in in_range if s is not latest]
                in_range.append(replace(latest, is_long_run=True, is_quality=False))
            slots = in_range

        return sorted(slots, key=lambda s: s.date)
