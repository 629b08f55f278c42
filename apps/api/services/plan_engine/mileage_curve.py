"""
Mileage Curve

Week-by-week volume targets in three segments:

1. Buildup (first 70% of weeks): linear ramp from the starting mileage
   to the max weekly mileage.
2. Peak (between the windows): flat at max weekly mileage.
3. Taper (last 20% of weeks): drops up to 20% below max.

These windows are computed independently of the phase labels (60/80 split);
a week can be labelled Peak Training while still on the ramp.
"""

import math
from typing import List

from .config import DEFAULT_RULES, PlanRules


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


class MileageCurve:

    def __init__(self, rules: PlanRules = DEFAULT_RULES):
        self.rules = rules

    def weekly_mileage(
        self,
        week_index: int,
        total_weeks: int,
        starting_mileage: float,
        max_weekly_mileage: float,
    ) -> int:
        """
        Target mileage for a week.

        Args:
            week_index: 1-based week number
            total_weeks: Total plan weeks
            starting_mileage: Week-1 seed from the normalizer
            max_weekly_mileage: Effective (clamped) max

        Returns:
            Whole-unit mileage, never below 1
        """
        buildup_phase = math.floor(total_weeks * self.rules.buildup_fraction)
        taper_phase = math.floor(total_weeks * self.rules.taper_fraction)
        taper_start = total_weeks - taper_phase

        if taper_phase > 0 and week_index > taper_start:
            taper_week = week_index - taper_start
            mileage = max_weekly_mileage * (1 - self.rules.taper_reduction * (taper_week / taper_phase))
        elif buildup_phase > 0 and week_index <= buildup_phase:
            progress = week_index / buildup_phase
            mileage = starting_mileage + (max_weekly_mileage - starting_mileage) * progress
        else:
            mileage = max_weekly_mileage

        return max(1, round_half_up(mileage))

    def mileage_progression(
        self,
        total_weeks: int,
        starting_mileage: float,
        max_weekly_mileage: float,
    ) -> List[int]:
        """Targets for every week of the plan."""
        return [
            self.weekly_mileage(week, total_weeks, starting_mileage, max_weekly_mileage)
            for week in range(1, total_weeks + 1)
        ]
