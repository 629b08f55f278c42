"""
Phase Scheduler

Partitions a plan's weeks into phase labels:
- Base Building: weeks 1..base_end
- Peak Training: weeks base_end+1..peak_end
- Tapering: the rest

Short plans may collapse the peak or taper span to zero weeks; labels still
resolve by the same formula.

Usage:
    scheduler = PhaseScheduler()
    bounds = scheduler.schedule(total_weeks=13)   # base_end=7, peak_end=10
    scheduler.phase_for_week(8, 13)               # Phase.PEAK_TRAINING
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import List

from .config import DEFAULT_RULES, PlanRules
from .constants import Phase


@dataclass(frozen=True)
class PhaseBoundaries:
    """Last week number (1-indexed) of the base and peak spans."""
    base_end: int
    peak_end: int


def total_weeks_between(start_date: date, end_date: date) -> int:
    """Number of (possibly partial) 7-day weeks covering the plan. At least 1."""
    days = (end_date - start_date).days
    return max(1, math.ceil(days / 7))


class PhaseScheduler:

    def __init__(self, rules: PlanRules = DEFAULT_RULES):
        self.rules = rules

    def schedule(self, total_weeks: int) -> PhaseBoundaries:
        return PhaseBoundaries(
            base_end=math.floor(total_weeks * self.rules.base_fraction),
            peak_end=math.floor(total_weeks * self.rules.peak_fraction),
        )

    def phase_for_week(self, week: int, total_weeks: int) -> Phase:
        bounds = self.schedule(total_weeks)
        if week <= bounds.base_end:
            return Phase.BASE_BUILDING
        if week <= bounds.peak_end:
            return Phase.PEAK_TRAINING
        return Phase.TAPERING

    def phases(self, total_weeks: int) -> List[Phase]:
        """Phase label for every week, in order."""
        return [self.phase_for_week(week, total_weeks) for week in range(1, total_weeks + 1)]
