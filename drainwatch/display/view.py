"""
Report view state
Filtering and expansion state over one analysis result.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from drainwatch.analysis.engine import analyze_battery_data
from drainwatch.shared.models import (
    BatteryAnalysisResult,
    BatteryReading,
    DeviceAnalysis,
    DeviceStatus,
    SchoolAnalysis,
    SchoolPriority,
)

FILTERS = ("all", "critical", "needs-visits")


@dataclass
class TotalStats:
    """Batch totals plus the number of schools needing a visit"""
    total_devices: int = 0
    total_critical: int = 0
    total_warning: int = 0
    total_healthy: int = 0
    total_unknown: int = 0
    schools_needing_visits: int = 0


def needs_visit(school: SchoolAnalysis) -> bool:
    return school.priority == SchoolPriority.HIGH or school.critical_devices >= 2


class ReportView:
    """Holds an analysis result and what the user has chosen to look at"""

    def __init__(self, result: Optional[BatteryAnalysisResult] = None):
        self.result = result
        self.selected_filter = "all"
        self.expanded_schools: Set[int] = set()

    @property
    def has_data(self) -> bool:
        return self.result is not None

    def set_filter(self, selected: str):
        if selected not in FILTERS:
            raise ValueError(f"Unknown filter: {selected}")
        self.selected_filter = selected

    @property
    def filtered_schools(self) -> List[SchoolAnalysis]:
        if self.result is None:
            return []
        if self.selected_filter == "critical":
            return [s for s in self.result.schools if s.critical_devices > 0]
        if self.selected_filter == "needs-visits":
            return self.schools_needing_visits
        return list(self.result.schools)

    @property
    def schools_needing_visits(self) -> List[SchoolAnalysis]:
        if self.result is None:
            return []
        return [s for s in self.result.schools if needs_visit(s)]

    @property
    def total_stats(self) -> TotalStats:
        if self.result is None:
            return TotalStats()
        return TotalStats(
            total_devices=self.result.total_devices,
            total_critical=self.result.total_critical,
            total_warning=self.result.total_warning,
            total_healthy=self.result.total_healthy,
            total_unknown=self.result.total_unknown,
            schools_needing_visits=len(self.schools_needing_visits),
        )

    def is_school_expanded(self, academy_id: int) -> bool:
        return academy_id in self.expanded_schools

    def toggle_school_expansion(self, academy_id: int):
        if academy_id in self.expanded_schools:
            self.expanded_schools.discard(academy_id)
        else:
            self.expanded_schools.add(academy_id)

    def expand_all_schools(self):
        if self.result is None:
            return
        self.expanded_schools.update(s.academy_id for s in self.result.schools)

    def collapse_all_schools(self):
        self.expanded_schools.clear()

    def devices_by_status(self, academy_id: int, status: DeviceStatus) -> List[DeviceAnalysis]:
        """Devices of one school with the given status"""
        if self.result is None:
            return []
        for school in self.result.schools:
            if school.academy_id == academy_id:
                return [d for d in school.devices if d.status == status]
        return []


def page_stats(page_readings: Sequence[BatteryReading]) -> TotalStats:
    """Device tier totals for a single page of readings"""
    result = analyze_battery_data(page_readings)
    return TotalStats(
        total_devices=result.total_devices,
        total_critical=result.total_critical,
        total_warning=result.total_warning,
        total_healthy=result.total_healthy,
        total_unknown=result.total_unknown,
    )
