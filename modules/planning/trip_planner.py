"""
modules/planning/trip_planner.py
----------------------------------
Per-trip planning operations behind the trip detail screen.

Builds the day-by-day sections shown for a trip (every day in the trip's
date range, including days with nothing scheduled), routes add / edit /
delete actions through the DayAgendaStore, and summarises spend against
the trip budget.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from modules.agenda.day_agenda_store import DayAgendaStore
from modules.input.activity_intake import ActivityDraft
from modules.input.trip_intake import TripDraft
from modules.recommendation.destination_catalog import DestinationCatalog
from modules.tool_usage.time_tool import DayLike
from schemas.trip import DayAgenda, ScheduledActivity, TripPlan
import config

logger = logging.getLogger(__name__)


@dataclass
class DaySection:
    """One day row group on the trip detail screen."""
    day: date
    header: str
    agenda: Optional[DayAgenda]
    activities: list[ScheduledActivity] = field(default_factory=list)   # time-sorted

    @property
    def count_label(self) -> str:
        return self.agenda.count_label if self.agenda is not None else ""


@dataclass
class BudgetSummary:
    budget: float
    planned: float
    currency: str = config.CURRENCY_UNIT
    by_category: dict[str, float] = field(default_factory=dict)

    @property
    def remaining(self) -> float:
        return self.budget - self.planned

    @property
    def over_budget(self) -> bool:
        return self.planned > self.budget + 1e-2   # 1 cent tolerance for rounding


class TripPlanner:

    def __init__(self, plan: TripPlan, catalog: Optional[DestinationCatalog] = None):
        self.plan = plan
        self.store = DayAgendaStore(plan)
        self._catalog = catalog or DestinationCatalog()

    # ── Views ─────────────────────────────────────────────────────────────

    def days_in_trip(self) -> list[date]:
        return self.store.days_in_trip()

    def day_sections(self) -> list[DaySection]:
        sections = []
        for day in self.days_in_trip():
            agenda = self.store.agenda_for(day)
            sections.append(DaySection(
                day=day,
                header=day.strftime(config.DAY_HEADER_FORMAT),
                agenda=agenda,
                activities=list(self.store.sorted_activities(day)),
            ))
        return sections

    def orphaned_agendas(self) -> list[DayAgenda]:
        """Agendas left outside the trip's date range after its dates were edited."""
        days = set(self.days_in_trip())
        return sorted(
            (a for a in self.plan.day_agendas if a.date not in days),
            key=lambda a: a.date,
        )

    def image_url(self) -> str:
        return self._catalog.image_url_for(self.plan.destination)

    def budget_summary(self) -> BudgetSummary:
        by_category: dict[str, float] = {}
        for agenda in self.plan.day_agendas:
            for activity in agenda.activities:
                if activity.cost is None:
                    continue
                key = activity.category.value if activity.category else "Uncategorized"
                by_category[key] = by_category.get(key, 0.0) + activity.cost
        return BudgetSummary(
            budget=self.plan.budget,
            planned=self.plan.planned_spend,
            by_category=by_category,
        )

    # ── Activity actions ──────────────────────────────────────────────────

    def add_activity(self, day: DayLike, draft: ActivityDraft) -> ScheduledActivity:
        activity = draft.build()
        self.store.add_activity(day, activity)
        logger.info("Added %r on %s to trip %s", activity.name, activity.time.date(), self.plan.destination)
        return activity

    def save_activity_edit(
        self,
        original: ScheduledActivity,
        draft: ActivityDraft,
    ) -> Optional[ScheduledActivity]:
        """Apply an edit screen's draft. Returns None when nothing changed."""
        if not draft.has_changes(original):
            return None
        draft.activity_id = original.id
        updated = draft.build()
        self.store.relocate_activity(original.time, updated)
        return updated

    def delete_activities(self, day: DayLike, offsets: Iterable[int]) -> int:
        return self.store.remove_at_offsets(day, offsets)

    # ── Trip details ──────────────────────────────────────────────────────

    def update_details(self, draft: TripDraft) -> TripPlan:
        """Edit destination, dates and budget in place; agendas are kept."""
        draft.validate()
        self.plan.destination = draft.destination.strip()
        self.plan.start_time = draft.start_time
        self.plan.end_time = draft.end_time
        self.plan.budget = draft.budget
        orphans = self.orphaned_agendas()
        if orphans:
            logger.info(
                "Trip %s keeps %d agenda(s) outside its new dates", self.plan.destination, len(orphans),
            )
        return self.plan
