"""
modules/agenda/day_agenda_store.py
------------------------------------
Keeps a trip's activities bucketed by calendar day.

Invariants held after every public mutation:
  - at most one DayAgenda per calendar day
  - no DayAgenda with zero activities
  - every activity's time falls on its agenda's day
  - each agenda's activity list is ascending by time

The store wraps a TripPlan and edits plan.day_agendas in place. The order of
agendas inside that list carries no meaning; display order is computed by
TimeTool.days_in_range.
"""

from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional

from modules.agenda.ordering import SortedActivities, sort_in_place, sorted_activities
from modules.tool_usage.time_tool import DayLike, TimeTool
from schemas.trip import DayAgenda, ScheduledActivity, TripPlan

logger = logging.getLogger(__name__)


class DayAgendaStore:
    def __init__(self, plan: TripPlan):
        self._plan = plan

    @property
    def plan(self) -> TripPlan:
        return self._plan

    @property
    def agendas(self) -> list[DayAgenda]:
        return self._plan.day_agendas

    # ── Lookup ────────────────────────────────────────────────────────────

    def _index_of(self, day: DayLike) -> Optional[int]:
        target = TimeTool.start_of_day(day)
        for i, agenda in enumerate(self.agendas):
            if agenda.date == target:
                return i
        return None

    def agenda_for(self, day: DayLike) -> Optional[DayAgenda]:
        index = self._index_of(day)
        return None if index is None else self.agendas[index]

    def sorted_activities(self, day: DayLike) -> SortedActivities:
        return sorted_activities(self.agenda_for(day))

    def find_activity(self, activity_id: str) -> Optional[ScheduledActivity]:
        found = self._locate_by_id(activity_id)
        if found is None:
            return None
        index, position = found
        return self.agendas[index].activities[position]

    def days_in_trip(self) -> list[date]:
        return TimeTool.days_in_range(self._plan.start_time, self._plan.end_time)

    # ── Insert ────────────────────────────────────────────────────────────

    def add_activity(self, day: DayLike, activity: ScheduledActivity) -> DayAgenda:
        """
        File an activity under its day, creating the day's agenda on first use.

        Raises:
            ValueError: activity.time is not on `day`.
        """
        target = TimeTool.start_of_day(day)
        if TimeTool.start_of_day(activity.time) != target:
            raise ValueError(
                f"activity {activity.name!r} at {activity.time} is not on {target}"
            )

        agenda = self.agenda_for(target)
        if agenda is None:
            agenda = DayAgenda(date=target, activities=[activity])
            self.agendas.append(agenda)
            logger.debug("Created agenda for %s", target)
        else:
            agenda.activities.append(activity)
            sort_in_place(agenda.activities)
        return agenda

    # ── Relocate ──────────────────────────────────────────────────────────

    def relocate_activity(
        self,
        old_time: datetime,
        updated: ScheduledActivity,
    ) -> DayAgenda:
        """
        Replace an activity with its edited state, moving it to another day's
        agenda if its time now falls on a different day.

        The activity is located by updated.id on whichever day holds it, so a
        stale old_time still finds it. Activities without a matching id fall
        back to the first activity in old_time's agenda with that exact time.

        An edit that matches nothing is not dropped. It is filed as a new
        activity on its day and a warning is logged.
        """
        new_day = TimeTool.start_of_day(updated.time)

        found = self._locate_by_id(updated.id)
        if found is None:
            found = self._locate_by_time(old_time)
        if found is None:
            logger.warning(
                "No activity matching %r at %s; adding it to %s instead",
                updated.name, old_time, new_day,
            )
            return self.add_activity(new_day, updated)

        old_index, position = found
        old_agenda = self.agendas[old_index]
        if old_agenda.date == new_day:
            previous = old_agenda.activities[position]
            old_agenda.activities[position] = updated
            if previous.time != updated.time:
                sort_in_place(old_agenda.activities)
            return old_agenda

        del old_agenda.activities[position]
        self._prune(old_index)
        return self.add_activity(new_day, updated)

    def _locate_by_id(self, activity_id: str) -> Optional[tuple[int, int]]:
        """(agenda index, position) of the activity with this id, on any day."""
        for index, agenda in enumerate(self.agendas):
            for i, activity in enumerate(agenda.activities):
                if activity.id == activity_id:
                    return index, i
        return None

    def _locate_by_time(self, old_time: datetime) -> Optional[tuple[int, int]]:
        index = self._index_of(old_time)
        if index is None:
            return None
        for i, activity in enumerate(self.agendas[index].activities):
            if activity.time == old_time:
                return index, i
        return None

    # ── Remove ────────────────────────────────────────────────────────────

    def remove_where(
        self,
        day: DayLike,
        predicate: Callable[[ScheduledActivity], bool],
    ) -> int:
        """Remove the day's activities matching predicate. Returns the count removed."""
        index = self._index_of(day)
        if index is None:
            return 0

        agenda = self.agendas[index]
        kept = [a for a in agenda.activities if not predicate(a)]
        removed = len(agenda.activities) - len(kept)
        agenda.activities[:] = kept
        self._prune(index)
        return removed

    def remove_activities(self, day: DayLike, targets: Iterable[ScheduledActivity]) -> int:
        ids = {t.id for t in targets}
        return self.remove_where(day, lambda a: a.id in ids)

    def remove_at_offsets(self, day: DayLike, offsets: Iterable[int]) -> int:
        """Remove by position in the day's time-sorted view (list swipe-to-delete)."""
        view = self.sorted_activities(day)
        targets = [view[i] for i in sorted(set(offsets))]
        return self.remove_activities(day, targets)

    def remove_activity(self, activity_id: str) -> bool:
        """Remove one activity from whichever day holds it."""
        for agenda in list(self.agendas):
            if any(a.id == activity_id for a in agenda.activities):
                self.remove_where(agenda.date, lambda a: a.id == activity_id)
                return True
        return False

    def _prune(self, index: int) -> None:
        if not self.agendas[index].activities:
            removed = self.agendas.pop(index)
            logger.debug("Removed empty agenda for %s", removed.date)

    # ── Invariants ────────────────────────────────────────────────────────

    def check_invariants(self) -> None:
        """Raise ValueError describing the first violated invariant, if any."""
        seen: set[date] = set()
        for agenda in self.agendas:
            if agenda.date in seen:
                raise ValueError(f"duplicate agenda for {agenda.date}")
            seen.add(agenda.date)
            if not agenda.activities:
                raise ValueError(f"empty agenda for {agenda.date}")
            for activity in agenda.activities:
                if TimeTool.start_of_day(activity.time) != agenda.date:
                    raise ValueError(
                        f"activity {activity.name!r} at {activity.time} filed under {agenda.date}"
                    )
            times = [a.time for a in agenda.activities]
            if times != sorted(times):
                raise ValueError(f"agenda for {agenda.date} is not in time order")
