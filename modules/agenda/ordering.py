"""
modules/agenda/ordering.py
----------------------------
Time-ordered views over a day's activities.
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import Iterator, Union

from schemas.trip import DayAgenda, ScheduledActivity


def _by_time(activity: ScheduledActivity):
    return activity.time


class SortedActivities(Sequence):
    """
    Read-only, ascending-by-time view of a list of activities.

    Nothing is cached: each iteration or index sorts the current contents of
    the underlying list, so the view follows later edits and can be iterated
    any number of times. Ties keep their insertion order.
    """

    def __init__(self, activities: list[ScheduledActivity]):
        self._source = activities

    def _ordered(self) -> list[ScheduledActivity]:
        return sorted(self._source, key=_by_time)

    def __iter__(self) -> Iterator[ScheduledActivity]:
        return iter(self._ordered())

    def __len__(self) -> int:
        return len(self._source)

    def __getitem__(self, index):
        return self._ordered()[index]

    def __repr__(self) -> str:
        names = ", ".join(a.name for a in self)
        return f"SortedActivities([{names}])"


def sorted_activities(
    agenda: Union[DayAgenda, list[ScheduledActivity], None],
) -> SortedActivities:
    """Ascending view of an agenda (or bare list). None gives an empty view."""
    if agenda is None:
        return SortedActivities([])
    if isinstance(agenda, DayAgenda):
        return SortedActivities(agenda.activities)
    return SortedActivities(agenda)


def sort_in_place(activities: list[ScheduledActivity]) -> None:
    activities.sort(key=_by_time)
