"""
modules/tool_usage/time_tool.py
---------------------------------
Arithmetic tool: calendar-day calculations used to bucket activities by day.
Local computation only.

A "calendar day" is a datetime.date. Any datetime passed in is truncated to
its date, which is the start-of-day normalization the agenda store keys on.
"""

from __future__ import annotations
from datetime import date, datetime, time, timedelta
from typing import Union

DayLike = Union[date, datetime]


class TimeTool:
    """Calendar-day helpers. All methods are static; the class is a namespace."""

    @staticmethod
    def start_of_day(value: DayLike) -> date:
        """
        Truncate a datetime to its calendar day.

        Args:
            value: date or datetime. A plain date is returned unchanged.
        """
        # datetime subclasses date, so check it first.
        if isinstance(value, datetime):
            return value.date()
        return value

    @staticmethod
    def is_same_day(a: DayLike, b: DayLike) -> bool:
        return TimeTool.start_of_day(a) == TimeTool.start_of_day(b)

    @staticmethod
    def add_days(day: DayLike, days: int) -> date:
        return TimeTool.start_of_day(day) + timedelta(days=days)

    @staticmethod
    def at_time_of_day(day: DayLike, hour: int, minute: int) -> datetime:
        """
        Place a clock time on a calendar day, seconds zeroed.

        Args:
            day:    Target day (time-of-day ignored if a datetime).
            hour:   0-23.
            minute: 0-59.
        """
        return datetime.combine(TimeTool.start_of_day(day), time(hour, minute))

    @staticmethod
    def days_in_range(start: DayLike, end: DayLike) -> list[date]:
        """
        Every calendar day from start through end inclusive, ascending.

        Returns exactly one day when start and end fall on the same day.
        Raises ValueError if end is before start.
        """
        first = TimeTool.start_of_day(start)
        last = TimeTool.start_of_day(end)
        if last < first:
            raise ValueError(f"end day {last} is before start day {first}")

        days: list[date] = []
        current = first
        while current <= last:
            days.append(current)
            current += timedelta(days=1)
        return days
