import pytest
from datetime import date, datetime, timedelta

from modules.tool_usage.time_tool import TimeTool


def test_days_in_range_same_day():
    start = datetime(2025, 6, 2, 9, 30)
    assert TimeTool.days_in_range(start, start) == [date(2025, 6, 2)]

def test_days_in_range_same_day_different_times():
    days = TimeTool.days_in_range(datetime(2025, 6, 2, 1, 0), datetime(2025, 6, 2, 23, 0))
    assert days == [date(2025, 6, 2)]

def test_days_in_range_four_days():
    start = datetime(2025, 6, 2, 18, 0)
    days = TimeTool.days_in_range(start, start + timedelta(days=3))
    assert days == [date(2025, 6, 2), date(2025, 6, 3), date(2025, 6, 4), date(2025, 6, 5)]

def test_days_in_range_ignores_time_of_day():
    # 23:00 to 01:00 next day still spans two calendar days.
    days = TimeTool.days_in_range(datetime(2025, 6, 2, 23, 0), datetime(2025, 6, 3, 1, 0))
    assert days == [date(2025, 6, 2), date(2025, 6, 3)]

def test_days_in_range_crosses_month():
    days = TimeTool.days_in_range(date(2025, 1, 30), date(2025, 2, 2))
    assert days[-1] == date(2025, 2, 2)
    assert len(days) == 4

def test_days_in_range_rejects_reversed():
    with pytest.raises(ValueError, match="before start"):
        TimeTool.days_in_range(date(2025, 6, 3), date(2025, 6, 2))

def test_start_of_day_and_same_day():
    assert TimeTool.start_of_day(datetime(2025, 6, 2, 13, 45)) == date(2025, 6, 2)
    assert TimeTool.start_of_day(date(2025, 6, 2)) == date(2025, 6, 2)
    assert TimeTool.is_same_day(datetime(2025, 6, 2, 0, 0), datetime(2025, 6, 2, 23, 59))
    assert not TimeTool.is_same_day(datetime(2025, 6, 2, 23, 59), datetime(2025, 6, 3, 0, 0))

def test_at_time_of_day_zeroes_seconds():
    dt = TimeTool.at_time_of_day(datetime(2025, 6, 2, 17, 3, 42), 8, 15)
    assert dt == datetime(2025, 6, 2, 8, 15, 0)

def test_add_days():
    assert TimeTool.add_days(datetime(2025, 12, 31, 10, 0), 1) == date(2026, 1, 1)
