"""
schemas/trip.py
---------------
Dataclass definitions for trips, their day agendas and scheduled activities.

Ownership is strictly top-down:
  TripPlan ──owns──▶ DayAgenda ──owns──▶ ScheduledActivity
No back-references; an activity does not know which day or trip holds it.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


def _new_id() -> str:
    return str(uuid.uuid4())


class ActivityCategory(str, Enum):
    CAR = "Car"
    ENTERTAINMENT = "Entertainment"
    FLIGHT = "Flight"
    FOOD = "Food"
    HOTEL = "Hotel"
    TRAIN = "Train"
    MISC = "Misc."

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]


_CATEGORY_ICONS: dict[ActivityCategory, str] = {
    ActivityCategory.CAR:           "car.fill",
    ActivityCategory.ENTERTAINMENT: "ticket.fill",
    ActivityCategory.FLIGHT:        "airplane",
    ActivityCategory.FOOD:          "fork.knife",
    ActivityCategory.HOTEL:         "bed.double.fill",
    ActivityCategory.TRAIN:         "tram.fill",
    ActivityCategory.MISC:          "ellipsis",
}


@dataclass
class FlightDetails:
    """Structured sub-record for Flight activities."""
    airport: str = ""
    airline: str = ""
    flight_number: str = ""
    terminal: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.airport or self.airline or self.flight_number or self.terminal)


@dataclass
class ScheduledActivity:
    """
    One planned event on a trip day.

    `time` carries both the calendar day and the clock time; the day part
    decides which DayAgenda owns the activity.
    """
    time: datetime
    name: str
    description: str = ""
    category: Optional[ActivityCategory] = None
    url: Optional[str] = None
    photo_data: Optional[bytes] = None
    flight: Optional[FlightDetails] = None
    cost: Optional[float] = None               # in config.CURRENCY_UNIT
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("activity name must not be empty")
        if self.cost is not None and self.cost < 0:
            raise ValueError("activity cost must be non-negative")

    @property
    def is_flight(self) -> bool:
        return self.category == ActivityCategory.FLIGHT

    @property
    def display_description(self) -> str:
        """Flight details in their four-line form, otherwise the free text."""
        if self.is_flight and self.flight is not None:
            # Local import: the codec module depends on this one.
            from modules.agenda.flight_codec import encode_details
            return encode_details(self.flight)
        return self.description


@dataclass
class DayAgenda:
    """The bucket of activities scheduled for one calendar day."""
    date: date
    activities: list[ScheduledActivity] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    @property
    def count_label(self) -> str:
        n = len(self.activities)
        return f"{n} {'Activity' if n == 1 else 'Activities'}"


@dataclass
class TripPlan:
    """
    A single vacation plan with dates, budget, and a day-by-day agenda.

    end_time > start_time is enforced by TripDraft, not here.
    """
    destination: str
    start_time: datetime
    end_time: datetime
    budget: float = 0.0
    day_agendas: list[DayAgenda] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        if self.budget < 0:
            raise ValueError("budget must be non-negative")

    @property
    def total_activities(self) -> int:
        return sum(len(agenda.activities) for agenda in self.day_agendas)

    @property
    def planned_spend(self) -> float:
        return sum(
            a.cost or 0.0
            for agenda in self.day_agendas
            for a in agenda.activities
        )

    @property
    def remaining_budget(self) -> float:
        return self.budget - self.planned_spend
