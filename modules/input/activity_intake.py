"""
modules/input/activity_intake.py
----------------------------------
Form state behind the "Add Activity" and "Edit Activity" screens.

ADD:  ActivityDraft.for_day(day, hour, minute): the picked clock time is
       placed on the selected trip day with seconds zeroed.
EDIT: ActivityDraft.from_activity(activity): every field prefilled; flight
       fields come from the structured record or, for legacy data, are
       decoded from the description.

build() turns the draft into a ScheduledActivity; has_changes() drives the
Save button on the edit screen.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from modules.agenda.flight_codec import flight_details_for, looks_encoded
from modules.tool_usage.time_tool import DayLike, TimeTool
from schemas.trip import ActivityCategory, FlightDetails, ScheduledActivity


@dataclass
class ActivityDraft:
    time: datetime
    name: str = ""
    description: str = ""
    category: Optional[ActivityCategory] = None
    url: str = ""                               # "" means no link
    photo_data: Optional[bytes] = None
    flight: FlightDetails = field(default_factory=FlightDetails)
    cost: Optional[float] = None
    activity_id: Optional[str] = None           # set when editing an existing activity

    # ── Construction ──────────────────────────────────────────────────────

    @classmethod
    def for_day(cls, day: DayLike, hour: int = 9, minute: int = 0) -> "ActivityDraft":
        return cls(time=TimeTool.at_time_of_day(day, hour, minute))

    @classmethod
    def from_activity(cls, activity: ScheduledActivity) -> "ActivityDraft":
        flight = FlightDetails()
        description = activity.description
        if activity.is_flight:
            flight = replace(flight_details_for(activity))
            if activity.flight is None and looks_encoded(description):
                description = ""
        return cls(
            time=activity.time,
            name=activity.name,
            description=description,
            category=activity.category,
            url=activity.url or "",
            photo_data=activity.photo_data,
            flight=flight,
            cost=activity.cost,
            activity_id=activity.id,
        )

    # ── Field edits ───────────────────────────────────────────────────────

    def set_clock_time(self, hour: int, minute: int) -> None:
        """Change the time of day, keeping the day."""
        self.time = TimeTool.at_time_of_day(self.time, hour, minute)

    def attach_photo(self, data: Optional[bytes]) -> None:
        """Result of the photo picker: one payload, or None to drop the photo."""
        self.photo_data = data

    # ── Validation ────────────────────────────────────────────────────────

    @property
    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    def validate(self) -> None:
        if not self.name.strip():
            raise ValueError("Title is required")
        if self.cost is not None and self.cost < 0:
            raise ValueError("Cost cannot be negative")

    # ── Output ────────────────────────────────────────────────────────────

    def build(self) -> ScheduledActivity:
        self.validate()
        is_flight = self.category == ActivityCategory.FLIGHT
        activity = ScheduledActivity(
            time=self.time,
            name=self.name.strip(),
            description=self.description,
            category=self.category,
            url=self.url.strip() or None,
            photo_data=self.photo_data,
            flight=replace(self.flight) if is_flight else None,
            cost=self.cost,
        )
        if self.activity_id is not None:
            activity.id = self.activity_id
        return activity

    def has_changes(self, activity: ScheduledActivity) -> bool:
        if (
            self.time != activity.time
            or self.name != activity.name
            or self.category != activity.category
            or (self.url or None) != activity.url
            or self.photo_data != activity.photo_data
            or self.cost != activity.cost
        ):
            return True
        # Flight screens show the four flight fields in place of the description.
        if self.category == ActivityCategory.FLIGHT:
            return self.flight != flight_details_for(activity)
        return self.description != activity.description
