"""
modules/input/trip_intake.py
------------------------------
Form state behind the "New Trip" / "Edit Trip" sheet.

Rules:
  - destination is required
  - the end must be strictly after the start; the picker's minimum end is
    one day after the start
  - budget defaults to 0 and cannot be negative

Editing keeps the trip's id and its day agendas.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from modules.recommendation.destination_catalog import Destination
from schemas.trip import TripPlan


@dataclass
class TripDraft:
    destination: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    budget: float = 0.0

    def __post_init__(self):
        if self.start_time is None:
            self.start_time = datetime.now()
        if self.end_time is None:
            self.end_time = self.min_end_time

    @classmethod
    def from_trip(cls, plan: TripPlan) -> "TripDraft":
        return cls(
            destination=plan.destination,
            start_time=plan.start_time,
            end_time=plan.end_time,
            budget=plan.budget,
        )

    @property
    def min_end_time(self) -> datetime:
        return self.start_time + timedelta(days=1)

    def choose_destination(self, destination: Destination) -> None:
        self.destination = destination.name

    @property
    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    def validate(self) -> None:
        if not self.destination.strip():
            raise ValueError("Destination is required")
        if self.end_time <= self.start_time:
            raise ValueError("End date must be after the start date")
        if self.budget < 0:
            raise ValueError("Budget cannot be negative")

    def build(self, existing: Optional[TripPlan] = None) -> TripPlan:
        """New TripPlan from the form; when editing, reuse existing's id and agendas."""
        self.validate()
        plan = TripPlan(
            destination=self.destination.strip(),
            start_time=self.start_time,
            end_time=self.end_time,
            budget=self.budget,
        )
        if existing is not None:
            plan.id = existing.id
            plan.day_agendas = existing.day_agendas
        return plan
