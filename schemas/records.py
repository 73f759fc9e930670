"""
schemas/records.py
------------------
Pydantic models for the on-disk trip store.

These mirror schemas/trip.py field for field, with two differences:
  - photos are base64 text (JSON has no bytes type)
  - the file is wrapped in a versioned envelope
Conversion to and from the dataclasses lives in modules/memory/trip_repository.py.
"""

import datetime as dt
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from schemas.trip import ActivityCategory


class FlightRecord(BaseModel):
    airport: str = ""
    airline: str = ""
    flight_number: str = ""
    terminal: str = ""


class ActivityRecord(BaseModel):
    id: str
    time: dt.datetime
    name: str
    description: str = ""
    category: Optional[ActivityCategory] = None
    url: Optional[str] = None
    photo_b64: Optional[str] = None
    flight: Optional[FlightRecord] = None
    cost: Optional[float] = Field(default=None, ge=0)

    @field_validator("name")
    def name_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError("activity name must not be empty")
        return v


class DayAgendaRecord(BaseModel):
    id: str
    date: dt.date
    activities: List[ActivityRecord] = []


class TripRecord(BaseModel):
    id: str
    destination: str
    start_time: dt.datetime
    end_time: dt.datetime
    budget: float = Field(default=0.0, ge=0)
    day_agendas: List[DayAgendaRecord] = []


class TripStoreFile(BaseModel):
    version: int = 1
    trips: List[TripRecord] = []
